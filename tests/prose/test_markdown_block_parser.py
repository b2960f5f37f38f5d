"""
Tests for the markdown block parser and whole-document parsing.
"""
import pytest

from prose import (
    BLOCK_RULE_ORDER,
    UNKNOWN_LANGUAGE,
    MarkdownASTCodeBlockNode,
    MarkdownASTDocumentNode,
    MarkdownASTHeadingNode,
    MarkdownASTItalicNode,
    MarkdownASTLineNode,
    MarkdownASTLinkNode,
    MarkdownASTOrderedListNode,
    MarkdownASTPlaintextNode,
    MarkdownASTUnorderedListNode,
    MarkdownBlockParser,
    MarkdownParseError,
    MissingLineTerminatorError,
    UnmatchedAlternativeError,
    UnterminatedDelimiterError
)


def text(value):
    """Build a single-node line of plain text."""
    return (MarkdownASTPlaintextNode(value),)


def parse_document(source):
    """Parse a whole document."""
    return MarkdownBlockParser(source).parse()


def test_rule_order():
    """Test the block rules are tried in their documented order."""
    assert BLOCK_RULE_ORDER == ("heading", "unordered_list", "ordered_list", "code_block", "line")


@pytest.mark.parametrize("source,expected", [
    ("# h1\n", MarkdownASTHeadingNode(1, text("h1"))),
    ("## h2\n", MarkdownASTHeadingNode(2, text("h2"))),
    ("###  h3\n", MarkdownASTHeadingNode(3, text(" h3"))),
    ("# \n", MarkdownASTHeadingNode(1, ())),
    ("######### deep\n", MarkdownASTHeadingNode(9, text("deep"))),
])
def test_parse_heading(source, expected):
    """Test headings, including empty text and levels beyond six."""
    assert MarkdownBlockParser(source).parse_heading(0) == (expected, len(source))


@pytest.mark.parametrize("source", ["###h3", "###", "", "#", "# test", " # h1\n"])
def test_parse_heading_failures(source):
    """Test inputs that are not headings."""
    assert MarkdownBlockParser(source).parse_heading(0) is None


def test_parse_unordered_list():
    """Test an unordered list collects consecutive items."""
    source = "- this is an element\n- here is another\n"
    expected = MarkdownASTUnorderedListNode((text("this is an element"), text("here is another")))
    assert MarkdownBlockParser(source).parse_unordered_list(0) == (expected, len(source))


def test_parse_unordered_list_empty_item():
    """Test an item may have no text."""
    assert MarkdownBlockParser("- \n").parse_unordered_list(0) == (MarkdownASTUnorderedListNode(((),)), 3)


def test_parse_unordered_list_stops_at_other_block():
    """Test the list ends at the first line that is not an item."""
    source = "- a\nplain\n"
    assert MarkdownBlockParser(source).parse_unordered_list(0) == (MarkdownASTUnorderedListNode((text("a"),)), 4)


@pytest.mark.parametrize("source", ["-", "-a\n", "- a", "", "* a\n"])
def test_parse_unordered_list_failures(source):
    """Test inputs that are not unordered lists."""
    assert MarkdownBlockParser(source).parse_unordered_list(0) is None


def test_parse_ordered_list():
    """Test an ordered list collects consecutive items."""
    source = "1. this is an element\n2. here is another\n"
    expected = MarkdownASTOrderedListNode((text("this is an element"), text("here is another")))
    assert MarkdownBlockParser(source).parse_ordered_list(0) == (expected, len(source))


def test_parse_ordered_list_ignores_numbers():
    """Test item numbers need not be sequential or start at one."""
    source = "1234567. a\n3. b\n3. c\n"
    expected = MarkdownASTOrderedListNode((text("a"), text("b"), text("c")))
    assert MarkdownBlockParser(source).parse_ordered_list(0) == (expected, len(source))


@pytest.mark.parametrize("source", ["1.", "1.a\n", "1 a\n", "a. b\n", "1. a", ""])
def test_parse_ordered_list_failures(source):
    """Test inputs that are not ordered lists."""
    assert MarkdownBlockParser(source).parse_ordered_list(0) is None


def test_parse_code_block():
    """Test a fenced code block with a language."""
    source = "```bash\npip install foobar\n```"
    expected = MarkdownASTCodeBlockNode("bash", "pip install foobar\n")
    assert MarkdownBlockParser(source).parse_code_block(0) == (expected, len(source))


def test_parse_code_block_keeps_body_verbatim():
    """Test the body keeps blank lines and markdown characters other than backticks."""
    body = "import foobar\n\nfoobar.pluralize('word') # returns 'words'\n*not italic* [not](link)\n"
    source = f"```python\n{body}```"
    expected = MarkdownASTCodeBlockNode("python", body)
    assert MarkdownBlockParser(source).parse_code_block(0) == (expected, len(source))


def test_parse_code_block_no_language():
    """Test a fence without a language tag records the unknown language."""
    source = "```\npip install foobar\n```"
    expected = MarkdownASTCodeBlockNode(UNKNOWN_LANGUAGE, "pip install foobar\n")
    assert MarkdownBlockParser(source).parse_code_block(0) == (expected, len(source))
    assert UNKNOWN_LANGUAGE == "__UNKNOWN__"


@pytest.mark.parametrize("source", [
    "```bash",
    "```bash pip\n",
    "```\n```",
    "```bash\necho `hi`\n```",
    "```bash\necho hi\n``",
    "``\nx\n```",
])
def test_parse_code_block_failures(source):
    """Test fences that do not form a code block."""
    assert MarkdownBlockParser(source).parse_code_block(0) is None


def test_parse_line():
    """Test a plain line becomes a line node."""
    assert MarkdownBlockParser("hello\n").parse_line(0) == (MarkdownASTLineNode(text("hello")), 6)


def test_parse_line_blank():
    """Test a bare terminator becomes a blank line."""
    result = MarkdownBlockParser("\n").parse_line(0)
    assert result == (MarkdownASTLineNode(()), 1)
    assert result[0].is_blank()


def test_parse_block_prefers_heading_over_line():
    """Test a heading-shaped line is never a plain line."""
    block, _ = MarkdownBlockParser("# h1\n").parse_block(0)
    assert isinstance(block, MarkdownASTHeadingNode)


def test_parse_block_falls_through_to_line():
    """Test near-misses of other block kinds become plain lines."""
    for source in ("#h1\n", "-a\n", "1.a\n"):
        block, _ = MarkdownBlockParser(source).parse_block(0)
        assert block == MarkdownASTLineNode(text(source[:-1]))


def test_parse_document():
    """Test a document mixing every block kind."""
    source = (
        "# Foobar\n"
        "\n"
        "Foobar is a Python library for dealing with word pluralization.\n"
        "\n"
        "```bash\n"
        "pip install foobar\n"
        "```\n"
        "## Installation\n"
        "\n"
        "Use the package manager [pip](https://pip.pypa.io/en/stable/) to install foobar.\n"
        "```python\n"
        "import foobar\n"
        "\n"
        "foobar.pluralize('word') # returns 'words'\n"
        "foobar.pluralize('goose') # returns 'geese'\n"
        "foobar.singularize('phenomena') # returns 'phenomenon'\n"
        "```"
    )
    document = parse_document(source)
    assert isinstance(document, MarkdownASTDocumentNode)
    assert document.blocks == (
        MarkdownASTHeadingNode(1, text("Foobar")),
        MarkdownASTLineNode(()),
        MarkdownASTLineNode(text("Foobar is a Python library for dealing with word pluralization.")),
        MarkdownASTLineNode(()),
        MarkdownASTCodeBlockNode("bash", "pip install foobar\n"),
        MarkdownASTLineNode(()),
        MarkdownASTHeadingNode(2, text("Installation")),
        MarkdownASTLineNode(()),
        MarkdownASTLineNode((
            MarkdownASTPlaintextNode("Use the package manager "),
            MarkdownASTLinkNode("pip", "https://pip.pypa.io/en/stable/"),
            MarkdownASTPlaintextNode(" to install foobar."),
        )),
        MarkdownASTCodeBlockNode(
            "python",
            "import foobar\n"
            "\n"
            "foobar.pluralize('word') # returns 'words'\n"
            "foobar.pluralize('goose') # returns 'geese'\n"
            "foobar.singularize('phenomena') # returns 'phenomenon'\n"
        ),
    )


def test_parse_document_lists():
    """Test lists next to each other and to other blocks."""
    document = parse_document("- a\n- b\n1. c\n*d*\n")
    assert document.blocks == (
        MarkdownASTUnorderedListNode((text("a"), text("b"))),
        MarkdownASTOrderedListNode((text("c"),)),
        MarkdownASTLineNode((MarkdownASTItalicNode("d"),)),
    )


def test_parse_document_lone_terminator():
    """Test a single newline is one blank line."""
    assert parse_document("\n").blocks == (MarkdownASTLineNode(()),)


def test_parse_document_empty():
    """Test an empty document does not parse."""
    with pytest.raises(UnmatchedAlternativeError) as exc_info:
        parse_document("")

    assert exc_info.value.position == 0


def test_parse_document_unterminated_italic():
    """Test an unterminated italic span is reported at the end of its content."""
    with pytest.raises(UnterminatedDelimiterError) as exc_info:
        parse_document("*unterminated")

    error = exc_info.value
    assert error.position == 13
    assert error.line == 1
    assert error.column == 14
    assert "italic" in error.expected


def test_parse_document_missing_terminator():
    """Test a final line without a terminator is reported on its own line."""
    with pytest.raises(MissingLineTerminatorError) as exc_info:
        parse_document("# ok\nabc")

    error = exc_info.value
    assert error.position == 8
    assert error.line == 2
    assert error.column == 4
    assert "line terminator" in error.expected


def test_parse_document_list_missing_terminator():
    """Test a list whose last item has no terminator fails as a whole."""
    with pytest.raises(MissingLineTerminatorError):
        parse_document("- a\n- b")


def test_parse_document_stray_marker():
    """Test a star that opens no span makes the whole document fail."""
    with pytest.raises(MarkdownParseError):
        parse_document("fine\na * b\nfine\n")


def test_parse_error_message():
    """Test the error message carries position and expectation details."""
    with pytest.raises(MarkdownParseError) as exc_info:
        parse_document("abc")

    message = str(exc_info.value)
    assert message.startswith("Error: Line is not terminated by a newline")
    assert "Position: 3 (line 1, column 4)" in message
    assert "Received: end of input" in message


def test_parser_is_reusable_per_document():
    """Test parsing the same document twice gives equal trees."""
    source = "# h1\n- a\n"
    assert parse_document(source) == parse_document(source)


def test_list_nodes_require_items():
    """Test list nodes cannot be built without items."""
    with pytest.raises(ValueError):
        MarkdownASTUnorderedListNode(())

    with pytest.raises(ValueError):
        MarkdownASTOrderedListNode(())


@pytest.mark.parametrize("source,error_class", [
    ("", UnmatchedAlternativeError),
    ("*unterminated", UnterminatedDelimiterError),
    ("abc", MissingLineTerminatorError),
])
def test_parse_error_headline_follows_class(source, error_class):
    """Test each error reports the headline defined on its class."""
    with pytest.raises(error_class) as exc_info:
        parse_document(source)

    error = exc_info.value
    assert error.message == error_class.headline
    assert error.headline != MarkdownParseError.headline
    assert str(error).startswith(f"Error: {error_class.headline}\n")
