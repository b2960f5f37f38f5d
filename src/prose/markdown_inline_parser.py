"""
Parser for inline markdown content: styled spans, links, images and plain text.

At each position the rules in INLINE_RULE_ORDER are tried in turn and the
first one that matches wins.  The order matters: italic is tried before bold
so that "**" only becomes bold once a single-star span has been ruled out,
and image is tried before link so the "!" of "![" is never taken as text.
"""

import re
from typing import Callable, List, Optional, Tuple

from prose.markdown_ast_node import (
    MarkdownASTBoldNode, MarkdownASTImageNode, MarkdownASTInlineCodeNode, MarkdownASTItalicNode,
    MarkdownASTLinkNode, MarkdownASTPlaintextNode, MarkdownInline, MarkdownText
)
from prose.markdown_parser_error import (
    MissingLineTerminatorError, UnmatchedAlternativeError, UnterminatedDelimiterError
)
from prose.markdown_parser_state import MarkdownParserState


# Names of the inline rules, in the order they are tried
INLINE_RULE_ORDER = ("italic", "inline_code", "bold", "image", "link", "plaintext")

# Prefixes that end a plain text run
RESERVED_PREFIXES = ("*", "`", "[", "![", "\n")

LINE_TERMINATOR = "\n"

# A run of characters that does not start any reserved prefix.  "!" is only
# reserved when followed by "[".
_PLAINTEXT_PATTERN = re.compile(r'(?:[^*`\[!\n]|!(?!\[))+')

_STAR_CONTENT_PATTERN = re.compile(r'[^*]+')
_BACKTICK_CONTENT_PATTERN = re.compile(r'[^`]+')
_LABEL_CONTENT_PATTERN = re.compile(r'[^\]]+')
_URL_CONTENT_PATTERN = re.compile(r'[^)]+')


InlineResult = Optional[Tuple[MarkdownInline, int]]


class MarkdownInlineParser:
    """
    Recognizes inline nodes within one line of text.

    Every parse method takes a start offset and returns either a result and
    the offset just past it, or None after recording the failure in the
    shared parser state.
    """

    def __init__(self, state: MarkdownParserState) -> None:
        """
        Initialize the inline parser.

        Args:
            state: Parser state shared with the block parser
        """
        self._state = state

        rules = {
            "italic": self.parse_italic,
            "inline_code": self.parse_inline_code,
            "bold": self.parse_bold,
            "image": self.parse_image,
            "link": self.parse_link,
            "plaintext": self.parse_plaintext,
        }
        self._rules: List[Callable[[int], InlineResult]] = [rules[name] for name in INLINE_RULE_ORDER]

    def _parse_delimited(
        self,
        position: int,
        opener: str,
        content_pattern: re.Pattern,
        closer: str,
        description: str
    ) -> Optional[Tuple[str, int]]:
        """
        Parse an opener, a non-empty content run, and a closer.

        Args:
            position: Offset to start at
            opener: Literal opening marker
            content_pattern: Pattern matching the allowed content run
            closer: Literal closing marker
            description: Name of the construct, for error messages

        Returns:
            The content and the offset after the closer, or None
        """
        state = self._state
        if not state.startswith(opener, position):
            state.fail(position, repr(opener), UnmatchedAlternativeError)
            return None

        content_start = position + len(opener)
        match = content_pattern.match(state.source, content_start)
        if match is None:
            error_class = UnterminatedDelimiterError if content_start >= state.length else UnmatchedAlternativeError
            state.fail(content_start, f"{description} content", error_class)
            return None

        content_end = match.end()
        if not state.startswith(closer, content_end):
            state.fail(content_end, f"closing {closer!r} for {description}", UnterminatedDelimiterError)
            return None

        return match.group(), content_end + len(closer)

    def parse_italic(self, position: int) -> InlineResult:
        """Parse `*text*`."""
        result = self._parse_delimited(position, "*", _STAR_CONTENT_PATTERN, "*", "italic")
        if result is None:
            return None

        text, end = result
        return MarkdownASTItalicNode(text), end

    def parse_inline_code(self, position: int) -> InlineResult:
        """Parse `` `text` ``."""
        result = self._parse_delimited(position, "`", _BACKTICK_CONTENT_PATTERN, "`", "inline code")
        if result is None:
            return None

        text, end = result
        return MarkdownASTInlineCodeNode(text), end

    def parse_bold(self, position: int) -> InlineResult:
        """Parse `**text**`."""
        result = self._parse_delimited(position, "**", _STAR_CONTENT_PATTERN, "**", "bold")
        if result is None:
            return None

        text, end = result
        return MarkdownASTBoldNode(text), end

    def _parse_label_and_url(self, position: int, opener: str, description: str) -> Optional[Tuple[str, str, int]]:
        """
        Parse the `<opener>label](url)` shape shared by links and images.

        Args:
            position: Offset to start at
            opener: Either "[" or "!["
            description: Name of the construct, for error messages

        Returns:
            The label, the url, and the offset after the closing paren, or None
        """
        label_result = self._parse_delimited(position, opener, _LABEL_CONTENT_PATTERN, "]", f"{description} label")
        if label_result is None:
            return None

        label, url_start = label_result
        url_result = self._parse_delimited(url_start, "(", _URL_CONTENT_PATTERN, ")", f"{description} url")
        if url_result is None:
            return None

        url, end = url_result
        return label, url, end

    def parse_image(self, position: int) -> InlineResult:
        """Parse `![alt](url)`."""
        result = self._parse_label_and_url(position, "![", "image")
        if result is None:
            return None

        alt, url, end = result
        return MarkdownASTImageNode(alt, url), end

    def parse_link(self, position: int) -> InlineResult:
        """Parse `[label](url)`."""
        result = self._parse_label_and_url(position, "[", "link")
        if result is None:
            return None

        label, url, end = result
        return MarkdownASTLinkNode(label, url), end

    def parse_plaintext_run(self, position: int) -> Optional[Tuple[str, int]]:
        """
        Consume characters up to the next reserved prefix or line terminator.

        Args:
            position: Offset to start at

        Returns:
            The run and the offset after it, or None if the run would be empty
        """
        match = _PLAINTEXT_PATTERN.match(self._state.source, position)
        if match is None:
            self._state.fail(position, "plain text", UnmatchedAlternativeError)
            return None

        return match.group(), match.end()

    def parse_plaintext(self, position: int) -> InlineResult:
        """Parse a maximal run of unstyled text."""
        result = self.parse_plaintext_run(position)
        if result is None:
            return None

        text, end = result
        return MarkdownASTPlaintextNode(text), end

    def parse_inline(self, position: int) -> InlineResult:
        """
        Parse one inline node, trying each rule in order.

        Args:
            position: Offset to start at

        Returns:
            The first node that matches and the offset after it, or None
        """
        for rule in self._rules:
            result = rule(position)
            if result is not None:
                return result

        return None

    def parse_text(self, position: int) -> Optional[Tuple[MarkdownText, int]]:
        """
        Parse zero or more inline nodes followed by a mandatory line terminator.

        Args:
            position: Offset to start at

        Returns:
            The inline nodes and the offset after the terminator, or None
        """
        nodes: List[MarkdownInline] = []
        while True:
            result = self.parse_inline(position)
            if result is None:
                break

            node, position = result
            nodes.append(node)

        if not self._state.startswith(LINE_TERMINATOR, position):
            self._state.fail(position, "line terminator", MissingLineTerminatorError)
            return None

        return tuple(nodes), position + len(LINE_TERMINATOR)
