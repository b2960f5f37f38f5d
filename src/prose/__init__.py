"""A parser and HTML renderer for a small, strict markdown dialect."""

from prose.markdown_ast_node import (
    UNKNOWN_LANGUAGE,
    MarkdownASTBoldNode,
    MarkdownASTCodeBlockNode,
    MarkdownASTDocumentNode,
    MarkdownASTHeadingNode,
    MarkdownASTImageNode,
    MarkdownASTInlineCodeNode,
    MarkdownASTItalicNode,
    MarkdownASTLineNode,
    MarkdownASTLinkNode,
    MarkdownASTNode,
    MarkdownASTOrderedListNode,
    MarkdownASTPlaintextNode,
    MarkdownASTUnorderedListNode,
    MarkdownASTVisitor,
    MarkdownBlock,
    MarkdownInline,
    MarkdownText
)
from prose.markdown_ast_printer import MarkdownASTPrinter
from prose.markdown_block_parser import BLOCK_RULE_ORDER, MarkdownBlockParser
from prose.markdown_converter import MarkdownConverter, parse, render
from prose.markdown_html_renderer import MarkdownHTMLRenderer
from prose.markdown_inline_parser import INLINE_RULE_ORDER, MarkdownInlineParser
from prose.markdown_parser_error import (
    MarkdownParseError,
    MissingLineTerminatorError,
    UnmatchedAlternativeError,
    UnterminatedDelimiterError
)
from prose.markdown_settings import DEFAULT_FALLBACK_MESSAGE, MarkdownSettings, MarkdownSettingsError
from prose.sample_document import SAMPLE_DOCUMENT


__all__ = [
    "BLOCK_RULE_ORDER",
    "DEFAULT_FALLBACK_MESSAGE",
    "INLINE_RULE_ORDER",
    "SAMPLE_DOCUMENT",
    "UNKNOWN_LANGUAGE",
    "MarkdownASTBoldNode",
    "MarkdownASTCodeBlockNode",
    "MarkdownASTDocumentNode",
    "MarkdownASTHeadingNode",
    "MarkdownASTImageNode",
    "MarkdownASTInlineCodeNode",
    "MarkdownASTItalicNode",
    "MarkdownASTLineNode",
    "MarkdownASTLinkNode",
    "MarkdownASTNode",
    "MarkdownASTOrderedListNode",
    "MarkdownASTPlaintextNode",
    "MarkdownASTPrinter",
    "MarkdownASTUnorderedListNode",
    "MarkdownASTVisitor",
    "MarkdownBlock",
    "MarkdownBlockParser",
    "MarkdownConverter",
    "MarkdownHTMLRenderer",
    "MarkdownInline",
    "MarkdownInlineParser",
    "MarkdownParseError",
    "MarkdownSettings",
    "MarkdownSettingsError",
    "MarkdownText",
    "MissingLineTerminatorError",
    "UnmatchedAlternativeError",
    "UnterminatedDelimiterError",
    "parse",
    "render"
]
