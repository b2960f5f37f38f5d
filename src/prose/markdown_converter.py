"""
Convert prose markdown text to HTML.

Parsing and rendering are both pure: a converter can be shared between
threads, and every call works only on the document it is given.
"""

import logging

from prose.markdown_ast_node import MarkdownASTDocumentNode
from prose.markdown_block_parser import MarkdownBlockParser
from prose.markdown_html_renderer import MarkdownHTMLRenderer
from prose.markdown_inline_parser import LINE_TERMINATOR
from prose.markdown_parser_error import MarkdownParseError
from prose.markdown_settings import MarkdownSettings


class MarkdownConverter:
    """
    Converts markdown to HTML by building an AST and rendering it.

    A document that cannot be parsed in its entirety renders as the fallback
    message from the settings, never as partial HTML.
    """

    def __init__(self, settings: MarkdownSettings | None = None) -> None:
        """
        Initialize the markdown converter.

        Args:
            settings: Conversion settings; defaults are used if not given
        """
        self.settings = settings if settings is not None else MarkdownSettings()
        self._logger = logging.getLogger("MarkdownConverter")

    def _prepare_source(self, source: str) -> str:
        """Apply the final-line setting to a document before parsing."""
        if self.settings.terminate_final_line and source and not source.endswith(LINE_TERMINATOR):
            return source + LINE_TERMINATOR

        return source

    def parse(self, source: str) -> MarkdownASTDocumentNode:
        """
        Parse a document into an AST.

        Args:
            source: The markdown text

        Returns:
            The document node

        Raises:
            MarkdownParseError: If the document cannot be parsed in its entirety
        """
        return MarkdownBlockParser(self._prepare_source(source)).parse()

    def render(self, source: str) -> str:
        """
        Render a document to HTML.

        Args:
            source: The markdown text

        Returns:
            The HTML, or the fallback message if the document does not parse
        """
        try:
            document = self.parse(source)

        except MarkdownParseError as e:
            self._logger.debug("Rendering fallback message: %s", e)
            return self.settings.fallback_message

        renderer = MarkdownHTMLRenderer(escape_html=self.settings.escape_html)
        return renderer.render(document)


def render(source: str) -> str:
    """
    Render a document to HTML with default settings.

    Args:
        source: The markdown text

    Returns:
        The HTML, or the fallback message if the document does not parse
    """
    return MarkdownConverter().render(source)


def parse(source: str) -> MarkdownASTDocumentNode:
    """
    Parse a document into an AST with default settings.

    Args:
        source: The markdown text

    Returns:
        The document node

    Raises:
        MarkdownParseError: If the document cannot be parsed in its entirety
    """
    return MarkdownConverter().parse(source)
