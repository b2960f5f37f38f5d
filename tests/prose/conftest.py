"""Shared fixtures for prose tests."""

import pytest

from prose import MarkdownConverter, MarkdownHTMLRenderer, MarkdownInlineParser, MarkdownSettings
from prose.markdown_parser_state import MarkdownParserState


@pytest.fixture
def inline_parser():
    """Factory for inline parsers over a given source string."""
    def _create(source: str) -> MarkdownInlineParser:
        return MarkdownInlineParser(MarkdownParserState(source))
    return _create


@pytest.fixture
def renderer():
    """Renderer with the default verbatim output policy."""
    return MarkdownHTMLRenderer()


@pytest.fixture
def converter():
    """Converter with default settings."""
    return MarkdownConverter()


@pytest.fixture
def converter_custom():
    """Factory for converters with custom settings."""
    def _create(**kwargs) -> MarkdownConverter:
        return MarkdownConverter(MarkdownSettings(**kwargs))
    return _create
