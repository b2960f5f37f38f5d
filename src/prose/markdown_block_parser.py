"""
Parser to construct an AST from a whole markdown document.

A document is one or more blocks.  At each position the rules in
BLOCK_RULE_ORDER are tried in turn and the first one that matches wins.
The document either parses completely or not at all: there is no error
recovery and no partial result.
"""

import logging
import re
from typing import Callable, List, Optional, Tuple

from prose.markdown_ast_node import (
    UNKNOWN_LANGUAGE, MarkdownASTCodeBlockNode, MarkdownASTDocumentNode, MarkdownASTHeadingNode,
    MarkdownASTLineNode, MarkdownASTOrderedListNode, MarkdownASTUnorderedListNode, MarkdownBlock,
    MarkdownText
)
from prose.markdown_inline_parser import LINE_TERMINATOR, MarkdownInlineParser
from prose.markdown_parser_error import (
    MissingLineTerminatorError, UnmatchedAlternativeError, UnterminatedDelimiterError
)
from prose.markdown_parser_state import MarkdownParserState


# Names of the block rules, in the order they are tried
BLOCK_RULE_ORDER = ("heading", "unordered_list", "ordered_list", "code_block", "line")

CODE_FENCE = "```"

_HEADING_MARKER_PATTERN = re.compile(r'#+')
_ORDERED_LIST_NUMBER_PATTERN = re.compile(r'[0-9]+')
_CODE_BODY_PATTERN = re.compile(r'[^`]+')


BlockResult = Optional[Tuple[MarkdownBlock, int]]


class MarkdownBlockParser:
    """
    Builds a document AST from markdown text.

    A new parser is created for each document; it holds the source and the
    furthest-failure bookkeeping for that one parse.
    """

    def __init__(self, source: str) -> None:
        """
        Initialize the block parser.

        Args:
            source: The complete document text
        """
        self._state = MarkdownParserState(source)
        self._inline_parser = MarkdownInlineParser(self._state)
        self._logger = logging.getLogger("MarkdownBlockParser")

        rules = {
            "heading": self.parse_heading,
            "unordered_list": self.parse_unordered_list,
            "ordered_list": self.parse_ordered_list,
            "code_block": self.parse_code_block,
            "line": self.parse_line,
        }
        self._rules: List[Callable[[int], BlockResult]] = [rules[name] for name in BLOCK_RULE_ORDER]

    def parse_heading(self, position: int) -> BlockResult:
        """Parse `#... text\\n`; the number of '#' characters is the level."""
        state = self._state
        match = _HEADING_MARKER_PATTERN.match(state.source, position)
        if match is None:
            state.fail(position, "'#'", UnmatchedAlternativeError)
            return None

        marker_end = match.end()
        if not state.startswith(" ", marker_end):
            state.fail(marker_end, "' ' after heading marker", UnmatchedAlternativeError)
            return None

        result = self._inline_parser.parse_text(marker_end + 1)
        if result is None:
            return None

        text, end = result
        return MarkdownASTHeadingNode(len(match.group()), text), end

    def _parse_unordered_item(self, position: int) -> Optional[Tuple[MarkdownText, int]]:
        """Parse one `- text\\n` list item."""
        if not self._state.startswith("- ", position):
            self._state.fail(position, "'- '", UnmatchedAlternativeError)
            return None

        return self._inline_parser.parse_text(position + 2)

    def _parse_ordered_item(self, position: int) -> Optional[Tuple[MarkdownText, int]]:
        """
        Parse one `<digits>. text\\n` list item.

        The number is not checked; items keep their source order.
        """
        state = self._state
        match = _ORDERED_LIST_NUMBER_PATTERN.match(state.source, position)
        if match is None:
            state.fail(position, "list item number", UnmatchedAlternativeError)
            return None

        number_end = match.end()
        if not state.startswith(". ", number_end):
            state.fail(number_end, "'. ' after list item number", UnmatchedAlternativeError)
            return None

        return self._inline_parser.parse_text(number_end + 2)

    def _parse_items(
        self,
        position: int,
        parse_item: Callable[[int], Optional[Tuple[MarkdownText, int]]]
    ) -> Optional[Tuple[Tuple[MarkdownText, ...], int]]:
        """
        Parse one or more consecutive list items.

        Args:
            position: Offset to start at
            parse_item: Parser for a single item

        Returns:
            The items and the offset after the last one, or None if there are none
        """
        items: List[MarkdownText] = []
        while True:
            result = parse_item(position)
            if result is None:
                break

            text, position = result
            items.append(text)

        if not items:
            return None

        return tuple(items), position

    def parse_unordered_list(self, position: int) -> BlockResult:
        """Parse one or more `- ` items."""
        result = self._parse_items(position, self._parse_unordered_item)
        if result is None:
            return None

        items, end = result
        return MarkdownASTUnorderedListNode(items), end

    def parse_ordered_list(self, position: int) -> BlockResult:
        """Parse one or more `1. ` items."""
        result = self._parse_items(position, self._parse_ordered_item)
        if result is None:
            return None

        items, end = result
        return MarkdownASTOrderedListNode(items), end

    def parse_code_block(self, position: int) -> BlockResult:
        """
        Parse a fenced code block.

        The opening fence may be followed by a language tag, which follows the
        same rules as plain text.  Without one the language is UNKNOWN_LANGUAGE.
        The body is every character up to the closing fence, kept verbatim,
        and may not contain a backtick.
        """
        state = self._state
        if not state.startswith(CODE_FENCE, position):
            state.fail(position, repr(CODE_FENCE), UnmatchedAlternativeError)
            return None

        position += len(CODE_FENCE)
        language = UNKNOWN_LANGUAGE
        language_result = self._inline_parser.parse_plaintext_run(position)
        if language_result is not None:
            language, position = language_result

        if not state.startswith(LINE_TERMINATOR, position):
            state.fail(position, "line terminator after code fence", MissingLineTerminatorError)
            return None

        body_start = position + len(LINE_TERMINATOR)
        match = _CODE_BODY_PATTERN.match(state.source, body_start)
        if match is None:
            error_class = UnterminatedDelimiterError if body_start >= state.length else UnmatchedAlternativeError
            state.fail(body_start, "code block content", error_class)
            return None

        body_end = match.end()
        if not state.startswith(CODE_FENCE, body_end):
            state.fail(body_end, f"closing {CODE_FENCE!r} for code block", UnterminatedDelimiterError)
            return None

        return MarkdownASTCodeBlockNode(language, match.group()), body_end + len(CODE_FENCE)

    def parse_line(self, position: int) -> BlockResult:
        """Parse a plain line; a bare terminator gives a blank line."""
        result = self._inline_parser.parse_text(position)
        if result is None:
            return None

        text, end = result
        return MarkdownASTLineNode(text), end

    def parse_block(self, position: int) -> BlockResult:
        """
        Parse one block, trying each rule in order.

        Args:
            position: Offset to start at

        Returns:
            The first block that matches and the offset after it, or None
        """
        for rule in self._rules:
            result = rule(position)
            if result is not None:
                return result

        return None

    def parse(self) -> MarkdownASTDocumentNode:
        """
        Parse the whole document.

        Returns:
            The document node

        Raises:
            MarkdownParseError: If the document is empty, if no rule matches at
                some position, or if input is left over
        """
        state = self._state
        blocks: List[MarkdownBlock] = []
        position = 0
        while position < state.length:
            result = self.parse_block(position)
            if result is None:
                break

            block, position = result
            blocks.append(block)

        if not blocks or position < state.length:
            error = state.error()
            self._logger.debug("Parsed %d blocks before stopping at offset %d of %d", len(blocks), position, state.length)
            raise error

        return MarkdownASTDocumentNode(tuple(blocks))

