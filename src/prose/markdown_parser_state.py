"""
Shared state for one parse of one markdown document.

The block and inline parsers work on the same immutable source string using
integer offsets.  A failed alternative never raises; it is recorded here and
the caller tries the next alternative from the position it saved.  The
furthest recorded failure is what gets reported if the whole parse fails.
"""

from dataclasses import dataclass, field
from typing import List, Type

from prose.markdown_parser_error import MarkdownParseError, UnmatchedAlternativeError


@dataclass
class ParseFailure:
    """The furthest point the parser reached before an alternative failed."""
    position: int
    expected: List[str] = field(default_factory=list)
    error_class: Type[MarkdownParseError] = UnmatchedAlternativeError


class MarkdownParserState:
    """Source text plus furthest-failure bookkeeping for a single parse."""

    def __init__(self, source: str) -> None:
        """
        Initialize parser state.

        Args:
            source: The complete document text
        """
        self.source = source
        self.length = len(source)
        self.failure: ParseFailure | None = None

    def fail(self, position: int, expected: str, error_class: Type[MarkdownParseError]) -> None:
        """
        Record that an alternative failed.

        Only the furthest failure is kept.  Failures at the same position
        accumulate their expected descriptions, and a specific error class
        replaces UnmatchedAlternativeError.

        Args:
            position: Offset at which the alternative gave up
            expected: Description of what would have allowed it to continue
            error_class: The error to raise if this turns out to be the final failure
        """
        if self.failure is None or position > self.failure.position:
            self.failure = ParseFailure(position, [expected], error_class)
            return

        if position != self.failure.position:
            return

        if expected not in self.failure.expected:
            self.failure.expected.append(expected)

        if self.failure.error_class is UnmatchedAlternativeError:
            self.failure.error_class = error_class

    def startswith(self, prefix: str, position: int) -> bool:
        """
        Check whether the source has the given prefix at a position.

        Args:
            prefix: The literal to look for
            position: Offset to look at

        Returns:
            True if the literal is present at that offset
        """
        return self.source.startswith(prefix, position)

    def describe(self, position: int) -> str:
        """
        Describe the input found at a position, for error messages.

        Args:
            position: Offset to describe

        Returns:
            A short quoted snippet, or "end of input"
        """
        if position >= self.length:
            return "end of input"

        snippet = self.source[position:position + 20]
        if position + 20 < self.length:
            snippet += "..."

        return repr(snippet)

    def error(self) -> MarkdownParseError:
        """
        Build the exception describing the furthest failure.

        Returns:
            A MarkdownParseError subclass instance
        """
        failure = self.failure
        if failure is None:
            failure = ParseFailure(0, ["markdown block"])

        return failure.error_class(
            message=failure.error_class.headline,
            source=self.source,
            position=failure.position,
            expected=" or ".join(failure.expected),
            received=self.describe(failure.position)
        )
