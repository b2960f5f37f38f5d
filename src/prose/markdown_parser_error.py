"""Exception classes for markdown parse failures, with position details."""

from typing import Optional


class MarkdownParseError(Exception):
    """Base exception for markdown parse failures."""

    headline = "Markdown parse failed"

    def __init__(
        self,
        message: str,
        source: str = "",
        position: int = 0,
        expected: Optional[str] = None,
        received: Optional[str] = None
    ):
        """
        Initialize a parse error.

        Args:
            message: Core error description
            source: The full document being parsed, used to derive line and column
            position: Character offset where the error occurred
            expected: What the parser was looking for
            received: What was actually found
        """
        self.message = message
        self.position = position
        self.expected = expected
        self.received = received

        # Lines and columns are 1-based
        self.line = source.count("\n", 0, position) + 1
        self.column = position - (source.rfind("\n", 0, position) + 1) + 1

        super().__init__(self._format_detailed_message())

    def _format_detailed_message(self) -> str:
        """Format the error message with all available details."""
        parts = [f"Error: {self.message}"]
        parts.append(f"Position: {self.position} (line {self.line}, column {self.column})")

        if self.expected:
            parts.append(f"Expected: {self.expected}")

        if self.received:
            parts.append(f"Received: {self.received}")

        return "\n".join(parts)


class UnmatchedAlternativeError(MarkdownParseError):
    """No block or inline rule matched at a position."""

    headline = "No markdown rule matches the input"


class UnterminatedDelimiterError(MarkdownParseError):
    """An opening marker has no matching closing marker."""

    headline = "Opening delimiter has no matching close"


class MissingLineTerminatorError(MarkdownParseError):
    """A line of inline content is not followed by a line terminator."""

    headline = "Line is not terminated by a newline"
