"""
Error types for commacalc expression parsing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_POSITION_RE = re.compile(r"position (\d+)")


class CalcError(Exception):
    """Base exception for all commacalc errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ExpressionSyntaxError(CalcError):
    """
    Raised when an expression cannot be parsed.

    ``pos`` is the 0-based character offset into the source, when one is known.
    """

    def __init__(self, message: str, pos: int | None = None) -> None:
        super().__init__(message)
        self.pos = pos


class UnexpectedTokenError(ExpressionSyntaxError):
    """
    Raised when a number or opening parenthesis was required.

    Examples:
    - Leading operator: ``+1``
    - Dangling operator: ``1+``
    - Empty input
    """

    pass


class ImbalancedParenthesesError(ExpressionSyntaxError):
    """
    Raised when a parenthesized group is not closed.

    Examples:
    - ``(2+3``
    - ``(1(2)``
    """

    pass


def position_from_message(message: str) -> int | None:
    """Extract the ``position <N>`` offset embedded in an error message."""
    match = _POSITION_RE.search(message)
    if match is None:
        return None
    return int(match.group(1))


@dataclass
class ErrorContext:
    """
    Source line plus the column an error points at.

    Attributes:
        source: The expression text as typed by the user
        column: 0-based character offset, or None when unknown
    """

    source: str
    column: int | None = None

    @classmethod
    def from_error(cls, source: str, error: Exception) -> ErrorContext:
        """Build a context from the position embedded in the error message."""
        return cls(source=source, column=position_from_message(str(error)))

    def marker(self) -> str | None:
        """Caret line aligned under the error column."""
        if self.column is None:
            return None
        return " " * self.column + "^"

    def format(self) -> str:
        """
        Format as the source line followed by the caret line.

        Returns:
            Formatted string like:
                (2+3
                   ^
        """
        marker = self.marker()
        if marker is None:
            return self.source
        return f"{self.source}\n{marker}"
