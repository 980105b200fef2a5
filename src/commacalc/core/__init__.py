"""Core commacalc functionality: cursor, IR, expression pipeline, errors."""

from . import ir
from .cursor import Cursor
from .errors import (
    CalcError,
    ErrorContext,
    ExpressionSyntaxError,
    ImbalancedParenthesesError,
    UnexpectedTokenError,
)

__all__ = [
    "ir",
    "Cursor",
    "CalcError",
    "ErrorContext",
    "ExpressionSyntaxError",
    "ImbalancedParenthesesError",
    "UnexpectedTokenError",
]
