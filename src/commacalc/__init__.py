"""
commacalc - arithmetic expressions with a decimal comma.

Evaluates expressions such as ``1,1 + 2 * 3,5`` or ``(2 + 3) ^ 2`` through a
tokenizer, a recursive descent parser and a tree-walking evaluator.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import (
    CalcError,
    ExpressionSyntaxError,
    ImbalancedParenthesesError,
    UnexpectedTokenError,
)
from .core.expression_lang import evaluate, format_result, interpret, parse, tokenize

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "CalcError",
    "ExpressionSyntaxError",
    "ImbalancedParenthesesError",
    "UnexpectedTokenError",
    "evaluate",
    "format_result",
    "interpret",
    "parse",
    "tokenize",
]
