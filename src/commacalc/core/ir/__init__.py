"""
commacalc intermediate representation.

Expression AST node types, re-exported for convenience.
"""

from .expressions import (
    AddExpr,
    BinaryExpr,
    DivExpr,
    Expr,
    MulExpr,
    NumberExpr,
    ParenthesesExpr,
    PowExpr,
    SubExpr,
    format_number,
)

__all__ = [
    "AddExpr",
    "BinaryExpr",
    "DivExpr",
    "Expr",
    "MulExpr",
    "NumberExpr",
    "ParenthesesExpr",
    "PowExpr",
    "SubExpr",
    "format_number",
]
