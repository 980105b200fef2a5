"""
Expression AST for commacalc.

Supports:
- Numbers: 23, 23,2 (comma as decimal separator)
- Arithmetic: +, -, *, /, ^
- Grouping: ( ... )

Every node is a frozen pydantic model tagged by ``type``, so a whole tree
serializes through ``model_dump()`` and compares by value.
"""

from __future__ import annotations

import math
from typing import Annotated, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field


def format_number(value: float) -> str:
    """Render a number the way it would be typed, with a decimal comma."""
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value).replace(".", ",")


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class NumberExpr(BaseModel):
    """A numeric literal."""

    type: Literal["number"] = "number"
    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return format_number(self.value)


class _BinaryExpr(BaseModel):
    """Shared shape of the binary operations: left op right."""

    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    symbol: ClassVar[str] = "?"

    def __str__(self) -> str:
        return f"({self.left} {self.symbol} {self.right})"


class AddExpr(_BinaryExpr):
    """Addition: left + right."""

    type: Literal["add"] = "add"
    symbol: ClassVar[str] = "+"


class SubExpr(_BinaryExpr):
    """Subtraction: left - right."""

    type: Literal["sub"] = "sub"
    symbol: ClassVar[str] = "-"


class MulExpr(_BinaryExpr):
    """Multiplication: left * right."""

    type: Literal["mul"] = "mul"
    symbol: ClassVar[str] = "*"


class DivExpr(_BinaryExpr):
    """Floating-point division: left / right."""

    type: Literal["div"] = "div"
    symbol: ClassVar[str] = "/"


class PowExpr(_BinaryExpr):
    """Exponentiation: left ^ right."""

    type: Literal["pow"] = "pow"
    symbol: ClassVar[str] = "^"


class ParenthesesExpr(BaseModel):
    """
    A parenthesized group.

    Carries no semantics beyond its content; it records that the source
    grouped the inner expression explicitly.
    """

    type: Literal["parentheses"] = "parentheses"
    content: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.content})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

BinaryExpr = AddExpr | SubExpr | MulExpr | DivExpr | PowExpr

Expr = Annotated[
    NumberExpr | AddExpr | SubExpr | MulExpr | DivExpr | PowExpr | ParenthesesExpr,
    Field(discriminator="type"),
]

# Rebuild models for recursive forward references
_BinaryExpr.model_rebuild()
AddExpr.model_rebuild()
SubExpr.model_rebuild()
MulExpr.model_rebuild()
DivExpr.model_rebuild()
PowExpr.model_rebuild()
ParenthesesExpr.model_rebuild()
