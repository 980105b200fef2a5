"""
Recursive descent parser for the commacalc expression language.

Grammar (precedence low to high):
    additive        → multiplicative (("+"|"-") additive)?
    multiplicative  → power (("*"|"/") multiplicative)?
    power           → atomic ("^" power)?
    atomic          → NUMBER | "(" additive ")"

Each binary rule recurses into itself for its right operand, so chains of
same-precedence operators group from the right: ``1-2-3`` is ``1-(2-3)``.
Tokens left over after the top-level expression are ignored.
"""

from __future__ import annotations

import logging

from commacalc.core.cursor import Cursor
from commacalc.core.errors import ImbalancedParenthesesError, UnexpectedTokenError
from commacalc.core.expression_lang.tokenizer import (
    DECIMAL_SEPARATOR,
    Token,
    TokenKind,
    tokenize,
)
from commacalc.core.ir.expressions import (
    AddExpr,
    BinaryExpr,
    DivExpr,
    Expr,
    MulExpr,
    NumberExpr,
    ParenthesesExpr,
    PowExpr,
    SubExpr,
)

logger = logging.getLogger(__name__)

_ADDITIVE: dict[str, type[BinaryExpr]] = {"+": AddExpr, "-": SubExpr}
_MULTIPLICATIVE: dict[str, type[BinaryExpr]] = {"*": MulExpr, "/": DivExpr}
_POWER: dict[str, type[BinaryExpr]] = {"^": PowExpr}


class _Parser:
    """Recursive descent parser over a token cursor."""

    def __init__(self, tokens: list[Token]) -> None:
        self.cursor: Cursor[Token] = Cursor(tokens)

    def match_operator(
        self, symbols: dict[str, type[BinaryExpr]]
    ) -> type[BinaryExpr] | None:
        """Consume the current token if it is one of ``symbols``."""
        tok = self.cursor.current
        if tok is not None and tok.type == TokenKind.OPERATOR and tok.payload in symbols:
            self.cursor.forward()
            return symbols[tok.payload]
        return None

    # -- Grammar rules --

    def parse_expression(self) -> Expr:
        return self.parse_additive()

    def parse_additive(self) -> Expr:
        """multiplicative (('+' | '-') additive)?"""
        left = self.parse_multiplicative()
        node = self.match_operator(_ADDITIVE)
        if node is None:
            return left
        return node(left=left, right=self.parse_additive())

    def parse_multiplicative(self) -> Expr:
        """power (('*' | '/') multiplicative)?"""
        left = self.parse_power()
        node = self.match_operator(_MULTIPLICATIVE)
        if node is None:
            return left
        return node(left=left, right=self.parse_multiplicative())

    def parse_power(self) -> Expr:
        """atomic ('^' power)?"""
        left = self.parse_atomic()
        node = self.match_operator(_POWER)
        if node is None:
            return left
        return node(left=left, right=self.parse_power())

    def parse_atomic(self) -> Expr:
        """NUMBER | '(' additive ')'"""
        tok = self.cursor.current

        if tok is not None and tok.type == TokenKind.NUMBER:
            self.cursor.forward()
            return NumberExpr(value=float(tok.payload.replace(DECIMAL_SEPARATOR, ".")))

        if tok is not None and tok.type == TokenKind.PARENTHESES and tok.payload == "(":
            self.cursor.forward()
            content = self.parse_expression()
            self._expect_closing()
            return ParenthesesExpr(content=content)

        if tok is None:
            raise UnexpectedTokenError("Expected <number> found <(empty)>.")
        raise UnexpectedTokenError(f"Expected <number> found <{tok}>.", tok.position)

    def _expect_closing(self) -> None:
        tok = self.cursor.current
        if tok is not None and tok.type == TokenKind.PARENTHESES and tok.payload == ")":
            self.cursor.forward()
            return

        # Exhausted input: point at the last token
        culprit = tok if tok is not None else self.cursor.last
        pos = culprit.position if culprit is not None else 0
        raise ImbalancedParenthesesError(f"Imbalanced brackets at position {pos} detected!", pos)


def parse(source: str) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "2,5 * (3 + 4)")

    Returns:
        Parsed expression AST.

    Raises:
        UnexpectedTokenError: If a number or "(" was required but not found.
        ImbalancedParenthesesError: If a "(" group is not closed.
    """
    tokens = tokenize(source)
    parser = _Parser(tokens)
    expr = parser.parse_expression()

    remaining = len(tokens) - parser.cursor.position
    if remaining > 0:
        logger.debug("Ignoring %d trailing token(s) after expression", remaining)

    return expr


parse_expr = parse
