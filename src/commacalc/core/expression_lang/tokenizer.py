"""
Tokenizer for the commacalc expression language.

Converts an expression string into a sequence of typed tokens. Characters
that belong to no token class are dropped without error; the parser is the
only stage that rejects input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeGuard

from commacalc.core.cursor import Cursor

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for the expression language."""

    NUMBER = "number"
    OPERATOR = "operator"
    PARENTHESES = "parentheses"


@dataclass(frozen=True, slots=True)
class Token:
    """A single token from the expression tokenizer."""

    payload: str
    position: int
    type: TokenKind

    def __str__(self) -> str:
        return f"{self.type} {self.payload!r} at position {self.position}"


WHITESPACE = frozenset(" \t\n")
OPERATORS = frozenset("+-*/^")
PARENTHESES = frozenset("()")
DECIMAL_SEPARATOR = ","


def _is_digit(c: str | None) -> TypeGuard[str]:
    # str.isdigit() also accepts non-ASCII digits such as "²"
    return c is not None and "0" <= c <= "9"


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens."""
    cursor: Cursor[str] = Cursor(source)
    tokens: list[Token] = []

    while cursor.open:
        c = cursor.current

        if c in WHITESPACE:
            pass
        elif _is_digit(c):
            tokens.append(_read_number(cursor))
            continue
        elif c in OPERATORS:
            tokens.append(Token(c, cursor.position, TokenKind.OPERATOR))
        elif c in PARENTHESES:
            tokens.append(Token(c, cursor.position, TokenKind.PARENTHESES))

        cursor.forward()

    logger.debug("Tokenized %d characters into %d tokens", len(source), len(tokens))
    return tokens


def _read_number(cursor: Cursor[str]) -> Token:
    """Read digits with an optional ``,digits`` fraction.

    Leaves the cursor on the first character after the number. A comma
    that is not followed by a digit is left unconsumed.
    """
    start = cursor.position
    buffer = _read_digits(cursor)

    if cursor.current == DECIMAL_SEPARATOR:
        if _is_digit(cursor.forward()):
            buffer.append(DECIMAL_SEPARATOR)
            buffer.extend(_read_digits(cursor))
        else:
            cursor.back()

    return Token("".join(buffer), start, TokenKind.NUMBER)


def _read_digits(cursor: Cursor[str]) -> list[str]:
    digits: list[str] = []
    c = cursor.current
    while _is_digit(c):
        digits.append(c)
        c = cursor.forward()
    return digits
