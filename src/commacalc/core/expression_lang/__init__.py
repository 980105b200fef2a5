"""
commacalc expression language.

Tokenizer, parser, and evaluator for arithmetic expressions written with a
decimal comma.

Usage:
    from commacalc.core.expression_lang import interpret, parse

    expr = parse("1,5 + 2 * 3")
    result = interpret("1,5 + 2 * 3")
    # result == 7.5
"""

from commacalc.core.expression_lang.evaluator import evaluate, format_result, interpret
from commacalc.core.expression_lang.parser import parse, parse_expr
from commacalc.core.expression_lang.tokenizer import Token, TokenKind, tokenize

__all__ = [
    "Token",
    "TokenKind",
    "evaluate",
    "format_result",
    "interpret",
    "parse",
    "parse_expr",
    "tokenize",
]
