"""
Expression evaluator for the commacalc expression language.

Pure evaluation: no I/O, no side effects. Does NOT use Python's eval().
Arithmetic follows IEEE 754 throughout, so division by zero and
out-of-domain powers produce infinities and NaN instead of raising.
"""

from __future__ import annotations

import logging
import math
from typing import assert_never

from commacalc.core.expression_lang.parser import parse
from commacalc.core.ir.expressions import (
    AddExpr,
    DivExpr,
    Expr,
    MulExpr,
    NumberExpr,
    ParenthesesExpr,
    PowExpr,
    SubExpr,
)

logger = logging.getLogger(__name__)

# Point positions (value = 0.d1d2... * 10**point) printed without an exponent
_MIN_POSITIONAL_POINT = -6
_MAX_POSITIONAL_POINT = 21


def evaluate(expr: Expr) -> float:
    """Evaluate an expression tree to a float.

    Only the closed set of AST node types is handled; type checkers flag a
    node type added to ``Expr`` without a case here.

    Args:
        expr: Parsed expression AST.

    Returns:
        The computed value. May be ``inf``, ``-inf`` or ``nan``.
    """
    if isinstance(expr, NumberExpr):
        return expr.value
    if isinstance(expr, AddExpr):
        return evaluate(expr.left) + evaluate(expr.right)
    if isinstance(expr, SubExpr):
        return evaluate(expr.left) - evaluate(expr.right)
    if isinstance(expr, MulExpr):
        return evaluate(expr.left) * evaluate(expr.right)
    if isinstance(expr, DivExpr):
        return _divide(evaluate(expr.left), evaluate(expr.right))
    if isinstance(expr, PowExpr):
        return _power(evaluate(expr.left), evaluate(expr.right))
    if isinstance(expr, ParenthesesExpr):
        return evaluate(expr.content)
    assert_never(expr)


def interpret(source: str) -> float:
    """Parse and evaluate an expression string.

    Raises:
        UnexpectedTokenError: If a number or "(" was required but not found.
        ImbalancedParenthesesError: If a "(" group is not closed.
    """
    result = evaluate(parse(source))
    logger.debug("Evaluated %r to %r", source, result)
    return result


def format_result(value: float) -> str:
    """Render a result the way ECMAScript ``Number#toString`` does.

    Digits are the shortest round-tripping ones (``repr``). Magnitudes in
    ``[1e-6, 1e21)`` print in positional notation, everything else as
    ``<digits>e<sign><exponent>``: ``1024``, ``0.00001``, ``1e-7``,
    ``1e+21``. Negative zero keeps its sign, and non-finite values use the
    spelling ``Infinity`` / ``-Infinity`` / ``NaN``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign = "-" if value < 0 else ""
    digits, point = _shortest_digits(abs(value))
    k = len(digits)

    if k <= point <= _MAX_POSITIONAL_POINT:
        return sign + digits + "0" * (point - k)
    if 0 < point <= _MAX_POSITIONAL_POINT:
        return sign + digits[:point] + "." + digits[point:]
    if _MIN_POSITIONAL_POINT < point <= 0:
        return sign + "0." + "0" * -point + digits

    exponent = point - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"


def _shortest_digits(value: float) -> tuple[str, int]:
    """Split a positive finite float into significant digits and point position.

    The value equals ``0.<digits> * 10**point``.
    """
    mantissa, _, exp = repr(value).partition("e")
    whole, _, frac = mantissa.partition(".")
    all_digits = whole + frac
    significant = all_digits.lstrip("0")
    leading_zeros = len(all_digits) - len(significant)
    point = len(whole) - leading_zeros + int(exp or 0)
    return significant.rstrip("0"), point


def _divide(left: float, right: float) -> float:
    """Division with IEEE results for a zero divisor."""
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    # copysign keeps the sign of a negative zero divisor
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _power(base: float, exponent: float) -> float:
    """``math.pow`` with IEEE results where it would raise."""
    if math.isnan(exponent):
        return math.nan
    if abs(base) == 1 and math.isinf(exponent):
        return math.nan
    try:
        return math.pow(base, exponent)
    except ValueError:
        # Zero to a negative power diverges; anything else is out of domain
        if base == 0:
            return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
        return math.nan
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and value % 2 == 1
