"""Symbolic square-root simplification.

The input is matched against an ordered table of (pattern, handler) rules;
the first rule whose pattern matches produces the result. The last rule
wraps anything unrecognized as ``√(input)``, so this engine never fails.

Rules, in order:
    x^n, x**n        variable to a power
    x²               variable squared
    (expr)^n         parenthesized expression to a power
    (expr)²          parenthesized expression squared
    4x^2, 4*x**2     coefficient times a variable power
    4x²              coefficient times a squared variable
    a/b              integer fraction
    a*b              integer product
    -4, 2.25         numeric literal
    x                bare variable
"""

from __future__ import annotations

import math
import re
from typing import Callable

from .formatter import format_float, superscriptify
from .logging_config import get_logger
from .radicals import integer_sqrt, simplify_radical
from .types import AnalyticalResult

logger = get_logger("analytical")

POWER = r"(?:\^|\*\*)(\d+)"


def parity_root(base: str, power: int, bare: str | None = None) -> str:
    """Simplify ``√(base^power)``.

    An even power halves; the absolute value is kept only when the halved
    power is odd. An odd power stays under the radical.

    Args:
        base: Base as it should appear with an exponent (e.g., "x", "(x+1)")
        power: Non-negative integer exponent
        bare: Base as it should appear inside |...| when the halved power is 1
    """
    if power % 2 != 0:
        return f"√({base}{superscriptify(power)})"

    half = power // 2
    if half == 1:
        return f"|{bare if bare is not None else base}|"
    if half % 2 == 0:
        return f"{base}{superscriptify(half)}"
    return f"|{base}{superscriptify(half)}|"


def _coefficient_root(coefficient: int, variable: str, power: int) -> str:
    root = integer_sqrt(coefficient)
    if power % 2 != 0 and root is None:
        return f"√({coefficient}{variable}{superscriptify(power)})"

    var_part = parity_root(variable, power)
    if root is not None:
        return f"{root}{var_part}"
    return f"√{coefficient}·{var_part}"


def _variable_power(match: re.Match, text: str) -> AnalyticalResult:
    variable, power = match.group(1), int(match.group(2))
    return AnalyticalResult(analytical=parity_root(variable, power))


def _variable_squared(match: re.Match, text: str) -> AnalyticalResult:
    return AnalyticalResult(analytical=parity_root(match.group(1), 2))


def _paren_power(match: re.Match, text: str) -> AnalyticalResult:
    expr, power = match.group(1), int(match.group(2))
    return AnalyticalResult(analytical=parity_root(f"({expr})", power, bare=expr))


def _paren_squared(match: re.Match, text: str) -> AnalyticalResult:
    expr = match.group(1)
    return AnalyticalResult(analytical=parity_root(f"({expr})", 2, bare=expr))


def _coefficient_power(match: re.Match, text: str) -> AnalyticalResult:
    coefficient, variable = int(match.group(1)), match.group(2)
    return AnalyticalResult(
        analytical=_coefficient_root(coefficient, variable, int(match.group(3)))
    )


def _coefficient_squared(match: re.Match, text: str) -> AnalyticalResult:
    coefficient, variable = int(match.group(1)), match.group(2)
    return AnalyticalResult(analytical=_coefficient_root(coefficient, variable, 2))


def _quotient(numerator: int, denominator: int = 1) -> float | None:
    """Float value of an integer ratio; None when it is not finite."""
    if denominator == 0:
        return None
    try:
        return numerator / denominator
    except OverflowError:
        return None


def _fraction(match: re.Match, text: str) -> AnalyticalResult:
    numerator, denominator = int(match.group(1)), int(match.group(2))
    root_num = integer_sqrt(numerator)
    root_den = integer_sqrt(denominator)

    if root_num is not None and root_den is not None:
        ratio = _quotient(root_num, root_den)
        value = format_float(ratio) if ratio is not None else None
        return AnalyticalResult(analytical=f"{root_num}/{root_den}", value=value)

    ratio = _quotient(numerator, denominator)
    value = format_float(math.sqrt(ratio)) if ratio is not None else None
    return AnalyticalResult(analytical=f"√({numerator}/{denominator})", value=value)


def _product(match: re.Match, text: str) -> AnalyticalResult:
    product = int(match.group(1)) * int(match.group(2))
    root = integer_sqrt(product)
    if root is not None:
        return AnalyticalResult(analytical=str(root), value=str(root))

    as_float = _quotient(product)
    value = format_float(math.sqrt(as_float)) if as_float is not None else None
    return AnalyticalResult(analytical=simplify_radical(product), value=value)


def _numeric(match: re.Match, text: str) -> AnalyticalResult:
    num = float(text)
    if not math.isfinite(num):
        return AnalyticalResult(analytical=f"√({text})")
    root = math.sqrt(abs(num))
    root_str = format_float(root)

    if num >= 0:
        if root.is_integer():
            return AnalyticalResult(analytical=root_str, value=root_str)
        return AnalyticalResult(analytical=f"√{format_float(num)}", value=root_str)

    if root.is_integer():
        return AnalyticalResult(analytical=f"{root_str}i", value=f"{root_str}i")
    return AnalyticalResult(
        analytical=f"√{format_float(abs(num))}·i", value=f"{root_str}i"
    )


def _variable(match: re.Match, text: str) -> AnalyticalResult:
    return AnalyticalResult(analytical=f"√{text}")


Rule = tuple[str, re.Pattern, Callable[[re.Match, str], AnalyticalResult]]

RULES: tuple[Rule, ...] = (
    ("variable_power", re.compile(rf"^([a-z]){POWER}$"), _variable_power),
    ("variable_squared", re.compile(r"^([a-z])²$"), _variable_squared),
    ("paren_power", re.compile(rf"^\(([^)]+)\){POWER}$"), _paren_power),
    ("paren_squared", re.compile(r"^\(([^)]+)\)²$"), _paren_squared),
    (
        "coefficient_power",
        re.compile(rf"^(\d+)\s*\*?\s*([a-z]){POWER}$"),
        _coefficient_power,
    ),
    (
        "coefficient_squared",
        re.compile(r"^(\d+)\s*\*?\s*([a-z])²$"),
        _coefficient_squared,
    ),
    ("fraction", re.compile(r"^(\d+)\s*/\s*(\d+)$"), _fraction),
    ("product", re.compile(r"^(\d+)\s*\*\s*(\d+)$"), _product),
    ("numeric", re.compile(r"^-?\d+\.?\d*$"), _numeric),
    ("variable", re.compile(r"^[a-z]$"), _variable),
)


def analytical_sqrt(input_str: str) -> AnalyticalResult:
    """Simplify the square root of an expression symbolically.

    Args:
        input_str: Expression (e.g., "x^4", "4x^2", "4/9", "12", "(a+b)^2")

    Returns:
        AnalyticalResult with the simplified form, and a decimal value for
        numeric inputs

    Example:
        >>> analytical_sqrt("x^6").analytical
        '|x³|'
        >>> analytical_sqrt("3*4").analytical
        '2√3'
    """
    text = input_str.strip().lower()
    for name, pattern, handler in RULES:
        match = pattern.match(text)
        if match:
            logger.debug("Rule %s matched %r", name, text)
            return handler(match, text)

    logger.debug("No rule matched %r, leaving it under the radical", text)
    return AnalyticalResult(analytical=f"√({text})")
