"""Numeric square-root engines: real, complex, and arbitrary-precision decimal.

Each engine takes the raw operand text and returns a typed result. Parse
failures are reported as ``Failure`` values, never raised.
"""

from __future__ import annotations

import math
from decimal import MAX_EMAX, MIN_EMIN, Context, localcontext

from .config import DEFAULT_PRECISION, GUARD_DIGITS
from .formatter import format_complex, format_fixed, format_float
from .logging_config import get_logger
from .parser import parse_complex, parse_decimal, parse_float_prefix
from .types import (
    ArbitraryResult,
    CalculationResult,
    ComplexResult,
    ComplexValue,
    ErrorKind,
    Failure,
    ParseError,
    RealResult,
    ValidationError,
)

logger = get_logger("engines")


def real_sqrt(input_str: str) -> CalculationResult:
    """Square root of a real number.

    Returns:
        RealResult with the shortest round-trip string of the root, or
        Failure(INVALID_INPUT) / Failure(NEGATIVE_REAL)
    """
    try:
        num = parse_float_prefix(input_str)
    except (ParseError, ValidationError) as e:
        logger.debug("Real mode rejected input (%s): %s", e.code, e)
        return Failure(ErrorKind.INVALID_INPUT)

    if num < 0:
        return Failure(ErrorKind.NEGATIVE_REAL)

    if num == 0:
        return RealResult(value="0")

    return RealResult(value=format_float(math.sqrt(num)))


def complex_sqrt(input_str: str) -> CalculationResult:
    """Principal square root of a real or complex number.

    For ``a+bi`` with ``b != 0``::

        r    = |a+bi|
        real = sqrt((r + a) / 2)
        imag = sign(b) * sqrt((r - a) / 2)
    """
    try:
        parsed = parse_complex(input_str)
    except (ParseError, ValidationError) as e:
        logger.debug("Complex mode rejected input (%s): %s", e.code, e)
        return Failure(ErrorKind.INVALID_INPUT)

    a, b = parsed.real, parsed.imaginary

    # Negative real axis: purely imaginary root
    if b == 0 and a < 0:
        root = math.sqrt(abs(a))
        return ComplexResult(value=f"{format_float(root)}i", complex=ComplexValue(0.0, root))

    if a == 0 and b == 0:
        return ComplexResult(value="0", complex=ComplexValue(0.0, 0.0))

    if b == 0:
        root = math.sqrt(a)
        return ComplexResult(value=format_float(root), complex=ComplexValue(root, 0.0))

    r = math.hypot(a, b)
    real_part = math.sqrt((r + a) / 2)
    imaginary_part = math.copysign(math.sqrt((r - a) / 2), b)

    return ComplexResult(
        value=format_complex(real_part, imaginary_part),
        complex=ComplexValue(real_part, imaginary_part),
    )


def arbitrary_sqrt(
    input_str: str, precision: int = DEFAULT_PRECISION
) -> CalculationResult:
    """Decimal square root fixed to ``precision`` decimal places.

    The root is computed in a call-local decimal context carrying
    ``precision + GUARD_DIGITS`` significant digits, so concurrent calls
    with different precisions never share state. The context spans the full
    exponent range, so magnitudes such as ``1e2000000`` neither overflow nor
    underflow.

    Args:
        input_str: Decimal literal of any magnitude (e.g., "12345678901234567890")
        precision: Number of decimal places in the result

    Returns:
        ArbitraryResult; negative inputs give an imaginary root with ``complex`` set
    """
    try:
        num = parse_decimal(input_str)
    except (ParseError, ValidationError) as e:
        logger.debug("Arbitrary mode rejected input (%s): %s", e.code, e)
        return Failure(ErrorKind.INVALID_INPUT)

    if num.is_zero():
        return ArbitraryResult(value="0")

    context = Context(prec=precision + GUARD_DIGITS, Emax=MAX_EMAX, Emin=MIN_EMIN)
    with localcontext(context) as ctx:
        root = num.copy_abs().sqrt(context=ctx)

    try:
        fixed = format_fixed(root, precision)
    except ValidationError as e:
        logger.debug("Arbitrary mode rejected input (%s): %s", e.code, e)
        return Failure(ErrorKind.INVALID_INPUT)

    if num < 0:
        return ArbitraryResult(
            value=f"{fixed}i", complex=ComplexValue(0.0, float(fixed))
        )

    return ArbitraryResult(value=fixed)
