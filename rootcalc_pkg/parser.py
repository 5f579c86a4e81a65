"""Input parsing module.

This module handles:
- Reading leading decimal literals the way a host float parser does
- Parsing real and complex literals ("5", "-4", "3+4i", "i", "3-i")
- Parsing arbitrary-magnitude decimal literals without a float round-trip
- Input length validation
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation

from .config import (
    COMPLEX_REGEX,
    COMPLEX_UNIT_REGEX,
    FLOAT_PREFIX_REGEX,
    MAX_INPUT_LENGTH,
    PURE_IMAGINARY_REGEX,
    WHITESPACE_REGEX,
)
from .logging_config import get_logger
from .types import ComplexValue, ParseError, ValidationError

logger = get_logger("parser")


def validate_input(input_str: str) -> None:
    """Reject operands longer than MAX_INPUT_LENGTH characters.

    Raises:
        ValidationError: input is too long.
    """
    if len(input_str) > MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long (>{MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )


def parse_float_prefix(input_str: str) -> float:
    """Parse the longest leading decimal literal of ``input_str``.

    Leading whitespace is skipped and anything after the literal is ignored,
    so ``"12abc"`` reads as ``12.0``.

    Raises:
        ParseError: no literal at the start of the string.
        ValidationError: the literal overflows to infinity.
    """
    match = FLOAT_PREFIX_REGEX.match(input_str)
    if not match:
        raise ParseError(f"Not a number: {input_str!r}", code="INVALID_NUMBER")
    value = float(match.group(1))
    if not math.isfinite(value):
        raise ValidationError(
            f"Number out of range: {match.group(1)!r}", code="OUT_OF_RANGE"
        )
    return value


def _signed_unit(coefficient: str) -> float:
    """Read an imaginary coefficient where a bare sign means one."""
    if coefficient in ("", "+"):
        return 1.0
    if coefficient == "-":
        return -1.0
    return parse_float_prefix(coefficient)


def parse_complex(input_str: str) -> ComplexValue:
    """Parse a real or complex literal into a ComplexValue.

    Forms are tried in order; the first match wins:
    pure imaginary (``5i``, ``-i``), pure real (``-4``), ``a+bi`` / ``a-bi``,
    and ``a+i`` / ``a-i``.

    Raises:
        ParseError: the text matches none of the forms.
    """
    text = WHITESPACE_REGEX.sub("", input_str.lower())

    match = PURE_IMAGINARY_REGEX.match(text)
    if match:
        return ComplexValue(0.0, _signed_unit(match.group(1)))

    if "i" not in text:
        try:
            return ComplexValue(parse_float_prefix(text), 0.0)
        except (ParseError, ValidationError):
            pass

    match = COMPLEX_REGEX.match(text)
    if match:
        return ComplexValue(
            parse_float_prefix(match.group(1)), _signed_unit(match.group(2))
        )

    match = COMPLEX_UNIT_REGEX.match(text)
    if match:
        imaginary = 1.0 if match.group(2) == "+" else -1.0
        return ComplexValue(parse_float_prefix(match.group(1)), imaginary)

    logger.debug("No complex form matched %r", text)
    raise ParseError(f"Not a complex number: {input_str!r}", code="INVALID_COMPLEX")


def parse_decimal(input_str: str) -> Decimal:
    """Parse a decimal literal of any magnitude or scale.

    The digits are read directly into a Decimal, never through a float, so
    inputs with more significant digits than a double holds stay exact.

    Raises:
        ParseError: the text is not a decimal literal.
        ValidationError: the literal is NaN or infinite.
    """
    try:
        value = Decimal(input_str.strip())
    except InvalidOperation as e:
        raise ParseError(
            f"Not a decimal number: {input_str!r}", code="INVALID_DECIMAL"
        ) from e
    if not value.is_finite():
        raise ValidationError(
            f"Decimal must be finite: {input_str!r}", code="NOT_FINITE"
        )
    return value
