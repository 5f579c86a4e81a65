"""Result formatting module.

This module handles:
- Shortest round-trip rendering of float results
- Fixed-then-trimmed rendering of complex components
- Fixed-scale rendering of arbitrary-precision decimals
- Unicode superscripts for symbolic powers
"""

from __future__ import annotations

from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Context, Decimal

from .config import COMPLEX_DISPLAY_PLACES, INTEGER_REPR_LIMIT, MAX_FIXED_DIGITS
from .types import ValidationError


def superscriptify(input_str: str | int) -> str:
    """Convert numeric string to Unicode superscript characters.

    Args:
        input_str: Input string with digits and '-' (e.g., "123", "-5")

    Returns:
        String with superscript Unicode characters (e.g., "¹²³", "⁻⁵")
    """
    mapping = {
        "0": "⁰",
        "1": "¹",
        "2": "²",
        "3": "³",
        "4": "⁴",
        "5": "⁵",
        "6": "⁶",
        "7": "⁷",
        "8": "⁸",
        "9": "⁹",
        "-": "⁻",
    }
    return "".join(mapping.get(char, char) for char in str(input_str))


def format_float(val: float) -> str:
    """Format a float as its shortest round-trip string.

    Integral values below INTEGER_REPR_LIMIT print without a decimal point
    (``4.0`` -> ``"4"``); everything else uses ``repr``.
    """
    if val == 0:
        return "0"
    if val.is_integer() and abs(val) < INTEGER_REPR_LIMIT:
        return str(int(val))
    return repr(val)


def format_trimmed(val: float, places: int = COMPLEX_DISPLAY_PLACES) -> str:
    """Fix ``val`` to ``places`` decimals, then strip trailing zeros and the point."""
    text = f"{val:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def format_fixed(val: Decimal, places: int) -> str:
    """Render a Decimal with exactly ``places`` decimal places (no trimming).

    Quantization runs in its own context sized to the integer digits, so a
    root with many integer digits never exceeds the working precision.

    Raises:
        ValidationError: the rendering would exceed MAX_FIXED_DIGITS digits.
    """
    integer_digits = max(val.adjusted() + 1, 1)
    if integer_digits + places > MAX_FIXED_DIGITS:
        raise ValidationError(
            f"Result too large (>{MAX_FIXED_DIGITS} digits)", "TOO_LARGE"
        )
    context = Context(
        prec=integer_digits + places + 1,
        rounding=ROUND_HALF_UP,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
    )
    exponent = Decimal(1).scaleb(-places, context=context)
    quantized = val.quantize(exponent, context=context)
    return format(quantized, "f")


def format_complex(
    real: float, imaginary: float, places: int = COMPLEX_DISPLAY_PLACES
) -> str:
    """Format a complex number as ``a + bi`` / ``a - bi``.

    Examples:
        >>> format_complex(2.0, -1.0)
        '2 - 1i'
        >>> format_complex(0.0, 1.5)
        '1.5i'
    """
    real_str = format_trimmed(real, places)
    imaginary_str = format_trimmed(abs(imaginary), places)

    if imaginary == 0:
        return real_str

    if real == 0:
        return f"-{imaginary_str}i" if imaginary < 0 else f"{imaginary_str}i"

    sign = " - " if imaginary < 0 else " + "
    return f"{real_str}{sign}{imaginary_str}i"
