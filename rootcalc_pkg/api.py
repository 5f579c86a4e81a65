"""Public API for Rootcalc - returns structured objects without side effects."""

from __future__ import annotations

from typing import Any

from .analytical import analytical_sqrt
from .config import DEFAULT_PRECISION
from .engines import arbitrary_sqrt, complex_sqrt, real_sqrt
from .logging_config import get_logger
from .parser import validate_input
from .types import CalculationResult, ErrorKind, Failure, Mode, ValidationError

__all__ = [
    "compute",
    "real_sqrt",
    "complex_sqrt",
    "arbitrary_sqrt",
    "analytical_sqrt",
]

logger = get_logger("api")


def compute(
    input_str: str | None,
    mode: Mode | str | Any = Mode.REAL,
    precision: int = DEFAULT_PRECISION,
) -> CalculationResult:
    """Compute the square root of ``input_str`` in the selected mode.

    Args:
        input_str: Operand text (e.g., "16", "3+4i", "12345678901234567890", "x^4")
        mode: Mode member or its name; unrecognized values behave as Mode.REAL
        precision: Decimal places for Mode.ARBITRARY (ignored by other modes)

    Returns:
        One case of CalculationResult; failures are returned, never raised

    Example:
        >>> from rootcalc_pkg.api import compute
        >>> compute("16").value
        '4'
        >>> compute("3+4i", "complex").value
        '2 + 1i'
        >>> compute("2", "arbitrary", 5).value
        '1.41421'
        >>> compute("x^2", "analytical").analytical
        '|x|'
        >>> compute("   ", "complex").error
        <ErrorKind.EMPTY_INPUT: 'emptyInput'>
    """
    if input_str is None or not input_str.strip():
        return Failure(ErrorKind.EMPTY_INPUT)

    try:
        validate_input(input_str)
    except ValidationError as e:
        logger.debug("Rejected input (%s): %s", e.code, e)
        return Failure(ErrorKind.INVALID_INPUT)

    selected = Mode.coerce(mode)
    try:
        if selected is Mode.COMPLEX:
            result = complex_sqrt(input_str)
        elif selected is Mode.ARBITRARY:
            result = arbitrary_sqrt(input_str, precision)
        elif selected is Mode.ANALYTICAL:
            result = analytical_sqrt(input_str)
        else:
            result = real_sqrt(input_str)
    except Exception as e:
        # Log unexpected errors for debugging
        logger.error(
            f"Unexpected error in {selected.value} mode: {e}", exc_info=True
        )
        return Failure(ErrorKind.INVALID_INPUT)

    logger.debug(
        "mode=%s length=%d success=%s", selected.value, len(input_str), result.success
    )
    return result
