"""Type definitions and result dataclasses for consistent API responses.

Every computation returns one case of ``CalculationResult``: a ``Failure``
carrying only an ``ErrorKind``, or the success case of the mode that ran.
Each case carries exactly the fields its mode can produce.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class Mode(str, Enum):
    """Computation strategy selected by the caller."""

    REAL = "real"
    COMPLEX = "complex"
    ARBITRARY = "arbitrary"
    ANALYTICAL = "analytical"

    @classmethod
    def coerce(cls, value: Any) -> "Mode":
        """Map any value to a Mode; unrecognized values fall back to REAL."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.REAL


class ErrorKind(str, Enum):
    """Error identifiers returned to callers (mapped to text by the front end)."""

    INVALID_INPUT = "invalidInput"
    NEGATIVE_REAL = "negativeReal"
    EMPTY_INPUT = "emptyInput"
    # Reserved: the analytical rules always succeed through their fallback
    INVALID_EXPRESSION = "invalidExpression"


@dataclass(frozen=True)
class ComplexValue:
    """A complex number as a pair of floats."""

    real: float
    imaginary: float

    def to_dict(self) -> dict[str, float]:
        return {"real": self.real, "imaginary": self.imaginary}

    def is_zero(self) -> bool:
        return self.real == 0 and self.imaginary == 0


@dataclass(frozen=True)
class Failure:
    """Result of a computation that could not be carried out."""

    error: ErrorKind
    success = False
    mode = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"success": False, "error": self.error.value}

    def __repr__(self) -> str:
        return f"Failure(error={self.error.value!r})"


@dataclass(frozen=True)
class RealResult:
    """Square root of a non-negative real number."""

    value: str
    success = True
    mode = Mode.REAL

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"success": True, "value": self.value}

    def __repr__(self) -> str:
        return f"RealResult(value={self.value!r})"


@dataclass(frozen=True)
class ComplexResult:
    """Principal square root in the complex plane."""

    value: str
    complex: ComplexValue
    success = True
    mode = Mode.COMPLEX

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "success": True,
            "value": self.value,
            "complex": self.complex.to_dict(),
        }

    def __repr__(self) -> str:
        return f"ComplexResult(value={self.value!r}, complex={self.complex!r})"


@dataclass(frozen=True)
class ArbitraryResult:
    """Decimal square root fixed to the requested number of places.

    ``complex`` is only set when the input was negative.
    """

    value: str
    complex: ComplexValue | None = None
    success = True
    mode = Mode.ARBITRARY

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"success": True, "value": self.value}
        if self.complex is not None:
            result_dict["complex"] = self.complex.to_dict()
        return result_dict

    def __repr__(self) -> str:
        parts = [f"value={self.value!r}"]
        if self.complex is not None:
            parts.append(f"complex={self.complex!r}")
        return f"ArbitraryResult({', '.join(parts)})"


@dataclass(frozen=True)
class AnalyticalResult:
    """Symbolic square root, with a decimal approximation when one is meaningful."""

    analytical: str
    value: str | None = None
    success = True
    mode = Mode.ANALYTICAL

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"success": True, "analytical": self.analytical}
        if self.value is not None:
            result_dict["value"] = self.value
        return result_dict

    def __repr__(self) -> str:
        parts = [f"analytical={self.analytical!r}"]
        if self.value is not None:
            parts.append(f"value={self.value!r}")
        return f"AnalyticalResult({', '.join(parts)})"


CalculationResult = Union[
    Failure, RealResult, ComplexResult, ArbitraryResult, AnalyticalResult
]


class ValidationError(Exception):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ParseError(Exception):
    """Raised when parsing fails."""

    def __init__(self, message: str, code: str = "PARSE_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
