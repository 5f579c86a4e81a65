"""Test that the dispatcher returns typed result dataclasses."""

import json

import pytest
import sympy as sp

from rootcalc_pkg.api import compute
from rootcalc_pkg.config import MAX_INPUT_LENGTH
from rootcalc_pkg.types import (
    AnalyticalResult,
    ArbitraryResult,
    ComplexResult,
    ComplexValue,
    ErrorKind,
    Failure,
    Mode,
    RealResult,
)


class TestDispatch:
    """compute() routes to the engine selected by the mode."""

    def test_real(self):
        result = compute("16", Mode.REAL)
        assert isinstance(result, RealResult)
        assert result.value == "4"

    def test_complex(self):
        result = compute("-4", Mode.COMPLEX)
        assert isinstance(result, ComplexResult)
        assert result.value == "2i"

    def test_arbitrary(self):
        result = compute("2", Mode.ARBITRARY, 5)
        assert isinstance(result, ArbitraryResult)
        assert result.value == "1.41421"

    def test_analytical(self):
        result = compute("x^2", Mode.ANALYTICAL)
        assert isinstance(result, AnalyticalResult)
        assert result.analytical == "|x|"

    def test_mode_by_name(self):
        assert compute("3+4i", "complex").value == "2 + 1i"
        assert compute("x^4", "ANALYTICAL").analytical == "x²"

    def test_default_mode_is_real(self):
        assert compute("16") == RealResult(value="4")

    def test_default_precision(self):
        assert compute("2", Mode.ARBITRARY).value == "1.4142135624"


class TestEmptyInput:
    """Empty input is rejected before any mode runs."""

    @pytest.mark.parametrize("mode", list(Mode) + ["bogus"])
    @pytest.mark.parametrize("text", ["", "   ", "\t\n", None])
    def test_empty(self, text, mode):
        assert compute(text, mode) == Failure(ErrorKind.EMPTY_INPUT)


class TestInputLength:
    """Over-long input is rejected before any mode runs."""

    @pytest.mark.parametrize("mode", list(Mode))
    def test_too_long(self, mode):
        text = "4" * (MAX_INPUT_LENGTH + 1)
        assert compute(text, mode) == Failure(ErrorKind.INVALID_INPUT)

    def test_at_limit(self):
        result = compute("1" + "0" * (MAX_INPUT_LENGTH - 1), Mode.ARBITRARY, 0)
        assert result.success

    def test_semiprime_product(self):
        p, q = sp.prevprime(10**10), sp.prevprime(10**10 - 100)
        result = compute(f"{p}*{q}", Mode.ANALYTICAL)
        assert result.analytical == f"√{p * q}"


class TestUnknownModeFallback:
    """Unrecognized modes behave exactly like real mode."""

    @pytest.mark.parametrize("mode", ["bogus", "", None, 42, "imaginary"])
    @pytest.mark.parametrize("text", ["16", "2", "-4", "abc", "3+4i"])
    def test_same_as_real(self, text, mode):
        assert compute(text, mode) == compute(text, Mode.REAL)


class TestEnvelope:
    """to_dict() renders the flat result envelope."""

    def test_failure_has_only_error(self):
        assert compute("-4", Mode.REAL).to_dict() == {
            "success": False,
            "error": "negativeReal",
        }

    def test_real(self):
        assert compute("16").to_dict() == {"success": True, "value": "4"}

    def test_complex(self):
        assert compute("3+4i", Mode.COMPLEX).to_dict() == {
            "success": True,
            "value": "2 + 1i",
            "complex": {"real": 2.0, "imaginary": 1.0},
        }

    def test_arbitrary_negative_carries_complex(self):
        assert compute("-9", Mode.ARBITRARY, 2).to_dict() == {
            "success": True,
            "value": "3.00i",
            "complex": {"real": 0.0, "imaginary": 3.0},
        }

    def test_arbitrary_positive_has_no_complex(self):
        assert "complex" not in compute("9", Mode.ARBITRARY, 2).to_dict()

    def test_analytical_optional_value(self):
        assert compute("x", Mode.ANALYTICAL).to_dict() == {
            "success": True,
            "analytical": "√x",
        }
        assert compute("4/9", Mode.ANALYTICAL).to_dict()["analytical"] == "2/3"

    def test_json_serializable(self):
        for mode in Mode:
            json.dumps(compute("-2", mode).to_dict())


class TestResultTypes:
    """Result dataclasses are immutable and self-describing."""

    def test_success_flags(self):
        assert Failure(ErrorKind.INVALID_INPUT).success is False
        assert RealResult(value="1").success is True
        assert AnalyticalResult(analytical="√x").success is True

    def test_mode_tags(self):
        assert Failure(ErrorKind.INVALID_INPUT).mode is None
        assert RealResult(value="1").mode is Mode.REAL
        assert ComplexResult(value="0", complex=ComplexValue(0.0, 0.0)).mode is Mode.COMPLEX
        assert ArbitraryResult(value="0").mode is Mode.ARBITRARY
        assert AnalyticalResult(analytical="√x").mode is Mode.ANALYTICAL

    def test_frozen(self):
        result = RealResult(value="4")
        with pytest.raises(AttributeError):
            result.value = "5"

    def test_repr(self):
        assert repr(Failure(ErrorKind.EMPTY_INPUT)) == "Failure(error='emptyInput')"
        assert "AnalyticalResult" in repr(compute("x^2", Mode.ANALYTICAL))
        assert "complex=" in repr(compute("-1", Mode.ARBITRARY))

    def test_mode_coerce(self):
        assert Mode.coerce(Mode.COMPLEX) is Mode.COMPLEX
        assert Mode.coerce(" Arbitrary ") is Mode.ARBITRARY
        assert Mode.coerce("bogus") is Mode.REAL
        assert Mode.coerce(None) is Mode.REAL
