"""Tests for the real, complex, and arbitrary-precision engines."""

import math
import random

import pytest

from rootcalc_pkg.engines import arbitrary_sqrt, complex_sqrt, real_sqrt
from rootcalc_pkg.types import (
    ArbitraryResult,
    ComplexResult,
    ComplexValue,
    ErrorKind,
    Failure,
    RealResult,
)


class TestRealSqrt:
    """Real mode."""

    def test_perfect_squares(self):
        assert real_sqrt("16") == RealResult(value="4")
        assert real_sqrt("25") == RealResult(value="5")
        assert real_sqrt("100") == RealResult(value="10")

    def test_zero(self):
        assert real_sqrt("0") == RealResult(value="0")

    def test_non_perfect_square(self):
        assert real_sqrt("2").value == "1.4142135623730951"

    def test_decimal_input(self):
        assert real_sqrt("0.25").value == "0.5"

    def test_trailing_text_ignored(self):
        assert real_sqrt("12abc").value == real_sqrt("12").value

    def test_negative(self):
        assert real_sqrt("-4") == Failure(ErrorKind.NEGATIVE_REAL)

    def test_invalid(self):
        assert real_sqrt("abc") == Failure(ErrorKind.INVALID_INPUT)
        assert real_sqrt("") == Failure(ErrorKind.INVALID_INPUT)
        assert real_sqrt("1e400") == Failure(ErrorKind.INVALID_INPUT)

    def test_square_round_trip(self):
        rng = random.Random(1234)
        for _ in range(200):
            x = rng.uniform(0, 1e6)
            v = float(real_sqrt(repr(x)).value)
            assert math.isclose(v * v, x, rel_tol=1e-15)


class TestComplexSqrt:
    """Complex mode."""

    def test_positive_real(self):
        result = complex_sqrt("16")
        assert result == ComplexResult(value="4", complex=ComplexValue(4.0, 0.0))

    def test_negative_real(self):
        result = complex_sqrt("-4")
        assert result.complex == ComplexValue(0.0, 2.0)
        assert result.value == "2i"

    def test_negative_real_non_square(self):
        result = complex_sqrt("-2")
        assert result.value == "1.4142135623730951i"

    def test_zero(self):
        assert complex_sqrt("0") == ComplexResult(
            value="0", complex=ComplexValue(0.0, 0.0)
        )

    def test_pure_imaginary(self):
        result = complex_sqrt("4i")
        assert result.complex.real == pytest.approx(math.sqrt(2))
        assert result.complex.imaginary == pytest.approx(math.sqrt(2))
        assert result.value == "1.4142135624 + 1.4142135624i"

    def test_general(self):
        result = complex_sqrt("3+4i")
        assert result.complex == ComplexValue(2.0, 1.0)
        assert result.value == "2 + 1i"

    def test_negative_imaginary_part(self):
        result = complex_sqrt("3-4i")
        assert result.complex == ComplexValue(2.0, -1.0)
        assert result.value == "2 - 1i"

    def test_negative_unit(self):
        result = complex_sqrt("-i")
        assert result.complex.real > 0
        assert result.complex.imaginary < 0

    def test_invalid(self):
        assert complex_sqrt("abc") == Failure(ErrorKind.INVALID_INPUT)

    @pytest.mark.parametrize(
        "text, a, b",
        [
            ("3+4i", 3, 4),
            ("-3+4i", -3, 4),
            ("-3-4i", -3, -4),
            ("i", 0, 1),
            ("-i", 0, -1),
            ("3+i", 3, 1),
            ("-7.5-2.25i", -7.5, -2.25),
            ("0.001+1000i", 1e-3, 1e3),
        ],
    )
    def test_square_of_root_is_input(self, text, a, b):
        root = complex_sqrt(text).complex
        squared = complex(root.real, root.imaginary) ** 2
        assert squared.real == pytest.approx(a, abs=1e-9)
        assert squared.imag == pytest.approx(b, abs=1e-9)
        assert root.real >= 0


class TestArbitrarySqrt:
    """Arbitrary-precision mode."""

    def test_precision(self):
        assert arbitrary_sqrt("2", 20).value == "1.41421356237309504880"

    def test_default_precision(self):
        assert arbitrary_sqrt("2").value == "1.4142135624"

    @pytest.mark.parametrize("n", [1, 12, 144, 99991, 10**12 + 39])
    def test_perfect_squares_keep_zeros(self, n):
        assert arbitrary_sqrt(str(n * n), 10).value == f"{n}.{'0' * 10}"

    def test_zero(self):
        assert arbitrary_sqrt("0", 10) == ArbitraryResult(value="0")
        assert arbitrary_sqrt("-0", 10) == ArbitraryResult(value="0")
        assert arbitrary_sqrt("0.000", 10) == ArbitraryResult(value="0")

    def test_negative(self):
        result = arbitrary_sqrt("-9", 5)
        assert result.value == "3.00000i"
        assert result.complex == ComplexValue(0.0, 3.0)

    def test_small_number(self):
        assert arbitrary_sqrt("0.0001", 10).value == "0.0100000000"

    def test_beyond_double_precision(self):
        result = arbitrary_sqrt("12345678901234567890", 10)
        assert result.value.startswith("3513641828")
        integer_part, fraction = result.value.split(".")
        assert len(fraction) == 10

    def test_digits_a_double_would_lose(self):
        # 10**17 + 1 and 10**17 are the same double
        root = 10**17 + 1
        assert arbitrary_sqrt(str(root * root), 10).value == f"{root}.0000000000"

    def test_zero_places(self):
        assert arbitrary_sqrt("2", 0).value == "1"

    def test_large_root(self):
        assert arbitrary_sqrt("1e40", 5).value == "100000000000000000000.00000"

    def test_invalid(self):
        assert arbitrary_sqrt("abc", 10) == Failure(ErrorKind.INVALID_INPUT)
        assert arbitrary_sqrt("NaN", 10) == Failure(ErrorKind.INVALID_INPUT)
        assert arbitrary_sqrt("Infinity", 10) == Failure(ErrorKind.INVALID_INPUT)

    def test_exponent_beyond_default_context(self):
        # 1e2000000 is outside the default context's exponent range
        result = arbitrary_sqrt("1e2000000", 2)
        assert result.success
        assert result.value == "1" + "0" * 1000000 + ".00"

    def test_tiny_exponent(self):
        assert arbitrary_sqrt("1e-2000000", 5).value == "0.00000"

    def test_result_too_large_to_render(self):
        assert arbitrary_sqrt("1e99999999999", 10) == Failure(ErrorKind.INVALID_INPUT)
