"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Clamp (порядок сравнений, NaN, инвертированный диапазон)
2. Целочисленное деление с усечением к нулю
3. Точный подъём в Fraction
4. Вычисление extent без wraparound
"""

from fractions import Fraction

import pytest

from bounded_cast.core.math.numeric_types import NumericType
from bounded_cast.core.math.numerical_safeguards import (
    clamp,
    compute_extent,
    is_integral_number,
    is_valid_float,
    to_exact,
    trunc_div,
)
from bounded_cast.errors import BoundedCastError, ExtentOverflowError

# =============================================================================
# ТЕСТЫ CLAMP
# =============================================================================


class TestClamp:
    """Тесты для clamp"""

    def test_value_within_range_unchanged(self) -> None:
        assert clamp(5.0, 0.0, 10.0) == 5.0
        assert clamp(7, 0, 10) == 7

    def test_value_below_min_clamped(self) -> None:
        assert clamp(-1.0, 0.0, 10.0) == 0.0

    def test_value_above_max_clamped(self) -> None:
        assert clamp(15.0, 0.0, 10.0) == 10.0

    def test_exact_bounds_unchanged(self) -> None:
        assert clamp(0, 0, 4095) == 0
        assert clamp(4095, 0, 4095) == 4095

    def test_nan_saturates_to_max(self) -> None:
        """NaN проходит min(max, NaN) → max"""
        assert clamp(float("nan"), 0.0, 1.0) == 1.0

    def test_infinities_saturate(self) -> None:
        assert clamp(float("inf"), -1.0, 1.0) == 1.0
        assert clamp(float("-inf"), -1.0, 1.0) == -1.0

    def test_inverted_range_returns_min(self) -> None:
        """Для min > max результат — min (поведение не определено, но детерминировано)"""
        assert clamp(5, 10, 0) == 10


# =============================================================================
# ТЕСТЫ ДЕЛЕНИЯ
# =============================================================================


class TestTruncDiv:
    """Тесты для trunc_div"""

    def test_positive_division(self) -> None:
        assert trunc_div(7, 2) == 3
        assert trunc_div(331500, 4095) == 80

    def test_negative_numerator_truncates_toward_zero(self) -> None:
        """В отличие от //, результат усекается к нулю"""
        assert trunc_div(-7, 2) == -3
        assert -7 // 2 == -4

    def test_negative_denominator(self) -> None:
        assert trunc_div(7, -2) == -3
        assert trunc_div(-7, -2) == 3

    def test_exact_division(self) -> None:
        assert trunc_div(-8, 2) == -4

    def test_division_by_zero_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            trunc_div(1, 0)


# =============================================================================
# ТЕСТЫ ТОЧНОЙ АРИФМЕТИКИ
# =============================================================================


class TestToExact:
    """Тесты для to_exact"""

    def test_float_lifted_without_loss(self) -> None:
        assert to_exact(0.5) == Fraction(1, 2)
        assert to_exact(0.1) == Fraction(0.1)
        assert to_exact(0.1) != Fraction(1, 10)

    def test_int_lifted(self) -> None:
        assert to_exact(3) == Fraction(3)

    def test_non_finite_raises(self) -> None:
        with pytest.raises(ValueError, match="non-finite"):
            to_exact(float("nan"))
        with pytest.raises(ValueError, match="non-finite"):
            to_exact(float("inf"))


class TestValueChecks:
    """Тесты для is_valid_float / is_integral_number"""

    def test_is_valid_float(self) -> None:
        assert is_valid_float(1.0)
        assert is_valid_float(3)
        assert is_valid_float(Fraction(1, 3))
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("-inf"))

    def test_is_integral_number(self) -> None:
        assert is_integral_number(3)
        assert not is_integral_number(3.0)
        assert not is_integral_number(Fraction(3))
        assert not is_integral_number(True)


# =============================================================================
# ТЕСТЫ EXTENT
# =============================================================================


class TestComputeExtent:
    """Тесты для compute_extent"""

    def test_unsigned_16_bit_extent_in_wider_type(self) -> None:
        assert compute_extent(0, 65535, NumericType.INT32) == 65535

    def test_signed_range_in_unsigned_extent(self) -> None:
        """Разность считается точно: нет wraparound при отрицательном min"""
        assert compute_extent(-128, 127, NumericType.UINT64) == 255
        assert compute_extent(-(2**63), 2**63 - 1, NumericType.UINT64) == 2**64 - 1

    def test_too_narrow_extent_type_raises(self) -> None:
        with pytest.raises(ExtentOverflowError, match="does not fit"):
            compute_extent(0, 65535, NumericType.INT16)

    def test_overflow_error_hierarchy(self) -> None:
        with pytest.raises(OverflowError):
            compute_extent(-128, 127, NumericType.INT8)
        with pytest.raises(BoundedCastError):
            compute_extent(-128, 127, NumericType.INT8)

    def test_float_extent(self) -> None:
        result = compute_extent(-1.0, 1.0, NumericType.FLOAT64)
        assert result == 2.0
        assert isinstance(result, float)

    def test_exact_extent(self) -> None:
        assert compute_extent(0, 2**64, NumericType.EXACT) == 2**64
        assert compute_extent(0.0, 0.5, NumericType.EXACT) == Fraction(1, 2)

    def test_float_extent_overflow_raises(self) -> None:
        flt_max = NumericType.FLOAT32.highest
        with pytest.raises(ExtentOverflowError):
            compute_extent(-flt_max, flt_max, NumericType.FLOAT32)

    def test_inverted_domain_negative_extent_without_wrap(self) -> None:
        """Инвертированный домен: отрицательный extent без проверки и wrap"""
        assert compute_extent(10, 0, NumericType.UINT64) == -10

    def test_degenerate_domain_zero_extent(self) -> None:
        assert compute_extent(5, 5, NumericType.INT64) == 0
