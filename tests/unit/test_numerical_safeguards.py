"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf проверки
2. Epsilon-сравнения float
3. Целочисленный clamp
4. Валидацию параметров
"""

import math

import pytest

from geomcore.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    all_finite,
    clamp_int,
    equals_with_tolerance,
    is_close,
    is_valid_float,
    nan_equal,
    validate_non_negative,
    validate_size,
)

# =============================================================================
# ТЕСТЫ NaN/Inf ПРОВЕРОК
# =============================================================================


class TestFiniteChecks:
    """Тесты для is_valid_float / all_finite"""

    def test_finite_values_valid(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1e308)

    def test_nan_inf_invalid(self) -> None:
        """NaN и Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))

    def test_all_finite(self) -> None:
        """all_finite проверяет каждый элемент"""
        assert all_finite([1.0, 2.0, 3.0])
        assert all_finite([])
        assert not all_finite([1.0, float("nan")])
        assert not all_finite([float("inf"), 1.0])


class TestNanEqual:
    """Тесты для nan_equal"""

    def test_nan_equals_nan(self) -> None:
        """Два NaN считаются равными"""
        assert nan_equal(math.nan, math.nan)

    def test_nan_not_equal_number(self) -> None:
        """NaN не равен числу (в обе стороны)"""
        assert not nan_equal(math.nan, 0.0)
        assert not nan_equal(0.0, math.nan)

    def test_plain_values(self) -> None:
        """Обычные значения сравниваются точно"""
        assert nan_equal(1.5, 1.5)
        assert not nan_equal(1.5, 1.5000001)


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_default_tolerances(self) -> None:
        """Значения по умолчанию"""
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_relative_closeness(self) -> None:
        """Относительная толерантность для больших чисел"""
        assert is_close(1e10, 1e10 + 1.0)
        assert not is_close(1.0, 1.1)

    def test_absolute_closeness_near_zero(self) -> None:
        """Абсолютная толерантность около нуля"""
        assert is_close(0.0, 1e-13)
        assert not is_close(0.0, 1e-6)


class TestEqualsWithTolerance:
    """Тесты для equals_with_tolerance"""

    def test_within_tolerance(self) -> None:
        assert equals_with_tolerance(1.0, 1.05, 0.1)
        assert equals_with_tolerance(1.0, 0.95, 0.1)

    def test_boundary_inclusive(self) -> None:
        """Граница включается: abs(a - b) <= tolerance"""
        assert equals_with_tolerance(1.0, 1.5, 0.5)

    def test_outside_tolerance(self) -> None:
        assert not equals_with_tolerance(1.0, 1.2, 0.1)

    def test_zero_tolerance_is_exact(self) -> None:
        assert equals_with_tolerance(2.0, 2.0, 0.0)
        assert not equals_with_tolerance(2.0, 2.0000001, 0.0)

    def test_negative_tolerance_raises(self) -> None:
        with pytest.raises(ValueError, match="tolerance must be non-negative"):
            equals_with_tolerance(1.0, 1.0, -0.1)


# =============================================================================
# ТЕСТЫ CLAMP
# =============================================================================


class TestClampInt:
    """Тесты для clamp_int"""

    def test_inside_range_unchanged(self) -> None:
        assert clamp_int(3, 2, 3) == 3
        assert clamp_int(2, 2, 3) == 2

    def test_clamped_to_bounds(self) -> None:
        assert clamp_int(5, 2, 3) == 3
        assert clamp_int(-1, 0, 1) == 0

    def test_open_bounds(self) -> None:
        """None означает отсутствие границы"""
        assert clamp_int(10, min_value=2) == 10
        assert clamp_int(-10, max_value=3) == -10


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidation:
    """Тесты для validate_non_negative / validate_size"""

    def test_non_negative_accepts(self) -> None:
        validate_non_negative(0.0, "x")
        validate_non_negative(5.0, "x")

    def test_non_negative_rejects_negative(self) -> None:
        with pytest.raises(ValueError, match="x must be non-negative"):
            validate_non_negative(-1.0, "x")

    def test_non_negative_rejects_nan(self) -> None:
        with pytest.raises(ValueError, match="must be a valid float"):
            validate_non_negative(float("nan"), "x")

    def test_size_accepts_zero_and_positive(self) -> None:
        validate_size(0)
        validate_size(10)

    def test_size_rejects_negative(self) -> None:
        with pytest.raises(ValueError, match="size must be non-negative"):
            validate_size(-1)

    def test_size_rejects_non_integer(self) -> None:
        with pytest.raises(ValueError, match="size must be an integer"):
            validate_size(2.5)  # type: ignore[arg-type]
        with pytest.raises(ValueError, match="size must be an integer"):
            validate_size(True)
