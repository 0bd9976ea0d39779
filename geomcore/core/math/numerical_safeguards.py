"""
Numerical Safeguards — Safe Math Primitives для геометрии

Модуль обеспечивает численную устойчивость геометрических вычислений:
- Проверка конечности float (NaN/Inf не принимаются как валидный результат)
- Epsilon-сравнения float с учётом машинной точности
- Целочисленный clamp для нормализации параметров (dimension/measures)
- Валидация параметров с явными ValueError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не выдаются за валидный результат
2. Float сравнения всегда учитывают машинную точность
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final, Iterable

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для абсолютных сравнений
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def all_finite(values: Iterable[float]) -> bool:
    """
    Проверка, что все значения конечны.

    Используется линейным солвером: вектор с NaN/Inf не считается решением.

    Examples:
        >>> all_finite([1.0, 2.0])
        True
        >>> all_finite([1.0, float('inf')])
        False
        >>> all_finite([])
        True
    """
    return all(is_valid_float(v) for v in values)


def nan_equal(a: float, b: float) -> bool:
    """
    Точное сравнение ординат, где два NaN считаются равными.

    Отсутствующая ордината кодируется NaN, поэтому для сравнения
    координат и последовательностей NaN == NaN.
    """
    if math.isnan(a):
        return math.isnan(b)
    return a == b


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def equals_with_tolerance(a: float, b: float, tolerance: float) -> bool:
    """
    Абсолютное сравнение: abs(a - b) <= tolerance.

    Базовый примитив для equals_2d_with_tolerance у координат.

    Raises:
        ValueError: Если tolerance отрицательный или NaN/Inf

    Examples:
        >>> equals_with_tolerance(1.0, 1.05, 0.1)
        True
        >>> equals_with_tolerance(1.0, 1.2, 0.1)
        False
    """
    validate_non_negative(tolerance, "tolerance")
    return abs(a - b) <= tolerance


# =============================================================================
# CLAMP
# =============================================================================


def clamp_int(
    value: int,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    """
    Ограничение целого значения в заданном диапазоне.

    Используется фабриками последовательностей: запрошенные dimension и
    measures приводятся к поддерживаемому диапазону без ошибки.

    Examples:
        >>> clamp_int(5, 2, 3)
        3
        >>> clamp_int(-1, 0, 1)
        0
        >>> clamp_int(2, 2)
        2
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_size(size: int, name: str = "size") -> None:
    """
    Валидация размера последовательности.

    Raises:
        ValueError: Если size не целое или отрицательное
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise ValueError(f"{name} must be an integer, got {size!r}")

    if size < 0:
        raise ValueError(f"{name} must be non-negative, got {size}")
