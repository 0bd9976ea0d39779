"""
Matrix — решение плотных систем линейных уравнений

Метод Гаусса с частичным выбором ведущего элемента (partial pivoting).
Модуль не зависит от геометрических типов; используется построениями,
сводящимися к малым системам (например, центр описанной окружности).

Матрица: n×n (список строк или 2-D numpy-массив). Вектор: длина n.
numpy-массивы не-float dtype (целые) не могут хранить промежуточные
значения исключения, поэтому solve решает их на float64-копиях.

Варианты:
- solve:        in-place на матрице и векторе; None если решения нет
- solve_copy:   то же, входы не изменяются
- solve_strict: входы не изменяются; ошибки различаются исключениями

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Несовпадение размеров и вырожденность (ведущий элемент == 0.0) дают None
   в solve/solve_copy; по результату причина не различима
2. Решение с NaN/Inf не возвращается как валидное
3. Детерминированность: одинаковые входы → одинаковый результат
"""

import logging
from typing import MutableSequence, Optional, Union

import numpy as np
import numpy.typing as npt

from geomcore.core.math.numerical_safeguards import all_finite

logger = logging.getLogger(__name__)

MatrixLike = Union[MutableSequence[MutableSequence[float]], npt.NDArray[np.floating]]
VectorLike = Union[MutableSequence[float], npt.NDArray[np.floating]]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class LinearSystemError(ValueError):
    """Система не имеет единственного решения."""

    pass


class MatrixDimensionError(LinearSystemError):
    """Матрица не квадратная или длина вектора не равна её стороне."""

    pass


class SingularMatrixError(LinearSystemError):
    """Нулевой ведущий элемент (или нечисловое решение): решение не единственно."""

    pass


# =============================================================================
# ПЕРЕСТАНОВКИ СТРОК
# =============================================================================


def swap_rows(m: MatrixLike, i: int, j: int) -> None:
    """
    Обмен строк i и j матрицы поэлементно.

    Поэлементный обмен корректен и для списков, и для numpy-массивов
    (строки numpy — views).
    """
    if i == j:
        return
    for col in range(len(m[0])):
        temp = m[i][col]
        m[i][col] = m[j][col]
        m[j][col] = temp


def swap_entries(v: VectorLike, i: int, j: int) -> None:
    """Обмен элементов i и j вектора"""
    if i == j:
        return
    temp = v[i]
    v[i] = v[j]
    v[j] = temp


# =============================================================================
# SOLVE
# =============================================================================


def _has_valid_shape(a: MatrixLike, b: VectorLike) -> bool:
    n = len(b)
    if len(a) != n:
        return False
    return all(len(row) == n for row in a)


def _float_workspace(
    m: Union[MatrixLike, VectorLike],
) -> Union[MatrixLike, VectorLike]:
    """numpy-массив не-float dtype → float64-копия; остальное без изменений"""
    if isinstance(m, np.ndarray) and not np.issubdtype(m.dtype, np.floating):
        logger.debug("Solving %s input on a float64 copy", m.dtype)
        return m.astype(np.float64)
    return m


def _eliminate_and_substitute(a: MatrixLike, b: VectorLike) -> Optional[list[float]]:
    """
    Прямой ход с partial pivoting и обратная подстановка (in-place).

    Returns:
        Решение или None при нулевом ведущем элементе
    """
    n = len(b)

    for i in range(n):
        # Строка с максимальным |a[j][i]| среди j >= i (первая при равенстве)
        max_element_row = i
        for j in range(i + 1, n):
            if abs(a[j][i]) > abs(a[max_element_row][i]):
                max_element_row = j

        if a[max_element_row][i] == 0.0:
            return None

        swap_rows(a, i, max_element_row)
        swap_entries(b, i, max_element_row)

        for j in range(i + 1, n):
            row_factor = a[j][i] / a[i][i]
            for k in range(n - 1, i - 1, -1):
                a[j][k] -= a[i][k] * row_factor
            b[j] -= b[i] * row_factor

    # a — верхнетреугольная; обратная подстановка
    solution = [float("nan")] * n
    for j in range(n - 1, -1, -1):
        t = 0.0
        for k in range(j + 1, n):
            t += a[j][k] * solution[k]
        solution[j] = float((b[j] - t) / a[j][j])
    return solution


def solve(a: MatrixLike, b: VectorLike) -> Optional[list[float]]:
    """
    Решение A·x = b методом Гаусса; работает in-place.

    ВАЖНО: a и b изменяются. Если исходные данные нужны, передайте копию
    или используйте solve_copy. Исключение: numpy-массив с не-float dtype
    не изменяется, система решается на его float64-копии.

    Args:
        a: Матрица n×n (изменяется)
        b: Вектор длины n (изменяется)

    Returns:
        Вектор решения длины n, либо None если размеры не согласованы
        или система не имеет единственного решения

    Examples:
        >>> solve([[2.0, 1.0], [1.0, 3.0]], [3.0, 5.0])  # doctest: +SKIP
        [0.8, 1.4]
    """
    if not _has_valid_shape(a, b):
        logger.debug("No solution: matrix is not %dx%d", len(b), len(b))
        return None

    a = _float_workspace(a)
    b = _float_workspace(b)
    solution = _eliminate_and_substitute(a, b)
    if solution is None:
        logger.debug("No solution: zero pivot, system is singular")
        return None

    if not all_finite(solution):
        logger.debug("No solution: non-finite values in solution %s", solution)
        return None

    return solution


def solve_copy(a: MatrixLike, b: VectorLike) -> Optional[list[float]]:
    """
    Как solve, но входы не изменяются (решение на копиях).
    """
    return solve([list(row) for row in a], list(b))


def solve_strict(a: MatrixLike, b: VectorLike) -> list[float]:
    """
    Решение A·x = b без изменения входов; отказ различается по типу.

    Raises:
        MatrixDimensionError: Если матрица не n×n для вектора длины n
        SingularMatrixError: Если система вырождена или решение не конечно
    """
    if not _has_valid_shape(a, b):
        raise MatrixDimensionError(
            f"Matrix must be {len(b)}x{len(b)} to match vector of length {len(b)}"
        )

    work_a = [list(row) for row in a]
    work_b = list(b)
    solution = _eliminate_and_substitute(work_a, work_b)
    if solution is None:
        raise SingularMatrixError("Matrix is singular: zero pivot found")
    if not all_finite(solution):
        raise SingularMatrixError(f"Solution contains non-finite values: {solution}")
    return solution
