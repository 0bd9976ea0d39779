"""
Sequences — утилиты над CoordinateSequence

Все функции работают только через индексный контракт CoordinateSequence и
одинаково применимы к object-backed и packed вариантам.
"""

from typing import Optional

from geomcore.core.geom.coordinate import X, Y, Coordinate
from geomcore.core.geom.coordinate_sequence import CoordinateSequence
from geomcore.core.math.numerical_safeguards import nan_equal


def reverse(seq: CoordinateSequence) -> None:
    """Разворот последовательности на месте"""
    if seq.size() <= 1:
        return

    last = seq.size() - 1
    mid = last // 2
    for i in range(mid + 1):
        swap(seq, i, last - i)


def swap(seq: CoordinateSequence, i: int, j: int) -> None:
    """Обмен двух координат (все ординаты)"""
    if i == j:
        return
    for dim in range(seq.get_dimension()):
        tmp = seq.get_ordinate(i, dim)
        seq.set_ordinate(i, dim, seq.get_ordinate(j, dim))
        seq.set_ordinate(j, dim, tmp)


def copy(
    src: CoordinateSequence,
    src_pos: int,
    dest: CoordinateSequence,
    dest_pos: int,
    length: int,
) -> None:
    """
    Копирование участка src в dest.

    Последовательности могут иметь разную dimension; копируются только
    общие ординаты.
    """
    for i in range(length):
        copy_coord(src, src_pos + i, dest, dest_pos + i)


def copy_coord(
    src: CoordinateSequence,
    src_pos: int,
    dest: CoordinateSequence,
    dest_pos: int,
) -> None:
    """Копирование одной координаты (только общие ординаты)"""
    min_dim = min(src.get_dimension(), dest.get_dimension())
    for dim in range(min_dim):
        dest.set_ordinate(dest_pos, dim, src.get_ordinate(src_pos, dim))


def _is_closed(seq: CoordinateSequence) -> bool:
    n = seq.size()
    return seq.get_ordinate(0, X) == seq.get_ordinate(n - 1, X) and seq.get_ordinate(
        0, Y
    ) == seq.get_ordinate(n - 1, Y)


def is_ring(seq: CoordinateSequence) -> bool:
    """
    Проверка, что последовательность образует кольцо.

    Пустая последовательность — кольцо; 1–3 точки — нет; иначе первая и
    последняя точки должны совпадать в 2D. Самопересечения не проверяются.
    """
    n = seq.size()
    if n == 0:
        return True
    if n <= 3:
        return False
    return _is_closed(seq)


def ensure_valid_ring(seq: CoordinateSequence) -> CoordinateSequence:
    """
    Гарантия валидного кольца.

    Returns:
        seq без изменений, если он уже валиден (или пуст); иначе новую
        замкнутую последовательность, дополненную стартовой точкой
    """
    n = seq.size()
    if n == 0:
        return seq
    if n <= 3:
        return create_closed_ring(seq, 4)
    if _is_closed(seq):
        return seq
    return create_closed_ring(seq, n + 1)


def create_closed_ring(seq: CoordinateSequence, size: int) -> CoordinateSequence:
    """Новая последовательность size точек: seq + повторы стартовой точки"""
    newseq = seq.new_like(size)
    n = seq.size()
    copy(seq, 0, newseq, 0, n)
    for i in range(n, size):
        copy(seq, 0, newseq, i, 1)
    return newseq


def extend(seq: CoordinateSequence, size: int) -> CoordinateSequence:
    """Новая последовательность size точек: seq + повторы последней точки"""
    newseq = seq.new_like(size)
    n = seq.size()
    copy(seq, 0, newseq, 0, n)
    if n > 0:
        for i in range(n, size):
            copy(seq, n - 1, newseq, i, 1)
    return newseq


def is_equal(cs1: CoordinateSequence, cs2: CoordinateSequence) -> bool:
    """
    Равенство последовательностей по общим ординатам.

    Длины должны совпадать; dimension может отличаться. NaN == NaN.
    """
    size = cs1.size()
    if size != cs2.size():
        return False

    dim = min(cs1.get_dimension(), cs2.get_dimension())
    for i in range(size):
        for j in range(dim):
            if not nan_equal(cs1.get_ordinate(i, j), cs2.get_ordinate(i, j)):
                return False
    return True


def index_of(coordinate: Coordinate, seq: CoordinateSequence) -> int:
    """
    Индекс первой координаты, совпадающей с coordinate в 2D, или -1.
    """
    for i in range(seq.size()):
        if coordinate.x == seq.get_ordinate(i, X) and coordinate.y == seq.get_ordinate(i, Y):
            return i
    return -1


def min_coordinate_index(
    seq: CoordinateSequence, start: int = 0, end: Optional[int] = None
) -> int:
    """
    Индекс минимальной (по x, затем y) координаты в [start, end].

    Returns:
        Индекс или -1 для пустого диапазона
    """
    if end is None:
        end = seq.size() - 1

    min_index = -1
    min_coord: Optional[Coordinate] = None
    current = seq.create_coordinate()
    for i in range(start, end + 1):
        seq.get_coordinate_into(i, current)
        if min_coord is None or min_coord.compare_to(current) > 0:
            min_coord = current.copy_coordinate()
            min_index = i
    return min_index
