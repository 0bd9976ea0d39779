"""
Area — площадь кольца (Shoelace formula)

Знаковая площадь:
- положительная для кольца по часовой стрелке (CW)
- отрицательная для кольца против часовой стрелки (CCW)
- ноль для вырожденного кольца

Численная устойчивость: все X переносятся так, чтобы X первой вершины
стал локальным началом (x' = x - x0). Площадь инвариантна к переносу, а
накапливаемые слагаемые остаются малыми, что снижает cancellation.

ФОРМУЛА:
    signed_area = ( Σ_{i=1}^{N-2} x'[i] * (y[i-1] - y[i+1]) ) / 2

Два пути вычисления (список Coordinate и CoordinateSequence) вычисляют
одни и те же float-выражения в одном порядке и дают побитово равный
результат. Замкнутость кольца не проверяется.
"""

from typing import Sequence, Union

from geomcore.core.geom.coordinate import Coordinate
from geomcore.core.geom.coordinate_sequence import CoordinateSequence

Ring = Union[Sequence[Coordinate], CoordinateSequence]


def area(ring: Ring) -> float:
    """
    Площадь кольца (без знака).

    Args:
        ring: Список координат или CoordinateSequence

    Returns:
        abs(signed_area(ring))
    """
    return abs(signed_area(ring))


def signed_area(ring: Ring) -> float:
    """
    Знаковая площадь кольца; выбирает путь по типу входа.
    """
    if isinstance(ring, CoordinateSequence):
        return signed_area_of_sequence(ring)
    return signed_area_of_coordinates(ring)


def signed_area_of_coordinates(ring: Sequence[Coordinate]) -> float:
    """
    Знаковая площадь кольца, заданного списком координат.

    Returns:
        Площадь со знаком ориентации; 0.0 для колец короче 3 точек
    """
    n = len(ring)
    if n < 3:
        return 0.0

    total = 0.0
    x0 = ring[0].x
    for i in range(1, n - 1):
        x = ring[i].x - x0
        y1 = ring[i + 1].y
        y2 = ring[i - 1].y
        total += x * (y2 - y1)
    return total / 2.0


def signed_area_of_sequence(ring: CoordinateSequence) -> float:
    """
    Знаковая площадь кольца через индексный доступ CoordinateSequence.

    Три scratch-координаты (p0, p1, p2) переиспользуются на каждом шаге;
    промежуточный список не создаётся.
    """
    n = ring.size()
    if n < 3:
        return 0.0

    p0 = ring.create_coordinate()
    p1 = ring.create_coordinate()
    p2 = ring.create_coordinate()
    ring.get_coordinate_into(0, p1)
    ring.get_coordinate_into(1, p2)
    x0 = p1.x
    p2.x -= x0

    total = 0.0
    for i in range(1, n - 1):
        p0.y = p1.y
        p1.x = p2.x
        p1.y = p2.y
        ring.get_coordinate_into(i + 1, p2)
        p2.x -= x0
        total += p1.x * (p0.y - p2.y)
    return total / 2.0
