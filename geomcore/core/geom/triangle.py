"""
Triangle — построения по трём вершинам

Центр описанной окружности (circumcentre) — точка, равноудалённая от трёх
вершин; пересечение серединных перпендикуляров сторон. Может лежать вне
треугольника (тупоугольный случай).

Два способа вычисления (оба переносят начало координат в вершину c для
уменьшения потери точности):
- circumcentre: явная формула через определители 2×2
- circumcentre_by_solver: система 2×2, решаемая matrix.solve
"""

import math
from typing import Optional

from geomcore.core.geom.coordinate import Coordinate
from geomcore.core.math.matrix import solve


def det(m00: float, m01: float, m10: float, m11: float) -> float:
    """Определитель матрицы 2×2 (обычная double-арифметика)"""
    return m00 * m11 - m01 * m10


def circumcentre(a: Coordinate, b: Coordinate, c: Coordinate) -> Coordinate:
    """
    Центр описанной окружности через определители.

    Для вырожденного (коллинеарного) треугольника знаменатель равен 0 и
    ординаты результата не конечны.

    Returns:
        XY координата центра
    """
    cx = c.x
    cy = c.y
    ax = a.x - cx
    ay = a.y - cy
    bx = b.x - cx
    by = b.y - cy

    denom = 2.0 * det(ax, ay, bx, by)
    numx = det(ay, ax * ax + ay * ay, by, bx * bx + by * by)
    numy = det(ax, ax * ax + ay * ay, bx, bx * bx + by * by)

    if denom == 0.0:
        return Coordinate.xy(math.nan, math.nan)

    return Coordinate.xy(cx - numx / denom, cy + numy / denom)


def circumcentre_by_solver(
    a: Coordinate, b: Coordinate, c: Coordinate
) -> Optional[Coordinate]:
    """
    Центр описанной окружности как решение линейной системы.

    Для p = centre - c:
        2(a - c)·p = |a - c|²
        2(b - c)·p = |b - c|²

    Returns:
        XY координата центра или None для коллинеарных вершин
    """
    ax = a.x - c.x
    ay = a.y - c.y
    bx = b.x - c.x
    by = b.y - c.y

    matrix = [
        [2.0 * ax, 2.0 * ay],
        [2.0 * bx, 2.0 * by],
    ]
    vector = [ax * ax + ay * ay, bx * bx + by * by]

    solution = solve(matrix, vector)
    if solution is None:
        return None
    return Coordinate.xy(c.x + solution[0], c.y + solution[1])


def circumradius(a: Coordinate, b: Coordinate, c: Coordinate) -> float:
    """
    Радиус описанной окружности: |ab|·|bc|·|ca| / (4·area).

    Returns:
        Радиус; inf для вырожденного треугольника
    """
    side_a = a.distance(b)
    side_b = b.distance(c)
    side_c = c.distance(a)
    twice_area = abs(det(b.x - a.x, b.y - a.y, c.x - a.x, c.y - a.y))
    if twice_area == 0.0:
        return math.inf
    return (side_a * side_b * side_c) / (2.0 * twice_area)
