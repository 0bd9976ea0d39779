"""
Length — длина ломаной

Сумма евклидовых расстояний между соседними координатами. Расстояние
считается через math.hypot (без переполнения/потери точности на
промежуточном возведении в квадрат).
"""

import math

from geomcore.core.geom.coordinate_sequence import CoordinateSequence


def length(pts: CoordinateSequence) -> float:
    """
    Длина ломаной, заданной последовательностью точек.

    Одна scratch-координата переиспользуется для всех точек.

    Args:
        pts: Последовательность вершин

    Returns:
        Длина; 0.0 для последовательностей из 0 или 1 точки
    """
    n = pts.size()
    if n <= 1:
        return 0.0

    total = 0.0

    p = pts.create_coordinate()
    pts.get_coordinate_into(0, p)
    x0 = p.x
    y0 = p.y

    for i in range(1, n):
        pts.get_coordinate_into(i, p)
        x1 = p.x
        y1 = p.y
        total += math.hypot(x1 - x0, y1 - y0)
        x0 = x1
        y0 = y1
    return total
