"""
Coordinate — Модель координаты с фиксированным набором ординат

Координата хранит до 4 ординат {x, y, z, m} и тип (kind), который
фиксирует, какие ординаты имеют смысл:

- XY:   x, y
- XYZ:  x, y, z
- XYM:  x, y, m
- XYZM: x, y, z, m

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. kind задаётся при создании и не может быть изменён
2. Чтение ординаты, отсутствующей для данного kind, возвращает NaN
3. Запись ординаты, отсутствующей для данного kind, вызывает ValueError
"""

import math
from enum import Enum
from typing import Final, Sequence

from pydantic import BaseModel, Field, model_validator

from geomcore.core.math.numerical_safeguards import (
    equals_with_tolerance,
    is_valid_float,
    nan_equal,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Значение отсутствующей ординаты
NULL_ORDINATE: Final[float] = math.nan

# Стандартные индексы ординат (раскладка XYZM)
X: Final[int] = 0
Y: Final[int] = 1
Z: Final[int] = 2
M: Final[int] = 3


# =============================================================================
# ENUMS
# =============================================================================


class CoordinateKind(str, Enum):
    """Тип координаты: какие ординаты присутствуют"""

    XY = "XY"
    XYZ = "XYZ"
    XYM = "XYM"
    XYZM = "XYZM"

    @property
    def dimension(self) -> int:
        """Общее число ординат"""
        return len(self.value)

    @property
    def measures(self) -> int:
        """Число measure-ординат (0 или 1)"""
        return 1 if "M" in self.value else 0

    @property
    def has_z(self) -> bool:
        return "Z" in self.value

    @property
    def has_m(self) -> bool:
        return "M" in self.value

    @classmethod
    def from_dimension(cls, dimension: int, measures: int = 0) -> "CoordinateKind":
        """
        Тип координаты по dimension/measures.

        Неподдерживаемые комбинации сводятся к XYZ.

        Examples:
            >>> CoordinateKind.from_dimension(2)
            <CoordinateKind.XY: 'XY'>
            >>> CoordinateKind.from_dimension(3, 1)
            <CoordinateKind.XYM: 'XYM'>
            >>> CoordinateKind.from_dimension(4, 1)
            <CoordinateKind.XYZM: 'XYZM'>
        """
        if dimension == 2:
            return cls.XY
        if dimension == 3 and measures == 1:
            return cls.XYM
        if dimension == 4 and measures == 1:
            return cls.XYZM
        return cls.XYZ


# =============================================================================
# COORDINATE MODEL
# =============================================================================


class Coordinate(BaseModel):
    """
    Координата с фиксированным kind.

    Mutable модель: ординаты могут переписываться (например, scratch-координата
    в алгоритмах), но kind заморожен. Прямое присваивание полей z/m не
    проверяется; kind-aware доступ идёт через get_z/get_m/get_ordinate и
    set_z/set_m/set_ordinate.
    """

    x: float = Field(default=0.0, description="X-ордината")
    y: float = Field(default=0.0, description="Y-ордината")
    z: float = Field(default=NULL_ORDINATE, description="Z-ордината (NaN если отсутствует)")
    m: float = Field(default=NULL_ORDINATE, description="Measure (NaN если отсутствует)")
    kind: CoordinateKind = Field(
        default=CoordinateKind.XYZ, frozen=True, description="Набор ординат"
    )

    @model_validator(mode="after")
    def validate_kind_ordinates(self) -> "Coordinate":
        """
        Ординаты, отсутствующие для kind, должны быть NaN.
        """
        if not self.kind.has_z and not math.isnan(self.z):
            raise ValueError(f"{self.kind.value} coordinate does not support z-ordinate")
        if not self.kind.has_m and not math.isnan(self.m):
            raise ValueError(f"{self.kind.value} coordinate does not support m-ordinate")
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def xy(cls, x: float, y: float) -> "Coordinate":
        return cls(x=x, y=y, kind=CoordinateKind.XY)

    @classmethod
    def xyz(cls, x: float, y: float, z: float = NULL_ORDINATE) -> "Coordinate":
        return cls(x=x, y=y, z=z, kind=CoordinateKind.XYZ)

    @classmethod
    def xym(cls, x: float, y: float, m: float) -> "Coordinate":
        return cls(x=x, y=y, m=m, kind=CoordinateKind.XYM)

    @classmethod
    def xyzm(cls, x: float, y: float, z: float, m: float) -> "Coordinate":
        return cls(x=x, y=y, z=z, m=m, kind=CoordinateKind.XYZM)

    def copy_coordinate(self) -> "Coordinate":
        """Независимая копия той же kind"""
        return self.model_copy()

    # -------------------------------------------------------------------------
    # Kind-aware доступ
    # -------------------------------------------------------------------------

    @property
    def dimension(self) -> int:
        return self.kind.dimension

    @property
    def measures(self) -> int:
        return self.kind.measures

    def get_z(self) -> float:
        """Z-ордината или NaN, если kind её не содержит"""
        return self.z if self.kind.has_z else NULL_ORDINATE

    def get_m(self) -> float:
        """Measure или NaN, если kind его не содержит"""
        return self.m if self.kind.has_m else NULL_ORDINATE

    def set_z(self, z: float) -> None:
        if not self.kind.has_z:
            raise ValueError(f"{self.kind.value} coordinate does not support z-ordinate")
        self.z = z

    def set_m(self, m: float) -> None:
        if not self.kind.has_m:
            raise ValueError(f"{self.kind.value} coordinate does not support m-ordinate")
        self.m = m

    def get_ordinate(self, ordinate_index: int) -> float:
        """
        Ордината по позиционному индексу в раскладке данного kind.

        Для XYM индекс 2 — это M; для XYZ и XYZM индекс 2 — это Z.
        Индексы в пределах [0, 4), но за пределами dimension, дают NaN.

        Raises:
            ValueError: Если индекс вне [0, 4)
        """
        if ordinate_index == X:
            return self.x
        if ordinate_index == Y:
            return self.y
        if ordinate_index == 2:
            if self.kind.has_z:
                return self.z
            if self.kind.has_m:
                return self.m
            return NULL_ORDINATE
        if ordinate_index == 3:
            return self.m if self.kind is CoordinateKind.XYZM else NULL_ORDINATE
        raise ValueError(f"Invalid ordinate index: {ordinate_index}")

    def set_ordinate(self, ordinate_index: int, value: float) -> None:
        """
        Запись ординаты по позиционному индексу.

        Raises:
            ValueError: Если kind не содержит такой ординаты
        """
        if ordinate_index == X:
            self.x = value
        elif ordinate_index == Y:
            self.y = value
        elif ordinate_index == 2 and self.kind.has_z:
            self.z = value
        elif ordinate_index == 2 and self.kind.has_m:
            self.m = value
        elif ordinate_index == 3 and self.kind is CoordinateKind.XYZM:
            self.m = value
        else:
            raise ValueError(
                f"{self.kind.value} coordinate does not support ordinate index {ordinate_index}"
            )

    def set_coordinate(self, other: "Coordinate") -> None:
        """
        Копирование ординат из other (только ординаты этого kind).
        """
        self.x = other.x
        self.y = other.y
        if self.kind.has_z:
            self.z = other.get_z()
        if self.kind.has_m:
            self.m = other.get_m()

    # -------------------------------------------------------------------------
    # Проверки и сравнения
    # -------------------------------------------------------------------------

    def is_valid(self) -> bool:
        """Конечные X и Y"""
        return is_valid_float(self.x) and is_valid_float(self.y)

    def equals_2d(self, other: "Coordinate") -> bool:
        return self.x == other.x and self.y == other.y

    def equals_2d_with_tolerance(self, other: "Coordinate", tolerance: float) -> bool:
        """
        Совпадение X и Y в пределах tolerance (Z и M игнорируются).

        Каноническое понятие "та же точка" для проверок устойчивости.
        """
        if not equals_with_tolerance(self.x, other.x, tolerance):
            return False
        return equals_with_tolerance(self.y, other.y, tolerance)

    def equals_3d(self, other: "Coordinate") -> bool:
        return (
            self.x == other.x
            and self.y == other.y
            and nan_equal(self.get_z(), other.get_z())
        )

    def __eq__(self, other: object) -> bool:
        """
        Точное равенство по x, y, z, m (NaN == NaN). kind не сравнивается.
        """
        if not isinstance(other, Coordinate):
            return NotImplemented
        return (
            self.x == other.x
            and self.y == other.y
            and nan_equal(self.get_z(), other.get_z())
            and nan_equal(self.get_m(), other.get_m())
        )

    def compare_to(self, other: "Coordinate") -> int:
        """
        Лексикографическое сравнение по (x, y).

        Returns:
            -1, 0 или 1
        """
        if self.x < other.x:
            return -1
        if self.x > other.x:
            return 1
        if self.y < other.y:
            return -1
        if self.y > other.y:
            return 1
        return 0

    def distance(self, other: "Coordinate") -> float:
        """Евклидово расстояние в 2D (через hypot)"""
        return math.hypot(self.x - other.x, self.y - other.y)

    def distance_3d(self, other: "Coordinate") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.get_z() - other.get_z()
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def __str__(self) -> str:
        if self.kind is CoordinateKind.XY:
            return f"({self.x}, {self.y})"
        if self.kind is CoordinateKind.XYM:
            return f"({self.x}, {self.y} m={self.m})"
        if self.kind is CoordinateKind.XYZM:
            return f"({self.x}, {self.y}, {self.z} m={self.m})"
        return f"({self.x}, {self.y}, {self.z})"


# =============================================================================
# ФАБРИЧНЫЕ ФУНКЦИИ
# =============================================================================


def create_coordinate(dimension: int, measures: int = 0) -> Coordinate:
    """
    Пустая координата для заданных dimension/measures.

    XY и XYZ создаются в (0, 0) с NaN для Z; XYM и XYZM получают 0 для
    всех своих ординат.
    """
    kind = CoordinateKind.from_dimension(dimension, measures)
    if kind is CoordinateKind.XYM:
        return Coordinate(m=0.0, kind=kind)
    if kind is CoordinateKind.XYZM:
        return Coordinate(z=0.0, m=0.0, kind=kind)
    return Coordinate(kind=kind)


def dimension_of(coordinate: Coordinate) -> int:
    return coordinate.kind.dimension


def measures_of(coordinate: Coordinate) -> int:
    return coordinate.kind.measures


def coordinates_kind(coordinates: Sequence[Coordinate]) -> CoordinateKind:
    """
    Наименьший kind, вмещающий все элементы списка (XYZ для пустого).

    Examples:
        >>> coordinates_kind([Coordinate.xy(0, 0), Coordinate.xym(1, 1, 5)])
        <CoordinateKind.XYM: 'XYM'>
        >>> coordinates_kind([Coordinate.xyz(0, 0, 1), Coordinate.xym(1, 1, 5)])
        <CoordinateKind.XYZM: 'XYZM'>
    """
    if not coordinates:
        return CoordinateKind.XYZ
    has_z = any(c.kind.has_z for c in coordinates)
    has_m = any(c.kind.has_m for c in coordinates)
    if has_z and has_m:
        return CoordinateKind.XYZM
    if has_m:
        return CoordinateKind.XYM
    if has_z:
        return CoordinateKind.XYZ
    return CoordinateKind.XY


def coordinates_dimension(coordinates: Sequence[Coordinate]) -> int:
    """Dimension списка координат (3 для пустого)"""
    return coordinates_kind(coordinates).dimension


def coordinates_measures(coordinates: Sequence[Coordinate]) -> int:
    """Measures списка координат (0 для пустого)"""
    return coordinates_kind(coordinates).measures
