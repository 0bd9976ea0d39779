"""
CoordinateSequence — абстракция упорядоченного набора координат

Последовательность скрывает физическое представление данных. Алгоритмы
(Area, Length, утилиты sequences) работают только через индексный доступ:
size / get / set, и не различают варианты хранения:

- CoordinateArraySequence: список объектов Coordinate
- PackedCoordinateSequence: плоский буфер float (numpy), offset-арифметика

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. dimension и measures фиксируются при создании
2. Индекс вне [0, size) вызывает IndexError (без clamp и без wrap)
3. get_coordinate(i) + set_coordinate(i, ...) того же значения — no-op
"""

from abc import ABC, abstractmethod
from typing import Final, Iterator

from geomcore.core.geom.coordinate import (
    M,
    NULL_ORDINATE,
    X,
    Y,
    Z,
    Coordinate,
    CoordinateKind,
    create_coordinate,
)

# =============================================================================
# ПАРАМЕТРЫ РАСКЛАДКИ
# =============================================================================

DEFAULT_DIMENSION: Final[int] = 3
DEFAULT_MEASURES: Final[int] = 0

MIN_SPATIAL_DIMENSION: Final[int] = 2
MAX_SPATIAL_DIMENSION: Final[int] = 3
MAX_MEASURES: Final[int] = 1


def validate_layout(dimension: int, measures: int) -> None:
    """
    Строгая проверка dimension/measures для прямого конструирования.

    Фабрики не вызывают ошибку, а приводят значения к допустимым
    (см. sequence_factory).

    Raises:
        ValueError: Если measures вне [0, 1] или spatial вне [2, 3]
    """
    if not 0 <= measures <= MAX_MEASURES:
        raise ValueError(f"measures must be in [0, {MAX_MEASURES}], got {measures}")

    spatial = dimension - measures
    if spatial < MIN_SPATIAL_DIMENSION:
        raise ValueError(
            f"Must have at least {MIN_SPATIAL_DIMENSION} spatial dimensions, "
            f"got dimension={dimension}, measures={measures}"
        )
    if spatial > MAX_SPATIAL_DIMENSION:
        raise ValueError(
            f"At most {MAX_SPATIAL_DIMENSION} spatial dimensions are supported, "
            f"got dimension={dimension}, measures={measures}"
        )


class CoordinateSequence(ABC):
    """
    Базовый класс последовательностей координат.

    Подклассы реализуют хранение; общие производные операции
    (get_x, get_z, has_m, итерация и т.п.) определены здесь один раз.
    """

    X = X
    Y = Y
    Z = Z
    M = M

    # -------------------------------------------------------------------------
    # Обязательный контракт
    # -------------------------------------------------------------------------

    @abstractmethod
    def size(self) -> int:
        """Число координат"""

    @abstractmethod
    def get_dimension(self) -> int:
        """Общее число ординат на координату (2–4)"""

    @abstractmethod
    def get_measures(self) -> int:
        """Число measure-ординат (0–1)"""

    @abstractmethod
    def get_ordinate(self, index: int, ordinate_index: int) -> float:
        """Ордината ordinate_index координаты index"""

    @abstractmethod
    def set_ordinate(self, index: int, ordinate_index: int, value: float) -> None:
        """Запись ординаты ordinate_index координаты index"""

    @abstractmethod
    def get_coordinate(self, index: int) -> Coordinate:
        """Новая Coordinate (kind последовательности) для index"""

    @abstractmethod
    def get_coordinate_into(self, index: int, coordinate: Coordinate) -> None:
        """Заполнение caller-owned координаты значениями index"""

    @abstractmethod
    def set_coordinate(self, index: int, coordinate: Coordinate) -> None:
        """Запись ординат coordinate, которые есть у последовательности"""

    @abstractmethod
    def copy(self) -> "CoordinateSequence":
        """Глубокая копия того же варианта"""

    @abstractmethod
    def new_like(self, size: int) -> "CoordinateSequence":
        """Новая последовательность того же варианта, dimension и measures"""

    # -------------------------------------------------------------------------
    # Производные операции
    # -------------------------------------------------------------------------

    @property
    def kind(self) -> CoordinateKind:
        return CoordinateKind.from_dimension(self.get_dimension(), self.get_measures())

    def has_z(self) -> bool:
        return self.get_dimension() - self.get_measures() > 2

    def has_m(self) -> bool:
        return self.get_measures() > 0

    def create_coordinate(self) -> Coordinate:
        """Пустая координата, совместимая с последовательностью (scratch)"""
        return create_coordinate(self.get_dimension(), self.get_measures())

    def get_x(self, index: int) -> float:
        return self.get_ordinate(index, X)

    def get_y(self, index: int) -> float:
        return self.get_ordinate(index, Y)

    def get_z(self, index: int) -> float:
        """Z или NaN, если последовательность не хранит Z"""
        if self.has_z():
            return self.get_ordinate(index, Z)
        self.check_index(index)
        return NULL_ORDINATE

    def get_m(self, index: int) -> float:
        """M или NaN, если последовательность не хранит measures"""
        if self.has_m():
            return self.get_ordinate(index, self.get_dimension() - self.get_measures())
        self.check_index(index)
        return NULL_ORDINATE

    def to_coordinate_array(self) -> list[Coordinate]:
        """Новый список координат (копии)"""
        return [self.get_coordinate(i) for i in range(self.size())]

    def check_index(self, index: int) -> None:
        """
        Raises:
            IndexError: Если index вне [0, size)
        """
        size = self.size()
        if not 0 <= index < size:
            raise IndexError(f"Coordinate index {index} out of range [0, {size})")

    def check_ordinate_index(self, ordinate_index: int) -> None:
        """
        Raises:
            IndexError: Если ordinate_index вне [0, dimension)
        """
        dimension = self.get_dimension()
        if not 0 <= ordinate_index < dimension:
            raise IndexError(
                f"Ordinate index {ordinate_index} out of range [0, {dimension})"
            )

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Coordinate]:
        for i in range(self.size()):
            yield self.get_coordinate(i)

    def __str__(self) -> str:
        return "(" + ", ".join(str(c) for c in self) + ")"
