"""
CoordinateArraySequence — последовательность на списке объектов Coordinate

Object-backed вариант CoordinateSequence. Список, переданный в конструктор,
принимается без копирования (zero-copy adoption); элементы, kind которых
не совпадает с kind последовательности, заменяются в этом же списке.

Запись (set_ordinate / set_coordinate) кладёт в слот новую координату, а не
изменяет хранимый объект: один и тот же Coordinate может стоять в нескольких
слотах (кольцо [a, b, c, a]) или в списках разных последовательностей.
"""

from typing import Optional, Sequence

from geomcore.core.geom.coordinate import (
    Coordinate,
    CoordinateKind,
    coordinates_kind,
    create_coordinate,
)
from geomcore.core.geom.coordinate_sequence import CoordinateSequence, validate_layout
from geomcore.core.math.numerical_safeguards import validate_size


class CoordinateArraySequence(CoordinateSequence):
    """Последовательность, хранящая собственные объекты Coordinate."""

    def __init__(
        self,
        coordinates: Optional[list[Coordinate]] = None,
        dimension: Optional[int] = None,
        measures: Optional[int] = None,
    ):
        """
        Args:
            coordinates: Список координат (не копируется). None → пустой список
            dimension: Dimension последовательности (default: по элементам)
            measures: Measures последовательности (default: по элементам)

        Raises:
            ValueError: Если dimension/measures не образуют поддерживаемый kind
        """
        if coordinates is None:
            coordinates = []

        inferred = coordinates_kind(coordinates)
        if dimension is None:
            dimension = inferred.dimension
        if measures is None:
            measures = inferred.measures if dimension >= inferred.dimension else 0
            measures = max(measures, dimension - 3)
        validate_layout(dimension, measures)

        self._dimension = dimension
        self._measures = measures
        self._coordinates = coordinates
        self._enforce_consistency()

    @classmethod
    def with_size(
        cls, size: int, dimension: int = 3, measures: int = 0
    ) -> "CoordinateArraySequence":
        """
        Последовательность из size пустых координат.

        Raises:
            ValueError: Если size отрицательный
        """
        validate_size(size)
        coordinates = [create_coordinate(dimension, measures) for _ in range(size)]
        return cls(coordinates, dimension, measures)

    @classmethod
    def from_sequence(cls, sequence: CoordinateSequence) -> "CoordinateArraySequence":
        """Глубокая копия любой последовательности в object-backed вид"""
        return cls(
            sequence.to_coordinate_array(),
            sequence.get_dimension(),
            sequence.get_measures(),
        )

    @classmethod
    def from_coordinates(
        cls, coordinates: Sequence[Coordinate]
    ) -> "CoordinateArraySequence":
        """Последовательность из копий координат (исходный список не разделяется)"""
        return cls([c.copy_coordinate() for c in coordinates])

    def _enforce_consistency(self) -> None:
        kind = self.kind
        for i, coordinate in enumerate(self._coordinates):
            if coordinate.kind is not kind:
                converted = create_coordinate(self._dimension, self._measures)
                converted.set_coordinate(coordinate)
                self._coordinates[i] = converted

    @property
    def kind(self) -> CoordinateKind:
        return CoordinateKind.from_dimension(self._dimension, self._measures)

    def size(self) -> int:
        return len(self._coordinates)

    def get_dimension(self) -> int:
        return self._dimension

    def get_measures(self) -> int:
        return self._measures

    def get_ordinate(self, index: int, ordinate_index: int) -> float:
        self.check_index(index)
        self.check_ordinate_index(ordinate_index)
        return self._coordinates[index].get_ordinate(ordinate_index)

    def set_ordinate(self, index: int, ordinate_index: int, value: float) -> None:
        self.check_index(index)
        self.check_ordinate_index(ordinate_index)
        updated = self._coordinates[index].copy_coordinate()
        updated.set_ordinate(ordinate_index, value)
        self._coordinates[index] = updated

    def get_coordinate(self, index: int) -> Coordinate:
        self.check_index(index)
        return self._coordinates[index].copy_coordinate()

    def get_coordinate_into(self, index: int, coordinate: Coordinate) -> None:
        self.check_index(index)
        coordinate.set_coordinate(self._coordinates[index])

    def set_coordinate(self, index: int, coordinate: Coordinate) -> None:
        self.check_index(index)
        updated = self._coordinates[index].copy_coordinate()
        updated.set_coordinate(coordinate)
        self._coordinates[index] = updated

    def get_coordinates(self) -> list[Coordinate]:
        """Backing-список (без копирования)"""
        return self._coordinates

    def copy(self) -> "CoordinateArraySequence":
        return CoordinateArraySequence(
            [c.copy_coordinate() for c in self._coordinates],
            self._dimension,
            self._measures,
        )

    def new_like(self, size: int) -> "CoordinateArraySequence":
        return CoordinateArraySequence.with_size(size, self._dimension, self._measures)
