"""
PackedCoordinateSequence — последовательность на плоском буфере чисел

Packed вариант CoordinateSequence: ординаты N координат лежат в одном
1-D numpy-массиве длины N × dimension. Ордината j координаты i находится
по смещению i * dimension + j.

Точность буфера задаётся PackedPrecision:
- DOUBLE: float64 (по умолчанию)
- FLOAT:  float32

Буфер подходящего dtype принимается без копирования (zero-copy adoption).
"""

from enum import Enum
from typing import Iterable, Sequence, Union

import numpy as np
import numpy.typing as npt

from geomcore.core.geom.coordinate import Coordinate, CoordinateKind
from geomcore.core.geom.coordinate_sequence import (
    DEFAULT_DIMENSION,
    DEFAULT_MEASURES,
    CoordinateSequence,
    validate_layout,
)
from geomcore.core.math.numerical_safeguards import validate_size


class PackedPrecision(str, Enum):
    """Тип чисел в packed-буфере"""

    DOUBLE = "DOUBLE"
    FLOAT = "FLOAT"

    @property
    def dtype(self) -> np.dtype:
        if self is PackedPrecision.FLOAT:
            return np.dtype(np.float32)
        return np.dtype(np.float64)


class PackedCoordinateSequence(CoordinateSequence):
    """Последовательность с ординатами в одном плоском массиве."""

    def __init__(
        self,
        coords: Union[npt.NDArray[np.floating], Iterable[float]],
        dimension: int = DEFAULT_DIMENSION,
        measures: int = DEFAULT_MEASURES,
        precision: PackedPrecision = PackedPrecision.DOUBLE,
    ):
        """
        Args:
            coords: Плоский буфер ординат; ndarray нужного dtype не копируется
            dimension: Число ординат на координату
            measures: Число measure-ординат
            precision: DOUBLE или FLOAT

        Raises:
            ValueError: Если буфер не 1-D, длина не кратна dimension
                или dimension/measures недопустимы
        """
        validate_layout(dimension, measures)

        buffer = np.asarray(coords, dtype=precision.dtype)
        if buffer.ndim != 1:
            raise ValueError(f"Packed array must be 1-D, got shape {buffer.shape}")
        if buffer.shape[0] % dimension != 0:
            raise ValueError(
                "Packed array does not contain an integral number of coordinates: "
                f"length={buffer.shape[0]}, dimension={dimension}"
            )

        self._coords = buffer
        self._dimension = dimension
        self._measures = measures
        self._precision = precision

    @classmethod
    def with_size(
        cls,
        size: int,
        dimension: int = DEFAULT_DIMENSION,
        measures: int = DEFAULT_MEASURES,
        precision: PackedPrecision = PackedPrecision.DOUBLE,
    ) -> "PackedCoordinateSequence":
        """
        Последовательность из size координат, заполненная NaN.

        Raises:
            ValueError: Если size отрицательный
        """
        validate_size(size)
        validate_layout(dimension, measures)
        buffer = np.full(size * dimension, np.nan, dtype=precision.dtype)
        return cls(buffer, dimension, measures, precision)

    @classmethod
    def from_coordinates(
        cls,
        coordinates: Sequence[Coordinate],
        dimension: int = DEFAULT_DIMENSION,
        measures: int = DEFAULT_MEASURES,
        precision: PackedPrecision = PackedPrecision.DOUBLE,
    ) -> "PackedCoordinateSequence":
        """Упаковка списка координат (всегда копия)"""
        sequence = cls.with_size(len(coordinates), dimension, measures, precision)
        for i, coordinate in enumerate(coordinates):
            sequence.set_coordinate(i, coordinate)
        return sequence

    # -------------------------------------------------------------------------
    # Контракт CoordinateSequence
    # -------------------------------------------------------------------------

    @property
    def precision(self) -> PackedPrecision:
        return self._precision

    def size(self) -> int:
        return self._coords.shape[0] // self._dimension

    def get_dimension(self) -> int:
        return self._dimension

    def get_measures(self) -> int:
        return self._measures

    def get_ordinate(self, index: int, ordinate_index: int) -> float:
        self.check_index(index)
        self.check_ordinate_index(ordinate_index)
        return float(self._coords[index * self._dimension + ordinate_index])

    def set_ordinate(self, index: int, ordinate_index: int, value: float) -> None:
        self.check_index(index)
        self.check_ordinate_index(ordinate_index)
        self._coords[index * self._dimension + ordinate_index] = value

    def get_coordinate(self, index: int) -> Coordinate:
        coordinate = self.create_coordinate()
        self.get_coordinate_into(index, coordinate)
        return coordinate

    def get_coordinate_into(self, index: int, coordinate: Coordinate) -> None:
        self.check_index(index)
        offset = index * self._dimension
        coordinate.x = float(self._coords[offset])
        coordinate.y = float(self._coords[offset + 1])
        if self.has_z() and coordinate.kind.has_z:
            coordinate.z = float(self._coords[offset + 2])
        if self.has_m() and coordinate.kind.has_m:
            coordinate.m = float(self._coords[offset + self._dimension - 1])

    def set_coordinate(self, index: int, coordinate: Coordinate) -> None:
        self.check_index(index)
        offset = index * self._dimension
        self._coords[offset] = coordinate.x
        self._coords[offset + 1] = coordinate.y
        if self.has_z():
            self._coords[offset + 2] = coordinate.get_z()
        if self.has_m():
            self._coords[offset + self._dimension - 1] = coordinate.get_m()

    def get_raw_coordinates(self) -> npt.NDArray[np.floating]:
        """Backing-буфер (без копирования)"""
        return self._coords

    def copy(self) -> "PackedCoordinateSequence":
        return PackedCoordinateSequence(
            self._coords.copy(), self._dimension, self._measures, self._precision
        )

    def new_like(self, size: int) -> "PackedCoordinateSequence":
        return PackedCoordinateSequence.with_size(
            size, self._dimension, self._measures, self._precision
        )

    @property
    def kind(self) -> CoordinateKind:
        return CoordinateKind.from_dimension(self._dimension, self._measures)
