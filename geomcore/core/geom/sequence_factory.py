"""
Sequence Factories — построение последовательностей координат

Фабрики не хранят состояния (кроме выбранной точности packed-буфера) и
приводят запрошенные dimension/measures к поддерживаемым значениям без
ошибки:

- create(size, dimension, measures):
    spatial = dimension - measures  (считается до clip measures)
    measures → [0, 1]
    spatial  → [2, 3]
    dimension = spatial + measures

- CoordinateArraySequenceFactory.create(size, dimension):
    dimension → [2, 3], measures = 0

- PackedCoordinateSequenceFactory.create(size, dimension):
    measures = max(0, dimension - 3), далее как выше (dimension 4 → XYZM)

Создание из списка координат у object-backed фабрики не копирует список
(он уже в нативном виде); packed фабрика всегда упаковывает копию.
"""

import logging
from typing import Optional, Sequence, Union

import numpy as np
import numpy.typing as npt

from geomcore.core.geom.coordinate import Coordinate, dimension_of, measures_of
from geomcore.core.geom.coordinate_array_sequence import CoordinateArraySequence
from geomcore.core.geom.coordinate_sequence import (
    DEFAULT_DIMENSION,
    DEFAULT_MEASURES,
    MAX_MEASURES,
    MAX_SPATIAL_DIMENSION,
    MIN_SPATIAL_DIMENSION,
    CoordinateSequence,
)
from geomcore.core.geom.packed_coordinate_sequence import (
    PackedCoordinateSequence,
    PackedPrecision,
)
from geomcore.core.math.numerical_safeguards import clamp_int

logger = logging.getLogger(__name__)

SequenceSource = Union[int, Sequence[Coordinate], CoordinateSequence]


# =============================================================================
# CLAMPING
# =============================================================================


def clamp_layout(dimension: int, measures: int) -> tuple[int, int]:
    """
    Приведение (dimension, measures) к поддерживаемой раскладке.

    Returns:
        (dimension, measures) после clip

    Examples:
        >>> clamp_layout(5, 2)
        (4, 1)
        >>> clamp_layout(1, 0)
        (2, 0)
        >>> clamp_layout(3, 1)
        (3, 1)
    """
    spatial = dimension - measures
    clamped_measures = clamp_int(measures, 0, MAX_MEASURES)
    clamped_spatial = clamp_int(spatial, MIN_SPATIAL_DIMENSION, MAX_SPATIAL_DIMENSION)
    clamped = (clamped_spatial + clamped_measures, clamped_measures)

    if clamped != (dimension, measures):
        logger.debug(
            "Clamped sequence layout dimension=%d measures=%d to dimension=%d measures=%d",
            dimension,
            measures,
            clamped[0],
            clamped[1],
        )
    return clamped


# =============================================================================
# OBJECT-BACKED FACTORY
# =============================================================================


class CoordinateArraySequenceFactory:
    """Фабрика CoordinateArraySequence."""

    def create(
        self,
        source: SequenceSource,
        dimension: Optional[int] = None,
        measures: Optional[int] = None,
    ) -> CoordinateArraySequence:
        """
        Единая точка входа:
        - int: create_with_size(source, dimension, measures)
        - CoordinateSequence: create_from_sequence(source)
        - список координат: create_from_coordinates(source)
        """
        if isinstance(source, bool):
            raise ValueError(f"Unsupported sequence source: {source!r}")
        if isinstance(source, int):
            return self.create_with_size(
                source, 3 if dimension is None else dimension, measures
            )
        if isinstance(source, CoordinateSequence):
            return self.create_from_sequence(source)
        return self.create_from_coordinates(source)

    def create_with_size(
        self, size: int, dimension: int = 3, measures: Optional[int] = None
    ) -> CoordinateArraySequence:
        """
        Последовательность из size пустых координат.

        Без measures: dimension → [2, 3], measures = 0.
        С measures: см. clamp_layout.
        """
        if measures is None:
            clamped_dimension = clamp_int(
                dimension, MIN_SPATIAL_DIMENSION, MAX_SPATIAL_DIMENSION
            )
            if clamped_dimension != dimension:
                logger.debug(
                    "Clamped object-backed dimension %d to %d", dimension, clamped_dimension
                )
            return CoordinateArraySequence.with_size(size, clamped_dimension, 0)

        dimension, measures = clamp_layout(dimension, measures)
        return CoordinateArraySequence.with_size(size, dimension, measures)

    def create_from_coordinates(
        self, coordinates: Sequence[Coordinate]
    ) -> CoordinateArraySequence:
        """
        Последовательность поверх данного списка (без копирования).

        Не-list входы (tuple и т.п.) копируются в новый список.
        """
        if not isinstance(coordinates, list):
            coordinates = list(coordinates)
        return CoordinateArraySequence(coordinates)

    def create_from_sequence(self, sequence: CoordinateSequence) -> CoordinateArraySequence:
        """Независимая копия с теми же dimension/measures"""
        return CoordinateArraySequence.from_sequence(sequence)


# =============================================================================
# PACKED FACTORY
# =============================================================================


class PackedCoordinateSequenceFactory:
    """
    Фабрика PackedCoordinateSequence.

    Args:
        precision: Точность packed-буфера (DOUBLE по умолчанию)
    """

    def __init__(self, precision: PackedPrecision = PackedPrecision.DOUBLE):
        self.precision = precision

    def create(
        self,
        source: SequenceSource,
        dimension: Optional[int] = None,
        measures: Optional[int] = None,
    ) -> PackedCoordinateSequence:
        """
        Единая точка входа:
        - int: create_with_size(source, dimension, measures)
        - CoordinateSequence: create_from_sequence(source)
        - список координат: create_from_coordinates(source)
        """
        if isinstance(source, bool):
            raise ValueError(f"Unsupported sequence source: {source!r}")
        if isinstance(source, int):
            return self.create_with_size(
                source, 3 if dimension is None else dimension, measures
            )
        if isinstance(source, CoordinateSequence):
            return self.create_from_sequence(source)
        return self.create_from_coordinates(source)

    def create_with_size(
        self, size: int, dimension: int = 3, measures: Optional[int] = None
    ) -> PackedCoordinateSequence:
        """
        NaN-заполненная последовательность из size координат.

        Без measures: measures = max(0, dimension - 3).
        """
        if measures is None:
            measures = max(DEFAULT_MEASURES, dimension - 3)
        dimension, measures = clamp_layout(dimension, measures)
        return PackedCoordinateSequence.with_size(size, dimension, measures, self.precision)

    def create_from_coordinates(
        self, coordinates: Sequence[Coordinate]
    ) -> PackedCoordinateSequence:
        """
        Упаковка копии координат.

        Раскладка берётся по первой координате (XYZ для пустого списка).
        """
        if not coordinates:
            return PackedCoordinateSequence.with_size(
                0, DEFAULT_DIMENSION, DEFAULT_MEASURES, self.precision
            )
        first = coordinates[0]
        return PackedCoordinateSequence.from_coordinates(
            coordinates, dimension_of(first), measures_of(first), self.precision
        )

    def create_from_sequence(self, sequence: CoordinateSequence) -> PackedCoordinateSequence:
        """Независимая packed-копия с теми же dimension/measures"""
        return PackedCoordinateSequence.from_coordinates(
            sequence.to_coordinate_array(),
            sequence.get_dimension(),
            sequence.get_measures(),
            self.precision,
        )

    def create_from_packed(
        self,
        packed_coordinates: npt.NDArray[np.floating],
        dimension: int = 3,
        measures: int = DEFAULT_MEASURES,
    ) -> PackedCoordinateSequence:
        """
        Последовательность поверх готового плоского буфера.

        Буфер с dtype фабрики принимается без копирования.
        Dimension/measures здесь не приводятся: буфер уже имеет раскладку,
        и неверная раскладка вызывает ValueError.
        """
        return PackedCoordinateSequence(
            packed_coordinates, dimension, measures, self.precision
        )
