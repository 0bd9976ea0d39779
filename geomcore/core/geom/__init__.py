"""
Coordinates and coordinate sequences.

Contains the Coordinate value model, the CoordinateSequence abstraction with
its object-backed and packed variants, sequence factories and utilities.
"""

from geomcore.core.geom.coordinate import (
    M,
    NULL_ORDINATE,
    X,
    Y,
    Z,
    Coordinate,
    CoordinateKind,
    coordinates_dimension,
    coordinates_kind,
    coordinates_measures,
    create_coordinate,
    dimension_of,
    measures_of,
)
from geomcore.core.geom.coordinate_array_sequence import CoordinateArraySequence
from geomcore.core.geom.coordinate_sequence import CoordinateSequence, validate_layout
from geomcore.core.geom.packed_coordinate_sequence import (
    PackedCoordinateSequence,
    PackedPrecision,
)
from geomcore.core.geom.sequence_factory import (
    CoordinateArraySequenceFactory,
    PackedCoordinateSequenceFactory,
    clamp_layout,
)

__all__ = [
    # Coordinate
    "NULL_ORDINATE",
    "X",
    "Y",
    "Z",
    "M",
    "Coordinate",
    "CoordinateKind",
    "create_coordinate",
    "dimension_of",
    "measures_of",
    "coordinates_kind",
    "coordinates_dimension",
    "coordinates_measures",
    # Sequences
    "CoordinateSequence",
    "CoordinateArraySequence",
    "PackedCoordinateSequence",
    "PackedPrecision",
    "validate_layout",
    # Factories
    "CoordinateArraySequenceFactory",
    "PackedCoordinateSequenceFactory",
    "clamp_layout",
]
