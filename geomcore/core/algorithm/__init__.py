"""
Measure algorithms over coordinate sequences.
"""

from geomcore.core.algorithm.area import (
    area,
    signed_area,
    signed_area_of_coordinates,
    signed_area_of_sequence,
)
from geomcore.core.algorithm.length import length

__all__ = [
    "area",
    "signed_area",
    "signed_area_of_coordinates",
    "signed_area_of_sequence",
    "length",
]
