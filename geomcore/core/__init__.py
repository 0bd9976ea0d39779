"""
Core geometry primitives, measure algorithms and numerical routines.

This module contains the foundational building blocks that are independent
of any geometry object model (points, polygons, factories, etc.).
"""
