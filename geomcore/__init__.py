"""
geomcore — coordinate sequences, measure algorithms and a dense linear solver.

Core building blocks independent of any geometry object model: coordinates,
storage-agnostic coordinate sequences, ring area, line length and Gaussian
elimination.
"""

__version__ = "0.1.0"
