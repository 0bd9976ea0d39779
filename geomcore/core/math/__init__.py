"""
Core math modules для geomcore

Математические примитивы и численные алгоритмы с гарантией стабильности.
"""

# Numerical Safeguards
from geomcore.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # NaN/Inf checks
    all_finite,
    is_valid_float,
    nan_equal,
    # Epsilon comparisons
    equals_with_tolerance,
    is_close,
    # Utilities
    clamp_int,
    # Validation
    validate_non_negative,
    validate_size,
)

# Matrix (linear solver)
from geomcore.core.math.matrix import (
    LinearSystemError,
    MatrixDimensionError,
    SingularMatrixError,
    solve,
    solve_copy,
    solve_strict,
    swap_entries,
    swap_rows,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — NaN/Inf checks
    "all_finite",
    "is_valid_float",
    "nan_equal",
    # Numerical Safeguards — Epsilon comparisons
    "equals_with_tolerance",
    "is_close",
    # Numerical Safeguards — Utilities
    "clamp_int",
    # Numerical Safeguards — Validation
    "validate_non_negative",
    "validate_size",
    # Matrix — Exceptions
    "LinearSystemError",
    "MatrixDimensionError",
    "SingularMatrixError",
    # Matrix — Functions
    "solve",
    "solve_copy",
    "solve_strict",
    "swap_entries",
    "swap_rows",
]
