"""
Kernels для linalg

Чистые алгоритмы над плоскими row-major буферами float.
Value-типы (Dimensions, Matrix) делегируют им всю арифметику.
"""

# Numerical Safeguards
from src.linalg.kernels.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    ieee_divide,
    ieee_log,
    is_close,
    left_fold_sum,
    validate_finite,
    validate_non_negative_int,
)

# Broadcasting
from src.linalg.kernels.broadcasting import (
    broadcast_values,
    tile_columns,
    tile_rows,
)

# Reductions
from src.linalg.kernels.reductions import sum_all, sum_columns, sum_rows

# Products
from src.linalg.kernels.products import (
    dot_product,
    get_column,
    get_row,
    inner_product,
    transpose,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Functions
    "ieee_divide",
    "ieee_log",
    "is_close",
    "left_fold_sum",
    "validate_finite",
    "validate_non_negative_int",
    # Broadcasting
    "broadcast_values",
    "tile_columns",
    "tile_rows",
    # Reductions
    "sum_all",
    "sum_columns",
    "sum_rows",
    # Products
    "dot_product",
    "get_column",
    "get_row",
    "inner_product",
    "transpose",
]
