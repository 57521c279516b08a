"""
Dense 2-D matrix value types, elementwise arithmetic with broadcasting,
reductions and dot product.

This package is pure Python and independent of external numeric backends.
"""

from src.linalg.config import DEFAULT_MATRIX_CONFIG, MatrixConfig
from src.linalg.domain import Dimensions, Matrix, MatrixContractViolation, SumDirection

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MATRIX_CONFIG",
    "MatrixConfig",
    "Dimensions",
    "Matrix",
    "MatrixContractViolation",
    "SumDirection",
]
