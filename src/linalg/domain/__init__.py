"""
Domain models and value objects.

Contains the fundamental value types: Dimensions and Matrix.
"""

from src.linalg.domain.dimensions import Dimensions
from src.linalg.domain.matrix import Matrix, MatrixContractViolation, SumDirection

__all__ = [
    # Dimensions model
    "Dimensions",
    # Matrix model
    "Matrix",
    "MatrixContractViolation",
    "SumDirection",
]
