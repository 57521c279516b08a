"""
Contract Validation Module

Модуль для валидации входных контрактов linalg через JSON Schema.
"""

from .validators import (
    ContractValidator,
    MatrixRowsValidator,
    SchemaLoader,
    validate_matrix_rows,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatrixRowsValidator",
    # Functions
    "validate_matrix_rows",
]
