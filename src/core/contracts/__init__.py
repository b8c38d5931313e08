"""
Contract Validation Module

Модуль для валидации JSON контрактов OOP cheatsheet.
"""

from .validators import (
    SCHEMA_DIR,
    OwnedMatrixValidator,
    SchemaLoader,
    validate_owned_matrix,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "OwnedMatrixValidator",
    # Functions
    "validate_owned_matrix",
]
