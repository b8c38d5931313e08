"""
Owned buffers для OOP cheatsheet

Value types, эксклюзивно владеющие своим хранилищем, и их форматирование.
"""

from src.core.buffers.owned_matrix import (
    # Exceptions
    InvalidArgument,
    MatrixError,
    OutOfRange,
    # Types
    MatrixState,
    OwnedMatrix,
)
from src.core.buffers.render import format_matrix

__all__ = [
    # Exceptions
    "MatrixError",
    "InvalidArgument",
    "OutOfRange",
    # Types
    "MatrixState",
    "OwnedMatrix",
    # Rendering
    "format_matrix",
]
