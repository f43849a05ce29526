"""
Core -- Data layer for numvec

Contains the foundational data structures:
- Storage: Backing capability (VectorStorage) and dense numpy storage
- Vector: Value-equal, fixed-size sequence over a storage
- Errors: UnsupportedOperation and InvalidArgument
"""

from .errors import VectorError, UnsupportedOperation, InvalidArgument
from .storage import VectorStorage, DenseStorage
from .vector import Vector, DenseVector, is_element

__all__ = [
    # Errors
    "VectorError", "UnsupportedOperation", "InvalidArgument",
    # Storage
    "VectorStorage", "DenseStorage",
    # Vector
    "Vector", "DenseVector", "is_element",
]
