"""
densematrix: small dense matrix library for Python.

A double-precision matrix value type with shape manipulation, classical
cofactor-expansion linear algebra, and text/binary serialization.

Submodules:
    core: exceptions, validators, tolerances
    matrix: the Matrix type
    io: text and binary codecs
"""

__version__ = "0.1.0"

from densematrix.core.exceptions import (
    MatrixError,
    ValidationError,
    InvalidDimensionError,
    ShapeMismatchError,
    NotSquareError,
    IndexOutOfRangeError,
    NumericalError,
    SingularMatrixError,
    SerializationError,
    MalformedInputError,
    UnexpectedEndOfInputError,
)
from densematrix.core.tolerances import EPS
from densematrix.matrix import Matrix
from densematrix import io

__all__ = [
    "__version__",
    "Matrix",
    "EPS",
    "io",
    "MatrixError",
    "ValidationError",
    "InvalidDimensionError",
    "ShapeMismatchError",
    "NotSquareError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
    "SerializationError",
    "MalformedInputError",
    "UnexpectedEndOfInputError",
]
