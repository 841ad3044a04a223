"""
Core infrastructure for densematrix.

This module provides shared abstractions used by the matrix type and the
codecs.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Equality tolerance and numeric thresholds
"""

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
from densematrix.core.tolerances import EPS, ToleranceTier

__all__ = [
    # Exceptions
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
    # Tolerances
    "EPS",
    "ToleranceTier",
]
