"""
Input validation utilities for densematrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every matrix operation runs its
checks before touching any state.

Design principles:
    - Validators work on shapes and plain values, never on Matrix objects
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter or operation names included in all error messages
"""

import operator
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.exceptions import (
    IndexOutOfRangeError,
    InvalidDimensionError,
    NotSquareError,
    ShapeMismatchError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    The result never shares memory with the input.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64, freshly allocated

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype != np.bool_ and not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, only real values are supported"
        )

    return np.array(result, dtype=np.float64, order='C', copy=True)


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a row or column count is a positive integer.

    Args:
        value: Proposed count
        name: Parameter name for error messages

    Returns:
        The count as a plain int

    Raises:
        InvalidDimensionError: If value is not an integer or is less than 1
    """
    n = _as_int(value, name)
    if n < 1:
        raise InvalidDimensionError(
            f"{name}: matrices must have a positive size, got {n}"
        )
    return n


def check_shape(rows: Any, cols: Any) -> tuple[int, int]:
    """
    Verify both dimensions of a shape are positive integers.

    Raises:
        InvalidDimensionError: If either dimension is invalid
    """
    r = _as_int(rows, 'rows')
    c = _as_int(cols, 'cols')
    if r < 1 or c < 1:
        raise InvalidDimensionError(
            f"Invalid shape ({r}, {c}): matrices must have a positive size",
            rows=r,
            cols=c,
        )
    return r, c


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise InvalidDimensionError(f"{name}: expected an integer, got bool {value!r}")
    try:
        return operator.index(value)
    except TypeError as e:
        raise InvalidDimensionError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        ) from e


def check_index(
    i: Any,
    j: Any,
    shape: tuple[int, int],
    base: int = 0,
) -> tuple[int, int]:
    """
    Verify (i, j) addresses an element of a matrix with the given shape.

    Negative indices are rejected; there is no wrap-around.

    Args:
        i: Row index
        j: Column index
        shape: (rows, cols) of the matrix
        base: 0 for Python-style indices, 1 for row/column numbers

    Returns:
        (i, j) converted to zero-based plain ints

    Raises:
        IndexOutOfRangeError: If either index is outside the shape
    """
    rows, cols = shape
    try:
        ii = operator.index(i) - base
        jj = operator.index(j) - base
    except TypeError as e:
        raise IndexOutOfRangeError(
            f"Matrix indices must be integers, got ({i!r}, {j!r})",
            shape=shape,
        ) from e
    if ii < 0 or jj < 0 or ii >= rows or jj >= cols:
        raise IndexOutOfRangeError(
            f"Matrix index out of range: ({i}, {j}) for size ({rows}, {cols})"
            + (f" with {base}-based indexing" if base else ""),
            index=(ii + base, jj + base),
            shape=shape,
        )
    return ii, jj


def check_not_empty(shape: tuple[int, int], operation: str) -> None:
    """
    Verify the matrix is not the 0x0 sentinel.

    Raises:
        InvalidDimensionError: If either dimension is zero
    """
    rows, cols = shape
    if rows < 1 or cols < 1:
        raise InvalidDimensionError(
            f"{operation}: not defined for an empty {rows}x{cols} matrix",
            rows=rows,
            cols=cols,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two shapes are identical.

    Raises:
        ShapeMismatchError: If shapes differ
    """
    if left != right:
        raise ShapeMismatchError(
            f"{operation}: matrices must be the same size, "
            f"got {left[0]}x{left[1]} and {right[0]}x{right[1]}",
            left_shape=left,
            right_shape=right,
            operation=operation,
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
) -> None:
    """
    Verify left.cols == right.rows for a matrix product.

    Raises:
        ShapeMismatchError: If the inner dimensions disagree
    """
    if left[1] != right[0]:
        raise ShapeMismatchError(
            f"multiply: the number of columns of the first matrix ({left[1]}) "
            f"is not equal to the number of rows of the second matrix ({right[0]})",
            left_shape=left,
            right_shape=right,
            operation='multiply',
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a shape is square.

    Raises:
        NotSquareError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise NotSquareError(
            f"{operation}: the matrix is not square ({rows}x{cols})",
            shape=shape,
            operation=operation,
        )


def check_rectangular(data: Any, name: str) -> tuple[int, int]:
    """
    Verify nested row data is non-empty and rectangular.

    Args:
        data: Sequence of rows, each a sequence of numbers
        name: Parameter name for error messages

    Returns:
        (n_rows, n_cols) taken from the outer length and the first row

    Raises:
        ValidationError: If data or a row is not a sequence
        InvalidDimensionError: If data or its first row is empty
        ShapeMismatchError: If any row length differs from the first
    """
    if not _is_row_container(data):
        raise ValidationError(
            f"{name}: expected a sequence of rows, got {type(data).__name__}"
        )
    if len(data) == 0:
        raise InvalidDimensionError(f"{name}: no rows given", rows=0)

    width = None
    for i, row in enumerate(data):
        if not _is_row_container(row):
            raise ValidationError(
                f"{name}: row {i} is not a sequence ({type(row).__name__})"
            )
        if width is None:
            width = len(row)
            if width == 0:
                raise InvalidDimensionError(f"{name}: first row is empty", cols=0)
        elif len(row) != width:
            raise ShapeMismatchError(
                f"{name}: row {i} has {len(row)} elements, expected {width}",
                left_shape=(width,),
                right_shape=(len(row),),
                operation='from_rows',
            )
    return len(data), width


def _is_row_container(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim >= 1
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))
