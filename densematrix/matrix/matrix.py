"""
Matrix: dense float64 matrix value type.

Owns a C-contiguous float64 buffer of shape (rows, cols). Every public
operation copies on the way in and on the way out, so two Matrix instances
never share storage. Only set() and the two resize methods mutate; all
algebra returns a new Matrix.

Construction:
    Matrix()                     empty 0x0 matrix
    Matrix(rows, cols)           zero-filled
    Matrix.from_rows(rows)       nested sequences, must be rectangular
    Matrix.from_array(array)     any 2D array-like
    Matrix.identity(n)
"""

from __future__ import annotations

import numbers
from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.exceptions import InvalidDimensionError, ValidationError
from densematrix.core.tolerances import MATRIX_EQUALITY
from densematrix.core.validation import (
    check_array,
    check_dimension,
    check_index,
    check_inner_dimensions,
    check_not_empty,
    check_rectangular,
    check_same_shape,
    check_shape,
    check_square,
)
from densematrix.matrix import _algebra


def format_element(value: float) -> str:
    """Locale-independent shortest round-trip text for a double, e.g. '-3.5'."""
    return repr(float(value))


class Matrix:
    """
    Dense, double-precision matrix.

    Equality is tolerance based: two matrices are equal when they have the
    same shape and every pair of elements differs by at most ``EPS``
    (1e-7). Because of that, and because matrices are mutable, Matrix is
    not hashable.

    Parameters
    ----------
    rows, cols : int, optional
        Shape of a zero-filled matrix. Both must be at least 1. Omit both
        for the empty 0x0 matrix.

    Raises
    ------
    InvalidDimensionError
        If only one of rows/cols is given, or either is less than 1.
    """

    __slots__ = ('_data',)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int | None = None, cols: int | None = None):
        if rows is None and cols is None:
            self._data = np.zeros((0, 0), dtype=np.float64)
            return
        if rows is None or cols is None:
            raise InvalidDimensionError(
                f"Both rows and cols are required, got rows={rows!r}, cols={cols!r}",
                rows=rows,
                cols=cols,
            )
        r, c = check_shape(rows, cols)
        self._data = np.zeros((r, c), dtype=np.float64)

    @classmethod
    def _from_owned(cls, data: NDArray[np.float64]) -> Matrix:
        """Wrap an array this module just allocated. No copy, no checks."""
        m = cls.__new__(cls)
        m._data = data
        return m

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """
        Build a matrix from literal row data.

        Parameters
        ----------
        rows : sequence of sequences of numbers
            Row-major data. Every row must have the same length as the first.

        Raises
        ------
        InvalidDimensionError
            If there are no rows or the first row is empty.
        ShapeMismatchError
            If any row length differs from the first row's.
        ValidationError
            If an element is not a real number.
        """
        n_rows, n_cols = check_rectangular(rows, 'rows')
        data = check_array(rows, 'rows')
        if data.shape != (n_rows, n_cols):
            raise ValidationError(
                f"rows: elements must be numbers, got nested data of shape {data.shape}"
            )
        return cls._from_owned(data)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a matrix from a 2D array-like.

        Objects exposing ``.values`` (e.g. pandas DataFrames) are unwrapped.
        A 1D input becomes a single row. The input is always copied.

        Raises
        ------
        InvalidDimensionError
            If the input is not 1D/2D or has an empty axis.
        """
        if hasattr(array, 'values') and not isinstance(array, np.ndarray):
            array = array.values
        data = check_array(array, 'array')

        if data.ndim == 1:
            data = data.reshape(1, -1)
        if data.ndim != 2:
            raise InvalidDimensionError(
                f"array: expected 2D array, got {data.ndim}D with shape {data.shape}"
            )
        check_shape(*data.shape)
        return cls._from_owned(data)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        n = check_dimension(n, 'n')
        return cls._from_owned(np.eye(n, dtype=np.float64))

    # === Shape ===

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._data.shape[0], self._data.shape[1])

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    @property
    def is_empty(self) -> bool:
        """True for the 0x0 matrix (or any matrix with a zero dimension)."""
        return self._data.size == 0

    def resize_rows(self, new_rows: int) -> None:
        """
        Change the number of rows in place.

        Existing rows are kept up to ``min(rows, new_rows)``; added rows are
        zero. The new buffer is fully built before it replaces the old one.

        Raises
        ------
        InvalidDimensionError
            If new_rows is less than 1.
        """
        n = check_dimension(new_rows, 'new_rows')
        if n == self.rows:
            return
        data = np.zeros((n, self.cols), dtype=np.float64)
        keep = min(n, self.rows)
        data[:keep, :] = self._data[:keep, :]
        self._data = data

    def resize_cols(self, new_cols: int) -> None:
        """
        Change the number of columns in place.

        Existing columns are kept up to ``min(cols, new_cols)``; added
        columns are zero.

        Raises
        ------
        InvalidDimensionError
            If new_cols is less than 1.
        """
        n = check_dimension(new_cols, 'new_cols')
        if n == self.cols:
            return
        data = np.zeros((self.rows, n), dtype=np.float64)
        keep = min(n, self.cols)
        data[:, :keep] = self._data[:, :keep]
        self._data = data

    # === Element access ===

    def get(self, i: int, j: int) -> float:
        """Element at zero-based (i, j). Raises IndexOutOfRangeError."""
        ii, jj = check_index(i, j, self.shape)
        return float(self._data[ii, jj])

    def set(self, i: int, j: int, value: float) -> None:
        """Store value at zero-based (i, j). Raises IndexOutOfRangeError."""
        ii, jj = check_index(i, j, self.shape)
        if not isinstance(value, numbers.Real):
            raise ValidationError(
                f"value: expected a real number, got {type(value).__name__}"
            )
        self._data[ii, jj] = float(value)

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = _unpack_key(key)
        return self.get(i, j)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        i, j = _unpack_key(key)
        self.set(i, j, value)

    # === Copies and export ===

    def copy(self) -> Matrix:
        """Deep copy with an independent buffer."""
        return Matrix._from_owned(self._data.copy())

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.copy()

    def to_array(self) -> NDArray[np.float64]:
        """Copy of the elements as a (rows, cols) float64 array."""
        return self._data.copy()

    def to_list(self) -> list[list[float]]:
        """Elements as nested Python lists, row-major."""
        return self._data.tolist()

    # === Equality and formatting ===

    def equals(self, other: object, atol: float = MATRIX_EQUALITY.atol) -> bool:
        """
        Tolerance equality.

        True when ``other`` is a Matrix of the same shape and every element
        pair differs by at most ``atol``.
        """
        if other is self:
            return True
        if not isinstance(other, Matrix):
            return False
        if self.shape != other.shape:
            return False
        return bool(np.all(np.abs(self._data - other._data) <= atol))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def format(self) -> str:
        """
        Human-readable rendering.

        ``"{rows}x{cols}"`` on the first line, then one line per row with
        elements separated by single spaces. No trailing newline after the
        last row; the 0x0 matrix renders as ``"0x0\\n"``.
        """
        header = f"{self.rows}x{self.cols}\n"
        body = "\n".join(
            " ".join(format_element(x) for x in row) for row in self._data
        )
        return header + body

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols})"

    # === Arithmetic ===

    def add(self, other: Matrix) -> Matrix:
        """Element-wise sum. Raises ShapeMismatchError unless shapes match."""
        self._check_operand(other, 'add')
        check_not_empty(self.shape, 'add')
        check_same_shape(self.shape, other.shape, 'add')
        return Matrix._from_owned(self._data + other._data)

    def subtract(self, other: Matrix) -> Matrix:
        """Element-wise difference. Raises ShapeMismatchError unless shapes match."""
        self._check_operand(other, 'subtract')
        check_not_empty(self.shape, 'subtract')
        check_same_shape(self.shape, other.shape, 'subtract')
        return Matrix._from_owned(self._data - other._data)

    def multiply(self, value: Matrix | float) -> Matrix:
        """
        Scalar or matrix product.

        Parameters
        ----------
        value : Matrix or real number
            A number scales every element. A Matrix gives the standard
            matrix product, which requires ``self.cols == value.rows`` and
            has shape ``(self.rows, value.cols)``.

        Raises
        ------
        ShapeMismatchError
            If the inner dimensions of a matrix product disagree.
        ValidationError
            If value is neither a Matrix nor a real number.
        """
        check_not_empty(self.shape, 'multiply')
        if isinstance(value, Matrix):
            check_not_empty(value.shape, 'multiply')
            check_inner_dimensions(self.shape, value.shape)
            return Matrix._from_owned(np.ascontiguousarray(self._data @ value._data))
        if isinstance(value, numbers.Real):
            return Matrix._from_owned(self._data * float(value))
        raise ValidationError(
            f"multiply: expected a Matrix or a real number, got {type(value).__name__}"
        )

    def negate(self) -> Matrix:
        return self.multiply(-1.0)

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> Matrix:
        # Matrix products go through @
        if isinstance(other, Matrix) or not isinstance(other, numbers.Real):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: object) -> Matrix:
        return self.__mul__(other)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self) -> Matrix:
        return self.negate()

    # === Linear algebra ===

    def transpose(self) -> Matrix:
        """Matrix with rows and columns swapped."""
        check_not_empty(self.shape, 'transpose')
        return Matrix._from_owned(np.ascontiguousarray(self._data.T))

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def minor(self, row: int, column: int) -> Matrix:
        """
        Submatrix without the given row and column.

        Parameters
        ----------
        row, column : int
            1-indexed row and column to delete.

        Raises
        ------
        InvalidDimensionError
            If the matrix has fewer than 2 rows or columns.
        IndexOutOfRangeError
            If row is not in [1, rows] or column not in [1, cols].
        """
        if self.rows < 2 or self.cols < 2:
            raise InvalidDimensionError(
                f"minor: needs at least 2 rows and 2 columns, matrix is {self.rows}x{self.cols}",
                rows=self.rows,
                cols=self.cols,
            )
        r, c = check_index(row, column, self.shape, base=1)
        return Matrix._from_owned(_algebra.minor(self._data, r + 1, c + 1))

    def determinant(self) -> float:
        """
        Determinant by Laplace expansion along the first row.

        Exponential in the matrix size; a RuntimeWarning is emitted above
        ``LAPLACE_WARN_SIZE``.

        Raises
        ------
        NotSquareError
            If the matrix is not square.
        """
        check_square(self.shape, 'determinant')
        check_not_empty(self.shape, 'determinant')
        _algebra.warn_if_expensive(self.rows, 'determinant')
        return _algebra.determinant(self._data)

    def cofactors(self) -> Matrix:
        """
        Cofactor matrix, entry (i, j) = (-1)^(i+j) * det(minor(i+1, j+1)).

        For a 1x1 matrix this is [[determinant()]].

        Raises
        ------
        NotSquareError
            If the matrix is not square.
        """
        check_square(self.shape, 'cofactors')
        check_not_empty(self.shape, 'cofactors')
        _algebra.warn_if_expensive(self.rows, 'cofactors')
        return Matrix._from_owned(_algebra.cofactors(self._data))

    def adjugate(self) -> Matrix:
        """Transpose of the cofactor matrix; [[1.0]] for a 1x1 matrix."""
        check_square(self.shape, 'adjugate')
        check_not_empty(self.shape, 'adjugate')
        _algebra.warn_if_expensive(self.rows, 'adjugate')
        return Matrix._from_owned(_algebra.adjugate(self._data))

    def inverse(self) -> Matrix:
        """
        Inverse as adjugate / determinant.

        Raises
        ------
        NotSquareError
            If the matrix is not square.
        SingularMatrixError
            If |determinant| is below ``SINGULARITY_TOLERANCE``.
        """
        check_square(self.shape, 'inverse')
        check_not_empty(self.shape, 'inverse')
        _algebra.warn_if_expensive(self.rows, 'inverse')
        return Matrix._from_owned(_algebra.inverse(self._data))

    def trace(self) -> float:
        """Sum of the diagonal."""
        check_square(self.shape, 'trace')
        check_not_empty(self.shape, 'trace')
        return float(np.trace(self._data))

    def _check_operand(self, other: object, operation: str) -> None:
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"{operation}: expected a Matrix, got {type(other).__name__}"
            )


def _unpack_key(key: Any) -> tuple[Any, Any]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError(
            f"Matrix indices must be a (row, col) pair, got {key!r}"
        )
    return key
