"""
Exception hierarchy for densematrix.

All exceptions inherit from MatrixError to allow catching any
library-specific error. Each concrete exception maps to one failure kind
of the matrix operations and codecs.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class MatrixError(Exception):
    """Base exception for all densematrix errors."""
    pass


class ValidationError(MatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidDimensionError(ValidationError):
    """
    Row or column count is not positive.

    Raised by construction, resizing and by operations that cannot act on
    the empty 0x0 matrix.

    Attributes:
        rows: Offending row count, if relevant
        cols: Offending column count, if relevant
    """

    def __init__(
        self,
        message: str,
        rows: int | None = None,
        cols: int | None = None
    ):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class ShapeMismatchError(ValidationError):
    """
    Operands have incompatible shapes.

    Raised by element-wise arithmetic on differently shaped matrices, by
    matrix products whose inner dimensions disagree, and by ragged row data.

    Attributes:
        left_shape: Shape of the receiver (or expected row shape)
        right_shape: Shape of the argument (or actual row shape)
        operation: Name of the operation that failed
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
        operation: str | None = None
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape
        self.operation = operation


class NotSquareError(ValidationError):
    """
    Operation requires a square matrix.

    Attributes:
        shape: Actual (rows, cols) of the matrix
        operation: Name of the operation that failed
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, int] | None = None,
        operation: str | None = None
    ):
        super().__init__(message)
        self.shape = shape
        self.operation = operation


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Element index outside the current shape.

    Also an IndexError, so generic sequence-handling code keeps working.

    Attributes:
        index: The (row, col) pair that was requested
        shape: The (rows, cols) shape it was checked against
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, int] | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class NumericalError(MatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when an inverse is requested and the absolute determinant falls
    below the singularity tolerance.

    Attributes:
        determinant: The determinant that was computed
        tolerance: The threshold it was compared against
    """

    def __init__(
        self,
        message: str,
        determinant: float | None = None,
        tolerance: float | None = None
    ):
        super().__init__(message)
        self.determinant = determinant
        self.tolerance = tolerance


class SerializationError(MatrixError):
    """
    Encoding or decoding a matrix failed.

    Base class for codec errors.
    """
    pass


class MalformedInputError(SerializationError, ValueError):
    """
    Encoded input does not follow the format.

    Raised when a text header or row has the wrong number of tokens, or a
    token cannot be parsed as a number.

    Attributes:
        row: Zero-based data row index, or None for the header
        expected: Expected token count, if a count check failed
        actual: Actual token count, if a count check failed
        column: Zero-based column of a bad token, if a parse failed
        token: The token that could not be parsed
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        expected: int | None = None,
        actual: int | None = None,
        column: int | None = None,
        token: str | None = None
    ):
        super().__init__(message)
        self.row = row
        self.expected = expected
        self.actual = actual
        self.column = column
        self.token = token


class UnexpectedEndOfInputError(SerializationError, EOFError):
    """
    Input ended before the declared shape was fully read.

    Attributes:
        row: Zero-based data row that was missing (text codec)
        expected: Number of bytes that were required (binary codec)
        actual: Number of bytes that were available (binary codec)
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        expected: int | None = None,
        actual: int | None = None
    ):
        super().__init__(message)
        self.row = row
        self.expected = expected
        self.actual = actual
