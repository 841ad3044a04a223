"""
Text codec.

Format::

    <rows> <cols>
    <a00> <a01> ... <a0,cols-1>
    ...

Elements are written with Python's shortest round-trip float repr
(``1.0``, ``-3.5``), one row per line, single spaces between fields. The
writer terminates every line with ``\\n``; the reader does not require a
newline after the last row and ignores anything after it.
"""

from __future__ import annotations

import io
from typing import TextIO

from densematrix.core.exceptions import MalformedInputError, UnexpectedEndOfInputError
from densematrix.matrix.matrix import Matrix, format_element


def _parse_number(token: str, kind: type[int] | type[float]) -> int | float:
    # int() and float() accept "1_000"; the format does not
    if "_" in token:
        raise ValueError(f"digit separators are not allowed: {token!r}")
    return kind(token)


def dump_text(matrix: Matrix, fp: TextIO) -> None:
    """Write ``matrix`` to the text stream ``fp``."""
    fp.write(f"{matrix.rows} {matrix.cols}\n")
    for row in matrix.to_list():
        fp.write(" ".join(format_element(x) for x in row))
        fp.write("\n")


def dumps_text(matrix: Matrix) -> str:
    """Encode ``matrix`` as a string."""
    with io.StringIO() as buf:
        dump_text(matrix, buf)
        return buf.getvalue()


def load_text(fp: TextIO) -> Matrix:
    """
    Read a matrix from the text stream ``fp``.

    Raises
    ------
    UnexpectedEndOfInputError
        If the input is empty or ends before all declared rows are read.
    MalformedInputError
        If the header lacks two integers, a row has the wrong number of
        fields, or a field is not a number.
    InvalidDimensionError
        If the header declares a non-positive shape.
    """
    header = fp.readline()
    if not header:
        raise UnexpectedEndOfInputError("Empty input: missing header line")

    fields = header.split()
    if len(fields) < 2:
        raise MalformedInputError(
            f"Header must contain rows and cols, got {len(fields)} field(s): {header.strip()!r}",
            expected=2,
            actual=len(fields),
        )
    try:
        rows, cols = _parse_number(fields[0], int), _parse_number(fields[1], int)
    except ValueError as e:
        raise MalformedInputError(
            f"Header rows and cols must be integers, got {header.strip()!r}"
        ) from e

    matrix = Matrix(rows, cols)
    for i in range(rows):
        line = fp.readline()
        if not line:
            raise UnexpectedEndOfInputError(
                f"Unexpected end of input at row {i} (expected {rows} rows)",
                row=i,
            )
        tokens = line.split()
        if len(tokens) != cols:
            raise MalformedInputError(
                f"Invalid number of columns at row {i}: expected {cols}, got {len(tokens)}",
                row=i,
                expected=cols,
                actual=len(tokens),
            )
        for j, token in enumerate(tokens):
            try:
                value = _parse_number(token, float)
            except ValueError as e:
                raise MalformedInputError(
                    f"Non-numeric value {token!r} at row {i}, column {j}",
                    row=i,
                    column=j,
                    token=token,
                ) from e
            matrix.set(i, j, value)
    return matrix


def loads_text(s: str) -> Matrix:
    """Decode a matrix from a string produced by :func:`dumps_text`."""
    with io.StringIO(s) as buf:
        return load_text(buf)
