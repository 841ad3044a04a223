"""
Binary codec.

Layout (big-endian, no magic, no padding, no version)::

    [4 bytes]           rows      signed 32-bit integer
    [4 bytes]           cols      signed 32-bit integer
    [rows*cols*8 bytes] elements  IEEE-754 float64, row-major
"""

from __future__ import annotations

import io
from typing import BinaryIO

import numpy as np

from densematrix.core.exceptions import UnexpectedEndOfInputError
from densematrix.core.validation import check_shape
from densematrix.matrix.matrix import Matrix

HEADER_DTYPE = np.dtype('>i4')
ELEMENT_DTYPE = np.dtype('>f8')
HEADER_SIZE = 2 * HEADER_DTYPE.itemsize

# Bytes requested per read; the header alone never sizes an allocation
READ_CHUNK = 1 << 16


def dump_binary(matrix: Matrix, fp: BinaryIO) -> None:
    """Write ``matrix`` to the binary stream ``fp``."""
    fp.write(np.array(matrix.shape, dtype=HEADER_DTYPE).tobytes())
    fp.write(matrix.to_array().astype(ELEMENT_DTYPE).tobytes(order='C'))


def dumps_binary(matrix: Matrix) -> bytes:
    """Encode ``matrix`` as bytes."""
    with io.BytesIO() as buf:
        dump_binary(matrix, buf)
        return buf.getvalue()


def _read_exact(fp: BinaryIO, n: int, what: str) -> bytes:
    chunks = []
    remaining = n
    while remaining > 0:
        chunk = fp.read(min(remaining, READ_CHUNK))
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    data = b"".join(chunks)
    if len(data) != n:
        raise UnexpectedEndOfInputError(
            f"Unexpected end of input reading {what}: expected {n} bytes, got {len(data)}",
            expected=n,
            actual=len(data),
        )
    return data


def load_binary(fp: BinaryIO) -> Matrix:
    """
    Read a matrix from the binary stream ``fp``.

    Consumes exactly the header and ``rows * cols`` doubles; anything after
    that is left in the stream.

    Raises
    ------
    UnexpectedEndOfInputError
        If the stream ends inside the header or the element block.
    InvalidDimensionError
        If the header declares a non-positive shape.
    """
    header = np.frombuffer(_read_exact(fp, HEADER_SIZE, 'header'), dtype=HEADER_DTYPE)
    rows, cols = int(header[0]), int(header[1])

    check_shape(rows, cols)

    body = _read_exact(fp, rows * cols * ELEMENT_DTYPE.itemsize, 'elements')
    values = np.frombuffer(body, dtype=ELEMENT_DTYPE).reshape(rows, cols)
    return Matrix.from_array(values)


def loads_binary(data: bytes) -> Matrix:
    """Decode a matrix from bytes produced by :func:`dumps_binary`."""
    with io.BytesIO(data) as buf:
        return load_binary(buf)
