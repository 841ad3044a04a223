"""
Path-based save/load.

Usage:
    from densematrix.io import save, load

    save(m, "m.txt")                  # text, inferred from suffix
    save(m, "m.bin")                  # binary
    save(m, "m.dat", format="binary")
    m2 = load("m.txt")
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from densematrix.core.exceptions import ValidationError
from densematrix.io.binary import dump_binary, load_binary
from densematrix.io.text import dump_text, load_text
from densematrix.matrix.matrix import Matrix

FormatChoice = Literal['text', 'binary']

SUFFIX_FORMATS: dict[str, FormatChoice] = {
    '.txt': 'text',
    '.bin': 'binary',
}


def _resolve_format(path: Path, format: FormatChoice | None) -> FormatChoice:
    if format is None:
        suffix = path.suffix.lower()
        if suffix not in SUFFIX_FORMATS:
            raise ValidationError(
                f"Unknown file format: {suffix!r}. "
                f"Pass format='text' or format='binary', or use one of {sorted(SUFFIX_FORMATS)}"
            )
        return SUFFIX_FORMATS[suffix]
    if format not in ('text', 'binary'):
        raise ValidationError(f"format must be 'text' or 'binary', got {format!r}")
    return format


def save(matrix: Matrix, path: str | Path, *, format: FormatChoice | None = None) -> None:
    """Write ``matrix`` to ``path`` in text or binary form."""
    path = Path(path)
    if _resolve_format(path, format) == 'text':
        with path.open('w', encoding='utf-8', newline='\n') as fp:
            dump_text(matrix, fp)
    else:
        with path.open('wb') as fp:
            dump_binary(matrix, fp)


def load(path: str | Path, *, format: FormatChoice | None = None) -> Matrix:
    """Read a matrix from ``path`` in text or binary form."""
    path = Path(path)
    if _resolve_format(path, format) == 'text':
        with path.open('r', encoding='utf-8') as fp:
            return load_text(fp)
    with path.open('rb') as fp:
        return load_binary(fp)
