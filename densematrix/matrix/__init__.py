"""
Dense matrix type.

Public API:
    Matrix          - dense float64 matrix with shape, arithmetic and
                      cofactor-expansion algebra
    format_element  - text rendering shared by Matrix.format and the text codec
"""

from densematrix.matrix.matrix import Matrix, format_element

__all__ = [
    "Matrix",
    "format_element",
]
