"""
Numeric tolerances and thresholds for densematrix.

Defines the precision expectations used across the package:
- matrix equality: absolute tolerance EPS on every element pair
- inverse: determinant magnitude below which a matrix counts as singular
- reference: tighter tier used when checking against known exact results

Also holds the size above which the cofactor-expansion determinant warns
about its factorial running time.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Element-wise absolute tolerance for Matrix equality
EPS = 1e-7

MATRIX_EQUALITY = ToleranceTier(
    rtol=0.0,
    atol=EPS,
    name='matrix_equality',
    description='Absolute per-element tolerance used by Matrix.__eq__',
)

# Known closed-form results (small integer matrices)
REFERENCE = ToleranceTier(
    rtol=0.0,
    atol=1e-10,
    name='reference',
    description='Exact small-integer results, double precision round-off only',
)

# |det| below this is treated as zero by inverse()
SINGULARITY_TOLERANCE = EPS

# Laplace expansion costs O(n!). At n = 10 that is ~3.6M 2x2 determinants.
LAPLACE_WARN_SIZE = 9
