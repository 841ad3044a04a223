"""
Tests for element-wise arithmetic, scaling, matrix product and transpose.
"""

import numpy as np
import pytest

from densematrix import InvalidDimensionError, Matrix, ShapeMismatchError, ValidationError


# ═══════════════════════════════════════════════════════════════════════
# Add and subtract
# ═══════════════════════════════════════════════════════════════════════


class TestAddSubtract:

    def test_add(self, sample_matrix, identity3):
        result = sample_matrix.add(identity3)
        assert result == Matrix.from_rows([[3, 5, 7], [6, 4, 4], [5, -2, -2]])

    def test_subtract(self, sample_matrix, identity3):
        result = sample_matrix.subtract(identity3)
        assert result == Matrix.from_rows([[1, 5, 7], [6, 2, 4], [5, -2, -4]])

    def test_operators(self, sample_matrix, identity3):
        assert sample_matrix + identity3 == sample_matrix.add(identity3)
        assert sample_matrix - identity3 == sample_matrix.subtract(identity3)

    def test_operands_untouched(self, sample_matrix, identity3):
        before = sample_matrix.copy()
        sample_matrix + identity3
        sample_matrix - identity3
        assert sample_matrix == before
        assert identity3 == Matrix.identity(3)

    @pytest.mark.parametrize("method", ["add", "subtract"])
    def test_shape_mismatch(self, sample_matrix, method):
        incompatible = Matrix(1, 7)
        with pytest.raises(ShapeMismatchError) as exc_info:
            getattr(incompatible, method)(sample_matrix)
        assert exc_info.value.operation == method

    def test_non_matrix_argument(self, sample_matrix):
        with pytest.raises(ValidationError):
            sample_matrix.add(1.0)

    def test_operator_with_scalar_unsupported(self, sample_matrix):
        with pytest.raises(TypeError):
            sample_matrix + 1.0

    def test_empty_rejected(self):
        with pytest.raises(InvalidDimensionError):
            Matrix().add(Matrix())


# ═══════════════════════════════════════════════════════════════════════
# Scalar multiply
# ═══════════════════════════════════════════════════════════════════════


class TestScalarMultiply:

    def test_times_two(self, sample_matrix):
        result = sample_matrix.multiply(2)
        assert result.to_list() == [[4.0, 10.0, 14.0], [12.0, 6.0, 8.0], [10.0, -4.0, -6.0]]

    def test_exact_scaling(self, rng):
        a = rng.standard_normal((3, 5))
        result = Matrix.from_array(a).multiply(2.0)
        np.testing.assert_array_equal(result.to_array(), a * 2.0)

    def test_operators(self, sample_matrix):
        assert sample_matrix * 2 == sample_matrix.multiply(2)
        assert 2 * sample_matrix == sample_matrix.multiply(2)
        assert sample_matrix * np.float64(0.5) == sample_matrix.multiply(0.5)

    def test_negate(self, sample_matrix):
        assert -sample_matrix == sample_matrix.multiply(-1)
        assert sample_matrix.negate().get(2, 1) == 2.0

    def test_invalid_argument(self, sample_matrix):
        with pytest.raises(ValidationError):
            sample_matrix.multiply("2")


# ═══════════════════════════════════════════════════════════════════════
# Matrix multiply
# ═══════════════════════════════════════════════════════════════════════


class TestMatrixMultiply:

    def test_identity_right(self, sample_matrix, identity3):
        assert sample_matrix.multiply(identity3) == sample_matrix

    def test_identity_left(self, sample_matrix, identity3):
        assert identity3 @ sample_matrix == sample_matrix

    def test_rectangular(self):
        a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        b = Matrix.from_rows([[7, 8], [9, 10], [11, 12]])
        result = a @ b
        assert result.shape == (2, 2)
        assert result == Matrix.from_rows([[58, 64], [139, 154]])

    def test_matches_numpy(self, rng):
        a = rng.standard_normal((4, 3))
        b = rng.standard_normal((3, 5))
        result = Matrix.from_array(a) @ Matrix.from_array(b)
        np.testing.assert_allclose(result.to_array(), a @ b, rtol=1e-12)

    def test_incompatible(self, sample_matrix):
        incompatible = Matrix(1, 7)
        with pytest.raises(ShapeMismatchError):
            incompatible.multiply(sample_matrix)

    def test_star_between_matrices_unsupported(self, sample_matrix):
        with pytest.raises(TypeError):
            sample_matrix * sample_matrix


# ═══════════════════════════════════════════════════════════════════════
# Transpose
# ═══════════════════════════════════════════════════════════════════════


class TestTranspose:

    @pytest.mark.parametrize("shape", [(1, 1), (1, 7), (3, 3), (4, 2)])
    def test_double_transpose(self, rng, shape):
        m = Matrix.from_array(rng.standard_normal(shape))
        assert m.transpose().transpose() == m

    def test_shape_and_values(self):
        m = Matrix.from_rows([[1, 2, 3]])
        t = m.T
        assert t.shape == (3, 1)
        assert t.get(2, 0) == 3.0

    def test_transpose_is_a_copy(self, sample_matrix):
        t = sample_matrix.transpose()
        t.set(0, 1, 100.0)
        assert sample_matrix.get(1, 0) == 6.0

    def test_empty_rejected(self):
        with pytest.raises(InvalidDimensionError):
            Matrix().transpose()
