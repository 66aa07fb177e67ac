"""Tests for the linear algebra engine."""

import numpy as np
import pytest

from scicalc.core.errors import InvalidArgument, NotSquare
from scicalc.core.linalg import (
    adjugate,
    cofactor_matrix,
    column_matrix,
    determinant,
    diagonal,
    eigenvalues_2x2,
    eigenvectors_2x2,
    hermitian,
    identity,
    inverse,
    is_orthogonal,
    is_square,
    is_symmetric,
    lower_triangular,
    matrices_equal,
    matrix_add,
    matrix_multiply,
    minor,
    outer_product,
    row_matrix,
    solve_linear_system,
    transpose,
    upper_triangular,
)
from scicalc.core.outcome import Status
from scicalc.utils.constants import MAX_COFACTOR_ORDER


class TestConstructors:
    def test_identity(self):
        assert np.array_equal(identity(3), np.eye(3))

    def test_identity_invalid(self):
        with pytest.raises(InvalidArgument):
            identity(0)

    def test_diagonal(self):
        assert np.array_equal(diagonal([1, 2]), [[1, 0], [0, 2]])

    def test_outer(self):
        assert np.array_equal(outer_product([1, 2], [3, 4, 5]), [[3, 4, 5], [6, 8, 10]])

    def test_row_and_column(self):
        assert row_matrix([1, 2, 3]).shape == (1, 3)
        assert column_matrix([1, 2, 3]).shape == (3, 1)


class TestArithmetic:
    def test_add(self):
        assert np.array_equal(matrix_add([[1, 2]], [[3, 4]]), [[4, 6]])

    def test_add_shape_mismatch(self):
        with pytest.raises(InvalidArgument):
            matrix_add([[1, 2]], [[1], [2]])

    def test_multiply(self):
        result = matrix_multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]])
        assert np.array_equal(result, [[19, 22], [43, 50]])

    def test_multiply_incompatible(self):
        with pytest.raises(InvalidArgument):
            matrix_multiply([[1, 2, 3]], [[1, 2, 3]])

    def test_ragged_rejected(self):
        with pytest.raises(InvalidArgument):
            transpose([[1, 2], [3]])

    def test_transpose_twice_is_identity(self):
        a = [[1, 2, 3], [4, 5, 6]]
        assert np.array_equal(transpose(transpose(a)), a)
        assert transpose(a).shape == (3, 2)

    def test_hermitian_real(self):
        assert np.array_equal(hermitian([[1, 2], [3, 4]]), [[1, 3], [2, 4]])

    def test_triangular(self):
        a = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
        assert np.array_equal(upper_triangular(a), [[1, 2, 3], [0, 5, 6], [0, 0, 9]])
        assert np.array_equal(lower_triangular(a), [[1, 0, 0], [4, 5, 0], [7, 8, 9]])


class TestPredicates:
    def test_is_square(self):
        assert is_square([[1, 2], [3, 4]])
        assert not is_square([[1, 2, 3]])
        assert not is_square([[1, 2], [3]])

    def test_matrices_equal_tolerance(self):
        assert matrices_equal([[1.0]], [[1.0 + 1e-12]])
        assert not matrices_equal([[1.0]], [[1.1]])
        assert not matrices_equal([[1.0, 2.0]], [[1.0], [2.0]])

    def test_symmetric(self):
        assert is_symmetric([[2, 1], [1, 3]])
        assert not is_symmetric([[2, 1], [0, 3]])

    def test_orthogonal(self):
        c, s = np.cos(0.3), np.sin(0.3)
        assert is_orthogonal([[c, -s], [s, c]])
        assert not is_orthogonal([[1, 1], [0, 1]])


class TestDeterminant:
    """Cofactor determinant, adjugate and inverse."""

    @pytest.mark.parametrize("n", [1, 2, 3, 5])
    def test_identity(self, n):
        assert determinant(identity(n)) == pytest.approx(1.0)

    def test_zero_row(self):
        assert determinant([[1, 2, 3], [0, 0, 0], [4, 5, 6]]) == 0.0

    def test_known_value(self):
        assert determinant([[6, 1, 1], [4, -2, 5], [2, 8, 7]]) == pytest.approx(-306.0)

    def test_not_square(self):
        with pytest.raises(NotSquare):
            determinant([[1, 2, 3], [4, 5, 6]])

    def test_order_cap(self):
        n = MAX_COFACTOR_ORDER + 1
        with pytest.raises(InvalidArgument):
            determinant(np.eye(n))

    def test_minor(self):
        assert np.array_equal(minor([[1, 2, 3], [4, 5, 6], [7, 8, 9]], 1, 1), [[1, 3], [7, 9]])

    def test_cofactor_and_adjugate(self):
        a = [[1, 2], [3, 4]]
        assert np.array_equal(cofactor_matrix(a), [[4, -3], [-2, 1]])
        assert np.array_equal(adjugate(a), [[4, -2], [-3, 1]])

    def test_inverse_product_is_identity(self):
        a = np.array([[4.0, 7.0, 2.0], [3.0, 6.0, 1.0], [2.0, 5.0, 3.0]])
        inv = inverse(a).unwrap()
        assert matrices_equal(a @ inv, np.eye(3), 1e-9)

    def test_singular_has_no_inverse(self):
        out = inverse([[1, 2], [2, 4]])
        assert out.status is Status.NO_RESULT
        assert "singular" in out.reason

    @pytest.mark.parametrize("scale", [1e-3, 1e3])
    def test_scaled_identity_inverts(self, scale):
        """det(1e-3·I₅) = 1e-15 is tiny but the matrix is well conditioned."""
        a = scale * np.eye(5)
        out = inverse(a)
        assert out.status is Status.OK
        assert np.allclose(out.value, np.eye(5) / scale)
        assert matrices_equal(a @ out.value, np.eye(5), 1e-9)

    def test_scaled_singular_stays_singular(self):
        out = inverse(1e6 * np.array([[1.0, 2.0], [2.0, 4.0]]))
        assert out.status is Status.NO_RESULT

    def test_zero_matrix_has_no_inverse(self):
        assert inverse(np.zeros((3, 3))).status is Status.NO_RESULT


class TestEigen2x2:
    def test_eigenvalues(self):
        l1, l2 = eigenvalues_2x2([[2, 1], [1, 2]]).unwrap()
        assert l1 == pytest.approx(3.0)
        assert l2 == pytest.approx(1.0)

    def test_eigenvectors_satisfy_definition(self):
        a = np.array([[4.0, 1.0], [2.0, 3.0]])
        values = eigenvalues_2x2(a).unwrap()
        vectors = eigenvectors_2x2(a).unwrap()
        for lam, v in zip(values, vectors):
            assert np.linalg.norm(v) == pytest.approx(1.0)
            assert np.allclose(a @ v, lam * v)

    def test_diagonal_matrix(self):
        vectors = eigenvectors_2x2([[5.0, 0.0], [0.0, 2.0]]).unwrap()
        assert np.allclose(np.abs(vectors[0]), [1.0, 0.0])
        assert np.allclose(np.abs(vectors[1]), [0.0, 1.0])

    def test_complex_unsupported(self):
        assert eigenvalues_2x2([[0, -1], [1, 0]]).status is Status.UNSUPPORTED

    def test_larger_matrix_unsupported(self):
        assert eigenvalues_2x2(np.eye(3)).status is Status.UNSUPPORTED

    def test_non_square_rejected(self):
        with pytest.raises(NotSquare):
            eigenvalues_2x2([[1, 2, 3], [4, 5, 6]])


class TestGaussianElimination:
    def test_solves_system(self):
        x = solve_linear_system([[2, 1, -1], [-3, -1, 2], [-2, 1, 2]], [8, -11, -3]).unwrap()
        assert x == pytest.approx([2.0, 3.0, -1.0])

    def test_zero_pivot_is_near_singular(self):
        # Solvable with pivoting, but elimination here does not pivot
        out = solve_linear_system([[0, 1], [1, 0]], [1, 2])
        assert out.status is Status.NO_RESULT
        assert "near-singular" in out.reason

    def test_rhs_length(self):
        with pytest.raises(InvalidArgument):
            solve_linear_system([[1, 0], [0, 1]], [1, 2, 3])
