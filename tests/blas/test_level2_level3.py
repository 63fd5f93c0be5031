"""
Tests for gemv and gemm against float64 numpy on integer-valued data,
where both are exact.
"""

import numpy as np
import pytest
from mpmath import mpf

from mplinalg.blas import column_major, gemm, gemv
from mplinalg.core.compute.precision import to_float_array, to_mpf_array
from mplinalg.core.exceptions import ValidationError


def int_matrix(rng, shape):
    return rng.integers(-4, 5, size=shape).astype(float)


# ═══════════════════════════════════════════════════════════════════════
# gemv
# ═══════════════════════════════════════════════════════════════════════


class TestGemv:

    def test_no_transpose(self, rng):
        A = int_matrix(rng, (4, 3))
        x = int_matrix(rng, 3)
        y = int_matrix(rng, 4)
        out = to_mpf_array(y)
        gemv('N', 4, 3, mpf(2), to_mpf_array(A), to_mpf_array(x), 1, mpf(-1), out, 1)
        np.testing.assert_array_equal(to_float_array(out), 2 * A @ x - y)

    def test_transpose(self, rng):
        A = int_matrix(rng, (4, 3))
        x = int_matrix(rng, 4)
        y = int_matrix(rng, 3)
        out = to_mpf_array(y)
        gemv('T', 4, 3, mpf(1), to_mpf_array(A), to_mpf_array(x), 1, mpf(3), out, 1)
        np.testing.assert_array_equal(to_float_array(out), A.T @ x + 3 * y)

    def test_conjugate_transpose_is_transpose(self, rng):
        A = to_mpf_array(int_matrix(rng, (3, 3)))
        x = to_mpf_array(int_matrix(rng, 3))
        y1 = to_mpf_array(np.zeros(3))
        y2 = to_mpf_array(np.zeros(3))
        gemv('T', 3, 3, mpf(1), A, x, 1, mpf(0), y1, 1)
        gemv('c', 3, 3, mpf(1), A, x, 1, mpf(0), y2, 1)
        assert list(y1) == list(y2)

    def test_beta_zero_overwrites_garbage(self, rng):
        A = int_matrix(rng, (3, 2))
        x = int_matrix(rng, 2)
        out = np.array([mpf('nan')] * 3, dtype=object)
        gemv('N', 3, 2, mpf(1), to_mpf_array(A), to_mpf_array(x), 1, mpf(0), out, 1)
        np.testing.assert_array_equal(to_float_array(out), A @ x)

    def test_alpha_zero_only_scales(self):
        out = to_mpf_array([1.0, 2.0])
        gemv('N', 2, 2, mpf(0), to_mpf_array(np.ones((2, 2))), to_mpf_array([1.0, 1.0]),
             1, mpf(3), out, 1)
        assert list(out) == [3, 6]

    def test_quick_return_when_empty(self):
        out = to_mpf_array([5.0])
        gemv('N', 1, 0, mpf(1), to_mpf_array(np.ones((1, 1))), to_mpf_array([1.0]),
             1, mpf(0), out, 1)
        assert out[0] == 5

    def test_negative_increments(self, rng):
        A = int_matrix(rng, (3, 3))
        x = int_matrix(rng, 3)
        out = to_mpf_array(np.zeros(3))
        gemv('N', 3, 3, mpf(1), to_mpf_array(A), to_mpf_array(x), -1, mpf(0), out, -1)
        np.testing.assert_array_equal(to_float_array(out)[::-1], A @ x[::-1])

    def test_strided_submatrix(self, rng):
        A = int_matrix(rng, (5, 5))
        a = to_mpf_array(A)
        x = to_mpf_array(np.ones(2))
        out = to_mpf_array(np.zeros(3))
        gemv('N', 3, 2, mpf(1), a[1:, 2:], x, 1, mpf(0), out, 1)
        np.testing.assert_array_equal(to_float_array(out), A[1:4, 2:4].sum(axis=1))

    def test_bad_flag(self):
        with pytest.raises(ValidationError, match="trans"):
            gemv('X', 1, 1, mpf(1), to_mpf_array(np.ones((1, 1))), to_mpf_array([1.0]),
                 1, mpf(0), to_mpf_array([0.0]), 1)

    def test_zero_increment(self):
        with pytest.raises(ValidationError, match="increments"):
            gemv('N', 1, 1, mpf(1), to_mpf_array(np.ones((1, 1))), to_mpf_array([1.0]),
                 0, mpf(0), to_mpf_array([0.0]), 1)


# ═══════════════════════════════════════════════════════════════════════
# gemm
# ═══════════════════════════════════════════════════════════════════════


class TestGemm:

    @pytest.mark.parametrize("transa", ['N', 'T'])
    @pytest.mark.parametrize("transb", ['N', 'T'])
    def test_all_transpose_combinations(self, rng, transa, transb):
        m, n, k = 3, 4, 2
        A = int_matrix(rng, (m, k) if transa == 'N' else (k, m))
        B = int_matrix(rng, (k, n) if transb == 'N' else (n, k))
        C = int_matrix(rng, (m, n))
        out = to_mpf_array(C)
        gemm(transa, transb, m, n, k, mpf(2), to_mpf_array(A), to_mpf_array(B), mpf(-1), out)
        opA = A if transa == 'N' else A.T
        opB = B if transb == 'N' else B.T
        np.testing.assert_array_equal(to_float_array(out), 2 * opA @ opB - C)

    @pytest.mark.parametrize("transa", ['N', 'T'])
    def test_beta_zero_overwrites_garbage(self, rng, transa):
        A = int_matrix(rng, (2, 2))
        B = int_matrix(rng, (2, 2))
        out = np.full((2, 2), mpf('nan'), dtype=object)
        gemm(transa, 'N', 2, 2, 2, mpf(1), to_mpf_array(A), to_mpf_array(B), mpf(0), out)
        opA = A if transa == 'N' else A.T
        np.testing.assert_array_equal(to_float_array(out), opA @ B)

    def test_empty_inner_dimension_scales(self):
        out = to_mpf_array(np.ones((2, 2)))
        gemm('N', 'N', 2, 2, 0, mpf(1), to_mpf_array(np.ones((2, 0))),
             to_mpf_array(np.ones((0, 2))), mpf(3), out)
        np.testing.assert_array_equal(to_float_array(out), 3 * np.ones((2, 2)))

    def test_quick_return(self):
        out = to_mpf_array(np.ones((2, 2)))
        gemm('N', 'N', 0, 2, 2, mpf(1), to_mpf_array(np.ones((2, 2))),
             to_mpf_array(np.ones((2, 2))), mpf(0), out)
        np.testing.assert_array_equal(to_float_array(out), np.ones((2, 2)))

    def test_only_leading_block_touched(self, rng):
        A = int_matrix(rng, (2, 2))
        B = int_matrix(rng, (2, 2))
        out = to_mpf_array(np.full((3, 3), 9.0))
        gemm('N', 'N', 2, 2, 2, mpf(1), to_mpf_array(A), to_mpf_array(B), mpf(0), out)
        result = to_float_array(out)
        np.testing.assert_array_equal(result[:2, :2], A @ B)
        assert (result[2, :] == 9).all() and (result[:, 2] == 9).all()

    def test_leading_dimension_buffer(self, rng):
        ld = 5
        A = int_matrix(rng, (3, 3))
        buffer = to_mpf_array(np.zeros(ld * 3))
        a = column_major(buffer, ld, 3, 3)
        a[...] = to_mpf_array(A)
        c = column_major(to_mpf_array(np.zeros(ld * 3)), ld, 3, 3)
        gemm('T', 'N', 3, 3, 3, mpf(1), a, a, mpf(0), c)
        np.testing.assert_array_equal(to_float_array(c), A.T @ A)

    def test_bad_flags(self):
        one = to_mpf_array(np.ones((1, 1)))
        with pytest.raises(ValidationError, match="transa"):
            gemm('Z', 'N', 1, 1, 1, mpf(1), one, one, mpf(0), one)
        with pytest.raises(ValidationError, match="transb"):
            gemm('N', 'Z', 1, 1, 1, mpf(1), one, one, mpf(0), one)
