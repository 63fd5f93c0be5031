"""
Tests for level-1 BLAS: dot, scal, swap, copy, iamax.

Integer-valued data keeps every sum exact, so parallel and sequential
paths can be compared for equality; random data is compared within the
reduction tolerance tier.
"""

import numpy as np
import pytest
from mpmath import mpf

from mplinalg.blas import copy, dot, iamax, scal, swap
from mplinalg.core.compute.precision import is_close, to_mpf_array
from mplinalg.core.compute.threads import temporary_thread_count
from mplinalg.core.compute.tolerances import REDUCTION


def mp_vector(values):
    return to_mpf_array(np.asarray(values, dtype=float))


# ═══════════════════════════════════════════════════════════════════════
# dot
# ═══════════════════════════════════════════════════════════════════════


class TestDot:

    def test_basic(self):
        x = mp_vector([1, 2, 3])
        y = mp_vector([4, 5, 6])
        assert dot(3, x, 1, y, 1) == 32

    @pytest.mark.parametrize("n", [0, -1])
    def test_non_positive_length_is_zero(self, n):
        result = dot(n, mp_vector([1]), 1, mp_vector([1]), 1)
        assert isinstance(result, mpf)
        assert result == 0

    @pytest.mark.parametrize("n_threads", [1, 2, 3, 8])
    def test_thread_count_does_not_change_exact_sum(self, rng, n_threads):
        x = mp_vector(rng.integers(-50, 50, 1000))
        y = mp_vector(rng.integers(-50, 50, 1000))
        expected = sum(int(a) * int(b) for a, b in zip(x, y))
        assert dot(1000, x, 1, y, 1, n_threads=n_threads) == expected

    def test_parallel_agrees_within_reduction_tolerance(self, rng, precision):
        n = 2000
        x = mp_vector(rng.standard_normal(n))
        y = mp_vector(rng.standard_normal(n))
        sequential = dot(n, x, 1, y, 1, n_threads=1)
        parallel = dot(n, x, 1, y, 1, n_threads=4)
        assert is_close(parallel, sequential, rtol=REDUCTION.rtol(n), atol=REDUCTION.atol(n))

    def test_default_thread_count_is_used(self, rng):
        x = mp_vector(rng.integers(-5, 5, 64))
        with temporary_thread_count(4):
            assert dot(64, x, 1, x, 1) == sum(int(v) ** 2 for v in x)

    def test_strided(self):
        x = mp_vector([1, 0, 2, 0, 3])
        y = mp_vector([1, 1, 1])
        assert dot(3, x, 2, y, 1) == 6

    def test_negative_increment_equals_reversed(self):
        x = mp_vector([1, 2, 3])
        y = mp_vector([10, 20, 30])
        assert dot(3, x, -1, y, 1) == dot(3, x[::-1].copy(), 1, y, 1) == 100
        assert dot(3, x, -1, y, -1) == dot(3, x, 1, y, 1)

    def test_negative_y_increment_equals_reversed_y(self, rng):
        x = mp_vector(rng.integers(-9, 9, 50))
        y = mp_vector(rng.integers(-9, 9, 50))
        assert dot(50, x, 1, y, -1) == dot(50, x, 1, y[::-1].copy(), 1)

    def test_uses_only_first_n(self):
        x = mp_vector([1, 1, 100])
        assert dot(2, x, 1, x, 1) == 2

    def test_worker_error_propagates(self):
        x = np.array([mpf(1)] * 8 + [None], dtype=object)
        y = mp_vector([1] * 9)
        with pytest.raises(TypeError):
            dot(9, x, 1, y, 1, n_threads=3)


# ═══════════════════════════════════════════════════════════════════════
# scal
# ═══════════════════════════════════════════════════════════════════════


class TestScal:

    def test_unit_stride(self):
        x = mp_vector([1, 2, 3])
        scal(3, mpf(2), x, 1)
        assert list(x) == [2, 4, 6]

    def test_strided_leaves_gaps(self):
        x = mp_vector([1, 1, 1, 1, 1])
        scal(3, mpf(-1), x, 2)
        assert list(x) == [-1, 1, -1, 1, -1]

    @pytest.mark.parametrize("n,incx", [(0, 1), (3, 0), (3, -1)])
    def test_no_op(self, n, incx):
        x = mp_vector([1, 2, 3])
        scal(n, mpf(5), x, incx)
        assert list(x) == [1, 2, 3]


# ═══════════════════════════════════════════════════════════════════════
# swap / copy
# ═══════════════════════════════════════════════════════════════════════


class TestSwapCopy:

    def test_swap(self):
        x = mp_vector([1, 2, 3])
        y = mp_vector([4, 5, 6])
        swap(3, x, 1, y, 1)
        assert list(x) == [4, 5, 6]
        assert list(y) == [1, 2, 3]

    def test_swap_opposite_directions(self):
        x = mp_vector([1, 2, 3])
        y = mp_vector([4, 5, 6])
        swap(3, x, 1, y, -1)
        assert list(x) == [6, 5, 4]
        assert list(y) == [3, 2, 1]

    def test_swap_rows_of_matrix(self):
        a = to_mpf_array(np.arange(9.0).reshape(3, 3))
        swap(3, a[0, :], 1, a[2, :], 1)
        assert list(a[0, :]) == [6, 7, 8]
        assert list(a[2, :]) == [0, 1, 2]

    def test_copy_strided(self):
        x = mp_vector([1, 2, 3])
        y = mp_vector([0, 0, 0, 0, 0])
        copy(3, x, 1, y, 2)
        assert list(y) == [1, 0, 2, 0, 3]

    def test_copy_negative_increment(self):
        x = mp_vector([1, 2, 3])
        y = mp_vector([0, 0, 0])
        copy(3, x, -1, y, 1)
        assert list(y) == [3, 2, 1]

    def test_copy_zero_length(self):
        y = mp_vector([7])
        copy(0, mp_vector([1]), 1, y, 1)
        assert y[0] == 7


# ═══════════════════════════════════════════════════════════════════════
# iamax
# ═══════════════════════════════════════════════════════════════════════


class TestIamax:

    def test_one_based_index_of_largest_magnitude(self):
        assert iamax(4, mp_vector([1, -9, 3, 2]), 1) == 2

    def test_ties_go_to_first(self):
        assert iamax(4, mp_vector([1, -5, 5, 2]), 1) == 2

    def test_strided_counts_walk_positions(self):
        x = mp_vector([1, 0, -7, 0, 7])
        assert iamax(3, x, 2) == 2

    @pytest.mark.parametrize("n,incx", [(0, 1), (-1, 1), (3, 0), (3, -1)])
    def test_degenerate_returns_zero(self, n, incx):
        assert iamax(n, mp_vector([1, 2, 3]), incx) == 0

    def test_single_element(self):
        assert iamax(1, mp_vector([0]), 1) == 1
