"""
Blocked Bunch-Kaufman step for symmetric indefinite matrices (?lasyf).

lasyf factors up to nb columns of an n x n symmetric matrix A, from the
trailing end when the upper triangle holds the data and from the leading
end when the lower triangle does:

    A = U*D*U'   (upper)      A = L*D*L'   (lower)

U (L) is a product of permutations and unit triangular blocks, D is block
diagonal with 1x1 and 2x2 blocks. Factored columns are staged in the
workspace W as W = U12*D (W = L21*D) before they are committed to A; after
the last column the untouched block A11 (A22) receives a single rank-kb
update, A11 := A11 - U12*W'.

Pivot choice at frontier k (alpha = (1 + sqrt(17))/8):

    absakk >= alpha*colmax                          1x1, no interchange
    absakk >= alpha*colmax*(colmax/rowmax)          1x1, no interchange
    |W(imax, imax)| >= alpha*rowmax                 1x1, swap k <-> imax
    otherwise                                       2x2, swap k-1 <-> imax

The kernel is written for the upper triangle. The lower triangle runs
the same code on reversed views (see _traversal.Traversal).
"""

from dataclasses import dataclass

import numpy as np
from mpmath import mpf
from numpy.typing import NDArray

from mplinalg.blas import copy, gemm, gemv, scal, swap
from mplinalg.core.compute.precision import bunch_kaufman_alpha
from mplinalg.sytrf._traversal import Traversal


@dataclass(frozen=True)
class LasyfResult:
    """
    Outcome of one lasyf call.

    Attributes:
        kb: Number of columns factored (may be less than nb)
        info: 0, or the 1-based column of an exactly-zero pivot. When
            several zero pivots occur, the lowest column number is kept.
    """
    kb: int
    info: int


def lasyf(
    uplo: str,
    n: int,
    nb: int,
    a: NDArray[np.object_],
    ipiv: NDArray[np.integer],
    w: NDArray[np.object_],
) -> LasyfResult:
    """
    Partially factor a symmetric matrix with Bunch-Kaufman pivoting.

    Args:
        uplo: 'U' to use (and overwrite) the upper triangle, 'L' the lower
        n: Order of A
        nb: Block size. When nb < n, kb is nb-1, or nb if the last pivot
            is 2x2; W always has room for the second column of that pivot.
        a: View with at least n rows and columns, overwritten in place
        ipiv: Integer array of length >= n; entries of factored columns
            receive 1-based pivot indices (negative pairs for 2x2 blocks)
        w: Scratch view with at least n rows and nb columns

    Returns:
        LasyfResult(kb, info)

    Notes:
        Dimensions are the caller's obligation and are not validated.
        A zero pivot column is not an error: it is reported through info,
        stored as a zero 1x1 block with ipiv = itself, and factorization
        continues.
    """
    if n <= 0 or nb <= 0:
        return LasyfResult(kb=0, info=0)

    one = mpf(1)
    alpha = bunch_kaufman_alpha()
    traversal = Traversal.for_uplo(uplo, n)
    A = traversal.view(a[:n, :n])
    W = traversal.view(w[:n, :nb])
    info = 0

    # k is the 0-based frontier, moving down from n-1 by 1 or 2.
    # kw is the column of W that holds column k of A.
    k = n - 1
    while True:
        kw = nb - n + k
        if (k <= n - nb and nb < n) or k < 0:
            break

        # Stage column k in W and apply the updates of columns k+1..n-1
        copy(k + 1, A[:, k], 1, W[:, kw], 1)
        if k < n - 1:
            gemv('N', k + 1, n - k - 1, -one, A[:, k + 1:], W[k, kw + 1:], 1,
                 one, W[:, kw], 1)

        kstep = 1
        absakk = abs(W[k, kw])
        if k > 0:
            imax = traversal.argmax_abs(W[:, kw], k)
            colmax = abs(W[imax, kw])
        else:
            imax = k
            colmax = mpf(0)

        if max(absakk, colmax) == 0:
            # Column k is zero: record it, commit the (zero) updated column
            # as a trivial 1x1 pivot and move on
            column = traversal.column(k)
            info = column if info == 0 else min(info, column)
            kp = k
            copy(k + 1, W[:, kw], 1, A[:, k], 1)
        else:
            if absakk >= alpha * colmax:
                kp = k
            else:
                # Stage column imax in W column kw-1: the part above the
                # diagonal comes from column imax, the rest from row imax
                copy(imax + 1, A[:, imax], 1, W[:, kw - 1], 1)
                copy(k - imax, A[imax, imax + 1:], 1, W[imax + 1:, kw - 1], 1)
                if k < n - 1:
                    gemv('N', k + 1, n - k - 1, -one, A[:, k + 1:], W[imax, kw + 1:], 1,
                         one, W[:, kw - 1], 1)

                # Largest off-diagonal magnitude in row imax
                jmax = imax + 1 + traversal.argmax_abs(W[imax + 1:, kw - 1], k - imax)
                rowmax = abs(W[jmax, kw - 1])
                if imax > 0:
                    jmax = traversal.argmax_abs(W[:, kw - 1], imax)
                    rowmax = max(rowmax, abs(W[jmax, kw - 1]))

                if absakk >= alpha * colmax * (colmax / rowmax):
                    kp = k
                elif abs(W[imax, kw - 1]) >= alpha * rowmax:
                    kp = imax
                    copy(k + 1, W[:, kw - 1], 1, W[:, kw], 1)
                else:
                    kp = imax
                    kstep = 2

            kk = k - kstep + 1
            kkw = nb - n + kk

            if kp != kk:
                # Move the non-updated column kk to column kp, then swap
                # rows kk and kp in the trailing columns of A and W
                A[kp, k] = A[kk, k]
                copy(k - 1 - kp, A[kp + 1:, kk], 1, A[kp, kp + 1:], 1)
                copy(kp + 1, A[:, kk], 1, A[:, kp], 1)
                swap(n - kk, A[kk, kk:], 1, A[kp, kk:], 1)
                swap(n - kk, W[kk, kkw:], 1, W[kp, kkw:], 1)

            if kstep == 1:
                # W(k) = U(k)*D(k): store U(k) in column k of A
                copy(k + 1, W[:, kw], 1, A[:, k], 1)
                r1 = one / A[k, k]
                scal(k, r1, A[:, k], 1)
            else:
                # (W(k-1) W(k)) = (U(k-1) U(k))*D(k), solved through the
                # off-diagonal entry of D(k) instead of inverting D(k)
                if k > 1:
                    d21 = W[k - 1, kw]
                    d11 = W[k, kw] / d21
                    d22 = W[k - 1, kw - 1] / d21
                    t = one / (d11 * d22 - one)
                    d21 = t / d21
                    w_prev = W[:k - 1, kw - 1]
                    w_curr = W[:k - 1, kw]
                    A[:k - 1, k - 1] = (w_prev * d11 - w_curr) * d21
                    A[:k - 1, k] = (w_curr * d22 - w_prev) * d21

                A[k - 1, k - 1] = W[k - 1, kw - 1]
                A[k - 1, k] = W[k - 1, kw]
                A[k, k] = W[k, kw]

        traversal.store_pivot(ipiv, k, kp, kstep)
        k -= kstep

    # A11 := A11 - U12*W', in panels of nb columns: gemv down each column
    # of the diagonal block, one gemm for the rectangle above it
    for j in range((k // nb) * nb, -1, -nb):
        jb = min(nb, k - j + 1)
        for jj in range(j, j + jb):
            gemv('N', jj - j + 1, n - k - 1, -one, A[j:, k + 1:], W[jj, kw + 1:], 1,
                 one, A[j:, jj], 1)
        gemm('N', 'T', j, jb, n - k - 1, -one, A[:, k + 1:], W[j:, kw + 1:],
             one, A[:, j:])

    # Put U12 in standard form by partially undoing the interchanges
    # in the factored columns
    j = k + 1
    while j < n:
        jj = j
        jp, two_by_two = traversal.load_pivot(ipiv, j)
        if two_by_two:
            j += 1
        j += 1
        if jp != jj and j < n:
            swap(n - j, A[jp, j:], 1, A[jj, j:], 1)

    return LasyfResult(kb=n - k - 1, info=info)
