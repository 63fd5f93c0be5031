"""
Level-3 BLAS: matrix-matrix primitives on mpf object arrays.

Same addressing convention as level 2: every operand is a 2-D view and
only the block implied by (m, n, k) and the transpose flags is touched.
"""

from typing import Any

import numpy as np
from mpmath import mpf
from numpy.typing import NDArray

from mplinalg.core.validation import check_trans


def gemm(
    transa: str,
    transb: str,
    m: int,
    n: int,
    k: int,
    alpha: Any,
    a: NDArray[np.object_],
    b: NDArray[np.object_],
    beta: Any,
    c: NDArray[np.object_],
) -> None:
    """
    C := alpha*op(A)*op(B) + beta*C.

    Args:
        transa, transb: 'N', 'T' or 'C' for each operand
        m, n: Shape of C (and rows of op(A), columns of op(B))
        k: Inner dimension
        alpha, beta: Scalars
        a: m x k view ('N') or k x m view ('T')
        b: k x n view ('N') or n x k view ('T')
        c: m x n view, updated in place

    Notes:
        With beta == 0, C is overwritten without reading its old contents.
    """
    trans_a = check_trans(transa, 'transa')
    trans_b = check_trans(transb, 'transb')

    if m <= 0 or n <= 0 or ((alpha == 0 or k <= 0) and beta == 1):
        return

    target = c[:m, :n]
    if alpha == 0 or k <= 0:
        if beta == 0:
            target.fill(mpf(0))
        else:
            target[...] = target * beta
        return

    def b_entry(l: int, j: int):
        return b[j, l] if trans_b else b[l, j]

    if not trans_a:
        # C(:,j) := beta*C(:,j) + sum_l alpha*op(B)(l,j) * A(:,l)
        for j in range(n):
            column = target[:, j]
            if beta == 0:
                column.fill(mpf(0))
            elif beta != 1:
                column[...] = column * beta
            for l in range(k):
                temp = alpha * b_entry(l, j)
                column[...] = column + a[:m, l] * temp
    else:
        # C(i,j) := alpha*dot(A(:,i), op(B)(:,j)) + beta*C(i,j)
        for j in range(n):
            for i in range(m):
                temp = mpf(0)
                for l in range(k):
                    temp += a[l, i] * b_entry(l, j)
                if beta == 0:
                    target[i, j] = alpha * temp
                else:
                    target[i, j] = alpha * temp + beta * target[i, j]
