"""
Level-2 BLAS: matrix-vector primitives on mpf object arrays.

The matrix operand is a 2-D numpy view; only its leading m x n block is
read. A sub-rectangle of a larger column-major allocation is passed as a
slice of it, so no data is copied and the leading dimension is carried by
the view's strides.
"""

from typing import Any

import numpy as np
from mpmath import mpf
from numpy.typing import NDArray

from mplinalg.blas.views import strided
from mplinalg.core.exceptions import ValidationError
from mplinalg.core.validation import check_trans


def gemv(
    trans: str,
    m: int,
    n: int,
    alpha: Any,
    a: NDArray[np.object_],
    x: NDArray[np.object_],
    incx: int,
    beta: Any,
    y: NDArray[np.object_],
    incy: int,
) -> None:
    """
    y := alpha*op(A)*x + beta*y, with op(A) = A or A'.

    Args:
        trans: 'N' for A, 'T' or 'C' for A'
        m, n: Rows and columns of A (not of op(A))
        alpha, beta: Scalars
        a: Matrix view, at least m x n
        x: Vector of length n ('N') or m ('T')
        y: Vector of length m ('N') or n ('T'), updated in place
        incx, incy: Non-zero increments

    Notes:
        With beta == 0, y is overwritten without reading its old contents.
    """
    transposed = check_trans(trans)
    if incx == 0 or incy == 0:
        raise ValidationError("gemv: increments must not be zero")

    if m <= 0 or n <= 0 or (alpha == 0 and beta == 1):
        return

    len_x, len_y = (m, n) if transposed else (n, m)
    xv = strided(x, len_x, incx)
    yv = strided(y, len_y, incy)

    if beta != 1:
        if beta == 0:
            yv.fill(mpf(0))
        else:
            yv[...] = yv * beta
    if alpha == 0:
        return

    block = a[:m, :n]
    if not transposed:
        # y := alpha*A*x + y, one column of A at a time
        for j in range(n):
            temp = alpha * xv[j]
            yv[...] = yv + block[:, j] * temp
    else:
        # y := alpha*A'*x + y, one dot product per column of A
        for j in range(n):
            column = block[:, j]
            temp = mpf(0)
            for i in range(m):
                temp += column[i] * xv[i]
            yv[j] = yv[j] + alpha * temp
