"""
Level-1 BLAS: vector-vector primitives on mpf object arrays.

Vectors follow the reference BLAS (n, x, inc) convention, with ``x`` a
1-D numpy array or view. All routines work in place on the arrays they
are given and return nothing, except dot and iamax.

Only the unit-stride path of dot runs in parallel; see
mplinalg.core.compute.reduce for what that means for reproducibility.
"""

from typing import Any

import numpy as np
from mpmath import mpf
from numpy.typing import NDArray

from mplinalg.blas.views import one_based, strided, walk
from mplinalg.core.compute.reduce import ForkJoinSum


def dot(
    n: int,
    x: NDArray[np.object_],
    incx: int,
    y: NDArray[np.object_],
    incy: int,
    *,
    n_threads: int | None = None,
) -> mpf:
    """
    Dot product of two strided vectors.

    With incx == incy == 1 the index range is split across worker threads
    and the per-thread partial sums are merged in completion order, so the
    last few digits may vary between runs and thread counts. Any other
    stride pair is summed sequentially in walk order.

    Args:
        n: Number of elements
        x, y: Vectors
        incx, incy: Increments (negative walks from the far end)
        n_threads: Worker count for the unit-stride path
            (default: the configured thread count)

    Returns:
        sum of x[i]*y[i]; mpf(0) when n <= 0
    """
    total = mpf(0)
    if n <= 0:
        return total

    if incx == 1 and incy == 1:
        def partial(start: int, stop: int) -> mpf:
            acc = mpf(0)
            for i in range(start, stop):
                acc += x[i] * y[i]
            return acc

        return ForkJoinSum(n_threads)(n, partial, total)

    for ix, iy in zip(walk(n, incx), walk(n, incy)):
        total += x[ix] * y[iy]
    return total


def scal(n: int, alpha: Any, x: NDArray[np.object_], incx: int) -> None:
    """x := alpha * x. No-op when n <= 0 or incx <= 0."""
    if n <= 0 or incx <= 0:
        return
    view = strided(x, n, incx)
    view[...] = view * alpha


def swap(
    n: int,
    x: NDArray[np.object_],
    incx: int,
    y: NDArray[np.object_],
    incy: int,
) -> None:
    """Exchange x and y elementwise."""
    if n <= 0:
        return
    ix = walk(n, incx)
    iy = walk(n, incy)
    saved = x[ix]
    x[ix] = y[iy]
    y[iy] = saved


def copy(
    n: int,
    x: NDArray[np.object_],
    incx: int,
    y: NDArray[np.object_],
    incy: int,
) -> None:
    """y := x, each side keeping its own stride."""
    if n <= 0:
        return
    y[walk(n, incy)] = x[walk(n, incx)]


def iamax(n: int, x: NDArray[np.object_], incx: int) -> int:
    """
    1-based index of the element with the largest absolute value.

    Ties go to the first occurrence in walk order. Returns 0 when n < 1
    or incx <= 0, as reference BLAS does.
    """
    if n < 1 or incx <= 0:
        return 0
    positions = walk(n, incx)
    best = 0
    largest = abs(x[positions[0]])
    for i in range(1, n):
        value = abs(x[positions[i]])
        if value > largest:
            best = i
            largest = value
    return one_based(best)
