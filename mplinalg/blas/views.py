"""
Addressing helpers shared by the BLAS layer.

BLAS describes a vector as (n, x, inc) and a matrix as (pointer, ld). Here
vectors are 1-D numpy object arrays (or views) and matrices are 2-D views,
so a column-major matrix with leading dimension ``ld`` is just a numpy view
whose column stride is ``ld`` elements. This module is the one place that
translates between the two descriptions:

    walk          positions visited by an increment walk (any sign of inc)
    strided       the same walk as a writable view (inc != 0)
    column_major  2-D view over a flat buffer with an explicit ld
    one_based     0-based position -> 1-based index reported to callers
"""

import numpy as np
from numpy.typing import NDArray

from mplinalg.core.exceptions import DimensionError, ValidationError
from mplinalg.core.validation import check_leading_dimension


def walk(n: int, inc: int) -> NDArray[np.intp]:
    """
    0-based positions visited by a BLAS increment walk of length n.

    A negative increment starts at position (n-1)*|inc| and walks
    backward, so walking x with -inc is walking reverse(x) with +inc.
    An increment of zero revisits position 0 n times.
    """
    if n <= 0:
        return np.empty(0, dtype=np.intp)
    start = (n - 1) * -inc if inc < 0 else 0
    return start + inc * np.arange(n, dtype=np.intp)


def strided(x: NDArray, n: int, inc: int) -> NDArray:
    """
    View of the n elements of ``x`` visited with increment ``inc``.

    Writes through the returned view land in ``x``.

    Raises:
        ValidationError: If inc is zero (a view cannot repeat an element)
    """
    if inc == 0:
        raise ValidationError("increment must not be zero")
    if n <= 0:
        return x[:0]
    if inc > 0:
        return x[:(n - 1) * inc + 1:inc]
    return x[(n - 1) * -inc::inc]


def column_major(
    buffer: NDArray,
    ld: int,
    rows: int,
    cols: int,
    offset: int = 0,
) -> NDArray:
    """
    2-D view of a column-major matrix stored in a flat buffer.

    The buffer is read as whole columns of length ``ld``; the view starts
    at flat position ``offset`` (row ``offset % ld`` of column
    ``offset // ld``) and spans ``rows`` x ``cols``.

    Args:
        buffer: Contiguous 1-D array whose length is a multiple of ld
        ld: Leading dimension of the allocation
        rows: Row extent of the view
        cols: Column extent of the view
        offset: Flat position of the view's (0, 0) element

    Raises:
        DimensionError: If the view does not fit inside the buffer
    """
    if buffer.ndim != 1 or not buffer.flags['C_CONTIGUOUS']:
        raise DimensionError("buffer: expected a contiguous 1-D array")
    check_leading_dimension(ld, rows, 'ld')
    if buffer.size % ld:
        raise DimensionError(
            f"buffer: length {buffer.size} is not a whole number of columns of {ld}"
        )
    full = buffer.reshape((ld, buffer.size // ld), order='F')
    col0, row0 = divmod(offset, ld)
    if row0 + rows > ld or col0 + cols > full.shape[1]:
        raise DimensionError(
            f"view {rows}x{cols} at offset {offset} exceeds buffer of "
            f"{ld}x{full.shape[1]}"
        )
    return full[row0:row0 + rows, col0:col0 + cols]


def one_based(position: int) -> int:
    """Convert a 0-based position to the 1-based index BLAS reports."""
    return position + 1
