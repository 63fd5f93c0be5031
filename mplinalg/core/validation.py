"""
Input validation utilities for mplinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

The BLAS primitives and the factorization kernel do not call these on
their hot paths; dimension and leading-dimension obligations there belong
to the caller. The high-level entry points validate everything up front.
"""

from typing import Any, Literal

import mpmath
import numpy as np
from numpy.typing import ArrayLike, NDArray

from mplinalg.core.compute.precision import to_mpf_array
from mplinalg.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.object_]:
    """
    Validate and convert input to an mpf object array.

    Accepts numeric array-likes, and object arrays whose entries mpf can
    parse (mpf, int, float, decimal strings). The result is a fresh
    Fortran-ordered copy.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype object holding mpf values

    Raises:
        ValidationError: If input cannot be converted
    """
    try:
        source = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if source.dtype != object and not np.issubdtype(source.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {source.dtype}, expected numeric data"
        )
    if np.issubdtype(source.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex data is not supported")

    try:
        return to_mpf_array(source)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: entries are not real scalars: {e}") from e


def check_finite(array: NDArray[np.object_], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    n_nan = sum(1 for v in array.flat if mpmath.isnan(v))
    n_inf = sum(1 for v in array.flat if mpmath.isinf(v))
    if n_nan or n_inf:
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_square(array: NDArray[Any], name: str) -> None:
    """
    Verify array is a square matrix.

    Raises:
        DimensionError: If array is not 2D or not square
    """
    check_ndim(array, 2, name)
    rows, cols = array.shape
    if rows != cols:
        raise DimensionError(f"{name}: expected square matrix, got shape {array.shape}")


def check_symmetric(array: NDArray[np.object_], name: str) -> None:
    """
    Verify a square matrix equals its transpose exactly.

    Raises:
        ValidationError: If any mirrored pair differs
    """
    mismatch = np.argwhere(array != array.T)
    if len(mismatch) > 0:
        i, j = mismatch[0]
        raise ValidationError(
            f"{name}: not symmetric (first mismatch at ({i}, {j}))"
        )


def check_uplo(uplo: str) -> Literal['U', 'L']:
    """
    Normalize a triangle selector to 'U' or 'L'.

    Like reference LAPACK, only the first character matters and case is
    ignored ('upper', 'Lower', 'u' all work).

    Raises:
        ValidationError: If the selector names neither triangle
    """
    flag = str(uplo)[:1].upper()
    if flag not in ('U', 'L'):
        raise ValidationError(f"uplo: expected 'U' or 'L', got {uplo!r}")
    return flag  # type: ignore[return-value]


def check_trans(trans: str, name: str = 'trans') -> bool:
    """
    Parse a BLAS transpose flag.

    'N' means no transpose; 'T' and 'C' (conjugate transpose, identical for
    real data) mean transpose. First character only, case-insensitive.

    Returns:
        True if the operand is transposed

    Raises:
        ValidationError: If the flag is not one of N, T, C
    """
    flag = str(trans)[:1].upper()
    if flag == 'N':
        return False
    if flag in ('T', 'C'):
        return True
    raise ValidationError(f"{name}: expected 'N', 'T' or 'C', got {trans!r}")


def check_block_size(block_size: int, name: str = 'block_size') -> int:
    """
    Verify a block size is a non-negative integer.

    Raises:
        ValidationError: If block_size is negative or not an integer
    """
    if isinstance(block_size, bool) or not isinstance(block_size, (int, np.integer)):
        raise ValidationError(f"{name}: expected integer, got {type(block_size).__name__}")
    if block_size < 0:
        raise ValidationError(f"{name}: must be non-negative, got {block_size}")
    return int(block_size)


def check_leading_dimension(ld: int, rows: int, name: str) -> None:
    """
    Verify a leading dimension covers the row extent of a view.

    Raises:
        DimensionError: If ld < max(1, rows)
    """
    if ld < max(1, rows):
        raise DimensionError(f"{name}: must be >= max(1, {rows}), got {ld}")
