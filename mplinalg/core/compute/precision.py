"""
Working precision constants and utilities.

The scalar type is ``mpmath.mpf``. Its precision lives in the global
``mpmath.mp`` context, which every thread shares, so a precision set by the
caller also governs the worker threads of the parallel dot product.
"""

from typing import Any

import mpmath
import numpy as np
from mpmath import mp, mpf
from numpy.typing import ArrayLike, NDArray


# Decimal digits used by the test suite and examples
DEFAULT_DPS: int = 50


def working_precision(dps: int):
    """
    Context manager running a block at ``dps`` decimal digits.

    Thin wrapper over ``mpmath.workdps`` so callers need not import mpmath
    just to pick a precision.
    """
    return mpmath.workdps(dps)


def precision_bits() -> int:
    """Current working precision in bits."""
    return int(mp.prec)


def machine_epsilon() -> mpf:
    """
    Unit roundoff of the current working precision.

    Returns:
        2**(1 - prec) as an mpf
    """
    return mpf(2) ** (1 - mp.prec)


def bunch_kaufman_alpha() -> mpf:
    """
    Pivot threshold (1 + sqrt(17)) / 8 at the current precision.

    This value minimizes the element growth bound of Bunch-Kaufman
    pivoting and is not a tuning parameter.
    """
    return (1 + mpmath.sqrt(17)) / 8


def as_mpf(value: Any) -> mpf:
    """Convert one Python or numpy scalar (or decimal string) to mpf."""
    if isinstance(value, mpf):
        return value
    if isinstance(value, np.generic):
        value = value.item()
    return mpf(value)


_as_mpf_elementwise = np.frompyfunc(as_mpf, 1, 1)


def to_mpf_array(array: ArrayLike) -> NDArray[np.object_]:
    """
    Convert an array-like to a Fortran-ordered object array of mpf.

    Always returns a fresh array; the input is never aliased.
    """
    source = np.asarray(array)
    converted = np.empty(source.shape, dtype=object, order='F')
    if source.size:
        converted[...] = _as_mpf_elementwise(source)
    return converted


def zeros(shape: int | tuple[int, ...]) -> NDArray[np.object_]:
    """Fortran-ordered object array filled with mpf zeros."""
    out = np.empty(shape, dtype=object, order='F')
    out.fill(mpf(0))
    return out


def to_float_array(array: NDArray[np.object_]) -> NDArray[np.float64]:
    """Round an mpf object array to float64 (for display and plotting)."""
    return np.asarray(array, dtype=object).astype(np.float64)


def max_abs_diff(a: ArrayLike, b: ArrayLike) -> mpf:
    """
    Largest elementwise absolute difference, computed in working precision.

    Returns mpf(0) for empty inputs.
    """
    diff = np.abs(np.asarray(a, dtype=object) - np.asarray(b, dtype=object))
    if diff.size == 0:
        return mpf(0)
    return max(diff.flat)


def is_close(
    a: ArrayLike,
    b: ArrayLike,
    rtol: mpf | None = None,
    atol: mpf | None = None,
) -> bool:
    """
    Check if values are numerically close at the working precision.

    Uses the formula: max|a - b| <= atol + rtol * max|b|

    Args:
        a: First value(s)
        b: Reference value(s)
        rtol: Relative tolerance (default: 16 * machine epsilon)
        atol: Absolute tolerance (default: 16 * machine epsilon)

    Returns:
        True if every element satisfies the bound
    """
    eps = machine_epsilon()
    rtol = 16 * eps if rtol is None else rtol
    atol = 16 * eps if atol is None else atol
    b_arr = np.asarray(b, dtype=object)
    scale = max(np.abs(b_arr).flat) if b_arr.size else mpf(0)
    return bool(max_abs_diff(a, b) <= atol + rtol * scale)
