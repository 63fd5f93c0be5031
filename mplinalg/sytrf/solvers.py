"""
Public entry point for the blocked symmetric indefinite factorization.

factor_block() validates its input, builds the design, runs the backend and
wraps the result. lasyf itself is re-exported for callers that manage their
own buffers.
"""

import warnings

from numpy.typing import ArrayLike

from mplinalg.sytrf.backends.cpu import CPUBunchKaufmanBackend
from mplinalg.sytrf.design import SymmetricDesign
from mplinalg.sytrf.lasyf import LasyfResult, lasyf
from mplinalg.sytrf.solution import BlockFactorSolution

__all__ = ["factor_block", "lasyf", "LasyfResult"]


def factor_block(
    data: ArrayLike,
    *,
    uplo: str = 'L',
    block_size: int | None = None,
) -> BlockFactorSolution:
    """
    Factor a symmetric matrix with Bunch-Kaufman diagonal pivoting.

    Computes as much of A = U*D*U' (uplo='U') or A = L*D*L' (uplo='L') as one
    blocked step of block_size columns allows. The input is not modified.

    Args:
        data: Square matrix (n x n). Only the uplo triangle is read.
        uplo: 'U' or 'L'
        block_size: Maximum number of columns to factor; None factors all
            n columns. When block_size < n, block_size-1 columns are
            factored, or block_size if the last pivot is 2x2.

    Returns:
        BlockFactorSolution with the factor, pivots, kb and info

    Raises:
        ValidationError: If inputs are invalid
        DimensionError: If data is not a square 2-D array

    Warns:
        RuntimeWarning: If an exactly-zero pivot was met (info > 0)

    Example:
        >>> from mplinalg.sytrf import factor_block
        >>> sol = factor_block([[4, 1], [1, -3]])
        >>> sol.kb, sol.info
        (2, 0)
        >>> print(sol.summary())
    """
    design = SymmetricDesign.from_array(data, uplo=uplo)

    backend = CPUBunchKaufmanBackend()
    result = backend.solve(design, block_size=block_size)

    solution = BlockFactorSolution(_result=result, _design=design)
    if solution.is_singular:
        warnings.warn(
            f"Bunch-Kaufman factorization met an exactly-zero pivot in column "
            f"{solution.info}; D is singular.",
            RuntimeWarning,
            stacklevel=2,
        )
    return solution
