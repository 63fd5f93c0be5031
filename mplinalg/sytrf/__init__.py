"""
Blocked symmetric indefinite factorization (Bunch-Kaufman).

Public API:
    factor_block(data, ...) -> BlockFactorSolution
    lasyf(uplo, n, nb, a, ipiv, w) -> LasyfResult

factor_block() handles validation, conversion to mpf, workspace allocation
and result wrapping. lasyf() is the in-place kernel.

Example:
    >>> from mplinalg.sytrf import factor_block
    >>> sol = factor_block(A, uplo='U')
    >>> T, D = sol.unpack()
"""

from mplinalg.sytrf.design import SymmetricDesign
from mplinalg.sytrf.lasyf import LasyfResult, lasyf
from mplinalg.sytrf.solution import (
    BlockFactorParams,
    BlockFactorSolution,
    PivotBlock,
    pivot_blocks,
)
from mplinalg.sytrf.solvers import factor_block

__all__ = [
    "factor_block",
    "lasyf",
    "LasyfResult",
    "SymmetricDesign",
    "BlockFactorSolution",
    "BlockFactorParams",
    "PivotBlock",
    "pivot_blocks",
]
