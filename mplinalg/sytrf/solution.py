"""
Symmetric indefinite factorization solution types.

Contains the parameter payload, the pivot-block bookkeeping shared with the
backend, and the user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple, TYPE_CHECKING

import numpy as np
from mpmath import mpf
from numpy.typing import NDArray

from mplinalg.blas import gemm, gemv
from mplinalg.core.compute.precision import max_abs_diff, zeros
from mplinalg.core.exceptions import SingularMatrixError, ValidationError
from mplinalg.core.result import Result

if TYPE_CHECKING:
    from mplinalg.sytrf.design import SymmetricDesign


class PivotBlock(NamedTuple):
    """
    One diagonal block of D.

    Attributes:
        start: 0-based first column of the block
        size: 1 or 2
        partner: 0-based row/column interchanged with the block
        swapped: True if an interchange actually took place
    """
    start: int
    size: int
    partner: int
    swapped: bool


def pivot_blocks(
    ipiv: NDArray[np.integer],
    n: int,
    kb: int,
    uplo: str,
) -> list[PivotBlock]:
    """
    Decode the factored part of ipiv into pivot blocks, in processing order.

    Lower: columns 0..kb-1, ascending. Upper: columns n-kb..n-1, descending.
    For a 2x2 block the interchanged row is the second one processed
    (start+1 for lower, start for upper).
    """
    blocks = []
    if uplo == 'L':
        j = 0
        while j < kb:
            value = int(ipiv[j])
            if value < 0:
                partner = -value - 1
                blocks.append(PivotBlock(j, 2, partner, partner != j + 1))
                j += 2
            else:
                blocks.append(PivotBlock(j, 1, value - 1, value - 1 != j))
                j += 1
    else:
        j = n - 1
        while j >= n - kb:
            value = int(ipiv[j])
            if value < 0:
                partner = -value - 1
                blocks.append(PivotBlock(j - 1, 2, partner, partner != j - 1))
                j -= 2
            else:
                blocks.append(PivotBlock(j, 1, value - 1, value - 1 != j))
                j -= 1
    return blocks


def symmetric_from_triangle(matrix: NDArray[np.object_], uplo: str) -> NDArray[np.object_]:
    """Full symmetric matrix built from one triangle of ``matrix``."""
    n = matrix.shape[0]
    full = zeros((n, n))
    for j in range(n):
        for i in range(j, n) if uplo == 'L' else range(j + 1):
            full[i, j] = matrix[i, j]
            full[j, i] = matrix[i, j]
    return full


@dataclass(frozen=True)
class BlockFactorParams:
    """
    Parameter payload for one blocked Bunch-Kaufman step.

    Attributes:
        factor: n x n matrix; the factored columns of the uplo triangle hold
            the multipliers and D, the rest holds the updated remainder
        ipiv: 1-based pivot indices (0 for columns not factored)
        kb: Number of columns factored
        info: 0, or the lowest column with an exactly-zero pivot
        uplo: Triangle that was factored
    """
    factor: NDArray[np.object_]
    ipiv: NDArray[np.int64]
    kb: int
    info: int
    uplo: str


@dataclass
class BlockFactorSolution:
    """
    User-facing factorization result.

    Wraps Result[BlockFactorParams] and provides accessors plus the
    explicit factors when the whole matrix was factored.
    """
    _result: Result[BlockFactorParams]
    _design: 'SymmetricDesign'

    @property
    def factor(self) -> NDArray[np.object_]:
        """Overwritten matrix in LAPACK ?sytrf storage."""
        return self._result.params.factor

    @property
    def ipiv(self) -> NDArray[np.int64]:
        """1-based pivot indices."""
        return self._result.params.ipiv

    @property
    def kb(self) -> int:
        """Number of columns factored."""
        return self._result.params.kb

    @property
    def info(self) -> int:
        """0, or the lowest column with an exactly-zero pivot."""
        return self._result.params.info

    @property
    def uplo(self) -> str:
        return self._result.params.uplo

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def is_singular(self) -> bool:
        """True if D has an exactly-zero 1x1 block."""
        return self.info > 0

    @property
    def is_complete(self) -> bool:
        """True if every column was factored."""
        return self.kb == self.n

    @property
    def diagnostics(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def pivot_blocks(self) -> list[PivotBlock]:
        """Diagonal blocks of D in processing order."""
        return pivot_blocks(self.ipiv, self.n, self.kb, self.uplo)

    def require_nonsingular(self) -> None:
        """
        Raise if the factorization met an exactly-zero pivot.

        Raises:
            SingularMatrixError: If info > 0
        """
        if self.info > 0:
            raise SingularMatrixError(
                f"Matrix is singular: exactly-zero pivot in column {self.info}",
                matrix_name='A',
                pivot_index=self.info,
            )

    def unpack(self) -> tuple[NDArray[np.object_], NDArray[np.object_]]:
        """
        Explicit factors T and D with A = T*D*T'.

        T = P(1)*L(1)*P(2)*L(2)*... (lower) or P(n)*U(n)*P(n-1)*U(n-1)*...
        (upper), the product form documented for LAPACK ?sytrf, so T carries
        the interchanges and is a permuted unit triangular matrix.

        Raises:
            ValidationError: If only part of the matrix was factored
        """
        if not self.is_complete:
            raise ValidationError(
                f"unpack requires a complete factorization, got kb={self.kb} of n={self.n}"
            )

        n = self.n
        one = mpf(1)
        a = self.factor
        lower = self.uplo == 'L'
        T = zeros((n, n))
        for i in range(n):
            T[i, i] = one
        D = zeros((n, n))

        for block in self.pivot_blocks():
            start, size = block.start, block.size
            kk = start + 1 if (lower and size == 2) else start
            if block.partner != kk:
                T[:, [kk, block.partner]] = T[:, [block.partner, kk]]

            for c in range(start, start + size):
                if lower:
                    rest = start + size
                    gemv('N', n, n - rest, one, T[:, rest:], a[rest:, c], 1, one, T[:, c], 1)
                else:
                    gemv('N', n, start, one, T[:, :start], a[:start, c], 1, one, T[:, c], 1)

            D[start, start] = a[start, start]
            if size == 2:
                off = a[start + 1, start] if lower else a[start, start + 1]
                D[start + 1, start] = off
                D[start, start + 1] = off
                D[start + 1, start + 1] = a[start + 1, start + 1]

        return T, D

    def reconstruct(self) -> NDArray[np.object_]:
        """T*D*T', which equals the input matrix up to rounding."""
        T, D = self.unpack()
        n = self.n
        one, zero = mpf(1), mpf(0)
        TD = zeros((n, n))
        gemm('N', 'N', n, n, n, one, T, D, zero, TD)
        product = zeros((n, n))
        gemm('N', 'T', n, n, n, one, TD, T, zero, product)
        return product

    def reconstruction_error(self) -> mpf:
        """max |T*D*T' - A| over the full symmetric input."""
        original = symmetric_from_triangle(self._design.matrix, self.uplo)
        return max_abs_diff(self.reconstruct(), original)

    def summary(self) -> str:
        """Human-readable summary."""
        blocks = self.pivot_blocks()
        n_2x2 = sum(1 for b in blocks if b.size == 2)
        n_swapped = sum(1 for b in blocks if b.swapped)
        lines = [
            "Blocked Bunch-Kaufman Factorization",
            "=" * 50,
            f"Order: {self.n}",
            f"Triangle: {'upper' if self.uplo == 'U' else 'lower'}",
            f"Columns factored: {self.kb}",
            f"Pivot blocks: {len(blocks) - n_2x2} 1x1, {n_2x2} 2x2",
            f"Interchanges: {n_swapped}",
            f"Info: {self.info}" + (" (singular)" if self.is_singular else ""),
            "-" * 50,
            f"Backend: {self.backend_name}",
        ]
        if self.timing:
            lines.append(f"Time: {self.timing['total_seconds']:.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"BlockFactorSolution(n={self.n}, uplo={self.uplo!r}, kb={self.kb}, info={self.info})"
