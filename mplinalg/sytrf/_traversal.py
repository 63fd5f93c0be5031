"""
Traversal direction for the blocked Bunch-Kaufman kernel.

Factoring the lower triangle forward from column 1 is the same computation
as factoring the upper triangle backward from column n, once rows and
columns are renumbered i -> n-1-i. numpy expresses that renumbering as the
reversed views ``a[::-1, ::-1]`` and ``w[::-1, ::-1]``, so the kernel is
written once, for the upper triangle, and Traversal translates the few
things that leave the working coordinates: pivot indices written to ipiv,
the column reported in info, and the tie rule of iamax.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from mplinalg.blas.level1 import iamax
from mplinalg.blas.views import one_based


@dataclass(frozen=True)
class Traversal:
    """
    Maps working (upper-triangle) coordinates to the caller's.

    Attributes:
        n: Order of the matrix
        reverse: True when the caller's lower triangle is factored
    """
    n: int
    reverse: bool

    @classmethod
    def for_uplo(cls, uplo: str, n: int) -> 'Traversal':
        """Upper for 'U'/'u', lower for anything else (as LAPACK's lsame)."""
        return cls(n=n, reverse=str(uplo)[:1].upper() != 'U')

    def view(self, matrix: NDArray) -> NDArray:
        """Working view of a matrix whose block is already cut to size."""
        return matrix[::-1, ::-1] if self.reverse else matrix

    def position(self, k: int) -> int:
        """Caller's 0-based position of working position k (an involution)."""
        return self.n - 1 - k if self.reverse else k

    def column(self, k: int) -> int:
        """Caller's 1-based column number of working position k."""
        return one_based(self.position(k))

    def argmax_abs(self, x: NDArray, m: int) -> int:
        """
        Working position of the largest |x[i]|, i < m.

        Ties go to the first occurrence in the caller's order, which is the
        last one in working order when the traversal is reversed.
        """
        if not self.reverse:
            return iamax(m, x, 1) - 1
        return m - iamax(m, x[:m][::-1], 1)

    def store_pivot(self, ipiv: NDArray[np.integer], k: int, kp: int, kstep: int) -> None:
        """
        Record the pivot chosen at frontier k.

        1x1: ipiv(k) = kp. 2x2: ipiv(k) = ipiv(k-1) = -kp, where k-1 is the
        other working position of the block. Values are 1-based.
        """
        partner = self.column(kp)
        if kstep == 1:
            ipiv[self.position(k)] = partner
        else:
            ipiv[self.position(k)] = -partner
            ipiv[self.position(k - 1)] = -partner

    def load_pivot(self, ipiv: NDArray[np.integer], j: int) -> tuple[int, bool]:
        """
        Read the pivot stored at working position j.

        Returns:
            (working position of the interchange partner, True for a 2x2 block)
        """
        value = int(ipiv[self.position(j)])
        if value < 0:
            return self.position(-value - 1), True
        return self.position(value - 1), False
