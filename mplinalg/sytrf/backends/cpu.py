"""
CPU backend for the blocked Bunch-Kaufman factorization.

Runs lasyf on a private copy of the design matrix. Every arithmetic step
goes through the mpf BLAS primitives, so results carry the working
precision the design was built at.
"""

from typing import Any

import numpy as np

from mplinalg.core.compute.precision import precision_bits, zeros
from mplinalg.core.compute.timing import Timer
from mplinalg.core.result import Result
from mplinalg.core.validation import check_block_size
from mplinalg.sytrf.design import SymmetricDesign
from mplinalg.sytrf.lasyf import lasyf
from mplinalg.sytrf.solution import BlockFactorParams, pivot_blocks


class CPUBunchKaufmanBackend:
    """
    CPU backend for SymmetricDesign -> BlockFactorParams.

    One call performs one lasyf step of block_size columns. With
    the default block size (n) the whole matrix is factored.
    """

    @property
    def name(self) -> str:
        return 'cpu_bunch_kaufman'

    def solve(
        self,
        design: SymmetricDesign,
        *,
        block_size: int | None = None,
    ) -> Result[BlockFactorParams]:
        """
        Factor the design matrix.

        Args:
            design: Validated symmetric design
            block_size: Maximum number of columns to factor (None for n).
                Values above n behave as n.

        Returns:
            Result containing BlockFactorParams

        Raises:
            ValidationError: If block_size is negative or not an integer
        """
        n = design.n
        nb = n if block_size is None else check_block_size(block_size)
        nb = min(nb, n)

        timer = Timer()
        timer.start()

        with timer.section('allocate'):
            a = design.matrix.copy(order='F')
            ipiv = np.zeros(n, dtype=np.int64)
            w = zeros((n, max(nb, 1)))

        with timer.section('stage_and_pivot'):
            step = lasyf(design.uplo, n, nb, a, ipiv, w)

        timer.stop()

        blocks = pivot_blocks(ipiv, n, step.kb, design.uplo)
        n_2x2 = sum(1 for b in blocks if b.size == 2)

        info: dict[str, Any] = {
            'kb': step.kb,
            'info': step.info,
            'uplo': design.uplo,
            'block_size': nb,
            'n_1x1': len(blocks) - n_2x2,
            'n_2x2': n_2x2,
            'n_interchanges': sum(1 for b in blocks if b.swapped),
            'precision_bits': precision_bits(),
        }

        warnings_list = []
        if step.info > 0:
            warnings_list.append(
                f"Exactly-zero pivot in column {step.info}: D is singular"
            )
        if step.kb < n:
            warnings_list.append(
                f"Partial factorization: {step.kb} of {n} columns factored "
                f"(block_size={nb})"
            )

        params = BlockFactorParams(
            factor=a,
            ipiv=ipiv,
            kb=step.kb,
            info=step.info,
            uplo=design.uplo,
        )

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
