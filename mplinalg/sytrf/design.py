"""
SymmetricDesign: validated input for the symmetric indefinite factorization.

Wraps a square matrix converted to mpf at the current working precision,
together with the triangle that holds the meaningful data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray

from mplinalg.core.compute.precision import precision_bits
from mplinalg.core.validation import (
    check_array,
    check_finite,
    check_square,
    check_symmetric,
    check_uplo,
)


@dataclass(frozen=True)
class SymmetricDesign:
    """
    Design for the blocked Bunch-Kaufman factorization.

    Immutable after construction; the backend factors a copy of the matrix.

    Construction:
        SymmetricDesign.from_array(A)
        SymmetricDesign.from_array(A, uplo='U', require_symmetric=True)
    """
    _matrix: NDArray[np.object_]
    _n: int
    _uplo: Literal['U', 'L']
    _precision_bits: int

    @classmethod
    def from_array(
        cls,
        data: ArrayLike,
        *,
        uplo: str = 'L',
        require_symmetric: bool = False,
    ) -> SymmetricDesign:
        """
        Build SymmetricDesign from array-like data.

        Parameters
        ----------
        data : array-like
            Square matrix. Entries may be ints, floats, mpf values or
            decimal strings; they are converted at the current precision.
        uplo : str
            'U' or 'L': which triangle holds the data. The other triangle
            is carried along but never read.
        require_symmetric : bool
            If True, reject matrices that differ from their transpose.
        """
        flag = check_uplo(uplo)
        matrix = check_array(data, 'A')
        check_square(matrix, 'A')
        check_finite(matrix, 'A')
        if require_symmetric:
            check_symmetric(matrix, 'A')

        return cls(
            _matrix=matrix,
            _n=matrix.shape[0],
            _uplo=flag,
            _precision_bits=precision_bits(),
        )

    @property
    def matrix(self) -> NDArray[np.object_]:
        """Input matrix (n x n) of mpf values."""
        return self._matrix

    @property
    def n(self) -> int:
        """Order of the matrix."""
        return self._n

    @property
    def uplo(self) -> Literal['U', 'L']:
        """Triangle holding the data."""
        return self._uplo

    @property
    def precision_bits(self) -> int:
        """Working precision (bits) at which the entries were converted."""
        return self._precision_bits

    @property
    def metadata(self) -> dict[str, Any]:
        return {'n': self._n, 'uplo': self._uplo, 'precision_bits': self._precision_bits}

    def __repr__(self) -> str:
        return f"SymmetricDesign(n={self._n}, uplo={self._uplo!r}, prec={self._precision_bits})"
