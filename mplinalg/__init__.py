"""
mplinalg: arbitrary-precision dense linear algebra kernels.

BLAS primitives and the blocked Bunch-Kaufman step (?lasyf) over numpy
object arrays of mpmath mpf values.

Submodules:
    blas: dot, scal, swap, copy, iamax, gemv, gemm
    sytrf: Blocked symmetric indefinite factorization
    core: Exceptions, results, validation, precision and threads
"""

__version__ = "0.1.0"

from mplinalg import blas
from mplinalg import sytrf

__all__ = [
    "__version__",
    "blas",
    "sytrf",
]
