"""
BLAS primitives over mpf object arrays.

Level 1 (vector-vector):  dot, scal, swap, copy, iamax
Level 2 (matrix-vector):  gemv
Level 3 (matrix-matrix):  gemm

Index results (iamax) are 1-based; everything else is addressed through
numpy views and 0-based positions. See mplinalg.blas.views.
"""

from mplinalg.blas.level1 import dot, scal, swap, copy, iamax
from mplinalg.blas.level2 import gemv
from mplinalg.blas.level3 import gemm
from mplinalg.blas.views import column_major, strided, walk

__all__ = [
    # Level 1
    "dot",
    "scal",
    "swap",
    "copy",
    "iamax",
    # Level 2
    "gemv",
    # Level 3
    "gemm",
    # Addressing
    "column_major",
    "strided",
    "walk",
]
