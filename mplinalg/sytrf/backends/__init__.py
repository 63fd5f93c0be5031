"""
Factorization backends.

Available backends:
    CPUBunchKaufmanBackend: blocked Bunch-Kaufman step over mpf arrays
"""

from mplinalg.sytrf.backends.cpu import CPUBunchKaufmanBackend

__all__ = [
    "CPUBunchKaufmanBackend",
]
