"""
Core infrastructure for mplinalg.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Precision, tolerances, threads, reduction, timing
"""

from mplinalg.core.protocols import Backend
from mplinalg.core.result import Result
from mplinalg.core.exceptions import (
    MPLinalgError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "MPLinalgError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
