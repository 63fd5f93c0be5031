"""
Exception hierarchy for mplinalg.

All exceptions inherit from MPLinalgError to allow catching any
library-specific error. The BLAS primitives and the factorization kernel
never raise for numerical conditions; these exceptions belong to the
validating layer above them.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class MPLinalgError(Exception):
    """Base exception for all mplinalg errors."""
    pass


class ValidationError(MPLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs (arrays, triangle flags, transpose
    flags, block sizes) fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions, e.g. a
    non-square matrix handed to a symmetric factorization.
    """
    pass


class NumericalError(MPLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when a caller asks for a nonsingular factor but the
    factorization met an exactly-zero pivot column.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: 1-based column of the zero pivot, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
