"""
Tests for the mplinalg exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via MPLinalgError)
    - Diagnostic attributes on SingularMatrixError
    - Default attribute values (None for optional attributes)
"""

import pytest

from mplinalg.core.exceptions import (
    DimensionError,
    MPLinalgError,
    NumericalError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via MPLinalgError."""

    def test_validation_error_is_mplinalg_error(self):
        with pytest.raises(MPLinalgError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_numerical_error_is_mplinalg_error(self):
        with pytest.raises(MPLinalgError):
            raise NumericalError("computation failed")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_matrix_error_is_not_validation_error(self):
        assert not isinstance(SingularMatrixError("singular"), ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# SingularMatrixError attributes
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.pivot_index is None

    def test_attributes_are_kept(self):
        err = SingularMatrixError("zero pivot", matrix_name="A", pivot_index=3)
        assert err.matrix_name == "A"
        assert err.pivot_index == 3
        assert str(err) == "zero pivot"
