"""
Tolerance tiers for numerical validation.

Tolerances are expressed in units of the working precision's machine
epsilon rather than as fixed floats, so the same tier stays meaningful at
50 digits and at 500. A tier resolves to concrete ``mpf`` values only when
asked, under whatever precision is active at that moment.

Used by the test suite and by the factorization result accessors.
"""

from dataclasses import dataclass

from mpmath import mpf

from mplinalg.core.compute.precision import machine_epsilon


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification, in multiples of machine epsilon."""
    rtol_units: int
    atol_units: int
    name: str
    description: str

    def rtol(self, n: int = 1) -> mpf:
        """Relative tolerance for a problem of size ``n``."""
        return self.rtol_units * max(n, 1) * machine_epsilon()

    def atol(self, n: int = 1) -> mpf:
        """Absolute tolerance for a problem of size ``n``."""
        return self.atol_units * max(n, 1) * machine_epsilon()


# Copies, swaps and scalings: every element is one rounding or none
EXACT = ToleranceTier(
    rtol_units=1,
    atol_units=0,
    name='exact',
    description='elementwise operations, at most one rounding',
)

# Parallel sums: merge order of partial sums is unspecified
REDUCTION = ToleranceTier(
    rtol_units=4,
    atol_units=4,
    name='reduction',
    description='unordered partial-sum merge, drift in the last digits only',
)

# Blocked factorization, compared after reconstruction T*D*T'
FACTORIZATION = ToleranceTier(
    rtol_units=64,
    atol_units=64,
    name='factorization',
    description='Bunch-Kaufman growth bound, reconstruction residual',
)


def select_tolerance(operation: str) -> ToleranceTier:
    """Select the tolerance tier for a named operation."""
    if operation in ('copy', 'swap', 'scal'):
        return EXACT
    if operation in ('dot', 'gemv', 'gemm'):
        return REDUCTION
    if operation in ('lasyf', 'factorization', 'reconstruct'):
        return FACTORIZATION
    raise ValueError(f"Unknown operation for tolerance selection: {operation!r}")
