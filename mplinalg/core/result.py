"""
Generic result container for mplinalg computations.

The Result class provides a standardized envelope that domain-specific
results use. This enables shared tooling for timing, diagnostics and
reproducibility while allowing domains to define their own payloads.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (kb, info code, pivot counts)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True); the payload arrays themselves are owned by
      the result and must not be mutated by callers
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for factorization computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (factor data, pivots, ...)
        info: Structured metadata (kb, info code, pivot statistics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=BlockFactorParams(factor=a, ipiv=ipiv, kb=4, info=0, uplo='L'),
        ...     info={'kb': 4, 'info': 0, 'uplo': 'L'},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_bunch_kaufman'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
