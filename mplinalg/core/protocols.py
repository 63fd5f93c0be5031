"""
Core protocols for mplinalg.

These define structural interfaces that domain-specific implementations must
satisfy. We use Protocol (structural typing) rather than ABC (nominal typing)
so that alternative backends need not inherit from anything.
"""

from typing import Protocol, TypeVar, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a domain-specific design and produce
    a domain-specific parameter payload. Backends are stateless; all
    configuration is passed via the design or as keyword arguments.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_bunch_kaufman'.
        """
        ...

    def solve(self, design: D, **kwargs) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Domain-specific validated input container

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            ValidationError: If design or options are invalid for this backend
        """
        ...
