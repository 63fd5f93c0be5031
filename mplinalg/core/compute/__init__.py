"""
Shared compute infrastructure for mplinalg.

Submodules:
    precision: mpmath working precision and mpf array helpers
    tolerances: Precision-relative comparison tiers
    threads: Worker count configuration
    reduce: Fork-join partial-sum reduction on a thread pool
    timing: Execution timing utilities
"""

from mplinalg.core.compute.precision import (
    DEFAULT_DPS,
    machine_epsilon,
    precision_bits,
    to_mpf_array,
    working_precision,
)
from mplinalg.core.compute.reduce import ForkJoinSum, partition
from mplinalg.core.compute.threads import (
    configure_threads,
    current_thread_count,
    temporary_thread_count,
)
from mplinalg.core.compute.timing import Timer, timed

__all__ = [
    # Precision
    "DEFAULT_DPS",
    "machine_epsilon",
    "precision_bits",
    "to_mpf_array",
    "working_precision",
    # Threads
    "configure_threads",
    "current_thread_count",
    "temporary_thread_count",
    # Reduction
    "ForkJoinSum",
    "partition",
    # Timing
    "Timer",
    "timed",
]
