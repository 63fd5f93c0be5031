"""
Fork-join parallel summation.

The index range is partitioned into contiguous chunks, one per worker.
Each worker accumulates a private partial sum over its chunk in index
order with no shared state. Partial sums are then merged into a single
accumulator under a lock, in whatever order the workers finish.

Merge order is therefore unspecified. Addition of rounded numbers (floats
or mpf alike) is not associative, so two runs, or two thread counts, can
disagree in the last few digits of the result. Callers that need
bit-reproducible sums must use a sequential loop instead; this module
makes no determinism guarantee.
"""

from concurrent.futures import ThreadPoolExecutor
from threading import Lock
from typing import Callable, Generic, TypeVar

from mplinalg.core.compute.threads import resolve_thread_count

S = TypeVar('S')

_executors: dict[int, ThreadPoolExecutor] = {}
_executors_lock = Lock()


def partition(n: int, parts: int) -> list[tuple[int, int]]:
    """
    Split ``range(n)`` into at most ``parts`` contiguous, near-equal ranges.

    Returns:
        List of (start, stop) pairs covering 0..n-1 exactly once, in order.
        Empty when n <= 0.
    """
    if n <= 0:
        return []
    parts = max(1, min(parts, n))
    base, extra = divmod(n, parts)
    ranges = []
    start = 0
    for i in range(parts):
        stop = start + base + (1 if i < extra else 0)
        ranges.append((start, stop))
        start = stop
    return ranges


def shared_executor(n_threads: int) -> ThreadPoolExecutor:
    """Return the process-wide pool for ``n_threads`` workers, creating it once."""
    with _executors_lock:
        executor = _executors.get(n_threads)
        if executor is None:
            executor = ThreadPoolExecutor(
                max_workers=n_threads,
                thread_name_prefix='mplinalg-reduce',
            )
            _executors[n_threads] = executor
        return executor


class ForkJoinSum(Generic[S]):
    """
    Parallel sum of partial results over a partitioned index range.

    Usage:
        reducer = ForkJoinSum(n_threads=4)
        total = reducer(n, lambda start, stop: sum_of(start, stop), mpf(0))

    The partial callable must only read shared data. The result equals the
    sequential sum up to rounding differences caused by the unspecified
    merge order (see module docstring).
    """

    def __init__(self, n_threads: int | None = None):
        self.n_threads = resolve_thread_count(n_threads)

    def __call__(
        self,
        n: int,
        partial: Callable[[int, int], S],
        zero: S,
    ) -> S:
        ranges = partition(n, self.n_threads)
        if not ranges:
            return zero
        if len(ranges) == 1:
            start, stop = ranges[0]
            return zero + partial(start, stop)

        merge_lock = Lock()
        total = [zero]

        def work(start: int, stop: int) -> None:
            local = partial(start, stop)
            with merge_lock:
                total[0] = total[0] + local

        executor = shared_executor(self.n_threads)
        futures = [executor.submit(work, start, stop) for start, stop in ranges]
        for future in futures:
            future.result()
        return total[0]
