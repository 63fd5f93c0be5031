"""
Worker thread configuration for parallel reductions.

The only parallel code path in mplinalg is the unit-stride dot product.
Its worker count is a process-wide setting, seeded from the
``MPLINALG_NUM_THREADS`` environment variable and otherwise from the CPU
count (capped at 8; mpf arithmetic holds the GIL, so more threads only add
scheduling overhead).
"""

import os
from contextlib import contextmanager
from threading import Lock
from typing import Iterator

ENV_NUM_THREADS = "MPLINALG_NUM_THREADS"
MAX_DEFAULT_THREADS = 8

_lock = Lock()


def _default_thread_count() -> int:
    hint = os.environ.get(ENV_NUM_THREADS, "").strip()
    if hint:
        try:
            value = int(hint)
        except ValueError:
            raise ValueError(
                f"{ENV_NUM_THREADS} must be a positive integer, got {hint!r}"
            ) from None
        if value <= 0:
            raise ValueError(
                f"{ENV_NUM_THREADS} must be a positive integer, got {value}"
            )
        return value
    return max(1, min(os.cpu_count() or 1, MAX_DEFAULT_THREADS))


_thread_count: int = _default_thread_count()


def configure_threads(threads: int) -> None:
    """Set the number of worker threads used by parallel reductions."""
    global _thread_count

    if threads <= 0:
        raise ValueError("thread count must be a positive integer")

    with _lock:
        _thread_count = int(threads)


def current_thread_count() -> int:
    """Return the configured worker thread count."""
    return _thread_count


def resolve_thread_count(threads: int | None) -> int:
    """Return ``threads`` if given and valid, else the configured count."""
    if threads is None:
        return current_thread_count()
    if threads <= 0:
        raise ValueError("thread count must be a positive integer")
    return int(threads)


@contextmanager
def temporary_thread_count(threads: int) -> Iterator[None]:
    """Temporarily override the worker thread count within the context."""
    target = int(threads)

    if target <= 0:
        raise ValueError("thread count must be a positive integer")

    previous = current_thread_count()
    if previous == target:
        yield
        return

    configure_threads(target)
    try:
        yield
    finally:
        configure_threads(previous)
