"""Order-preserving data-parallel map over a fixed-size thread pool."""

import os
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, TypeVar

from babelfile import config

T = TypeVar("T")
R = TypeVar("R")


def default_workers() -> int:
    """Worker count from ``BABELFILE_WORKERS``, else the CPU count."""
    raw = os.getenv(config.WORKERS_ENV, "").strip()
    if not raw:
        return os.cpu_count() or 1
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            f"{config.WORKERS_ENV} must be an integer, got {raw!r}"
        ) from None


def resolve_workers(workers: Optional[int] = None) -> int:
    """Return the worker count to use, falling back to the configured default."""
    if workers is None:
        workers = default_workers()
    if workers < 1:
        raise ValueError(f"Worker count must be positive, got {workers}")
    return workers


def parallel_map(
    func: Callable[[T], R], items: Iterable[T], workers: Optional[int] = None
) -> List[R]:
    """
    Apply ``func`` to every item and return the results in input order.

    The first exception raised by any unit propagates to the caller once the
    pool has drained; no partial result list is returned.
    """
    items = list(items)
    workers = resolve_workers(workers)

    if workers == 1 or len(items) <= 1:
        return [func(item) for item in items]

    with ThreadPoolExecutor(max_workers=min(workers, len(items))) as executor:
        # Executor.map yields in submission order regardless of completion order
        return list(executor.map(func, items))


def split_evenly(length: int, parts: int, align: int = 1) -> List[range]:
    """Split ``range(length)`` into at most ``parts`` contiguous slices.

    Every slice boundary except the end is a multiple of ``align``.
    """
    if length <= 0:
        return []
    step = -(-length // parts)
    step += (-step) % align
    return [range(start, min(start + step, length)) for start in range(0, length, step)]
