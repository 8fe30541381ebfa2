"""Parallel associative summation over disjoint index ranges.

Each worker sums one contiguous slice with ``math.fsum`` and the partials
are combined with ``math.fsum`` in range order. Every index belongs to
exactly one range, so every value contributes exactly once. The input
is only read, so workers share it without locking.
"""

from __future__ import annotations

import concurrent.futures
import logging
import math
import os
from typing import List, Optional, Sequence, Tuple

from .config import DEFAULT_PARALLEL_THRESHOLD

logger = logging.getLogger("spacecurves.pipeline")


def default_worker_count() -> int:
    """Same default ThreadPoolExecutor picks when max_workers is None."""
    return min(32, (os.cpu_count() or 1) + 4)


def split_ranges(length: int, parts: int) -> List[Tuple[int, int]]:
    """Split ``range(length)`` into at most *parts* disjoint ``(start, stop)`` ranges.

    Ranges are contiguous, non-empty, ordered and together cover every index
    exactly once. Sizes differ by at most one.
    """
    if length <= 0:
        return []
    if parts < 1:
        raise ValueError("parts must be positive")

    parts = min(parts, length)
    base, extra = divmod(length, parts)

    ranges = []
    start = 0
    for i in range(parts):
        stop = start + base + (1 if i < extra else 0)
        ranges.append((start, stop))
        start = stop
    return ranges


def _partial_sum(values: Sequence[float], start: int, stop: int) -> float:
    return math.fsum(values[i] for i in range(start, stop))


def parallel_sum(
    values: Sequence[float],
    max_workers: Optional[int] = None,
    threshold: int = DEFAULT_PARALLEL_THRESHOLD,
) -> float:
    """Sum *values*, fanning out to a thread pool for large inputs.

    Args:
        values: Read-only sequence of finite floats.
        max_workers: Worker thread count. None uses the executor default.
        threshold: Inputs shorter than this are summed on the calling thread.

    Returns:
        The total, ``0.0`` for empty input.
    """
    if max_workers is not None and max_workers < 1:
        raise ValueError("max_workers must be positive")

    count = len(values)
    if count == 0:
        return 0.0

    workers = max_workers or default_worker_count()
    if count < threshold or workers == 1:
        return _partial_sum(values, 0, count)

    ranges = split_ranges(count, workers)
    logger.debug(f"Reducing {count} values across {len(ranges)} ranges")

    with concurrent.futures.ThreadPoolExecutor(max_workers=len(ranges)) as executor:
        futures = [executor.submit(_partial_sum, values, start, stop) for start, stop in ranges]
        partials = [future.result() for future in futures]

    return math.fsum(partials)


__all__ = ["parallel_sum", "split_ranges", "default_worker_count"]
