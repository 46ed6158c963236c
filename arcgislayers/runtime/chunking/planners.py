"""Chunk planning for batched requests.

Requests against a layer are limited to ``maxRecordCount`` rows, so a set of
``n`` rows (or object ids) is split into consecutive batches of at most ``m``.
"""

from __future__ import annotations

import math

from .definitions import ChunkPlan
from .telemetry import log_chunk_plan


def chunk_indices(n: int, m: int) -> ChunkPlan:
    """Determine the start and end positions of each chunk.

    Every chunk is exactly ``m`` wide except the last, whose end is clamped
    to ``n``.

    Args:
        n: Total number of rows
        m: Chunk size

    Returns:
        ChunkPlan with 1-indexed, inclusive ranges

    Raises:
        ValueError: If ``n`` or ``m`` is smaller than 1
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    if m < 1:
        raise ValueError(f"m must be >= 1, got {m}")

    n_chunks = math.ceil(n / m)
    starts = list(range(1, n + 1, m))
    ends = [i * m for i in range(1, n_chunks + 1)]
    ends[-1] = n

    log_chunk_plan(total_rows=n, chunk_size=m, total_chunks=n_chunks)

    return ChunkPlan(start=starts, end=ends)
