"""Structured logging for chunking operations."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_chunk_plan(*, total_rows: int, chunk_size: int, total_chunks: int) -> None:
    """Log chunk plan creation.

    Args:
        total_rows: Number of rows being split
        chunk_size: Maximum rows per chunk
        total_chunks: Number of chunks planned
    """
    logger.debug(
        "chunk_plan_created",
        extra={
            "total_rows": total_rows,
            "chunk_size": chunk_size,
            "total_chunks": total_chunks,
        },
    )
