"""Chunking layer for batched requests.

Architecture:
    - definitions.py: ChunkPlan structure
    - planners.py: chunk boundary computation
    - telemetry.py: structured logging
"""

from __future__ import annotations

from .definitions import ChunkPlan
from .planners import chunk_indices

__all__ = [
    "ChunkPlan",
    "chunk_indices",
]
