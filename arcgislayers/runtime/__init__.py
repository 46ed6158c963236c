"""Runtime layer: chunk planning and REST access."""

from .chunking import ChunkPlan, chunk_indices
from .rest import HTTPClient, arc_open

__all__ = [
    "ChunkPlan",
    "HTTPClient",
    "arc_open",
    "chunk_indices",
]
