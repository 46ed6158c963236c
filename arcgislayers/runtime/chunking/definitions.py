"""Chunk plan data structure."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class ChunkPlan:
    """Contiguous 1-indexed ranges covering ``[1, n]``.

    Attributes:
        start: First index of each chunk (inclusive)
        end: Last index of each chunk (inclusive)
    """

    start: list[int]
    end: list[int]

    def __post_init__(self) -> None:
        """Validate that start and end line up."""
        if len(self.start) != len(self.end):
            raise ValueError("ChunkPlan start and end must have the same length")

    def __len__(self) -> int:
        return len(self.start)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(zip(self.start, self.end))
