"""Unit tests for chunk planning logic."""

from __future__ import annotations

import logging

import pytest

from arcgislayers.runtime.chunking import ChunkPlan, chunk_indices


class TestChunkIndices:
    """Test chunk_indices functionality."""

    def test_uneven_split_clamps_last_end(self):
        """Test the last chunk ends at n when n is not a multiple of m."""
        plan = chunk_indices(10, 3)

        assert plan.start == [1, 4, 7, 10]
        assert plan.end == [3, 6, 9, 10]

    def test_even_split(self):
        """Test n an exact multiple of m."""
        plan = chunk_indices(6000, 2000)

        assert plan.start == [1, 2001, 4001]
        assert plan.end == [2000, 4000, 6000]

    def test_single_chunk_when_m_exceeds_n(self):
        """Test a chunk size larger than n yields one chunk."""
        plan = chunk_indices(5, 2000)

        assert len(plan) == 1
        assert list(plan) == [(1, 5)]

    def test_single_row(self):
        plan = chunk_indices(1, 1)
        assert list(plan) == [(1, 1)]

    @pytest.mark.parametrize("n,m", [(1, 1), (7, 2), (100, 7), (2001, 2000), (12, 12), (13, 1)])
    def test_ranges_contiguous_and_exhaustive(self, n, m):
        """Test chunks cover [1, n] without gaps or overlaps."""
        plan = chunk_indices(n, m)

        assert plan.start[0] == 1
        assert plan.end[-1] == n
        assert len(plan) == -(-n // m)
        for (_, prev_end), (next_start, _) in zip(plan, list(plan)[1:]):
            assert next_start == prev_end + 1
        for start, end in list(plan)[:-1]:
            assert end - start + 1 == m

    @pytest.mark.parametrize("n,m", [(0, 10), (-1, 10), (10, 0), (10, -3)])
    def test_rejects_non_positive_inputs(self, n, m):
        with pytest.raises(ValueError):
            chunk_indices(n, m)

    def test_logs_plan(self, caplog):
        """Test plan creation is logged with structured fields."""
        with caplog.at_level(logging.DEBUG, logger="arcgislayers.runtime.chunking"):
            chunk_indices(10, 3)

        record = next(r for r in caplog.records if r.getMessage() == "chunk_plan_created")
        assert record.total_rows == 10
        assert record.chunk_size == 3
        assert record.total_chunks == 4


class TestChunkPlan:
    """Test ChunkPlan structure."""

    def test_mismatched_lengths_rejected(self):
        with pytest.raises(ValueError, match="same length"):
            ChunkPlan(start=[1, 4], end=[3])

    def test_frozen(self):
        plan = ChunkPlan(start=[1], end=[3])
        with pytest.raises(Exception):  # FrozenInstanceError
            plan.start = [2]
