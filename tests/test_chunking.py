"""Tests for chunking pending request units."""

from collections import deque

import pytest

from dynamo_batch_tool.batch.core.chunking import requeue, take_chunk


class TestTakeChunk:
    """Tests for take_chunk()."""

    def test_takes_limit_units_in_order(self):
        queue = deque(range(10))
        assert take_chunk(queue, 4) == [0, 1, 2, 3]
        assert list(queue) == [4, 5, 6, 7, 8, 9]

    def test_takes_everything_when_queue_is_shorter(self):
        queue = deque(["a", "b"])
        assert take_chunk(queue, 25) == ["a", "b"]
        assert not queue

    def test_empty_queue_gives_empty_chunk(self):
        assert take_chunk(deque(), 100) == []

    def test_non_positive_limit_rejected(self):
        with pytest.raises(ValueError):
            take_chunk(deque([1]), 0)


class TestRequeue:
    """Tests for requeue()."""

    def test_residual_goes_to_head_in_order(self):
        queue = deque([5, 6])
        requeue(queue, [1, 2, 3])
        assert list(queue) == [1, 2, 3, 5, 6]

    def test_empty_residual_is_noop(self):
        queue = deque([1])
        requeue(queue, [])
        assert list(queue) == [1]
