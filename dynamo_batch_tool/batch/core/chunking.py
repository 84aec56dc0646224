"""
Chunking of pending request units into backend-sized sub-batches.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from collections import deque
from typing import Any


def take_chunk(queue: deque[Any], limit: int) -> list[Any]:
    """
    Remove and return the first min(len(queue), limit) units.

    Args:
        queue: Pending units, consumed from the left
        limit: Maximum chunk size

    Returns:
        Chunk in queue order (empty if the queue is empty)

    Raises:
        ValueError: If limit is not positive
    """
    if limit <= 0:
        raise ValueError(f"Chunk limit must be positive, got {limit}")
    return [queue.popleft() for _ in range(min(len(queue), limit))]


def requeue(queue: deque[Any], residual: list[Any]) -> None:
    """
    Put unprocessed units back at the head of the queue, keeping their order.

    Args:
        queue: Pending units
        residual: Units the backend reported as unprocessed
    """
    queue.extendleft(reversed(residual))
