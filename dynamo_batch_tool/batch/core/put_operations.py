"""
Bulk put operations.

Any error raised by the backend call fails a whole chunk. By default that chunk is logged and
dropped without retry and the operation carries on (ChunkFailurePolicy.LOG_AND_DROP);
ChunkFailurePolicy.RAISE propagates the error instead. Unprocessed items
reported by a successful call are always retried.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import time
from collections import deque
from collections.abc import Callable
from typing import Any

from ..constants import BATCH_WRITE_LIMIT
from ..logging_config import get_logger
from ..models import BatchPutRequest, BatchWriteResult, ChunkFailurePolicy
from ..utils import preview, require_single_table
from .backend import BatchBackend, ProgressObserver
from .backoff import BackoffConfig, BackoffPolicy, get_config
from .chunking import requeue, take_chunk

logger = get_logger(__name__)


class LoggingProgressObserver:
    """Progress observer that logs the pending count at INFO level."""

    def __init__(self, table: str):
        """
        Initialize the observer.

        Args:
            table: Table name used in log lines
        """
        self.table = table
        self.rounds = 0

    def on_round(self, pending: str) -> None:
        """
        Log one put round.

        Args:
            pending: Units still waiting after this round's chunk was taken
        """
        self.rounds += 1
        logger.info(f"Batch write to '{self.table}' round {self.rounds}: {pending} pending")


def batch_put_all(
    backend: BatchBackend,
    table: str,
    items: list[dict[str, Any]],
    progress: ProgressObserver | None = None,
    config: BackoffConfig | None = None,
    on_chunk_failure: ChunkFailurePolicy = ChunkFailurePolicy.LOG_AND_DROP,
    max_retry_rounds: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """
    Put all items into a table, splitting into chunks of BATCH_WRITE_LIMIT items.

    Args:
        backend: Batch backend
        table: Table name
        items: Items to put
        progress: Observer called once per round with the pending count
        config: Backoff tuning (defaults to the process-wide configuration)
        on_chunk_failure: What to do when the backend raises for a chunk
        max_retry_rounds: Consecutive rounds with unprocessed items allowed (None for unlimited)
        sleep: Wait function taking seconds

    Raises:
        UnsupportedMultiTableError: If the write request spans more than one table
        RetryRoundsExhaustedError: If max_retry_rounds is exceeded
        ConfigurationError: If config breaks the backoff invariants
        Exception: Whatever the backend raised, only with ChunkFailurePolicy.RAISE
    """
    logger.info(f"Starting batch write of {len(items)} items to '{table}'")

    request_items = {table: BatchPutRequest(table, items).put_units()}
    table = require_single_table(request_items, "batch write")

    pending: deque[dict[str, Any]] = deque(request_items[table])
    policy = BackoffPolicy(config or get_config(), sleep, max_retry_rounds)

    while pending:
        chunk = take_chunk(pending, BATCH_WRITE_LIMIT)

        if progress is not None:
            progress.on_round(str(len(pending)))

        response = _write_chunk(backend, table, chunk, on_chunk_failure)

        if response is not None and response.unprocessed_items:
            logger.debug(f"{len(response.unprocessed_items)} unprocessed items, retrying")
            requeue(pending, response.unprocessed_items)
            policy.failure()
        else:
            policy.success()

    logger.info(f"Batch write to '{table}' finished")


def _write_chunk(
    backend: BatchBackend,
    table: str,
    chunk: list[dict[str, Any]],
    on_chunk_failure: ChunkFailurePolicy,
) -> BatchWriteResult | None:
    """Write one chunk; returns None when the chunk failed and was dropped."""
    try:
        return backend.batch_write(table, chunk)
    except Exception as e:
        if on_chunk_failure is ChunkFailurePolicy.RAISE:
            raise
        failed_items = "\n".join(preview(unit) for unit in chunk)
        logger.warning(f"Not writing {failed_items}\n > failed with {e}")
        return None
