"""
Bulk executor bound to a backend and an explicit backoff configuration.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import time
from collections.abc import Callable
from typing import Any

from ..models import BatchGetRequest, ChunkFailurePolicy, ScanRequest
from .backend import BatchBackend, ProgressObserver
from .backoff import BackoffConfig, get_config
from .get_operations import batch_get_all
from .put_operations import batch_put_all
from .scan_operations import batch_scan_all


class BulkExecutor:
    """Runs bulk operations against one backend with fixed settings.

    Unlike the module-level functions, an executor does not see later
    configure() calls: its backoff configuration is fixed at construction.
    """

    def __init__(
        self,
        backend: BatchBackend,
        config: BackoffConfig | None = None,
        on_chunk_failure: ChunkFailurePolicy = ChunkFailurePolicy.LOG_AND_DROP,
        max_retry_rounds: int | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the executor.

        Args:
            backend: Batch backend
            config: Backoff tuning (defaults to the current process-wide configuration)
            on_chunk_failure: What a bulk put does when the backend raises for a chunk
            max_retry_rounds: Consecutive rounds with unprocessed entries allowed
            sleep: Wait function taking seconds
        """
        self.backend = backend
        self.config = (config or get_config()).validate()
        self.on_chunk_failure = on_chunk_failure
        self.max_retry_rounds = max_retry_rounds
        self._sleep = sleep

    def get_all(self, request: BatchGetRequest) -> list[dict[str, Any]]:
        """Get all keys in a single-table request."""
        return batch_get_all(
            self.backend,
            request,
            config=self.config,
            max_retry_rounds=self.max_retry_rounds,
            sleep=self._sleep,
        )

    def put_all(
        self,
        table: str,
        items: list[dict[str, Any]],
        progress: ProgressObserver | None = None,
    ) -> None:
        """Put all items into a table."""
        batch_put_all(
            self.backend,
            table,
            items,
            progress=progress,
            config=self.config,
            on_chunk_failure=self.on_chunk_failure,
            max_retry_rounds=self.max_retry_rounds,
            sleep=self._sleep,
        )

    def scan_all(self, request: ScanRequest) -> list[dict[str, Any]]:
        """Scan a table to exhaustion."""
        return batch_scan_all(self.backend, request)
