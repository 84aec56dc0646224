"""
Interfaces consumed by the bulk operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from typing import Any, Protocol

from ..models import BatchGetResult, BatchWriteResult, ScanPage


class BatchBackend(Protocol):
    """Batch-capable key-value store.

    Implementations raise BackendCallError (or a subclass) when a call fails.
    """

    def batch_get(
        self, table: str, keys: list[dict[str, Any]], options: dict[str, Any]
    ) -> BatchGetResult:
        """Fetch up to BATCH_GET_LIMIT keys from one table."""
        ...

    def batch_write(self, table: str, put_units: list[dict[str, Any]]) -> BatchWriteResult:
        """Write up to BATCH_WRITE_LIMIT put requests to one table."""
        ...

    def scan(
        self,
        table: str,
        options: dict[str, Any],
        cursor: dict[str, Any] | None = None,
    ) -> ScanPage:
        """Read one page of a table scan, resuming after cursor."""
        ...


class ProgressObserver(Protocol):
    """Receives the pending count once per bulk put round."""

    def on_round(self, pending: str) -> None: ...
