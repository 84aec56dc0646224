"""
Scan operations that follow the continuation cursor to the end of the table.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from typing import Any

from ..logging_config import get_logger
from ..models import ScanRequest
from .backend import BatchBackend

logger = get_logger(__name__)


def batch_scan_all(backend: BatchBackend, request: ScanRequest) -> list[dict[str, Any]]:
    """
    Scan a table page by page until no cursor is returned.

    Errors are not retried; they propagate to the caller.

    Args:
        backend: Batch backend
        request: Scan request (table and scan options)

    Returns:
        All scanned records
    """
    logger.info(f"Getting all items for '{request.table}'")

    results: list[dict[str, Any]] = []
    cursor: dict[str, Any] | None = None
    pages = 0

    while True:
        page = backend.scan(request.table, request.options, cursor)
        results.extend(page.records)
        pages += 1
        logger.debug(f"Page {pages}: {len(page.records)} items")

        cursor = page.next_cursor
        if cursor is None:
            break

    logger.info(f"Total items: {len(results)} ({pages} pages)")
    return results
