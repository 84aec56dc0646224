"""
Bulk get operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import time
from collections import deque
from collections.abc import Callable
from typing import Any

from ..constants import BATCH_GET_LIMIT
from ..logging_config import get_logger
from ..models import BatchGetRequest
from ..utils import require_single_table
from .backend import BatchBackend
from .backoff import BackoffConfig, BackoffPolicy, get_config
from .chunking import requeue, take_chunk

logger = get_logger(__name__)


def batch_get_all(
    backend: BatchBackend,
    request: BatchGetRequest,
    config: BackoffConfig | None = None,
    max_retry_rounds: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> list[dict[str, Any]]:
    """
    Get all keys in the request, splitting into chunks of BATCH_GET_LIMIT keys.

    Unprocessed keys are retried ahead of untried keys, with backoff between
    rounds. Backend errors are not caught.

    Args:
        backend: Batch backend
        request: Batch get request for a single table
        config: Backoff tuning (defaults to the process-wide configuration)
        max_retry_rounds: Consecutive rounds with unprocessed keys allowed (None for unlimited)
        sleep: Wait function taking seconds

    Returns:
        Retrieved records, in no particular order

    Raises:
        UnsupportedMultiTableError: If the request spans more than one table
        RetryRoundsExhaustedError: If max_retry_rounds is exceeded
        ConfigurationError: If config breaks the backoff invariants
        BackendCallError: If a backend call fails
    """
    if not request.request_items:
        logger.debug("No get items")
        return []

    table = require_single_table(request.request_items, "batch get")
    keys_and_options = request.request_items[table]

    if not keys_and_options.keys:
        logger.debug(f"No keys to get from '{table}'")
        return []

    logger.info(f"Starting batch get of {len(keys_and_options.keys)} keys from '{table}'")

    pending: deque[dict[str, Any]] = deque(keys_and_options.keys)
    policy = BackoffPolicy(config or get_config(), sleep, max_retry_rounds)
    results: list[dict[str, Any]] = []

    while pending:
        # Same options for every chunk, only the keys change
        chunk = take_chunk(pending, BATCH_GET_LIMIT)
        response = backend.batch_get(table, chunk, keys_and_options.options)

        results.extend(response.records)
        logger.debug(
            f"Got {len(response.records)} records, "
            f"{len(response.unprocessed_keys)} unprocessed, {len(pending)} pending"
        )

        if response.unprocessed_keys:
            requeue(pending, response.unprocessed_keys)
            policy.failure()
        else:
            policy.success()

    logger.info(f"Batch get from '{table}' returned {len(results)} records")
    return results
