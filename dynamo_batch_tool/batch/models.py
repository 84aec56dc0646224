"""
Type models for batch operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .constants import FIELD_ITEM, FIELD_PUT_REQUEST


class ChunkFailurePolicy(Enum):
    """What a bulk put does when the backend raises for a whole chunk."""

    LOG_AND_DROP = "log-and-drop"
    RAISE = "raise"


@dataclass
class KeysAndOptions:
    """Keys to fetch from one table plus options applied to every sub-batch."""

    keys: list[dict[str, Any]]
    options: dict[str, Any] = field(default_factory=dict)


@dataclass
class BatchGetRequest:
    """Batch get request keyed by table name."""

    request_items: dict[str, KeysAndOptions] = field(default_factory=dict)

    @classmethod
    def for_table(
        cls, table: str, keys: list[dict[str, Any]], **options: Any
    ) -> "BatchGetRequest":
        """
        Build a request for a single table.

        Args:
            table: Table name
            keys: Keys to fetch
            **options: Per-table options (ConsistentRead, ProjectionExpression, ...)

        Returns:
            Batch get request
        """
        return cls({table: KeysAndOptions(list(keys), dict(options))})


@dataclass
class BatchPutRequest:
    """Batch put request for a single table."""

    table: str
    items: list[dict[str, Any]]

    def put_units(self) -> list[dict[str, Any]]:
        """Wrap every item as a BatchWriteItem put request."""
        return [{FIELD_PUT_REQUEST: {FIELD_ITEM: item}} for item in self.items]


@dataclass
class ScanRequest:
    """Scan request; the cursor is managed by the scan walker."""

    table: str
    options: dict[str, Any] = field(default_factory=dict)


@dataclass
class BatchGetResult:
    """Records returned by one backend batch get and the keys it skipped."""

    records: list[dict[str, Any]] = field(default_factory=list)
    unprocessed_keys: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class BatchWriteResult:
    """Put requests the backend did not process in one batch write."""

    unprocessed_items: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class ScanPage:
    """One page of scan results."""

    records: list[dict[str, Any]] = field(default_factory=list)
    next_cursor: dict[str, Any] | None = None
