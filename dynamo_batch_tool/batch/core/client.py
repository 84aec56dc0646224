"""
DynamoDB batch backend with error handling.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..constants import (
    FIELD_EXCLUSIVE_START_KEY,
    FIELD_KEYS,
    FIELD_LAST_EVALUATED_KEY,
    THROTTLING_ERROR_CODES,
)
from ..exceptions import (
    AWSPermissionError,
    AWSThrottlingError,
    BackendCallError,
    TableNotFoundError,
)
from ..models import BatchGetResult, BatchWriteResult, ScanPage


class DynamoDBClient:
    """DynamoDB batch backend using the boto3 resource layer (plain Python values)."""

    def __init__(
        self,
        region: str | None = None,
        profile: str | None = None,
        endpoint_url: str | None = None,
    ):
        """
        Initialize DynamoDB client.

        Args:
            region: AWS region (optional, uses SDK default)
            profile: AWS profile (optional, uses SDK default)
            endpoint_url: Endpoint override, e.g. DynamoDB Local (optional)
        """
        session = boto3.Session(profile_name=profile, region_name=region)
        self.dynamodb = session.resource("dynamodb", endpoint_url=endpoint_url)

    def batch_get(
        self, table: str, keys: list[dict[str, Any]], options: dict[str, Any]
    ) -> BatchGetResult:
        """
        Get a chunk of keys from one table.

        Args:
            table: Table name
            keys: Keys to get (at most 100)
            options: Per-table options (ConsistentRead, ProjectionExpression, ...)

        Returns:
            Returned records and unprocessed keys

        Raises:
            BackendCallError: For DynamoDB, transport or serialization errors
        """
        try:
            response = self.dynamodb.batch_get_item(
                RequestItems={table: {**options, FIELD_KEYS: keys}}
            )
        except (ClientError, BotoCoreError) as e:
            self._handle_error(e, table)
            raise  # For type checker
        except (TypeError, ValueError) as e:
            raise BackendCallError(f"Cannot serialize request for '{table}': {e}") from e

        records = response.get("Responses", {}).get(table, [])
        unprocessed = response.get("UnprocessedKeys", {}).get(table, {}).get(FIELD_KEYS, [])
        return BatchGetResult(records=records, unprocessed_keys=unprocessed)

    def batch_write(self, table: str, put_units: list[dict[str, Any]]) -> BatchWriteResult:
        """
        Write a chunk of put requests to one table.

        Args:
            table: Table name
            put_units: Put requests (at most 25)

        Returns:
            Unprocessed put requests

        Raises:
            BackendCallError: For DynamoDB, transport or serialization errors
        """
        try:
            response = self.dynamodb.batch_write_item(RequestItems={table: put_units})
        except (ClientError, BotoCoreError) as e:
            self._handle_error(e, table)
            raise  # For type checker
        except (TypeError, ValueError) as e:
            raise BackendCallError(f"Cannot serialize request for '{table}': {e}") from e

        return BatchWriteResult(unprocessed_items=response.get("UnprocessedItems", {}).get(table, []))

    def scan(
        self,
        table: str,
        options: dict[str, Any],
        cursor: dict[str, Any] | None = None,
    ) -> ScanPage:
        """
        Scan one page of a table.

        Args:
            table: Table name
            options: Scan options (FilterExpression, ProjectionExpression, ...)
            cursor: LastEvaluatedKey of the previous page (None for the first page)

        Returns:
            Scanned records and the cursor for the next page

        Raises:
            BackendCallError: For DynamoDB, transport or serialization errors
        """
        kwargs: dict[str, Any] = dict(options)
        if cursor:
            kwargs[FIELD_EXCLUSIVE_START_KEY] = cursor

        try:
            response = self.dynamodb.Table(table).scan(**kwargs)
        except (ClientError, BotoCoreError) as e:
            self._handle_error(e, table)
            raise  # For type checker
        except (TypeError, ValueError) as e:
            raise BackendCallError(f"Cannot serialize request for '{table}': {e}") from e

        return ScanPage(
            records=response.get("Items", []),
            next_cursor=response.get(FIELD_LAST_EVALUATED_KEY),
        )

    def _handle_error(self, error: ClientError | BotoCoreError, table: str) -> None:
        """
        Convert boto3 errors to batch tool exceptions.

        Args:
            error: Error raised by boto3
            table: Table the request targeted

        Raises:
            TableNotFoundError: If table not found
            AWSThrottlingError: If throttled
            AWSPermissionError: If permission denied
            BackendCallError: For other errors
        """
        if isinstance(error, BotoCoreError):
            raise BackendCallError(f"DynamoDB transport error: {error}")

        code = error.response["Error"]["Code"]

        if code == "ResourceNotFoundException":
            raise TableNotFoundError(f"Table '{table}' not found")
        elif code in THROTTLING_ERROR_CODES:
            raise AWSThrottlingError(f"DynamoDB throttling on '{table}': {error}")
        elif code == "AccessDeniedException":
            raise AWSPermissionError(f"AWS permission denied on '{table}'")
        else:
            raise BackendCallError(f"DynamoDB error: {error}")
