"""
Custom exceptions for batch operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""


class BatchToolError(Exception):
    """Base exception for batch operations."""

    pass


class UnsupportedMultiTableError(BatchToolError):
    """Batch request spans more than one table."""

    pass


class BackendCallError(BatchToolError):
    """The batch backend failed to execute a request."""

    pass


class AWSThrottlingError(BackendCallError):
    """DynamoDB throttling occurred."""

    pass


class AWSPermissionError(BackendCallError):
    """AWS permission denied."""

    pass


class TableNotFoundError(BackendCallError):
    """DynamoDB table does not exist."""

    pass


class RetryRoundsExhaustedError(BatchToolError):
    """Unprocessed keys/items remained after the configured number of retry rounds."""

    pass


class ConfigurationError(BatchToolError):
    """Invalid backoff configuration."""

    pass


class InvalidInputError(BatchToolError):
    """Input file could not be read or parsed."""

    pass
