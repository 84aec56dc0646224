"""
Constants for batch operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

# DynamoDB per-request limits
BATCH_GET_LIMIT = 100  # BatchGetItem keys per request
BATCH_WRITE_LIMIT = 25  # BatchWriteItem requests per request

# Backoff on unprocessed keys/items (in milliseconds)
DEFAULT_BACKOFF_INITIAL = 1000  # 1 second
DEFAULT_BACKOFF_MAX = 30000  # 30 seconds
DEFAULT_BACKOFF_FACTOR = 2  # Exponential growth factor

# Length of the JSON preview logged for each dropped put request
FAILED_ITEM_PREVIEW_LENGTH = 20

# Environment variables read by the CLI
ENV_BACKOFF_INITIAL = "BATCH_BACKOFF_INITIAL"
ENV_BACKOFF_MAX = "BATCH_BACKOFF_MAX"
ENV_BACKOFF_FACTOR = "BATCH_BACKOFF_FACTOR"
ENV_TABLE = "BATCH_TABLE"

# DynamoDB request/response field names
FIELD_KEYS = "Keys"
FIELD_PUT_REQUEST = "PutRequest"
FIELD_ITEM = "Item"
FIELD_EXCLUSIVE_START_KEY = "ExclusiveStartKey"
FIELD_LAST_EVALUATED_KEY = "LastEvaluatedKey"

# ClientError codes that indicate throttling
THROTTLING_ERROR_CODES = (
    "ProvisionedThroughputExceededException",
    "ThrottlingException",
    "RequestLimitExceeded",
)
