"""
Utility functions for batch operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import json
from decimal import Decimal
from typing import Any, TextIO

from .constants import FAILED_ITEM_PREVIEW_LENGTH
from .exceptions import InvalidInputError, UnsupportedMultiTableError


def _json_default(value: Any) -> Any:
    """Render values returned by the DynamoDB resource layer as JSON."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="replace")
    return str(value)


def to_json(data: Any) -> str:
    """
    Serialize data to JSON, handling DynamoDB Decimal and set values.

    Args:
        data: Data to serialize

    Returns:
        JSON string
    """
    return json.dumps(data, default=_json_default)


def output_json(data: Any, quiet: bool = False) -> None:
    """
    Output JSON to stdout.

    Args:
        data: Data to output as JSON
        quiet: If True, suppress output
    """
    if not quiet:
        print(to_json(data))


def output_text(message: str, quiet: bool = False) -> None:
    """
    Output text to stdout.

    Args:
        message: Message to output
        quiet: If True, suppress output
    """
    if not quiet:
        print(message)


def error_json(error: str, solution: str, exit_code: int) -> str:
    """
    Format error as JSON.

    Args:
        error: Error message
        solution: Solution suggestion
        exit_code: Exit code

    Returns:
        Error as a JSON string
    """
    return json.dumps({"error": error, "solution": solution, "exit_code": exit_code})


def error_text(error: str, solution: str) -> str:
    """
    Format error as human-readable text.

    Args:
        error: Error message
        solution: Solution suggestion

    Returns:
        Formatted error message
    """
    return f"❌ Error: {error}\n\n💡 Solution: {solution}"


def preview(unit: Any, length: int = FAILED_ITEM_PREVIEW_LENGTH) -> str:
    """Truncated JSON rendering of a request unit for log lines."""
    return to_json(unit)[:length]


def validate_table_name(table_name: str) -> bool:
    """
    Validate DynamoDB table name.

    Args:
        table_name: Table name to validate

    Returns:
        True if valid

    Raises:
        ValueError: If table name is invalid
    """
    if not table_name:
        raise ValueError("Table name cannot be empty")
    if len(table_name) < 3 or len(table_name) > 255:
        raise ValueError("Table name must be between 3 and 255 characters")
    if not all(c.isalnum() or c in "-_." for c in table_name):
        raise ValueError(
            "Table name can only contain alphanumeric characters, hyphens, underscores, and periods"
        )
    return True


def parse_json_object(raw: str | None, option_name: str) -> dict[str, Any] | None:
    """
    Parse a JSON object passed as a CLI option value.

    Numbers are parsed as Decimal because the DynamoDB resource layer rejects floats.

    Raises:
        InvalidInputError: If the value is not a JSON object
    """
    if raw is None:
        return None
    try:
        data = json.loads(raw, parse_float=Decimal)
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"Invalid JSON for {option_name}: {e}")
    if not isinstance(data, dict):
        raise InvalidInputError(f"{option_name} must be a JSON object")
    return data


def load_json_records(stream: TextIO) -> list[dict[str, Any]]:
    """
    Load keys or items from a JSON document or a JSON Lines stream.

    The whole input is parsed as one JSON document first: an array is a
    list of records and a single object is one record. Input that is not
    one document is read as JSON Lines.

    Args:
        stream: Open text stream (file or stdin)

    Returns:
        List of records, in input order

    Raises:
        InvalidInputError: If the input is not valid JSON or holds non-object records
    """
    content = stream.read().strip()
    if not content:
        return []

    try:
        document = json.loads(content, parse_float=Decimal)
    except json.JSONDecodeError:
        try:
            records = [
                json.loads(line, parse_float=Decimal)
                for line in content.splitlines()
                if line.strip()
            ]
        except json.JSONDecodeError as e:
            raise InvalidInputError(f"Invalid JSON input: {e}")
    else:
        if isinstance(document, dict):
            records = [document]
        elif isinstance(document, list):
            records = document
        else:
            raise InvalidInputError("JSON input must be an object or an array of objects")

    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise InvalidInputError(f"Record {index} is not a JSON object")

    return records  # type: ignore[no-any-return]


def require_single_table(request_items: dict[str, Any], operation: str) -> str:
    """
    Return the only table name of a request map.

    Args:
        request_items: Request map keyed by table name
        operation: Operation name for the error message

    Returns:
        Table name

    Raises:
        UnsupportedMultiTableError: If the map does not hold exactly one table
    """
    tables = list(request_items)
    if len(tables) != 1:
        raise UnsupportedMultiTableError(
            f"Only {operation} on a single table at a time is supported, "
            f"got {len(tables)} tables: {', '.join(tables)}"
        )
    return tables[0]
