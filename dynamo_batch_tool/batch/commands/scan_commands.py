"""
Scan commands.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from typing import Any

import click

from ..constants import ENV_TABLE
from ..core.client import DynamoDBClient
from ..core.scan_operations import batch_scan_all
from ..exceptions import BackendCallError, BatchToolError
from ..logging_config import get_logger, setup_logging
from ..models import ScanRequest
from ..utils import (
    error_json,
    error_text,
    output_json,
    output_text,
    parse_json_object,
    validate_table_name,
)

logger = get_logger(__name__)


@click.command("scan-all")
@click.option("--table", required=True, envvar=ENV_TABLE, help="DynamoDB table name")
@click.option("--filter", "filter_expression", help="FilterExpression")
@click.option("--projection", help="ProjectionExpression")
@click.option("--names", help="ExpressionAttributeNames as a JSON object")
@click.option("--values", help="ExpressionAttributeValues as a JSON object")
@click.option("--index-name", help="Scan a secondary index instead of the table")
@click.option("--consistent-read", is_flag=True, help="Use strongly consistent reads")
@click.option("--region", envvar="AWS_REGION", help="AWS region")
@click.option("--profile", envvar="AWS_PROFILE", help="AWS profile")
@click.option("--endpoint-url", envvar="AWS_ENDPOINT_URL", help="DynamoDB endpoint override")
@click.option("--text", is_flag=True, help="Output as human-readable text")
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (-v INFO, -vv DEBUG, -vvv TRACE)",
)
@click.pass_context
def scan_all_command(
    ctx: click.Context,
    table: str,
    filter_expression: str | None,
    projection: str | None,
    names: str | None,
    values: str | None,
    index_name: str | None,
    consistent_read: bool,
    region: str | None,
    profile: str | None,
    endpoint_url: str | None,
    text: bool,
    verbose: int,
) -> None:
    """Scan a whole table.

    Follows LastEvaluatedKey until the table is exhausted. Scans read
    every item, so prefer get-all when the keys are known.

    Examples:

    \b
        # Dump a table
        dynamo-batch-tool batch scan-all --table users > users.json

    \b
        # Filtered scan
        dynamo-batch-tool batch scan-all --table users \\
            --filter "#s = :active" --names '{"#s": "status"}' \\
            --values '{":active": "active"}'

    \b
    Output Format:
        Returns JSON array of records:
        [{"PK": "user:1", "name": "Alice"}, ...]
    """
    setup_logging(verbose)

    try:
        validate_table_name(table)

        options: dict[str, Any] = {}
        if filter_expression:
            options["FilterExpression"] = filter_expression
        if projection:
            options["ProjectionExpression"] = projection
        attribute_names = parse_json_object(names, "--names")
        if attribute_names:
            options["ExpressionAttributeNames"] = attribute_names
        attribute_values = parse_json_object(values, "--values")
        if attribute_values:
            options["ExpressionAttributeValues"] = attribute_values
        if index_name:
            options["IndexName"] = index_name
        if consistent_read:
            options["ConsistentRead"] = True

        logger.info(f"Scanning '{table}'")
        logger.debug(f"Region: {region}, Options: {options}")

        client = DynamoDBClient(region, profile, endpoint_url)
        records = batch_scan_all(client, ScanRequest(table, options))

        if text:
            output_text(f"✅ Scanned {len(records)} items from '{table}'")
        else:
            output_json(records)

    except BackendCallError as e:
        if text:
            click.echo(error_text(str(e), "Check table exists and AWS credentials"), err=True)
        else:
            click.echo(error_json(str(e), "Check table and credentials", 3), err=True)
        ctx.exit(3)

    except (BatchToolError, ValueError) as e:
        if text:
            click.echo(error_text(str(e), "Check the scan options"), err=True)
        else:
            click.echo(error_json(str(e), "Check the scan options", 1), err=True)
        ctx.exit(1)
