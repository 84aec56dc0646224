"""
Bulk get commands.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from typing import Any, TextIO

import click

from ..constants import ENV_BACKOFF_FACTOR, ENV_BACKOFF_INITIAL, ENV_BACKOFF_MAX, ENV_TABLE
from ..core.backoff import configure
from ..core.client import DynamoDBClient
from ..core.get_operations import batch_get_all
from ..exceptions import BackendCallError, BatchToolError, RetryRoundsExhaustedError
from ..logging_config import get_logger, setup_logging
from ..models import BatchGetRequest
from ..utils import (
    error_json,
    error_text,
    load_json_records,
    output_json,
    output_text,
    parse_json_object,
    validate_table_name,
)

logger = get_logger(__name__)


@click.command("get-all")
@click.option("--table", required=True, envvar=ENV_TABLE, help="DynamoDB table name")
@click.option(
    "--keys-file",
    "-f",
    type=click.File("r"),
    default="-",
    help="JSON array, object or JSON Lines file of keys (default: stdin)",
)
@click.option("--consistent-read", is_flag=True, help="Use strongly consistent reads")
@click.option("--projection", help="ProjectionExpression applied to every chunk")
@click.option("--names", help="ExpressionAttributeNames as a JSON object")
@click.option("--region", envvar="AWS_REGION", help="AWS region")
@click.option("--profile", envvar="AWS_PROFILE", help="AWS profile")
@click.option("--endpoint-url", envvar="AWS_ENDPOINT_URL", help="DynamoDB endpoint override")
@click.option(
    "--backoff-initial", type=float, envvar=ENV_BACKOFF_INITIAL, help="Initial backoff (ms)"
)
@click.option("--backoff-max", type=float, envvar=ENV_BACKOFF_MAX, help="Maximum backoff (ms)")
@click.option(
    "--backoff-factor", type=float, envvar=ENV_BACKOFF_FACTOR, help="Backoff growth factor"
)
@click.option(
    "--max-retry-rounds",
    type=click.IntRange(min=0),
    help="Give up after this many consecutive rounds with unprocessed keys (default: unlimited)",
)
@click.option("--text", is_flag=True, help="Output as human-readable text")
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (-v INFO, -vv DEBUG, -vvv TRACE)",
)
@click.pass_context
def get_all_command(
    ctx: click.Context,
    table: str,
    keys_file: TextIO,
    consistent_read: bool,
    projection: str | None,
    names: str | None,
    region: str | None,
    profile: str | None,
    endpoint_url: str | None,
    backoff_initial: float | None,
    backoff_max: float | None,
    backoff_factor: float | None,
    max_retry_rounds: int | None,
    text: bool,
    verbose: int,
) -> None:
    """Get all keys from a table.

    Reads keys from a JSON array or JSON Lines file and fetches them in
    chunks of 100. Unprocessed keys are retried with exponential backoff.

    Examples:

    \b
        # Get keys listed in a file
        dynamo-batch-tool batch get-all --table users -f keys.json

    \b
        # Pipe keys from another command, strongly consistent
        jq -c '.[]' ids.json | dynamo-batch-tool batch get-all --table users --consistent-read

    \b
        # Only fetch some attributes
        dynamo-batch-tool batch get-all --table users -f keys.json \\
            --projection "#n, email" --names '{"#n": "name"}'

    \b
    Output Format:
        Returns JSON array of records:
        [{"PK": "user:1", "name": "Alice"}, ...]
    """
    setup_logging(verbose)

    try:
        validate_table_name(table)
        configure(backoff_initial, backoff_max, backoff_factor)

        keys = load_json_records(keys_file)
        options: dict[str, Any] = {}
        if consistent_read:
            options["ConsistentRead"] = True
        if projection:
            options["ProjectionExpression"] = projection
        attribute_names = parse_json_object(names, "--names")
        if attribute_names:
            options["ExpressionAttributeNames"] = attribute_names

        logger.info(f"Getting {len(keys)} keys from '{table}'")
        logger.debug(f"Region: {region}, Options: {options}")

        client = DynamoDBClient(region, profile, endpoint_url)
        records = batch_get_all(
            client,
            BatchGetRequest.for_table(table, keys, **options),
            max_retry_rounds=max_retry_rounds,
        )

        if text:
            output_text(f"✅ Retrieved {len(records)} of {len(keys)} keys from '{table}'")
        else:
            output_json(records)

    except (BackendCallError, RetryRoundsExhaustedError) as e:
        if text:
            click.echo(error_text(str(e), "Check table exists and AWS credentials"), err=True)
        else:
            click.echo(error_json(str(e), "Check table and credentials", 3), err=True)
        ctx.exit(3)

    except (BatchToolError, ValueError) as e:
        if text:
            click.echo(error_text(str(e), "Check the keys file and options"), err=True)
        else:
            click.echo(error_json(str(e), "Check the keys file and options", 1), err=True)
        ctx.exit(1)
