"""
Bulk put commands.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from typing import TextIO

import click

from ..constants import ENV_BACKOFF_FACTOR, ENV_BACKOFF_INITIAL, ENV_BACKOFF_MAX, ENV_TABLE
from ..core.backoff import configure
from ..core.client import DynamoDBClient
from ..core.put_operations import LoggingProgressObserver, batch_put_all
from ..exceptions import BackendCallError, BatchToolError, RetryRoundsExhaustedError
from ..logging_config import get_logger, setup_logging
from ..models import ChunkFailurePolicy
from ..utils import (
    error_json,
    error_text,
    load_json_records,
    output_json,
    output_text,
    validate_table_name,
)

logger = get_logger(__name__)


@click.command("put-all")
@click.option("--table", required=True, envvar=ENV_TABLE, help="DynamoDB table name")
@click.option(
    "--items-file",
    "-f",
    type=click.File("r"),
    default="-",
    help="JSON array, object or JSON Lines file of items (default: stdin)",
)
@click.option(
    "--on-chunk-failure",
    type=click.Choice([policy.value for policy in ChunkFailurePolicy]),
    default=ChunkFailurePolicy.LOG_AND_DROP.value,
    help="Drop (and log) or abort when a chunk write fails (default: log-and-drop)",
)
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
    help="Give up after this many consecutive rounds with unprocessed items (default: unlimited)",
)
@click.option("--text", is_flag=True, help="Output as human-readable text")
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (-v INFO, -vv DEBUG, -vvv TRACE)",
)
@click.pass_context
def put_all_command(
    ctx: click.Context,
    table: str,
    items_file: TextIO,
    on_chunk_failure: str,
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
    """Put all items into a table.

    Reads items from a JSON array or JSON Lines file and writes them in
    chunks of 25. Unprocessed items are retried with exponential backoff.

    A chunk whose write call fails is logged and dropped, not retried.
    Use --on-chunk-failure raise to abort instead. Run with -v to see
    dropped chunks and per-round progress.

    Examples:

    \b
        # Put items from a file
        dynamo-batch-tool batch put-all --table users -f users.json -v

    \b
        # Abort on the first failing chunk
        dynamo-batch-tool batch put-all --table users -f users.json \\
            --on-chunk-failure raise

    \b
    Output Format:
        Returns JSON:
        {"table": "users", "items": 250, "status": "submitted"}
    """
    setup_logging(verbose)

    try:
        validate_table_name(table)
        configure(backoff_initial, backoff_max, backoff_factor)

        items = load_json_records(items_file)

        logger.info(f"Putting {len(items)} items into '{table}'")
        logger.debug(f"Region: {region}, On chunk failure: {on_chunk_failure}")

        client = DynamoDBClient(region, profile, endpoint_url)
        batch_put_all(
            client,
            table,
            items,
            progress=LoggingProgressObserver(table),
            on_chunk_failure=ChunkFailurePolicy(on_chunk_failure),
            max_retry_rounds=max_retry_rounds,
        )

        if text:
            output_text(f"✅ Submitted {len(items)} items to '{table}'")
        else:
            output_json({"table": table, "items": len(items), "status": "submitted"})

    except (BackendCallError, RetryRoundsExhaustedError) as e:
        if text:
            click.echo(error_text(str(e), "Check table exists and AWS credentials"), err=True)
        else:
            click.echo(error_json(str(e), "Check table and credentials", 3), err=True)
        ctx.exit(3)

    except (BatchToolError, ValueError) as e:
        if text:
            click.echo(error_text(str(e), "Check the items file and options"), err=True)
        else:
            click.echo(error_json(str(e), "Check the items file and options", 1), err=True)
        ctx.exit(1)
