"""CLI entry point for dynamo-batch-tool.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import click

from dynamo_batch_tool.batch.commands.get_commands import get_all_command
from dynamo_batch_tool.batch.commands.put_commands import put_all_command
from dynamo_batch_tool.batch.commands.scan_commands import scan_all_command


@click.group()
@click.version_option(version="0.1.0")
def main() -> None:
    """A CLI for bulk DynamoDB reads, writes and scans beyond the per-request limits"""
    pass


@main.group("batch")
def batch() -> None:
    """Chunked batch operations with retry of unprocessed keys and items"""
    pass


# Register bulk commands
batch.add_command(get_all_command)
batch.add_command(put_all_command)
batch.add_command(scan_all_command)

if __name__ == "__main__":
    main()
