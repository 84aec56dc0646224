"""Tests for the batch CLI commands."""

import json

import pytest
from click.testing import CliRunner
from fakes import FakeBackend

from dynamo_batch_tool.batch.commands import get_commands, put_commands, scan_commands
from dynamo_batch_tool.batch.core.backoff import get_config
from dynamo_batch_tool.batch.exceptions import TableNotFoundError
from dynamo_batch_tool.batch.models import ScanPage
from dynamo_batch_tool.cli import main


@pytest.fixture
def backend(monkeypatch):
    fake = FakeBackend(
        pages=[ScanPage([{"PK": "a", "n": 1}], {"PK": "a"}), ScanPage([{"PK": "b", "n": 2}])]
    )
    for module in (get_commands, put_commands, scan_commands):
        monkeypatch.setattr(module, "DynamoDBClient", lambda *args, **kwargs: fake)
    return fake


@pytest.fixture
def runner():
    return CliRunner()


class TestGetAllCommand:
    """Tests for 'batch get-all'."""

    def test_keys_from_stdin_json_lines(self, runner, backend):
        result = runner.invoke(
            main,
            ["batch", "get-all", "--table", "users"],
            input='{"PK": "a"}\n{"PK": "b"}\n',
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == [
            {"PK": "a", "found": True},
            {"PK": "b", "found": True},
        ]

    def test_options_forwarded(self, runner, backend):
        result = runner.invoke(
            main,
            [
                "batch",
                "get-all",
                "--table",
                "users",
                "--consistent-read",
                "--projection",
                "#n",
                "--names",
                '{"#n": "name"}',
            ],
            input='[{"PK": "a"}]',
        )

        assert result.exit_code == 0, result.output
        _, _, options = backend.getter.calls[0]
        assert options == {
            "ConsistentRead": True,
            "ProjectionExpression": "#n",
            "ExpressionAttributeNames": {"#n": "name"},
        }

    def test_text_output(self, runner, backend):
        result = runner.invoke(
            main, ["batch", "get-all", "--table", "users", "--text"], input='[{"PK": "a"}]'
        )
        assert result.exit_code == 0
        assert "Retrieved 1 of 1 keys" in result.output

    def test_invalid_input(self, runner, backend):
        result = runner.invoke(main, ["batch", "get-all", "--table", "users"], input="[1, 2]")
        assert result.exit_code == 1
        assert "not a JSON object" in result.output
        assert backend.getter.calls == []

    def test_backend_error(self, runner, backend):
        backend.getter.error = TableNotFoundError("Table 'users' not found")
        result = runner.invoke(
            main, ["batch", "get-all", "--table", "users"], input='[{"PK": "a"}]'
        )
        assert result.exit_code == 3
        assert "Table 'users' not found" in result.output

    def test_backoff_settings_from_environment(self, runner, backend):
        result = runner.invoke(
            main,
            ["batch", "get-all", "--table", "users"],
            input="[]",
            env={"BATCH_BACKOFF_INITIAL": "200", "BATCH_BACKOFF_MAX": "800"},
        )
        assert result.exit_code == 0, result.output
        assert get_config().backoff_initial == 200
        assert get_config().backoff_max == 800

    def test_invalid_backoff_settings(self, runner, backend):
        result = runner.invoke(
            main,
            ["batch", "get-all", "--table", "users", "--backoff-max", "10"],
            input="[]",
        )
        assert result.exit_code == 1
        assert "backoff_max" in result.output


class TestPutAllCommand:
    """Tests for 'batch put-all'."""

    def test_items_written(self, runner, backend):
        items = [{"PK": f"item-{i}", "price": 1.5} for i in range(30)]
        result = runner.invoke(
            main, ["batch", "put-all", "--table", "users"], input=json.dumps(items)
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"table": "users", "items": 30, "status": "submitted"}
        assert len(backend.writer.calls) == 2
        assert len(backend.writer.written) == 30

    def test_single_pretty_printed_item(self, runner, backend):
        result = runner.invoke(
            main,
            ["batch", "put-all", "--table", "users"],
            input=json.dumps({"PK": "a", "tags": ["x"]}, indent=2),
        )

        assert result.exit_code == 0, result.output
        assert backend.writer.written == [{"PK": "a", "tags": ["x"]}]

    def test_failed_chunks_do_not_fail_command(self, runner, backend):
        backend.writer.fail_always = True
        result = runner.invoke(
            main, ["batch", "put-all", "--table", "users"], input='[{"PK": "a"}]'
        )
        assert result.exit_code == 0
        assert "Not writing" in result.output

    def test_raise_policy_fails_command(self, runner, backend):
        backend.writer.fail_always = True
        result = runner.invoke(
            main,
            ["batch", "put-all", "--table", "users", "--on-chunk-failure", "raise"],
            input='[{"PK": "a"}]',
        )
        assert result.exit_code == 3

    def test_invalid_table_name(self, runner, backend):
        result = runner.invoke(main, ["batch", "put-all", "--table", "x"], input="[]")
        assert result.exit_code == 1
        assert backend.writer.calls == []


class TestScanAllCommand:
    """Tests for 'batch scan-all'."""

    def test_all_pages_output(self, runner, backend):
        result = runner.invoke(main, ["batch", "scan-all", "--table", "users"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == [{"PK": "a", "n": 1}, {"PK": "b", "n": 2}]
        assert len(backend.scanner.calls) == 2

    def test_scan_options(self, runner, backend):
        result = runner.invoke(
            main,
            [
                "batch",
                "scan-all",
                "--table",
                "users",
                "--filter",
                "#s = :s",
                "--names",
                '{"#s": "status"}',
                "--values",
                '{":s": "active"}',
                "--index-name",
                "by-status",
            ],
        )

        assert result.exit_code == 0, result.output
        _, options, _ = backend.scanner.calls[0]
        assert options == {
            "FilterExpression": "#s = :s",
            "ExpressionAttributeNames": {"#s": "status"},
            "ExpressionAttributeValues": {":s": "active"},
            "IndexName": "by-status",
        }

    def test_invalid_json_option(self, runner, backend):
        result = runner.invoke(
            main, ["batch", "scan-all", "--table", "users", "--values", "{not json"]
        )
        assert result.exit_code == 1
        assert backend.scanner.calls == []
