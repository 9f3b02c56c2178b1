"""
Tests for the Typer CLI.
"""

import json

import httpx
import pytest
from typer.testing import CliRunner

from cli import main as cli_main

runner = CliRunner()


@pytest.fixture
def logging_levels(monkeypatch):
    levels = []
    monkeypatch.setattr(cli_main, "configure_logging", lambda settings: levels.append(settings.log_level))
    return levels


@pytest.fixture
def upstream(monkeypatch, make_transport, logging_levels):
    """Route the CLI's upstream client through a mock transport."""

    def install(**transport_kwargs):
        transport = make_transport(**transport_kwargs)
        monkeypatch.setattr(
            cli_main,
            "build_async_client",
            lambda settings, **kwargs: httpx.AsyncClient(transport=transport),
        )

    return install


class TestLookupCommand:
    """`nik-proxy lookup` runs the pipeline in process."""

    def test_json_output(self, upstream, valid_nik):
        upstream()
        result = runner.invoke(cli_main.app, ["lookup", valid_nik, "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["nama"] == "John Doe"

    def test_table_output(self, upstream, valid_nik):
        upstream()
        result = runner.invoke(cli_main.app, ["lookup", valid_nik])
        assert result.exit_code == 0
        assert "John Doe" in result.output

    def test_not_found_exit_code(self, upstream, valid_nik, empty_page):
        upstream(body=empty_page)
        result = runner.invoke(cli_main.app, ["lookup", valid_nik, "--json"])
        assert result.exit_code == 1
        assert json.loads(result.output) == {"message": "Not found"}

    def test_invalid_nik_skips_upstream(self, upstream, upstream_requests):
        upstream()
        result = runner.invoke(cli_main.app, ["lookup", "123", "--json"])
        assert result.exit_code == 1
        assert json.loads(result.output) == {"message": "Invalid NIK"}
        assert upstream_requests == []

    def test_output_file(self, upstream, valid_nik, tmp_path):
        upstream()
        target = tmp_path / "out" / "result.json"
        result = runner.invoke(cli_main.app, ["lookup", valid_nik, "-o", str(target)])
        assert result.exit_code == 0
        assert json.loads(target.read_text(encoding="utf-8"))["alamat_tps"] == "RT 001 / RW 002"

    def test_output_file_not_written_on_error(self, upstream, valid_nik, tmp_path):
        upstream(status=503)
        target = tmp_path / "result.json"
        result = runner.invoke(cli_main.app, ["lookup", valid_nik, "-o", str(target)])
        assert result.exit_code == 1
        assert not target.exists()

    def test_logging_quiet_unless_verbose(self, upstream, valid_nik, logging_levels):
        upstream()
        runner.invoke(cli_main.app, ["lookup", valid_nik, "--json"])
        runner.invoke(cli_main.app, ["-v", "lookup", valid_nik, "--json"])
        assert logging_levels[0] == "WARNING"
        assert logging_levels[1] != "WARNING"
