"""Tests for CLI module."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from unionfind.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    """Provide Click test CLI runner."""
    return CliRunner()


# ---------------------------------------------------------------------------
# Top-level CLI
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_cli_version_flag(runner: CliRunner) -> None:
    """Test --version flag outputs version string."""
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "unionfind" in result.output


@pytest.mark.unit
def test_cli_help(runner: CliRunner) -> None:
    """Test --help output lists commands."""
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "components" in result.output


@pytest.mark.unit
def test_cli_invalid_command(runner: CliRunner) -> None:
    """Test invalid command returns non-zero exit code."""
    result = runner.invoke(cli, ["invalid-command"])

    assert result.exit_code != 0


# ---------------------------------------------------------------------------
# components command
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_components_writes_output(runner: CliRunner, write_pairs, tmp_path: Path) -> None:
    """Test components command groups pairs into JSONL output."""
    pairs = write_pairs([{"a": "x", "b": "y"}, {"a": "y", "b": "z"}, {"a": "p", "b": "q"}])
    output = tmp_path / "components.jsonl"

    result = runner.invoke(cli, ["components", str(pairs), "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert "2 components" in result.output
    with output.open() as f:
        rows = [json.loads(line) for line in f]
    assert [row["elements"] for row in rows] == [["p", "q"], ["x", "y", "z"]]


@pytest.mark.unit
def test_components_verbose(runner: CliRunner, write_pairs, tmp_path: Path) -> None:
    """Test verbose flag reports progress."""
    pairs = write_pairs([{"a": 1, "b": 2}])

    result = runner.invoke(
        cli, ["components", str(pairs), "-o", str(tmp_path / "out.jsonl"), "--verbose"]
    )

    assert result.exit_code == 0
    assert "Found 1 pairs" in result.output


@pytest.mark.unit
def test_components_writes_audit_log(
    runner: CliRunner,
    write_pairs,
    read_events,
    tmp_path: Path,
) -> None:
    """Test --audit-log records the run and the merges."""
    pairs = write_pairs([{"a": "x", "b": "y"}])
    audit = tmp_path / "logs" / "events.jsonl"

    result = runner.invoke(
        cli,
        ["components", str(pairs), "-o", str(tmp_path / "out.jsonl"), "--audit-log", str(audit)],
    )

    assert result.exit_code == 0
    names = [e["event"] for e in read_events(audit)]
    assert names[0] == "run_started"
    assert "sets_merged" in names
    assert names[-1] == "run_finished"
    assert len({e["run_id"] for e in read_events(audit)}) == 1


@pytest.mark.unit
def test_components_malformed_input(
    runner: CliRunner,
    write_pairs,
    read_events,
    tmp_path: Path,
) -> None:
    """Test malformed input exits 1 and logs a failed run."""
    pairs = write_pairs(["{broken"])
    audit = tmp_path / "events.jsonl"

    result = runner.invoke(
        cli,
        ["components", str(pairs), "-o", str(tmp_path / "out.jsonl"), "--audit-log", str(audit)],
    )

    assert result.exit_code == 1
    assert "Invalid JSON" in result.output
    events = read_events(audit)
    assert events[-2]["event"] == "error"
    assert events[-1]["data"]["status"] == "failed"


@pytest.mark.unit
def test_components_missing_input(runner: CliRunner, tmp_path: Path) -> None:
    """Test nonexistent input path is rejected by click."""
    result = runner.invoke(
        cli, ["components", str(tmp_path / "missing.jsonl"), "-o", str(tmp_path / "o.jsonl")]
    )

    assert result.exit_code != 0


@pytest.mark.unit
def test_components_audit_events_carry_stages(
    runner: CliRunner,
    write_pairs,
    read_events,
    tmp_path: Path,
) -> None:
    """Test events are stamped with the read, group and write stages."""
    pairs = write_pairs([{"a": "x", "b": "y"}])
    audit = tmp_path / "events.jsonl"

    result = runner.invoke(
        cli,
        ["components", str(pairs), "-o", str(tmp_path / "out.jsonl"), "--audit-log", str(audit)],
    )

    assert result.exit_code == 0
    events = read_events(audit)
    assert events[0]["stage"] is None
    assert {e["stage"] for e in events if e["event"] in ("element_added", "sets_merged")} == {
        "group"
    }
    stages = {e["event"]: e["stage"] for e in events}
    assert stages["pairs_read"] == "read"
    assert stages["components_written"] == "write"
    assert events[-1]["event"] == "run_finished"
    assert events[-1]["stage"] is None


@pytest.mark.unit
def test_components_failure_records_stage(
    runner: CliRunner,
    write_pairs,
    read_events,
    tmp_path: Path,
) -> None:
    """Test a rejected input file is logged under the read stage."""
    pairs = write_pairs([{"a": 1, "b": True}])
    audit = tmp_path / "events.jsonl"

    result = runner.invoke(
        cli,
        ["components", str(pairs), "-o", str(tmp_path / "out.jsonl"), "--audit-log", str(audit)],
    )

    assert result.exit_code == 1
    assert "boolean" in result.output
    error = next(e for e in read_events(audit) if e["event"] == "error")
    assert error["stage"] == "read"
    assert error["data"]["exception_class"] == "PairFormatError"
