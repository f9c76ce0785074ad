from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from processing_report.cli import EXIT_ESCALATED, EXIT_FAILED, app
from processing_report.loader import load_messages
from processing_report.settings import LogLevel

runner = CliRunner()


def _write_messages(tmp_path: Path, entries: list[dict], name: str = "messages.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(entries), encoding="utf-8")
    return path


def test_load_messages_json_lines(tmp_path: Path) -> None:
    path = tmp_path / "messages.jsonl"
    path.write_text(
        '{"level": "warn", "message": "a", "pointer": "/x"}\n\n{"message": "b"}\n',
        encoding="utf-8",
    )

    messages = load_messages(path)

    assert [m.log_level for m in messages] == [LogLevel.WARNING, LogLevel.INFO]
    assert messages[0].get("pointer") == "/x"


def test_replay_success_exits_zero(tmp_path: Path) -> None:
    path = _write_messages(tmp_path, [{"level": "info", "message": "loaded"}])

    result = runner.invoke(app, ["replay", "--input", str(path), "--output", "json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == [{"level": "info", "message": "loaded"}]


def test_replay_with_errors_exits_one(tmp_path: Path) -> None:
    path = _write_messages(
        tmp_path,
        [{"level": "debug", "message": "quiet"}, {"level": "error", "message": "broken"}],
    )

    result = runner.invoke(app, ["replay", "--input", str(path), "--output", "markdown"])

    assert result.exit_code == EXIT_FAILED
    assert "**ERROR** broken" in result.stdout
    assert "quiet" not in result.stdout


def test_replay_escalation_exits_two(tmp_path: Path) -> None:
    path = _write_messages(
        tmp_path,
        [
            {"level": "warning", "message": "first"},
            {"level": "error", "message": "fatal here"},
            {"level": "info", "message": "never"},
        ],
    )

    result = runner.invoke(
        app,
        ["replay", "--input", str(path), "--output", "json", "--exception-threshold", "error"],
    )

    assert result.exit_code == EXIT_ESCALATED
    assert "Processing aborted" in result.stdout
    assert "fatal here" in result.stdout
    assert "never" not in result.stdout


def test_replay_uses_config_file(tmp_path: Path) -> None:
    path = _write_messages(tmp_path, [{"level": "debug", "message": "detail"}])
    cfg_path = tmp_path / "config.json"
    cfg_path.write_text(json.dumps({"report_threshold": "debug"}), encoding="utf-8")

    result = runner.invoke(
        app,
        ["replay", "--input", str(path), "--config", str(cfg_path), "--output", "json"],
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout)[0]["message"] == "detail"


def test_replay_bad_config_exits_one(tmp_path: Path) -> None:
    path = _write_messages(tmp_path, [])
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text("", encoding="utf-8")

    result = runner.invoke(app, ["replay", "--input", str(path), "--config", str(cfg_path)])

    assert result.exit_code == EXIT_FAILED
    assert "Error loading config" in result.stdout


def test_replay_rejects_unknown_level_option(tmp_path: Path) -> None:
    path = _write_messages(tmp_path, [])

    result = runner.invoke(
        app, ["replay", "--input", str(path), "--report-threshold", "loud"]
    )

    assert result.exit_code != 0


def test_levels_lists_in_order() -> None:
    result = runner.invoke(app, ["levels"])

    assert result.exit_code == 0
    assert result.stdout.split() == ["debug", "info", "warning", "error", "fatal"]


def test_field_named_like_constructor_argument_is_kept(tmp_path: Path) -> None:
    path = _write_messages(
        tmp_path, [{"level": "info", "message": "x", "log_level": "debug"}]
    )

    messages = load_messages(path)
    assert messages[0].log_level is LogLevel.INFO
    assert messages[0].get("log_level") == "debug"

    result = runner.invoke(app, ["replay", "--input", str(path), "--output", "json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == [{"level": "info", "message": "x", "log_level": "debug"}]


def test_replay_missing_config_file_exits_one(tmp_path: Path) -> None:
    path = _write_messages(tmp_path, [])

    result = runner.invoke(
        app, ["replay", "--input", str(path), "--config", str(tmp_path / "absent.yaml")]
    )

    assert result.exit_code == EXIT_FAILED
    assert "[error] Error loading config" in result.stdout


def test_replay_escalation_is_logged_at_fatal(tmp_path: Path) -> None:
    path = _write_messages(tmp_path, [{"level": "fatal", "message": "stop [now]"}])

    result = runner.invoke(app, ["replay", "--input", str(path), "--output", "json"])

    assert result.exit_code == EXIT_ESCALATED
    assert "[fatal] Processing aborted: stop [now]" in result.stdout
