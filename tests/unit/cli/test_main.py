from __future__ import annotations

import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from editkit.cli import main as cli_main
from editkit.history import CommandHistory

runner = CliRunner()


def test_record_invocation_keeps_replayable_commands(state_dir: Path) -> None:
    assert cli_main.record_invocation(["volume", "10"]) is True
    assert cli_main.record_invocation(["repeat"]) is False

    assert CommandHistory(state_dir / "command-history.json").entries() == [["volume", "10"]]


def test_config_from_argv(tmp_path: Path, monkeypatch) -> None:
    assert cli_main._config_from_argv(["--config", "a.yml", "lock"]) == Path("a.yml")
    assert cli_main._config_from_argv(["--config=b.yml", "lock"]) == Path("b.yml")
    assert cli_main._config_from_argv(["lock"]) is None
    monkeypatch.setenv("EDITKIT_CONFIG", "c.yml")
    assert cli_main._config_from_argv(["lock"]) == Path("c.yml")


def test_main_records_successful_invocation(monkeypatch, tmp_path: Path, state_dir: Path) -> None:
    monkeypatch.setattr(cli_main, "configure_logging", lambda **kwargs: None)
    library = tmp_path / "lib"
    library.mkdir()
    argv = ["load-path", "add", str(library)]
    monkeypatch.setattr("sys.argv", ["editkit", *argv])

    with pytest.raises(SystemExit) as exc:
        cli_main.main()

    assert exc.value.code == 0
    assert CommandHistory(state_dir / "command-history.json").entries() == [argv]


def test_main_skips_failed_invocation(monkeypatch, tmp_path: Path, state_dir: Path) -> None:
    monkeypatch.setattr(cli_main, "configure_logging", lambda **kwargs: None)
    monkeypatch.setattr("sys.argv", ["editkit", "load-path", "add", str(tmp_path / "missing")])

    with pytest.raises(SystemExit) as exc:
        cli_main.main()

    assert exc.value.code == 3
    assert CommandHistory(state_dir / "command-history.json").entries() == []


def test_invalid_config_exits_with_config_error(tmp_path: Path) -> None:
    config = tmp_path / "config.yml"
    config.write_text("history_limit: -1\n")

    res = runner.invoke(cli_main.app, ["--config", str(config), "mark", "list"])

    assert res.exit_code == 1
    assert "Configuration error" in res.stdout


def test_version() -> None:
    res = runner.invoke(cli_main.app, ["--version"])

    assert res.exit_code == 0
    assert "editkit" in res.stdout


def test_main_reports_unknown_log_level_as_config_error(monkeypatch) -> None:
    monkeypatch.setenv("EDITKIT_LOG_LEVEL", "verbose")
    monkeypatch.setattr("sys.argv", ["editkit", "mark", "list"])
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        with pytest.raises(SystemExit) as exc:
            cli_main.main()
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    assert exc.value.code == 1
