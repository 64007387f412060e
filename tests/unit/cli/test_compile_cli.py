from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from editkit.cli.main import app
from editkit.shell.process import ProcessResult

runner = CliRunner()


def _fake_shell(calls, returncode=0, stdout="", stderr=""):
    def fake(command, *, shell="/bin/sh", cwd=None, timeout=None):
        calls.append((command, shell, cwd))
        return ProcessResult(command=(shell, "-c", command), returncode=returncode, stdout=stdout, stderr=stderr)

    return fake


def test_compile_runs_and_records(monkeypatch, state_dir: Path) -> None:
    calls = []
    monkeypatch.setattr("editkit.cli.commands.compile.run_shell", _fake_shell(calls, stdout="built\n"))

    res = runner.invoke(app, ["compile", "make -k"])

    assert res.exit_code == 0
    assert "built" in res.stdout
    assert "Compilation finished" in res.stdout
    assert calls == [("make -k", "/bin/sh", None)]
    assert json.loads((state_dir / "compile-history.json").read_text()) == ["make -k"]


def test_compile_from_history_dedups_candidates(monkeypatch, state_dir: Path) -> None:
    state_dir.mkdir(parents=True)
    (state_dir / "compile-history.json").write_text(json.dumps(["make test", "make", "make test", ""]))
    calls = []
    monkeypatch.setattr("editkit.cli.commands.compile.run_shell", _fake_shell(calls))

    res = runner.invoke(app, ["compile", "--choice", "2"])

    assert res.exit_code == 0
    assert calls[0][0] == "make"
    assert json.loads((state_dir / "compile-history.json").read_text())[0] == "make"


def test_compile_prompt_reads_answer(monkeypatch, state_dir: Path) -> None:
    state_dir.mkdir(parents=True)
    (state_dir / "compile-history.json").write_text(json.dumps(["make test", "make"]))
    calls = []
    monkeypatch.setattr("editkit.cli.commands.compile.run_shell", _fake_shell(calls))
    monkeypatch.setattr(
        "editkit.interfaces.selector.Prompt.ask", classmethod(lambda cls, *args, **kwargs: "make test")
    )

    res = runner.invoke(app, ["compile"])

    assert res.exit_code == 0
    assert calls[0][0] == "make test"


def test_compile_empty_history_is_informational(monkeypatch) -> None:
    monkeypatch.setattr("editkit.cli.commands.compile.run_shell", _fake_shell([]))

    res = runner.invoke(app, ["compile"])

    assert res.exit_code == 0
    assert "Compile history is empty" in res.stdout


def test_compile_unknown_choice_selects_nothing(monkeypatch, state_dir: Path) -> None:
    state_dir.mkdir(parents=True)
    (state_dir / "compile-history.json").write_text(json.dumps(["make"]))
    calls = []
    monkeypatch.setattr("editkit.cli.commands.compile.run_shell", _fake_shell(calls))

    res = runner.invoke(app, ["compile", "--choice", "ninja"])

    assert res.exit_code == 0
    assert "Nothing selected" in res.stdout
    assert calls == []


def test_compile_failure_exit_code(monkeypatch) -> None:
    monkeypatch.setattr("editkit.cli.commands.compile.run_shell", _fake_shell([], returncode=2, stderr="boom\n"))

    res = runner.invoke(app, ["compile", "make"])

    assert res.exit_code == 4
    assert "Compilation exited abnormally with code 2" in res.stdout


def test_compile_missing_cwd(tmp_path: Path) -> None:
    res = runner.invoke(app, ["compile", "make", "--cwd", str(tmp_path / "missing")])

    assert res.exit_code == 3
    assert "Directory not found" in res.stdout
