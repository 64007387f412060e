from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def state_dir(monkeypatch, tmp_path: Path) -> Path:
    """Point every test at a private state directory and no user config."""
    state = tmp_path / "state"
    monkeypatch.setenv("EDITKIT_STATE_DIR", str(state))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.setenv("EDITKIT_EDITOR", "")
    monkeypatch.delenv("EDITKIT_CONFIG", raising=False)
    monkeypatch.delenv("EDITKIT_LOG_LEVEL", raising=False)
    return state
