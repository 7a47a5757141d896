# tests/test_config.py

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from tasklist.config import Settings

ENV_VARS = (
    "TASKLIST_APP_NAME",
    "TASKLIST_LOG_LEVEL",
    "TASKLIST_LOG_TO_FILE",
    "TASKLIST_DATA_DIR",
    "TASKLIST_STRICT_PRIORITY",
    "TASKLIST_AUTOLOAD_PATH",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    # load_dotenv writes straight into os.environ, bypassing monkeypatch.
    for name in ENV_VARS:
        os.environ.pop(name, None)


def test_defaults() -> None:
    s = Settings.from_env(dotenv=False)
    assert s.app_name == "tasklist"
    assert s.log_level == "WARNING"
    assert s.log_to_file is True
    assert s.data_dir == Path(".local/tasklist")
    assert s.strict_priority is False
    assert s.autoload_path is None


def test_values_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKLIST_APP_NAME", "todo")
    monkeypatch.setenv("TASKLIST_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKLIST_LOG_TO_FILE", "off")
    monkeypatch.setenv("TASKLIST_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKLIST_STRICT_PRIORITY", "yes")
    monkeypatch.setenv("TASKLIST_AUTOLOAD_PATH", str(tmp_path / "tasks.json"))

    s = Settings.from_env(dotenv=False)
    assert s.app_name == "todo"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is False
    assert s.data_dir == tmp_path
    assert s.strict_priority is True
    assert s.autoload_path == tmp_path / "tasks.json"


def test_malformed_bool_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKLIST_STRICT_PRIORITY", "maybe")
    monkeypatch.setenv("TASKLIST_LOG_TO_FILE", "sometimes")
    s = Settings.from_env(dotenv=False)
    assert s.strict_priority is False
    assert s.log_to_file is True


def test_dotenv_does_not_override_real_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("TASKLIST_APP_NAME=from-dotenv\nTASKLIST_STRICT_PRIORITY=true\n", "utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TASKLIST_APP_NAME", "from-env")

    s = Settings.from_env()
    assert s.app_name == "from-env"
    assert s.strict_priority is True
