# src/tasklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object per process, built once by the entrypoint.
- Tests construct Settings directly (or via from_env) instead of reading globals.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASKLIST"

_TRUE = {"1", "true", "yes", "y", "on"}
_FALSE = {"0", "false", "no", "n", "off"}


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    return default


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str = "tasklist"
    log_level: str = "WARNING"
    log_to_file: bool = True

    # ---- Local data (logs) ----
    data_dir: Path = Path(".local/tasklist")

    # ---- Behaviour ----
    strict_priority: bool = False
    autoload_path: Path | None = None

    @staticmethod
    def from_env(*, dotenv: bool = True) -> Settings:
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tasklist")) or Path(".local/tasklist")

        return Settings(
            app_name=_env(_k("APP_NAME"), "tasklist").strip() or "tasklist",
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            data_dir=data_dir,
            strict_priority=_env_bool(_k("STRICT_PRIORITY"), False),
            autoload_path=_env_path(_k("AUTOLOAD_PATH"), None),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
