# src/taskline/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

One frozen Settings object for the whole app; nothing is required at import
time, every variable has a usable default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKLINE"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data (ignored by git) ----
    data_dir: Path
    tasks_path: Path
    save_tasks: bool

    # ---- Display ----
    date_format: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskline").strip() or "taskline"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskline"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.txt")
        save_tasks = _env_bool(_k("SAVE_TASKS"), True)

        date_format = _env(_k("DATE_FORMAT"), "%Y-%m-%d") or "%Y-%m-%d"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_path=tasks_path,
            save_tasks=save_tasks,
            date_format=date_format,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
