from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def repo_root() -> Path:
    # Project root is the directory that contains the `boolfuck/` package.
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    # Prefer a project-local `.env`, fall back to searching from CWD.
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


@dataclass(frozen=True)
class Settings:
    log_level: str
    source_encoding: str


def load_settings(*, log_level: str | None = None) -> Settings:
    load_env()
    # An explicit level overrides BOOLFUCK_LOG_LEVEL.
    if log_level is None:
        log_level = os.getenv("BOOLFUCK_LOG_LEVEL") or "WARNING"
    log_level = log_level.strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"BOOLFUCK_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
    return Settings(
        log_level=log_level,
        source_encoding=(os.getenv("BOOLFUCK_SOURCE_ENCODING") or "utf-8").strip(),
    )
