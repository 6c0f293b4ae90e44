# streaming_catalog/config.py

"""Shared configuration and environment setup."""

from __future__ import annotations

import logging
from os import getenv
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(override=True)

FILMS_FILE = "films.csv"
PEOPLE_FILE = "people.csv"
SUBSCRIPTIONS_FILE = "subscriptions.csv"
WATCHLISTS_FILE = "watchlists.csv"


def get_project_root() -> Path:
    """Return the project root directory.

    Prefers STREAMING_CATALOG_PROJECT_ROOT env var. Falls back to current
    working directory.
    """
    if root := getenv("STREAMING_CATALOG_PROJECT_ROOT"):
        return Path(root).resolve()
    return Path.cwd()


def get_data_dir() -> Path:
    """Directory holding the record files (default: <root>/data)."""
    if data_dir := getenv("STREAMING_CATALOG_DATA_DIR"):
        return Path(data_dir).resolve()
    return get_project_root() / "data"


def get_log_level() -> str:
    """Level name from STREAMING_CATALOG_LOG_LEVEL; unknown names fall back to INFO."""
    level = getenv("STREAMING_CATALOG_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level
