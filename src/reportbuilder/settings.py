"""Environment settings read from the process and an optional `.env` file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_ENV_LOADED = False


def load_environment(dotenv_path: Optional[Path] = None) -> None:
    """Read ``.env`` into ``os.environ``; later calls are no-ops."""

    global _ENV_LOADED
    if _ENV_LOADED:
        return
    load_dotenv(dotenv_path)
    _ENV_LOADED = True


def default_log_level() -> str:
    """Return the ``LOG_LEVEL`` environment setting, ``INFO`` when unset."""

    return os.environ.get("LOG_LEVEL", "INFO")
