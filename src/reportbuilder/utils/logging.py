"""Structured event logging for report runs."""

from __future__ import annotations

import json
import logging
from typing import Any


def structured_log(level: int, **payload: Any) -> None:
    """Log ``payload`` on the root logger as one sorted JSON object."""

    logging.getLogger().log(level, json.dumps(payload, ensure_ascii=False, sort_keys=True, default=str))
