"""I/O helpers for writing report catalogs and snapshots."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import pandas as pd


def save_dataframe(df: pd.DataFrame, path: Path) -> None:
    """Persist ``df`` to ``path`` as CSV."""

    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)


def write_json(payload: Mapping[str, Any], path: Path) -> None:
    """Write ``payload`` to ``path`` as indented UTF-8 JSON."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, ensure_ascii=False, indent=2)
