"""Tabular catalog and JSON snapshots of report definitions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import pandas as pd

from reportbuilder.reporting.config import ReportConfig
from reportbuilder.reporting.summary import SEPARATOR
from reportbuilder.utils.io import save_dataframe, write_json

logger = logging.getLogger(__name__)

CATALOG_COLUMNS = [
    "title",
    "format",
    "start_date",
    "end_date",
    "columns",
    "filters",
    "sort_by",
    "group_by",
    "include_header",
    "include_footer",
    "include_charts",
    "chart_type",
    "include_summary",
    "include_totals",
    "orientation",
    "page_size",
    "include_page_numbers",
    "company_logo",
    "watermark",
]


def build_catalog(configs: Sequence[ReportConfig]) -> pd.DataFrame:
    """Return one row per report; list fields are joined with ``", "``."""

    rows = []
    for config in configs:
        payload = config.to_payload()
        payload["columns"] = SEPARATOR.join(config.columns)
        payload["filters"] = SEPARATOR.join(config.filters)
        rows.append({key: payload[key] for key in CATALOG_COLUMNS})
    return pd.DataFrame(rows, columns=CATALOG_COLUMNS)


def write_catalog(configs: Sequence[ReportConfig], path: Path) -> pd.DataFrame:
    """Persist the catalog of ``configs`` to ``path`` as CSV and return it."""

    df = build_catalog(configs)
    save_dataframe(df, path)
    logger.info("Report catalog written to %s (%d rows)", path, len(df))
    return df


def write_snapshot(config: ReportConfig, path: Path) -> None:
    """Write every field of ``config`` to ``path`` as JSON."""

    write_json(config.to_payload(), path)
    logger.debug("Report snapshot written to %s", path)


__all__ = ["CATALOG_COLUMNS", "build_catalog", "write_catalog", "write_snapshot"]
