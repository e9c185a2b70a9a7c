"""Load report definitions from YAML files.

A definitions file either describes a single report, or holds a ``defaults``
mapping applied to a shared base builder plus a ``reports`` list whose entries
each fork that base builder::

    defaults:
      format: PDF
      orientation: Landscape
    reports:
      - title: Vendas Anuais
        date_range: {start: 2024-01-01, end: 2024-12-31}
        columns: [Produto, Quantidade, Valor]
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml
from jsonschema import ValidationError, validate

from reportbuilder.reporting.builder import ReportConfigBuilder
from reportbuilder.reporting.config import ReportConfig
from reportbuilder.utils.dates import parse_date
from reportbuilder.utils.logging import structured_log

_TEXT = {"type": "string"}
_FLAG = {"type": "boolean"}

REPORT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "title": _TEXT,
        "format": _TEXT,
        "date_range": {
            "type": "object",
            "additionalProperties": False,
            "required": ["start", "end"],
            "properties": {"start": _TEXT, "end": _TEXT},
        },
        "header": _TEXT,
        "footer": _TEXT,
        "charts": _TEXT,
        "summary": _FLAG,
        "columns": {"type": "array", "items": _TEXT},
        "filters": {"type": "array", "items": _TEXT},
        "sort_by": _TEXT,
        "group_by": _TEXT,
        "totals": _FLAG,
        "orientation": _TEXT,
        "page_size": _TEXT,
        "page_numbers": _FLAG,
        "company_logo": _TEXT,
        "watermark": _TEXT,
    },
}

DEFINITIONS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "additionalProperties": False,
    "required": ["reports"],
    "properties": {
        "defaults": REPORT_SCHEMA,
        "reports": {"type": "array", "items": REPORT_SCHEMA},
    },
}

# Keys whose value is passed straight to the matching setter.
_TEXT_SETTERS = {
    "title": "set_title",
    "format": "set_format",
    "header": "set_header",
    "footer": "set_footer",
    "charts": "set_charts",
    "sort_by": "set_sort_by",
    "group_by": "set_group_by",
    "orientation": "set_orientation",
    "page_size": "set_page_size",
    "company_logo": "set_company_logo",
    "watermark": "set_watermark",
}

# Keys that switch a flag on when true.
_FLAG_SETTERS = {
    "summary": "set_summary",
    "totals": "set_totals",
    "page_numbers": "set_page_numbers",
}


def _normalise(payload: Any) -> Any:
    """Turn YAML-native dates back into ISO strings so the schema sees JSON types."""

    if isinstance(payload, dict):
        return {key: _normalise(value) for key, value in payload.items()}
    if isinstance(payload, list):
        return [_normalise(item) for item in payload]
    if isinstance(payload, (date, datetime)):
        return payload.isoformat()
    return payload


def apply_settings(builder: ReportConfigBuilder, settings: Mapping[str, Any]) -> ReportConfigBuilder:
    """Replay ``settings`` onto ``builder`` as setter calls and return the builder."""

    for key, value in settings.items():
        if key in _TEXT_SETTERS:
            getattr(builder, _TEXT_SETTERS[key])(value)
        elif key in _FLAG_SETTERS:
            if value:
                getattr(builder, _FLAG_SETTERS[key])()
        elif key == "date_range":
            builder.set_date_range(parse_date(value["start"]), parse_date(value["end"]))
        elif key == "columns":
            builder.add_columns(*value)
        elif key == "filters":
            for item in value:
                builder.add_filter(item)
        else:
            raise ValueError(f"Unknown report setting: {key}")
    return builder


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}
    if not isinstance(payload, dict):
        raise ValueError(f"Invalid YAML definitions structure at {path}")
    return _normalise(payload)


def load_definitions(path: Path) -> List[ReportConfig]:
    """Build every report described in the YAML file at ``path``."""

    payload = _load_yaml(path)
    if "reports" not in payload:
        payload = {"reports": [payload]}

    try:
        validate(instance=payload, schema=DEFINITIONS_SCHEMA)
    except ValidationError as exc:
        raise ValueError(f"Invalid report definitions at {path}: {exc.message}") from exc

    base = apply_settings(ReportConfigBuilder(), payload.get("defaults", {}))
    reports = [apply_settings(base.copy(), entry).finalize() for entry in payload["reports"]]

    structured_log(logging.INFO, event="definitions_loaded", path=str(path), reports=len(reports))
    return reports


__all__ = ["DEFINITIONS_SCHEMA", "REPORT_SCHEMA", "apply_settings", "load_definitions"]
