"""Configuration loading utilities for reportbuilder runs."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from reportbuilder.core.config import RunConfig


def _load_yaml_config(path: Optional[Path]) -> Dict[str, Any]:
    """Read the run settings mapping from ``path``; a missing file means no settings."""

    if path and path.exists():
        with path.open("r", encoding="utf-8") as handle:
            payload = yaml.safe_load(handle) or {}
        if not isinstance(payload, dict):
            raise ValueError(f"Invalid YAML config structure at {path}")
        return payload
    return {}


def _optional_path(value: Any) -> Optional[Path]:
    return Path(value) if value else None


def build_run_config(args: argparse.Namespace) -> RunConfig:
    # Command-line flags win over values from the YAML file.
    config_path = Path(args.config) if getattr(args, "config", None) else None
    yaml_payload = _load_yaml_config(config_path)

    run_cfg = RunConfig(
        definitions_path=_optional_path(yaml_payload.get("definitions")),
        snapshot_dir=_optional_path(yaml_payload.get("snapshot_dir")),
        catalog_path=_optional_path(yaml_payload.get("catalog")),
        quiet=bool(yaml_payload.get("quiet", False)),
    )
    if getattr(args, "definitions", None):
        run_cfg.definitions_path = Path(args.definitions)
    if getattr(args, "snapshot_dir", None):
        run_cfg.snapshot_dir = Path(args.snapshot_dir)
    if getattr(args, "catalog", None):
        run_cfg.catalog_path = Path(args.catalog)
    if getattr(args, "quiet", False):
        run_cfg.quiet = True

    return run_cfg
