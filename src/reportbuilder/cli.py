"""
1. Parses the command line arguments with `argparse`.
2. Builds a `RunConfig` via `build_run_config`, merging CLI overrides with `config.yaml`.
3. Builds the report definitions, either from a YAML definitions file or the built-in sales set.
4. Generates each report (prints its summary) unless `--quiet` is given.
5. Optionally saves:
   - One JSON snapshot per report (`<snapshot-dir>/<nn>-<title>.json`).
   - A CSV catalog with one row per report.
"""

from __future__ import annotations

import argparse
import io
import logging
import re
from pathlib import Path
from typing import List, Optional, Sequence

from reportbuilder.core.configuration import build_run_config
from reportbuilder.core.presets import demo_reports
from reportbuilder.core.templates import load_definitions
from reportbuilder.reporting.catalog import write_catalog, write_snapshot
from reportbuilder.reporting.config import ReportConfig
from reportbuilder.reporting.summary import generate_report
from reportbuilder.settings import default_log_level, load_environment
from reportbuilder.utils.logging import structured_log

_SLUG_PATTERN = re.compile(r"[^0-9A-Za-z]+")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_args(args: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate report definitions built with the fluent builder")
    parser.add_argument("--config", type=Path, default=Path("config.yaml"), help="Path to configuration YAML")
    parser.add_argument("--definitions", type=Path, default=None, help="YAML file with report definitions")
    parser.add_argument("--snapshot-dir", type=Path, default=None, help="Directory for per-report JSON snapshots")
    parser.add_argument("--catalog", type=Path, default=None, help="Path to a CSV catalog of the reports")
    parser.add_argument("--quiet", action="store_true", help="Do not print report summaries")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=default_log_level().upper(),
        help="Logging verbosity",
    )
    return parser.parse_args(args)


def snapshot_name(position: int, config: ReportConfig) -> str:
    slug = _SLUG_PATTERN.sub("-", config.title).strip("-").lower() or "report"
    return f"{position:02d}-{slug}.json"


def main(argv: Optional[Sequence[str]] = None) -> List[ReportConfig]:
    load_environment()
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.getLevelName(args.log_level) if args.log_level in LOG_LEVELS else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    logger = logging.getLogger(__name__)

    run_config = build_run_config(args)
    if run_config.definitions_path:
        reports = load_definitions(run_config.definitions_path)
    else:
        reports = demo_reports()

    for report in reports:
        generate_report(report, io.StringIO() if run_config.quiet else None)

    if run_config.snapshot_dir:
        for position, report in enumerate(reports, start=1):
            write_snapshot(report, run_config.snapshot_dir / snapshot_name(position, report))
        logger.info("Saved %d report snapshots to %s", len(reports), run_config.snapshot_dir)

    if run_config.catalog_path:
        write_catalog(reports, run_config.catalog_path)

    structured_log(
        logging.INFO,
        event="run_complete",
        reports=len(reports),
        definitions=str(run_config.definitions_path) if run_config.definitions_path else None,
        snapshot_dir=str(run_config.snapshot_dir) if run_config.snapshot_dir else None,
        catalog=str(run_config.catalog_path) if run_config.catalog_path else None,
    )
    if not run_config.quiet:
        print("\nRelatórios gerados com o padrão Builder!")
    return reports


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
