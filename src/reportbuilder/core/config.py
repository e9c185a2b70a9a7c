"""Configuration dataclasses for a reportbuilder run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(slots=True)
class RunConfig:
    """Inputs and outputs for generating a batch of reports."""

    definitions_path: Optional[Path] = None
    snapshot_dir: Optional[Path] = None
    catalog_path: Optional[Path] = None
    quiet: bool = False
