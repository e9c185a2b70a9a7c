import argparse
import json
from pathlib import Path

import pandas as pd
import pytest

from reportbuilder.cli import main, parse_args
from reportbuilder.core.configuration import build_run_config
from reportbuilder.core.presets import demo_reports
from reportbuilder.reporting.catalog import CATALOG_COLUMNS, build_catalog


def test_build_run_config_overlays_cli_on_yaml(tmp_path: Path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("definitions: defs.yaml\ncatalog: out/catalog.csv\nquiet: true\n", encoding="utf-8")
    args = argparse.Namespace(config=config_path, definitions=None, snapshot_dir=None, catalog=tmp_path / "c.csv", quiet=False)

    run_config = build_run_config(args)

    assert run_config.definitions_path == Path("defs.yaml")
    assert run_config.catalog_path == tmp_path / "c.csv"
    assert run_config.snapshot_dir is None
    assert run_config.quiet is True


def test_build_run_config_rejects_non_mapping(tmp_path: Path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError):
        build_run_config(argparse.Namespace(config=config_path))


def test_catalog_has_one_row_per_report():
    df = build_catalog(demo_reports())

    assert list(df.columns) == CATALOG_COLUMNS
    assert df["title"].tolist() == ["Vendas Mensais", "Relatório Trimestral", "Vendas Anuais"]
    assert df.loc[0, "columns"] == "Produto, Quantidade, Valor"
    assert df.loc[1, "filters"] == ""


def test_main_runs_demo_set_and_writes_outputs(tmp_path: Path, capsys):
    snapshot_dir = tmp_path / "snapshots"
    catalog_path = tmp_path / "catalog.csv"

    reports = main(
        [
            "--config",
            str(tmp_path / "absent.yaml"),
            "--snapshot-dir",
            str(snapshot_dir),
            "--catalog",
            str(catalog_path),
        ]
    )

    assert len(reports) == 3
    out = capsys.readouterr().out
    assert out.count("Relatório gerado com sucesso!") == 3
    assert "Período: 01/01/2024 a 31/03/2024" in out

    snapshot = json.loads((snapshot_dir / "01-vendas-mensais.json").read_text(encoding="utf-8"))
    assert snapshot["columns"] == ["Produto", "Quantidade", "Valor"]
    assert snapshot["start_date"].startswith("2024-01-01")
    assert len(list(snapshot_dir.glob("*.json"))) == 3

    catalog = pd.read_csv(catalog_path)
    assert len(catalog) == 3


def test_main_quiet_with_definitions(tmp_path: Path, capsys):
    definitions = tmp_path / "defs.yaml"
    definitions.write_text("reports:\n  - title: Só Uma\n", encoding="utf-8")

    reports = main(["--config", str(tmp_path / "absent.yaml"), "--definitions", str(definitions), "--quiet"])

    assert [report.title for report in reports] == ["Só Uma"]
    assert capsys.readouterr().out == ""


def test_log_level_rejects_non_level_names():
    with pytest.raises(SystemExit):
        parse_args(["--log-level", "root"])


def test_log_level_is_case_insensitive():
    assert parse_args(["--log-level", "debug"]).log_level == "DEBUG"
