from datetime import date
from pathlib import Path

import pytest

from reportbuilder.core.presets import annual_sales, demo_reports, standard_builder
from reportbuilder.core.templates import apply_settings, load_definitions
from reportbuilder.reporting.builder import ReportConfigBuilder


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_are_shared_and_reports_stay_independent(tmp_path: Path):
    path = _write(
        tmp_path / "reports.yaml",
        """
defaults:
  format: PDF
  header: Relatório de Vendas
  orientation: Landscape
reports:
  - title: Vendas Anuais
    date_range: {start: 2024-01-01, end: 2024-12-31}
    columns: [Produto, Quantidade, Valor]
    charts: Pie
    totals: true
  - title: Vendas por Região
    format: Excel
    columns: [Região]
    filters: [Status=Ativo]
""",
    )

    annual, regional = load_definitions(path)

    assert annual.date_range == (date(2024, 1, 1), date(2024, 12, 31))
    assert annual.columns == ["Produto", "Quantidade", "Valor"]
    assert annual.include_charts and annual.chart_type == "Pie"
    assert annual.include_totals
    assert regional.columns == ["Região"]
    assert regional.filters == ["Status=Ativo"]
    assert regional.format == "Excel"
    assert not regional.include_totals
    assert annual.header_text == regional.header_text == "Relatório de Vendas"
    assert annual.orientation == regional.orientation == "Landscape"


def test_single_report_file_without_reports_key(tmp_path: Path):
    path = _write(tmp_path / "single.yaml", "columns: [Total]\nsummary: false\n")

    (report,) = load_definitions(path)

    assert report.title == "Untitled Report"
    assert report.format == "PDF"
    assert report.columns == ["Total"]
    assert not report.include_summary


def test_unknown_key_is_rejected(tmp_path: Path):
    path = _write(tmp_path / "bad.yaml", "title: Vendas\ncolour: red\n")

    with pytest.raises(ValueError, match="Invalid report definitions"):
        load_definitions(path)


def test_non_mapping_document_is_rejected(tmp_path: Path):
    path = _write(tmp_path / "list.yaml", "- title: Vendas\n")

    with pytest.raises(ValueError, match="Invalid YAML definitions structure"):
        load_definitions(path)


def test_bad_date_is_rejected(tmp_path: Path):
    path = _write(tmp_path / "dates.yaml", "date_range: {start: yesterday, end: 2024-01-31}\n")

    with pytest.raises(ValueError, match="Invalid date value"):
        load_definitions(path)


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_definitions(tmp_path / "missing.yaml")


def test_apply_settings_skips_false_flags():
    config = apply_settings(ReportConfigBuilder(), {"totals": False, "page_numbers": True}).finalize()

    assert not config.include_totals
    assert config.include_page_numbers


def test_annual_sales_on_shared_standard_builder():
    base = standard_builder()
    report = annual_sales(base)
    plain = base.copy().set_title("Outro").finalize()

    assert report.orientation == "Landscape"
    assert report.footer_text == "Confidencial"
    assert plain.title == "Outro"
    assert report.title == "Vendas Anuais"


def test_demo_reports_cover_the_three_sales_reports():
    titles = [report.title for report in demo_reports()]

    assert titles == ["Vendas Mensais", "Relatório Trimestral", "Vendas Anuais"]


def test_aware_and_naive_timestamps_load(tmp_path: Path):
    path = _write(
        tmp_path / "tz.yaml",
        "date_range: {start: '2024-01-01T00:00:00+00:00', end: '2024-01-31 00:00'}\n",
    )

    (report,) = load_definitions(path)

    assert report.start_date.tzinfo is not None
    assert report.end_date.tzinfo is None
    assert report.end_date.day == 31
