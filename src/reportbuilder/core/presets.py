"""Built-in sales report definitions."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from reportbuilder.reporting.builder import ReportConfigBuilder
from reportbuilder.reporting.config import ReportConfig


def standard_builder() -> ReportConfigBuilder:
    """Return a builder pre-loaded with the house PDF layout."""

    return (
        ReportConfigBuilder()
        .set_format("PDF")
        .set_header("Relatório de Vendas")
        .set_footer("Confidencial")
        .set_orientation("Landscape")
        .set_page_size("A4")
    )


def monthly_sales() -> ReportConfig:
    return (
        ReportConfigBuilder()
        .set_title("Vendas Mensais")
        .set_format("PDF")
        .set_date_range(datetime(2024, 1, 1), datetime(2024, 1, 31))
        .set_header("Relatório de Vendas")
        .set_footer("Confidencial")
        .set_charts("Bar")
        .set_summary()
        .add_columns("Produto", "Quantidade", "Valor")
        .add_filter("Status=Ativo")
        .set_sort_by("Valor")
        .set_group_by("Categoria")
        .set_totals()
        .set_orientation("Portrait")
        .set_page_size("A4")
        .set_page_numbers()
        .set_company_logo("logo.png")
        .set_watermark("Confidencial")
        .finalize()
    )


def quarterly_sales() -> ReportConfig:
    return (
        ReportConfigBuilder()
        .set_title("Relatório Trimestral")
        .set_format("Excel")
        .set_date_range(datetime(2024, 1, 1), datetime(2024, 3, 31))
        .add_columns("Vendedor", "Região", "Total")
        .set_charts("Line")
        .set_header("Relatório Trimestral")
        .set_group_by("Região")
        .set_totals()
        .finalize()
    )


def annual_sales(base: Optional[ReportConfigBuilder] = None) -> ReportConfig:
    """Build the annual report on top of ``base`` (the standard layout by default)."""

    builder = base if base is not None else standard_builder()
    return (
        builder.set_title("Vendas Anuais")
        .set_date_range(datetime(2024, 1, 1), datetime(2024, 12, 31))
        .add_columns("Produto", "Quantidade", "Valor")
        .set_charts("Pie")
        .set_totals()
        .finalize()
    )


def demo_reports() -> List[ReportConfig]:
    """Return the monthly, quarterly and annual sales reports."""

    return [monthly_sales(), quarterly_sales(), annual_sales()]


__all__ = ["annual_sales", "demo_reports", "monthly_sales", "quarterly_sales", "standard_builder"]
