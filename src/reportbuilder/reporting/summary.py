"""Summary generation utilities for report definitions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, TextIO

from reportbuilder.utils.dates import format_period
from reportbuilder.utils.logging import structured_log

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from reportbuilder.reporting.config import ReportConfig

SEPARATOR = ", "
SUCCESS_LINE = "Relatório gerado com sucesso!"


def _text(value: Optional[str]) -> str:
    return value if value is not None else ""


def description_lines(config: "ReportConfig") -> List[str]:
    """Return the ordered summary lines for ``config``.

    Header, chart and footer lines follow their ``include_*`` flags; filters
    and group-by only appear when set.
    """

    lines = [
        f"=== Gerando Relatório: {config.title} ===",
        f"Formato: {config.format}",
        f"Período: {format_period(config.start_date, config.end_date)}",
    ]
    if config.include_header:
        lines.append(f"Cabeçalho: {_text(config.header_text)}")
    if config.include_charts:
        lines.append(f"Gráfico: {_text(config.chart_type)}")
    lines.append(f"Colunas: {SEPARATOR.join(config.columns)}")
    if config.filters:
        lines.append(f"Filtros: {SEPARATOR.join(config.filters)}")
    if config.group_by:
        lines.append(f"Agrupado por: {config.group_by}")
    if config.include_footer:
        lines.append(f"Rodapé: {_text(config.footer_text)}")
    lines.append(SUCCESS_LINE)
    return lines


def generate_report(config: "ReportConfig", sink: Optional[TextIO] = None) -> str:
    """Print the summary of ``config`` in place of rendering the document."""

    text = config.describe(sink)
    structured_log(
        logging.INFO,
        event="report_generated",
        title=config.title,
        format=config.format,
        columns=len(config.columns),
        filters=len(config.filters),
    )
    return text


__all__ = ["SEPARATOR", "SUCCESS_LINE", "description_lines", "generate_report"]
