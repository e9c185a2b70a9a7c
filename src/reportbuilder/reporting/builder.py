"""Fluent builder for :class:`ReportConfig` definitions."""

from __future__ import annotations

import dataclasses
import logging
from datetime import datetime

from reportbuilder.reporting.config import DEFAULT_FORMAT, DEFAULT_TITLE, DateLike, ReportConfig
from reportbuilder.utils.dates import is_inverted
from reportbuilder.utils.logging import structured_log

logger = logging.getLogger(__name__)


def _clone(config: ReportConfig) -> ReportConfig:
    return dataclasses.replace(config, columns=list(config.columns), filters=list(config.filters))


class ReportConfigBuilder:
    """Accumulate report options through chained calls.

    Every setter mutates the builder's working config and returns the builder.
    :meth:`finalize` hands out an independent copy, so a partially configured
    builder can serve as a template for several reports. Builders are not
    thread-safe; give each thread its own :meth:`copy`.
    """

    def __init__(self) -> None:
        now = datetime.now()
        self._config = ReportConfig(
            columns=[],
            filters=[],
            start_date=now,
            end_date=now,
            include_header=False,
            include_footer=False,
            include_charts=False,
            include_summary=False,
            include_totals=False,
            include_page_numbers=False,
        )

    @classmethod
    def from_config(cls, config: ReportConfig) -> "ReportConfigBuilder":
        """Seed a builder with the fields of an existing ``config``."""

        builder = cls()
        builder._config = _clone(config)
        return builder

    def copy(self) -> "ReportConfigBuilder":
        """Return an independent builder carrying the same accumulated state."""

        return type(self).from_config(self._config)

    def set_title(self, title: str) -> "ReportConfigBuilder":
        self._config.title = title
        return self

    def set_format(self, format: str) -> "ReportConfigBuilder":
        self._config.format = format
        return self

    def set_date_range(self, start: DateLike, end: DateLike) -> "ReportConfigBuilder":
        """Set the reporting period; an inverted range is accepted but logged."""

        if is_inverted(start, end):
            logger.warning("Report date range starts after it ends: %s > %s", start, end)
        self._config.start_date = start
        self._config.end_date = end
        return self

    def set_header(self, text: str) -> "ReportConfigBuilder":
        self._config.include_header = True
        self._config.header_text = text
        return self

    def set_footer(self, text: str) -> "ReportConfigBuilder":
        self._config.include_footer = True
        self._config.footer_text = text
        return self

    def set_charts(self, chart_type: str) -> "ReportConfigBuilder":
        self._config.include_charts = True
        self._config.chart_type = chart_type
        return self

    def set_summary(self) -> "ReportConfigBuilder":
        self._config.include_summary = True
        return self

    def add_column(self, name: str) -> "ReportConfigBuilder":
        self._config.columns.append(name)
        return self

    def add_columns(self, *names: str) -> "ReportConfigBuilder":
        self._config.columns.extend(names)
        return self

    def add_filter(self, text: str) -> "ReportConfigBuilder":
        self._config.filters.append(text)
        return self

    def set_sort_by(self, field: str) -> "ReportConfigBuilder":
        self._config.sort_by = field
        return self

    def set_group_by(self, field: str) -> "ReportConfigBuilder":
        self._config.group_by = field
        return self

    def set_totals(self) -> "ReportConfigBuilder":
        self._config.include_totals = True
        return self

    def set_orientation(self, orientation: str) -> "ReportConfigBuilder":
        self._config.orientation = orientation
        return self

    def set_page_size(self, page_size: str) -> "ReportConfigBuilder":
        self._config.page_size = page_size
        return self

    def set_page_numbers(self) -> "ReportConfigBuilder":
        self._config.include_page_numbers = True
        return self

    def set_company_logo(self, path: str) -> "ReportConfigBuilder":
        self._config.company_logo = path
        return self

    def set_watermark(self, text: str) -> "ReportConfigBuilder":
        self._config.watermark = text
        return self

    def finalize(self) -> ReportConfig:
        """Return a defaulted copy of the accumulated configuration.

        An empty title becomes ``"Untitled Report"`` and an empty format
        becomes ``"PDF"``. The builder itself is left untouched.
        """

        config = _clone(self._config)
        defaulted = []
        if not config.title:
            config.title = DEFAULT_TITLE
            defaulted.append("title")
        if not config.format:
            config.format = DEFAULT_FORMAT
            defaulted.append("format")

        structured_log(
            logging.DEBUG,
            event="report_config_finalized",
            title=config.title,
            format=config.format,
            defaulted=defaulted,
        )
        return config


__all__ = ["ReportConfigBuilder"]
