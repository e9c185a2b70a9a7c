"""Report definition models."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, TextIO, Tuple, Union

from reportbuilder.reporting.summary import description_lines

DateLike = Union[date, datetime]

DEFAULT_TITLE = "Untitled Report"
DEFAULT_FORMAT = "PDF"


@dataclass(slots=True)
class ReportConfig:
    """Presentation and content options for a single report.

    Instances are produced by :class:`~reportbuilder.reporting.builder.ReportConfigBuilder`.
    """

    title: str = ""
    format: str = ""
    start_date: DateLike = field(default_factory=datetime.now)
    end_date: Optional[DateLike] = None
    include_header: bool = False
    header_text: Optional[str] = None
    include_footer: bool = False
    footer_text: Optional[str] = None
    include_charts: bool = False
    chart_type: Optional[str] = None
    include_summary: bool = False
    columns: List[str] = field(default_factory=list)
    filters: List[str] = field(default_factory=list)
    sort_by: Optional[str] = None
    group_by: Optional[str] = None
    include_totals: bool = False
    orientation: Optional[str] = None
    page_size: Optional[str] = None
    include_page_numbers: bool = False
    company_logo: Optional[str] = None
    watermark: Optional[str] = None

    def __post_init__(self) -> None:
        if self.end_date is None:
            self.end_date = self.start_date

    @property
    def date_range(self) -> Tuple[DateLike, DateLike]:
        """Return the ``(start, end)`` reporting period."""

        return self.start_date, self.end_date

    def describe(self, sink: Optional[TextIO] = None) -> str:
        """Write a human-readable summary to ``sink`` (stdout by default) and return it."""

        lines = description_lines(self)
        stream = sink if sink is not None else sys.stdout
        for line in lines:
            print(line, file=stream)
        return "\n".join(lines)

    def to_payload(self) -> Dict[str, Any]:
        """Return a JSON-ready mapping of every field."""

        return {
            "title": self.title,
            "format": self.format,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "include_header": self.include_header,
            "header_text": self.header_text,
            "include_footer": self.include_footer,
            "footer_text": self.footer_text,
            "include_charts": self.include_charts,
            "chart_type": self.chart_type,
            "include_summary": self.include_summary,
            "columns": list(self.columns),
            "filters": list(self.filters),
            "sort_by": self.sort_by,
            "group_by": self.group_by,
            "include_totals": self.include_totals,
            "orientation": self.orientation,
            "page_size": self.page_size,
            "include_page_numbers": self.include_page_numbers,
            "company_logo": self.company_logo,
            "watermark": self.watermark,
        }


__all__ = ["DEFAULT_FORMAT", "DEFAULT_TITLE", "DateLike", "ReportConfig"]
