"""Fluent construction of report definitions."""

from reportbuilder.reporting.builder import ReportConfigBuilder
from reportbuilder.reporting.config import ReportConfig
from reportbuilder.reporting.summary import generate_report

__all__ = ["ReportConfig", "ReportConfigBuilder", "generate_report"]
