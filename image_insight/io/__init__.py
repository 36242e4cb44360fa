"""Persistence of analysis reports."""

from .report import ReportWriter, build_report

__all__ = ["ReportWriter", "build_report"]
