"""Report generation for cgtcalc."""

from cgtcalc.reports.cgt_report import CGTReportGenerator

__all__ = ["CGTReportGenerator"]
