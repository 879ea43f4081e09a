"""Infrastructure services that serialize preflight results."""

from .json_report_writer import JsonReportWriter, build_report

__all__ = ["JsonReportWriter", "build_report"]
