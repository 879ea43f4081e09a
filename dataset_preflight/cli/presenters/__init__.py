"""Presenters for CLI output formatting.

Presenters turn application responses into human-readable terminal output.
"""

from .report import IssueLimits, ReportPresenter

__all__ = ["IssueLimits", "ReportPresenter"]
