"""Scan progress logging: a rich console logger and a silent one for --quiet/--json."""

from .console_logger import ConsoleLogger, LogContext, LogLevel, describe_analysis
from .null_logger import NullLogger

__all__ = [
    "ConsoleLogger",
    "LogContext",
    "LogLevel",
    "NullLogger",
    "describe_analysis",
]
