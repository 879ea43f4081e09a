from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING

from typing_extensions import override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort
from ...domain.entities.dataset_file import format_size
from ...domain.entities.file_analysis import (
    BinaryAnalysis,
    JsonAnalysis,
    NotAnalyzed,
    TextAnalysis,
)
from ...domain.entities.tabular import TabularAnalysis

if TYPE_CHECKING:
    from pathlib import Path

    from ...application.models import GeneratedFile
    from ...domain.entities.file_analysis import FileAnalysis
    from ...domain.services.compliance_score import ComplianceScore


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    dataset_path: str = ""
    file_name: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _empty_stats() -> dict[str, int]:
    return dict.fromkeys(
        ("files_analyzed", "tabular_files", "rows_processed", "warnings", "errors"), 0
    )


def describe_analysis(analysis: FileAnalysis) -> str:
    match analysis:
        case TabularAnalysis():
            header = "header" if analysis.has_header else "no header"
            return (
                f"{analysis.delimiter.display_name}-delimited, {header}, "
                f"{analysis.column_count} columns x {analysis.row_count:,} rows"
            )
        case JsonAnalysis(is_valid=True):
            return f"valid JSON {analysis.root_type}"
        case JsonAnalysis():
            return f"invalid JSON ({analysis.error})"
        case TextAnalysis():
            kind = "documentation" if analysis.is_documentation else "text"
            return f"{kind}, {analysis.line_count:,} lines, {analysis.word_count:,} words"
        case BinaryAnalysis():
            return f"binary ({analysis.binary_type})"
        case NotAnalyzed():
            return f"not analyzed: {analysis.reason}"
    return "unknown"


class ConsoleLogger(LoggerPort):
    """Rich console logger.

    Messages are plain text: file paths and error reasons routinely hold
    square brackets, so every message is escaped before rich renders it.
    """

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(escape(f"{prefix}{message}"))

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{escape(prefix + message)}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{escape(prefix + message)}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {escape(message)}")

    @override
    def log_scan_start(self, dataset_path: Path) -> None:
        self.set_context(dataset_path=str(dataset_path), operation="scan")
        self.console.print(f"[bold]Scanning {escape(str(dataset_path))}[/bold]")

    @override
    def log_scan_complete(self, file_count: int, total_size: int) -> None:
        self.verbose(f"Found {file_count:,} files ({format_size(total_size)})")
        if self._context is not None:
            self.debug(f"Scan took {self._context.elapsed_ms():.0f} ms")

    @override
    def log_file_analyzed(self, relative_path: str, analysis: FileAnalysis) -> None:
        self.set_context(file_name=relative_path)
        self._stats["files_analyzed"] += 1
        if isinstance(analysis, TabularAnalysis):
            self._stats["tabular_files"] += 1
            self._stats["rows_processed"] += analysis.row_count
        self.verbose(f"  {relative_path}: {describe_analysis(analysis)}")
        if isinstance(analysis, TabularAnalysis) and self.verbosity >= LogLevel.DEBUG:
            for column in analysis.columns:
                self.debug(
                    f"    {column.display_name}: {column.column_type} "
                    f"(nulls={column.null_count}, unique={column.unique_count}"
                    f"{'+' if column.unique_saturated else ''})"
                )

    @override
    def log_generated_file(self, generated: GeneratedFile) -> None:
        if generated.created:
            self.success(f"Created {generated.path}")
        else:
            self.verbose(f"Skipped {generated.path} ({generated.reason or ''})")

    @override
    def log_score(self, score: ComplianceScore) -> None:
        self.verbose(
            f"Validation complete: {score.critical_count} critical, "
            f"{score.warning_count} warnings, {score.info_count} info"
        )

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Processing Statistics:[/dim]")
            self.console.print(
                f"[dim]  Files analyzed: {self._stats['files_analyzed']}[/dim]"
            )
            self.console.print(
                f"[dim]  Tabular files: {self._stats['tabular_files']}[/dim]"
            )
            self.console.print(
                f"[dim]  Rows processed: {self._stats['rows_processed']:,}[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        if self._context.file_name:
            return f"[{self._context.file_name}] "
        return ""
