from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ...constants import ScoreWeights
from ...domain.entities.dataset_file import format_size
from ...domain.entities.validation import ValidationSeverity

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from ...application.models import GeneratedFile, PreflightResponse
    from ...domain.entities.tabular import TabularAnalysis
    from ...domain.entities.validation import ValidationResult
    from ...domain.services.compliance_score import ComplianceScore

_FAIR_LABELS = {
    "F": "Findable",
    "A": "Accessible",
    "I": "Interoperable",
    "R": "Reusable",
}

_SEVERITY_STYLES = {
    ValidationSeverity.CRITICAL: ("bold red", "✗"),
    ValidationSeverity.WARNING: ("yellow", "⚠"),
    ValidationSeverity.INFO: ("cyan", "ℹ"),
}


@dataclass(frozen=True, slots=True)
class IssueLimits:
    critical: int | None = 10
    warning: int | None = 10
    info: int | None = 5

    @classmethod
    def unlimited(cls) -> IssueLimits:
        return cls(critical=None, warning=None, info=None)

    def for_severity(self, severity: ValidationSeverity) -> int | None:
        match severity:
            case ValidationSeverity.CRITICAL:
                return self.critical
            case ValidationSeverity.WARNING:
                return self.warning
            case _:
                return self.info


class ReportPresenter:
    """Render a ``PreflightResponse`` as a rich terminal report.

    The short form (``scan``/``generate``) caps the number of issues shown per
    severity; the detailed form (``report``) lists every issue and adds a
    per-column breakdown for each tabular file.
    """

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, response: PreflightResponse, *, detailed: bool = False) -> None:
        limits = IssueLimits.unlimited() if detailed else IssueLimits()
        self._print_header(response)
        self._print_summary(response)
        if response.tabular_analyses:
            self.console.print(self._build_tabular_table(response.tabular_analyses))
            self.console.print()
            if detailed:
                for path, analysis in sorted(response.tabular_analyses.items()):
                    if analysis.columns:
                        self.console.print(self._build_column_table(path, analysis))
                        self.console.print()
        self._print_score(response.score)
        self._print_issues(response.validation_results, limits)
        self._print_generated_files(response.generated_files)
        self._print_next_steps(response)

    def _print_header(self, response: PreflightResponse) -> None:
        timestamp = response.scan_timestamp.strftime("%Y-%m-%d %H:%M:%S UTC")
        body = (
            f"[bold]Dataset:[/bold] {escape(str(response.dataset_path))}\n"
            f"[bold]Scanned:[/bold] {timestamp}"
        )
        self.console.print()
        self.console.print(
            Panel(body, title="[bold magenta]Dataset Preflight Report[/bold magenta]")
        )

    def _print_summary(self, response: PreflightResponse) -> None:
        summary = response.summary
        self.console.print(
            f"[bold]Files scanned:[/bold] {summary.file_count:,}   "
            f"[bold]Total size:[/bold] {format_size(summary.total_size)}"
        )
        if not summary.type_counts:
            self.console.print()
            return
        table = Table(
            title="📁 File Types",
            show_header=True,
            header_style="bold cyan",
            border_style="bright_blue",
            title_style="bold magenta",
        )
        table.add_column("Type", style="cyan", no_wrap=True)
        table.add_column("Files", justify="right", style="yellow", no_wrap=True)
        ordered = sorted(
            summary.type_counts.items(), key=lambda item: (-item[1], str(item[0]))
        )
        for file_type, count in ordered:
            table.add_row(str(file_type), f"{count:,}")
        self.console.print(table)
        failed = response.failed_analyses
        if failed:
            self.console.print(
                f"[yellow]⚠[/yellow] {len(failed)} file(s) could not be analyzed"
            )
        self.console.print()

    def _build_tabular_table(self, analyses: dict[str, TabularAnalysis]) -> Table:
        table = Table(
            title="📊 Tabular Files",
            show_header=True,
            header_style="bold cyan",
            border_style="bright_blue",
            title_style="bold magenta",
        )
        table.add_column("File", style="cyan", overflow="fold", ratio=3)
        table.add_column("Delimiter", no_wrap=True)
        table.add_column("Header", justify="center", no_wrap=True)
        table.add_column("Columns", justify="right", style="yellow", no_wrap=True)
        table.add_column("Rows", justify="right", style="yellow", no_wrap=True)
        table.add_column("Types", style="dim", overflow="fold", ratio=2)
        for path, analysis in sorted(analyses.items()):
            types = ", ".join(
                sorted({str(column.column_type) for column in analysis.columns})
            )
            table.add_row(
                escape(path),
                analysis.delimiter.display_name,
                "✓" if analysis.has_header else "-",
                f"{analysis.column_count:,}",
                f"{analysis.row_count:,}",
                types,
            )
        return table

    def _build_column_table(self, path: str, analysis: TabularAnalysis) -> Table:
        table = Table(
            title=f"Columns of {escape(path)}",
            show_header=True,
            header_style="bold cyan",
            border_style="blue",
        )
        table.add_column("#", justify="right", style="dim", no_wrap=True)
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Type", style="green", no_wrap=True)
        table.add_column("Nulls", justify="right", style="yellow", no_wrap=True)
        table.add_column("Unique", justify="right", no_wrap=True)
        table.add_column("Samples", style="dim", overflow="fold")
        for column in analysis.columns:
            unique = f"{column.unique_count:,}{'+' if column.unique_saturated else ''}"
            table.add_row(
                str(column.index),
                escape(column.display_name),
                str(column.column_type),
                f"{column.null_count:,}",
                unique,
                escape(", ".join(column.sample_values)),
            )
        return table

    def _print_score(self, score: ComplianceScore) -> None:
        if score.score >= ScoreWeights.PASSING_SCORE:
            style = "bold green"
        elif score.score >= ScoreWeights.FAILING_SCORE:
            style = "bold yellow"
        else:
            style = "bold red"
        self.console.print(
            f"[bold]Compliance score:[/bold] [{style}]{score.score}/"
            f"{ScoreWeights.MAX_SCORE}[/{style}] ({score.grade})"
        )
        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("Principle", style="white", no_wrap=True)
        table.add_column("Score", justify="right", style="yellow", no_wrap=True)
        for principle in ScoreWeights.FAIR_PRINCIPLES:
            value = score.fair_scores.get(principle, 0)
            table.add_row(
                _FAIR_LABELS[principle], f"{value}/{ScoreWeights.FAIR_PRINCIPLE_MAX}"
            )
        self.console.print(table)
        self.console.print()

    def _print_issues(
        self, results: Sequence[ValidationResult], limits: IssueLimits
    ) -> None:
        self.console.print("[bold]Issues found[/bold]")
        if not results:
            self.console.print("[green]✓[/green] No issues found.")
            self.console.print()
            return
        for severity in (
            ValidationSeverity.CRITICAL,
            ValidationSeverity.WARNING,
            ValidationSeverity.INFO,
        ):
            issues = [r for r in results if r.severity is severity]
            if not issues:
                continue
            style, marker = _SEVERITY_STYLES[severity]
            self.console.print(
                f"[{style}]{severity.upper()} ({len(issues)})[/{style}]"
            )
            limit = limits.for_severity(severity)
            shown = issues if limit is None else issues[:limit]
            for issue in shown:
                location = f" ({escape(issue.file_path)})" if issue.file_path else ""
                self.console.print(
                    f"  [{style}]{marker}[/{style}] [bold]{issue.code}[/bold] "
                    f"{escape(issue.message)}{location}"
                )
                if issue.suggestion:
                    self.console.print(f"    [dim]→ {escape(issue.suggestion)}[/dim]")
            if len(issues) > len(shown):
                self.console.print(
                    f"  [dim]... and {len(issues) - len(shown)} more[/dim]"
                )
            self.console.print()

    def _print_generated_files(self, generated: Sequence[GeneratedFile]) -> None:
        if not generated:
            return
        self.console.print("[bold]📦 Generated files[/bold]")
        for item in generated:
            name = escape(item.path.name)
            if item.created:
                self.console.print(f"  [green]✓[/green] Created: {name}")
            else:
                reason = escape(item.reason or "already exists")
                self.console.print(f"  [dim]- Skipped: {name} ({reason})[/dim]")
        self.console.print()

    def _print_next_steps(self, response: PreflightResponse) -> None:
        score = response.score
        steps: list[str] = []
        if any(item.created for item in response.generated_files):
            steps.append("Review and complete all [TODO] sections in generated files")
        if score.critical_count:
            plural = "" if score.critical_count == 1 else "s"
            steps.append(
                f"Address {score.critical_count} critical issue{plural} before submission"
            )
        if score.warning_count:
            plural = "" if score.warning_count == 1 else "s"
            steps.append(
                f"Consider addressing {score.warning_count} warning{plural} "
                "to improve the score"
            )
        if steps:
            self.console.print("[bold]Next steps[/bold]")
            for number, step in enumerate(steps, start=1):
                self.console.print(f"  {number}. {escape(step)}")
        if score.score >= ScoreWeights.PASSING_SCORE and score.critical_count == 0:
            self.console.print(
                "[green]✓[/green] Dataset meets minimum compliance standards."
            )
        self.console.print()
