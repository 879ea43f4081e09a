from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import override

from ... import __version__
from ...application.ports.services import ReportWriterPort
from ...domain.entities.report import (
    FileStats,
    PreflightReport,
    ReportColumn,
    ReportGeneratedFile,
    ReportIssue,
    ReportScore,
    ReportTabularFile,
)
from ..io.exceptions import DocumentWriteError

if TYPE_CHECKING:
    from pathlib import Path

    from ...application.models import PreflightResponse
    from ...domain.entities.tabular import TabularAnalysis


def _tabular_entry(path: str, analysis: TabularAnalysis) -> ReportTabularFile:
    return ReportTabularFile(
        path=path,
        delimiter=analysis.delimiter.display_name,
        has_header=analysis.has_header,
        column_count=analysis.column_count,
        row_count=analysis.row_count,
        columns=[
            ReportColumn(
                index=column.index,
                name=column.display_name,
                type=str(column.column_type),
                null_count=column.null_count,
                unique_count=column.unique_count,
                sample_values=list(column.sample_values),
            )
            for column in analysis.columns
        ],
    )


def build_report(response: PreflightResponse) -> PreflightReport:
    score = response.score
    fair = score.fair_scores
    return PreflightReport(
        dataset_path=str(response.dataset_path),
        scan_timestamp=response.scan_timestamp.isoformat(),
        tool_version=__version__,
        score=ReportScore(
            total=score.score,
            findable=fair.get("F", 0),
            accessible=fair.get("A", 0),
            interoperable=fair.get("I", 0),
            reusable=fair.get("R", 0),
            critical_count=score.critical_count,
            warning_count=score.warning_count,
            info_count=score.info_count,
        ),
        files=FileStats(
            count=response.summary.file_count,
            total_size=response.summary.total_size,
            types={
                str(file_type): count
                for file_type, count in response.summary.type_counts.items()
            },
        ),
        tabular_files=[
            _tabular_entry(path, analysis)
            for path, analysis in sorted(response.tabular_analyses.items())
        ],
        validation_results=[
            ReportIssue(
                severity=result.severity,
                code=result.code,
                message=result.message,
                suggestion=result.suggestion,
                file_path=result.file_path,
                line_number=result.line_number,
            )
            for result in response.validation_results
        ],
        generated_files=[
            ReportGeneratedFile(
                path=str(generated.path),
                description=generated.description,
                was_created=generated.created,
                reason=generated.reason,
            )
            for generated in response.generated_files
        ],
        exit_code=response.exit_code,
    )


class JsonReportWriter(ReportWriterPort):
    pass

    @override
    def render(self, response: PreflightResponse) -> str:
        return build_report(response).model_dump_json(indent=2) + "\n"

    @override
    def write_json(self, output_path: Path, response: PreflightResponse) -> Path:
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(self.render(response), encoding="utf-8")
        except OSError as e:
            raise DocumentWriteError(f"Failed to write {output_path}: {e}") from e
        return output_path
