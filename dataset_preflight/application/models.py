from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from ..domain.entities.file_analysis import NotAnalyzed
from ..domain.entities.tabular import TabularAnalysis

if TYPE_CHECKING:
    from pathlib import Path

    from ..domain.entities.dataset_file import DatasetSummary, FileInfo
    from ..domain.entities.file_analysis import FileAnalysis
    from ..domain.entities.validation import ValidationResult
    from ..domain.services.compliance_score import ComplianceScore


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _empty_files() -> list[FileInfo]:
    return []


def _empty_analyses() -> dict[str, FileAnalysis]:
    return {}


def _empty_results() -> list[ValidationResult]:
    return []


def _empty_generated() -> list[GeneratedFile]:
    return []


@dataclass(slots=True)
class GeneratedFile:
    path: Path
    description: str
    created: bool
    reason: str | None = None

    @property
    def status(self) -> str:
        return "created" if self.created else "skipped"


@dataclass(slots=True)
class PreflightRequest:
    dataset_path: Path
    output_dir: Path | None = None
    generate: bool = False
    write_profiles: bool = False

    @property
    def resolved_output_dir(self) -> Path:
        return self.output_dir or self.dataset_path


@dataclass(slots=True)
class PreflightResponse:
    dataset_path: Path
    summary: DatasetSummary
    score: ComplianceScore
    scan_timestamp: datetime = field(default_factory=_utc_now)
    files: list[FileInfo] = field(default_factory=_empty_files)
    analyses: dict[str, FileAnalysis] = field(default_factory=_empty_analyses)
    validation_results: list[ValidationResult] = field(default_factory=_empty_results)
    generated_files: list[GeneratedFile] = field(default_factory=_empty_generated)

    @property
    def exit_code(self) -> int:
        return self.score.exit_code

    @property
    def tabular_analyses(self) -> dict[str, TabularAnalysis]:
        return {
            path: analysis
            for path, analysis in self.analyses.items()
            if isinstance(analysis, TabularAnalysis)
        }

    @property
    def failed_analyses(self) -> dict[str, NotAnalyzed]:
        return {
            path: analysis
            for path, analysis in self.analyses.items()
            if isinstance(analysis, NotAnalyzed)
        }
