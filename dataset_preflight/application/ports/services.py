from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.dataset_file import FileInfo
    from ...domain.entities.file_analysis import FileAnalysis
    from ...domain.services.compliance_score import ComplianceScore
    from ...domain.services.rules import DocumentText, ManifestSnapshot
    from ..models import GeneratedFile, PreflightResponse


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_scan_start(self, dataset_path: Path) -> None: ...

    def log_scan_complete(self, file_count: int, total_size: int) -> None: ...

    def log_file_analyzed(self, relative_path: str, analysis: FileAnalysis) -> None: ...

    def log_generated_file(self, generated: GeneratedFile) -> None: ...

    def log_score(self, score: ComplianceScore) -> None: ...

    def log_final_stats(self) -> None: ...


@runtime_checkable
class DatasetScannerPort(Protocol):
    pass

    def scan(self, root: Path) -> list[FileInfo]: ...


@runtime_checkable
class FileAnalyzerPort(Protocol):
    pass

    def analyze_all(self, files: list[FileInfo]) -> dict[str, FileAnalysis]: ...


@runtime_checkable
class DatasetDocumentsPort(Protocol):
    pass

    def read_readme(self, files: list[FileInfo]) -> DocumentText | None: ...

    def read_metadata(self, files: list[FileInfo]) -> DocumentText | None: ...

    def read_license(self, files: list[FileInfo]) -> DocumentText | None: ...

    def read_datacard(self, files: list[FileInfo]) -> DocumentText | None: ...

    def read_manifest(self, root: Path) -> ManifestSnapshot | None: ...


@runtime_checkable
class DocumentationWriterPort(Protocol):
    pass

    def write_missing(
        self,
        root: Path,
        output_dir: Path,
        files: list[FileInfo],
        analyses: dict[str, FileAnalysis],
        *,
        write_profiles: bool = False,
    ) -> list[GeneratedFile]: ...


@runtime_checkable
class ReportWriterPort(Protocol):
    pass

    def render(self, response: PreflightResponse) -> str: ...

    def write_json(self, output_path: Path, response: PreflightResponse) -> Path: ...
