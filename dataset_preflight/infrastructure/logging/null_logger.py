from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path

    from ...application.models import GeneratedFile
    from ...domain.entities.file_analysis import FileAnalysis
    from ...domain.services.compliance_score import ComplianceScore


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_scan_start(self, dataset_path: Path) -> None:
        return None

    @override
    def log_scan_complete(self, file_count: int, total_size: int) -> None:
        return None

    @override
    def log_file_analyzed(self, relative_path: str, analysis: FileAnalysis) -> None:
        return None

    @override
    def log_generated_file(self, generated: GeneratedFile) -> None:
        return None

    @override
    def log_score(self, score: ComplianceScore) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
