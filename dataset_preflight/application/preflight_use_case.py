"""Preflight use case.

Runs the whole lint over one dataset directory: scan, per-file analysis,
compliance rules, scoring and, when requested, documentation generation.
Validation always reflects the dataset as it was found; generated files are
reported separately.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..constants import Limits
from ..domain.entities.dataset_file import DatasetSummary
from ..domain.services.compliance_score import score_results
from ..domain.services.rules import RuleContext, run_all_rules
from .models import PreflightResponse

if TYPE_CHECKING:
    from pathlib import Path

    from ..domain.entities.dataset_file import FileInfo
    from ..domain.entities.file_analysis import FileAnalysis
    from .models import GeneratedFile, PreflightRequest
    from .ports.services import (
        DatasetDocumentsPort,
        DatasetScannerPort,
        DocumentationWriterPort,
        FileAnalyzerPort,
        LoggerPort,
    )


@dataclass(slots=True)
class PreflightDependencies:
    logger: LoggerPort
    scanner: DatasetScannerPort
    file_analyzer: FileAnalyzerPort
    documents: DatasetDocumentsPort
    documentation_writer: DocumentationWriterPort | None = None
    min_readme_length: int = Limits.MIN_README_LENGTH
    large_file_bytes: int = Limits.LARGE_FILE_BYTES


class PreflightUseCase:
    """Use case for linting a dataset directory.

    All collaborators are injected through ``PreflightDependencies`` so the
    workflow can run against fakes in tests.
    """

    def __init__(self, dependencies: PreflightDependencies) -> None:
        super().__init__()
        self._deps = dependencies
        self.logger = dependencies.logger

    def execute(self, request: PreflightRequest) -> PreflightResponse:
        root = request.dataset_path
        self.logger.log_scan_start(root)
        files = self._deps.scanner.scan(root)
        summary = DatasetSummary.from_files(root, files)
        self.logger.log_scan_complete(summary.file_count, summary.total_size)

        analyses = self._deps.file_analyzer.analyze_all(files)
        context = self._build_rule_context(root, files, analyses)
        results = run_all_rules(context)
        score = score_results(results)
        self.logger.log_score(score)

        generated: list[GeneratedFile] = []
        if request.generate:
            generated = self._generate(request, files, analyses)

        self.logger.log_final_stats()
        return PreflightResponse(
            dataset_path=root,
            summary=summary,
            score=score,
            files=files,
            analyses=analyses,
            validation_results=results,
            generated_files=generated,
        )

    def _build_rule_context(
        self,
        root: Path,
        files: list[FileInfo],
        analyses: dict[str, FileAnalysis],
    ) -> RuleContext:
        documents = self._deps.documents
        return RuleContext(
            files=tuple(files),
            analyses=analyses,
            readme=documents.read_readme(files),
            metadata=documents.read_metadata(files),
            license=documents.read_license(files),
            datacard=documents.read_datacard(files),
            manifest=documents.read_manifest(root),
            min_readme_length=self._deps.min_readme_length,
            large_file_bytes=self._deps.large_file_bytes,
        )

    def _generate(
        self,
        request: PreflightRequest,
        files: list[FileInfo],
        analyses: dict[str, FileAnalysis],
    ) -> list[GeneratedFile]:
        writer = self._deps.documentation_writer
        if writer is None:
            self.logger.warning("Documentation generation requested but no writer is configured")
            return []
        output_dir = request.resolved_output_dir
        self.logger.verbose(f"Generating documentation in: {output_dir}")
        return writer.write_missing(
            request.dataset_path,
            output_dir,
            files,
            analyses,
            write_profiles=request.write_profiles,
        )
