from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.preflight_use_case import PreflightDependencies, PreflightUseCase
from ..config import PreflightConfig
from .io.documentation_writer import DocumentationWriter
from .io.file_analyzers import FileAnalyzer
from .io.tabular_analyzer import TabularAnalyzer
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .repositories.dataset_documents import DatasetDocuments
from .repositories.dataset_scanner import DatasetScanner
from .services.json_report_writer import JsonReportWriter

if TYPE_CHECKING:
    from ..application.ports.services import (
        DatasetDocumentsPort,
        DatasetScannerPort,
        DocumentationWriterPort,
        FileAnalyzerPort,
        LoggerPort,
        ReportWriterPort,
    )


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config: PreflightConfig | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self.config = config or PreflightConfig()
        self._logger_instance: LoggerPort | None = None
        self._tabular_analyzer_instance: TabularAnalyzer | None = None
        self._file_analyzer_instance: FileAnalyzerPort | None = None
        self._scanner_instance: DatasetScannerPort | None = None
        self._documents_instance: DatasetDocumentsPort | None = None
        self._documentation_writer_instance: DocumentationWriterPort | None = None
        self._report_writer_instance: ReportWriterPort | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_tabular_analyzer(self) -> TabularAnalyzer:
        if self._tabular_analyzer_instance is None:
            self._tabular_analyzer_instance = TabularAnalyzer.from_config(
                self.config, logger=self.create_logger()
            )
        return self._tabular_analyzer_instance

    def create_file_analyzer(self) -> FileAnalyzerPort:
        if self._file_analyzer_instance is None:
            self._file_analyzer_instance = FileAnalyzer(
                self.create_tabular_analyzer(),
                encoding=self.config.encoding,
                logger=self.create_logger(),
            )
        return self._file_analyzer_instance

    def create_dataset_scanner(self) -> DatasetScannerPort:
        if self._scanner_instance is None:
            self._scanner_instance = DatasetScanner(
                compute_hashes=self.config.compute_hashes,
                max_depth=self.config.max_depth,
                logger=self.create_logger(),
            )
        return self._scanner_instance

    def create_dataset_documents(self) -> DatasetDocumentsPort:
        if self._documents_instance is None:
            self._documents_instance = DatasetDocuments(encoding=self.config.encoding)
        return self._documents_instance

    def create_documentation_writer(self) -> DocumentationWriterPort:
        if self._documentation_writer_instance is None:
            self._documentation_writer_instance = DocumentationWriter(
                logger=self.create_logger()
            )
        return self._documentation_writer_instance

    def create_report_writer(self) -> ReportWriterPort:
        if self._report_writer_instance is None:
            self._report_writer_instance = JsonReportWriter()
        return self._report_writer_instance

    def create_preflight_use_case(self) -> PreflightUseCase:
        dependencies = PreflightDependencies(
            logger=self.create_logger(),
            scanner=self.create_dataset_scanner(),
            file_analyzer=self.create_file_analyzer(),
            documents=self.create_dataset_documents(),
            documentation_writer=self.create_documentation_writer(),
            min_readme_length=self.config.min_readme_length,
            large_file_bytes=self.config.large_file_bytes,
        )
        return PreflightUseCase(dependencies)
