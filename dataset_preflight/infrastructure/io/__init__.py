"""I/O adapters: tabular analysis, per-file analyzers and documentation writers."""

from .documentation_writer import DocumentationWriter
from .exceptions import (
    DataParseError,
    DatasetNotDirectoryError,
    DatasetNotFoundError,
    DatasetScanError,
    DataSourceError,
    DataSourceNotFoundError,
    DocumentWriteError,
    PreflightInfrastructureError,
)
from .file_analyzers import FileAnalyzer
from .tabular_analyzer import TabularAnalyzer

__all__ = [
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "DatasetNotDirectoryError",
    "DatasetNotFoundError",
    "DatasetScanError",
    "DocumentWriteError",
    "DocumentationWriter",
    "FileAnalyzer",
    "PreflightInfrastructureError",
    "TabularAnalyzer",
]
