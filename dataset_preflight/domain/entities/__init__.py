"""Domain entities.

Core value objects: column types, tabular analyses, dataset files,
validation results and the machine-readable report.
"""

from .column_type import ColumnType, InferredType, ValueTypeCategory
from .dataset_file import DatasetSummary, FileInfo, FileType, format_size
from .file_analysis import (
    BinaryAnalysis,
    BinaryType,
    FileAnalysis,
    JsonAnalysis,
    JsonRootType,
    NotAnalyzed,
    TextAnalysis,
)
from .report import (
    FileStats,
    PreflightReport,
    ReportColumn,
    ReportGeneratedFile,
    ReportIssue,
    ReportScore,
    ReportTabularFile,
)
from .tabular import ColumnReport, Delimiter, TabularAnalysis
from .validation import ValidationResult, ValidationSeverity

__all__ = [
    "BinaryAnalysis",
    "BinaryType",
    "ColumnReport",
    "ColumnType",
    "DatasetSummary",
    "Delimiter",
    "FileAnalysis",
    "FileInfo",
    "FileStats",
    "FileType",
    "InferredType",
    "JsonAnalysis",
    "JsonRootType",
    "NotAnalyzed",
    "PreflightReport",
    "ReportColumn",
    "ReportGeneratedFile",
    "ReportIssue",
    "ReportScore",
    "ReportTabularFile",
    "TabularAnalysis",
    "TextAnalysis",
    "ValidationResult",
    "ValidationSeverity",
    "ValueTypeCategory",
    "format_size",
]
