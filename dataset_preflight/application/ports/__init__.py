"""Ports (Protocols) the application layer depends on."""

from .services import (
    DatasetDocumentsPort,
    DatasetScannerPort,
    DocumentationWriterPort,
    FileAnalyzerPort,
    LoggerPort,
    ReportWriterPort,
)

__all__ = [
    "DatasetDocumentsPort",
    "DatasetScannerPort",
    "DocumentationWriterPort",
    "FileAnalyzerPort",
    "LoggerPort",
    "ReportWriterPort",
]
