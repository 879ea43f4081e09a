"""Filesystem-backed repositories."""

from .dataset_documents import DatasetDocuments, parse_manifest
from .dataset_scanner import DatasetScanner, sha256_file

__all__ = ["DatasetDocuments", "DatasetScanner", "parse_manifest", "sha256_file"]
