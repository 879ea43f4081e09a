"""Per-file analysis results.

Each analyzable file type has its own result record. ``FileAnalysis`` is the
union the dispatcher returns; ``NotAnalyzed`` carries the reason a file was
skipped or failed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .tabular import TabularAnalysis


class JsonRootType(StrEnum):
    OBJECT = "object"
    ARRAY = "array"


@dataclass(frozen=True, slots=True)
class JsonAnalysis:
    is_valid: bool
    root_type: JsonRootType | None = None
    top_level_keys: tuple[str, ...] = ()
    error: str | None = None


@dataclass(frozen=True, slots=True)
class TextAnalysis:
    line_count: int
    word_count: int
    is_documentation: bool
    encoding_issues: tuple[str, ...] = ()


class BinaryType(StrEnum):
    HDF5 = "hdf5"
    NETCDF = "netcdf"
    PNG = "png"
    JPEG = "jpeg"
    PDF = "pdf"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class BinaryAnalysis:
    binary_type: BinaryType
    is_binary: bool


@dataclass(frozen=True, slots=True)
class NotAnalyzed:
    reason: str


FileAnalysis = TabularAnalysis | JsonAnalysis | TextAnalysis | BinaryAnalysis | NotAnalyzed
