from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from pathlib import Path, PurePosixPath

from ...constants import Patterns


class FileType(StrEnum):
    CSV = "csv"
    TSV = "tsv"
    JSON = "json"
    TEXT = "text"
    MARKDOWN = "markdown"
    BINARY = "binary"
    UNKNOWN = "unknown"

    @classmethod
    def from_extension(cls, extension: str) -> FileType:
        return _EXTENSION_TYPES.get(extension.lower().lstrip("."), cls.UNKNOWN)

    @classmethod
    def from_path(cls, path: Path | PurePosixPath) -> FileType:
        return cls.from_extension(path.suffix)

    @property
    def is_tabular(self) -> bool:
        return self in (FileType.CSV, FileType.TSV)


_EXTENSION_TYPES: dict[str, FileType] = {
    "csv": FileType.CSV,
    "tsv": FileType.TSV,
    "json": FileType.JSON,
    "txt": FileType.TEXT,
    "md": FileType.MARKDOWN,
    "markdown": FileType.MARKDOWN,
    **{
        ext: FileType.BINARY
        for ext in (
            "bin",
            "dat",
            "hdf5",
            "h5",
            "nc",
            "netcdf",
            "png",
            "jpg",
            "jpeg",
            "pdf",
        )
    },
}


@dataclass(frozen=True, slots=True)
class FileInfo:
    full_path: Path
    relative_path: PurePosixPath
    size_bytes: int
    modified: datetime | None
    file_type: FileType
    sha256: str | None = None
    is_hidden: bool = False

    @property
    def name(self) -> str:
        return self.relative_path.name

    @property
    def depth(self) -> int:
        return len(self.relative_path.parts)

    @property
    def is_documentation(self) -> bool:
        if self.file_type in (FileType.MARKDOWN, FileType.TEXT):
            return True
        upper = self.name.upper()
        return upper.startswith(Patterns.DOCUMENTATION_PREFIXES)

    @property
    def is_data(self) -> bool:
        return self.file_type in (
            FileType.CSV,
            FileType.TSV,
            FileType.JSON,
            FileType.BINARY,
        )


@dataclass(frozen=True, slots=True)
class DatasetSummary:
    path: Path
    file_count: int
    total_size: int
    type_counts: dict[FileType, int]

    @classmethod
    def from_files(cls, path: Path, files: list[FileInfo]) -> DatasetSummary:
        counts = Counter(info.file_type for info in files)
        return cls(
            path=path,
            file_count=len(files),
            total_size=sum(info.size_bytes for info in files),
            type_counts=dict(sorted(counts.items(), key=lambda item: item[0].value)),
        )

    def format_size(self) -> str:
        return format_size(self.total_size)


def format_size(size_bytes: int) -> str:
    kib = 1024
    mib = kib * 1024
    gib = mib * 1024
    if size_bytes >= gib:
        return f"{size_bytes / gib:.2f} GB"
    if size_bytes >= mib:
        return f"{size_bytes / mib:.2f} MB"
    if size_bytes >= kib:
        return f"{size_bytes / kib:.2f} KB"
    return f"{size_bytes} B"
