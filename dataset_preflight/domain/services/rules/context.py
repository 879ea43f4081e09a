from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from ....constants import Defaults, Limits
from ...entities.dataset_file import FileInfo
from ...entities.file_analysis import FileAnalysis


@dataclass(frozen=True, slots=True)
class DocumentText:
    relative_path: str
    text: str | None = None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class ManifestSnapshot:
    entries: Mapping[str, str] = field(default_factory=dict)
    error: str | None = None


@dataclass(frozen=True, slots=True)
class RuleContext:
    files: tuple[FileInfo, ...]
    analyses: Mapping[str, FileAnalysis] = field(default_factory=dict)
    readme: DocumentText | None = None
    metadata: DocumentText | None = None
    license: DocumentText | None = None
    datacard: DocumentText | None = None
    manifest: ManifestSnapshot | None = None
    min_readme_length: int = Limits.MIN_README_LENGTH
    large_file_bytes: int = Limits.LARGE_FILE_BYTES

    def names(self) -> list[str]:
        return [info.name for info in self.files]

    def has_name_prefix(self, *prefixes: str) -> bool:
        return any(name.upper().startswith(prefixes) for name in self.names())

    def has_name(self, name: str) -> bool:
        return name in self.names()

    @property
    def has_readme(self) -> bool:
        return self.has_name_prefix("README")

    @property
    def has_license(self) -> bool:
        return self.has_name_prefix("LICENSE", "LICENCE")

    @property
    def has_metadata(self) -> bool:
        return self.has_name(Defaults.METADATA_FILE_NAME)


def find_readme(files: tuple[FileInfo, ...] | list[FileInfo]) -> FileInfo | None:
    return next((info for info in files if info.name.upper().startswith("README")), None)


def find_metadata(files: tuple[FileInfo, ...] | list[FileInfo]) -> FileInfo | None:
    return next(
        (info for info in files if info.name == Defaults.METADATA_FILE_NAME), None
    )


def find_license(files: tuple[FileInfo, ...] | list[FileInfo]) -> FileInfo | None:
    return next(
        (info for info in files if info.name.upper().startswith(("LICENSE", "LICENCE"))),
        None,
    )


def find_datacard(files: tuple[FileInfo, ...] | list[FileInfo]) -> FileInfo | None:
    return next(
        (info for info in files if info.name.upper() == Defaults.DATACARD_FILE_NAME.upper()),
        None,
    )
