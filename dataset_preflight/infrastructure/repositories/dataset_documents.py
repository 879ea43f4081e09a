"""Reads the documentation files the metadata, content and integrity rules inspect."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ...constants import Defaults
from ...domain.services.rules import (
    DocumentText,
    ManifestSnapshot,
    find_datacard,
    find_license,
    find_metadata,
    find_readme,
)

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.dataset_file import FileInfo

_HEX_DIGEST = re.compile(r"^[0-9a-fA-F]{64}$")


def parse_manifest(text: str) -> dict[str, str]:
    """Parse ``<sha256>  <path>`` lines.

    Raises:
        ValueError: on a line that is not a digest followed by a path.
    """
    entries: dict[str, str] = {}
    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        digest, sep, path = line.partition(" ")
        path = path.lstrip(" *")
        if not sep or not path:
            raise ValueError(f"Invalid format on line {line_number}: expected 'hash  path'")
        if not _HEX_DIGEST.match(digest):
            raise ValueError(
                f"Invalid hash on line {line_number}: expected 64 hex characters"
            )
        entries[path] = digest.lower()
    return entries


class DatasetDocuments:
    pass

    def __init__(self, encoding: str = Defaults.ENCODING) -> None:
        super().__init__()
        self.encoding = encoding

    def _read(self, info: FileInfo) -> DocumentText:
        try:
            text = info.full_path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            return DocumentText(str(info.relative_path), error=str(e))
        return DocumentText(str(info.relative_path), text=text)

    def read_readme(self, files: list[FileInfo]) -> DocumentText | None:
        info = find_readme(files)
        return self._read(info) if info is not None else None

    def read_metadata(self, files: list[FileInfo]) -> DocumentText | None:
        info = find_metadata(files)
        return self._read(info) if info is not None else None

    def read_license(self, files: list[FileInfo]) -> DocumentText | None:
        info = find_license(files)
        return self._read(info) if info is not None else None

    def read_datacard(self, files: list[FileInfo]) -> DocumentText | None:
        info = find_datacard(files)
        return self._read(info) if info is not None else None

    def read_manifest(self, root: Path) -> ManifestSnapshot | None:
        path = root / Defaults.MANIFEST_FILE_NAME
        if not path.is_file():
            return None
        try:
            return ManifestSnapshot(
                entries=parse_manifest(path.read_text(encoding=self.encoding))
            )
        except (OSError, UnicodeDecodeError, ValueError) as e:
            return ManifestSnapshot(error=str(e))
