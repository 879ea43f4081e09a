from __future__ import annotations

from datetime import UTC, datetime
import hashlib
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from ...constants import Limits, Patterns
from ...domain.entities.dataset_file import FileInfo, FileType
from ..io.exceptions import DatasetNotDirectoryError, DatasetNotFoundError
from ..logging.null_logger import NullLogger

if TYPE_CHECKING:
    from ...application.ports.services import LoggerPort


def sha256_file(path: Path, chunk_size: int = Limits.HASH_CHUNK_BYTES) -> str:
    digest = hashlib.sha256()
    with path.open("rb") as handle:
        while chunk := handle.read(chunk_size):
            digest.update(chunk)
    return digest.hexdigest()


class DatasetScanner:
    pass

    def __init__(
        self,
        *,
        compute_hashes: bool = True,
        max_depth: int = Limits.MAX_SCAN_DEPTH,
        logger: LoggerPort | None = None,
    ) -> None:
        super().__init__()
        self.compute_hashes = compute_hashes
        self.max_depth = max_depth
        self.logger = logger or NullLogger()

    def scan(self, root: Path) -> list[FileInfo]:
        if not root.exists():
            raise DatasetNotFoundError(f"Dataset path not found: {root}")
        if not root.is_dir():
            raise DatasetNotDirectoryError(f"Dataset path is not a directory: {root}")
        files: list[FileInfo] = []
        self._walk(root, root, 0, files)
        files.sort(key=lambda info: str(info.relative_path))
        return files

    def _walk(self, root: Path, current: Path, depth: int, files: list[FileInfo]) -> None:
        if depth > self.max_depth:
            self.logger.warning(f"Maximum depth exceeded at {current}")
            return
        try:
            entries = sorted(current.iterdir())
        except OSError as e:
            self.logger.warning(f"Cannot read directory {current}: {e}")
            return
        for entry in entries:
            if entry.name.startswith("."):
                continue
            if entry.is_symlink():
                self.logger.debug(f"Skipping symlink: {entry}")
                continue
            try:
                if entry.is_dir():
                    if entry.name not in Patterns.SKIP_DIRS:
                        self._walk(root, entry, depth + 1, files)
                    continue
                if entry.is_file():
                    files.append(self._build_file_info(root, entry))
            except OSError as e:
                self.logger.warning(f"Cannot read {entry}: {e}")

    def _build_file_info(self, root: Path, path: Path) -> FileInfo:
        stat = path.stat()
        relative = PurePosixPath(path.relative_to(root).as_posix())
        return FileInfo(
            full_path=path,
            relative_path=relative,
            size_bytes=stat.st_size,
            modified=datetime.fromtimestamp(stat.st_mtime, tz=UTC),
            file_type=FileType.from_path(relative),
            sha256=sha256_file(path) if self.compute_hashes else None,
            is_hidden=path.name.startswith("."),
        )
