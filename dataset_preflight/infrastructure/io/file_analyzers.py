from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ...constants import Defaults, Limits, Patterns, Thresholds
from ...domain.entities.dataset_file import FileType
from ...domain.entities.file_analysis import (
    BinaryAnalysis,
    BinaryType,
    FileAnalysis,
    JsonAnalysis,
    JsonRootType,
    NotAnalyzed,
    TextAnalysis,
)
from ..logging.null_logger import NullLogger
from .exceptions import DataSourceError

if TYPE_CHECKING:
    from pathlib import Path

    from ...application.ports.services import LoggerPort
    from ...domain.entities.dataset_file import FileInfo
    from .tabular_analyzer import TabularAnalyzer

_MAGIC_NUMBERS: tuple[tuple[bytes, BinaryType], ...] = (
    (b"\x89HDF\r\n\x1a\n", BinaryType.HDF5),
    (b"\x89PNG\r\n\x1a\n", BinaryType.PNG),
    (b"\xff\xd8\xff", BinaryType.JPEG),
    (b"%PDF-", BinaryType.PDF),
    (b"CDF\x01", BinaryType.NETCDF),
    (b"CDF\x02", BinaryType.NETCDF),
)
_PRINTABLE_BYTES = frozenset({9, 10, 13, *range(32, 127)})
_DOCUMENTATION_EXTENSIONS = frozenset({".md", ".markdown", ".rst", ".txt"})
_DOCUMENTATION_NAMES = (*Patterns.DOCUMENTATION_PREFIXES, "CHANGELOG")


def detect_binary_type(header: bytes) -> BinaryType:
    if len(header) < 4:
        return BinaryType.UNKNOWN
    for magic, binary_type in _MAGIC_NUMBERS:
        if header.startswith(magic):
            return binary_type
    return BinaryType.UNKNOWN


def is_binary_sample(sample: bytes) -> bool:
    if not sample:
        return False
    if b"\x00" in sample:
        return True
    non_printable = sum(1 for byte in sample if byte not in _PRINTABLE_BYTES)
    return non_printable / len(sample) > Thresholds.NON_PRINTABLE_RATIO


def analyze_binary(path: Path) -> BinaryAnalysis:
    with path.open("rb") as handle:
        sample = handle.read(Limits.BINARY_SAMPLE_BYTES)
    return BinaryAnalysis(
        binary_type=detect_binary_type(sample[:16]), is_binary=is_binary_sample(sample)
    )


def analyze_json(path: Path, encoding: str = Defaults.ENCODING) -> JsonAnalysis:
    text = path.read_text(encoding=encoding)
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        return JsonAnalysis(is_valid=False, error=f"{e.msg} (line {e.lineno})")
    if isinstance(document, dict):
        return JsonAnalysis(
            is_valid=True,
            root_type=JsonRootType.OBJECT,
            top_level_keys=tuple(str(key) for key in document),
        )
    if isinstance(document, list):
        return JsonAnalysis(is_valid=True, root_type=JsonRootType.ARRAY)
    return JsonAnalysis(is_valid=False, error="root must be an object or array")


def _first_control_character(line: str) -> int | None:
    for column, char in enumerate(line, start=1):
        if char in "\n\r\t":
            continue
        if ord(char) < 32 or 127 <= ord(char) < 160:
            return column
    return None


def analyze_text(path: Path, encoding: str = Defaults.ENCODING) -> TextAnalysis:
    line_count = 0
    word_count = 0
    issues: list[str] = []
    looks_like_docs = False
    with path.open("rb") as handle:
        for line_number, raw in enumerate(handle, start=1):
            try:
                line = raw.decode(encoding)
            except UnicodeDecodeError as e:
                issues.append(f"Line {line_number}: {e.reason}")
                continue
            line_count += 1
            word_count += len(line.split())
            lower = line.lower()
            if line.lstrip().startswith("#") or any(
                keyword in lower for keyword in Patterns.DOCUMENTATION_KEYWORDS
            ):
                looks_like_docs = True
            if "\x00" in line:
                issues.append(
                    f"Line {line_number}: Contains null bytes (may be binary file)"
                )
            # Only the first control character per line is reported.
            elif (column := _first_control_character(line)) is not None:
                char = line[column - 1]
                issues.append(
                    f"Line {line_number}, column {column}: "
                    f"Unusual control character (U+{ord(char):04X})"
                )
    is_documentation = (
        looks_like_docs
        or path.suffix.lower() in _DOCUMENTATION_EXTENSIONS
        or path.name.upper().startswith(_DOCUMENTATION_NAMES)
    )
    return TextAnalysis(
        line_count=line_count,
        word_count=word_count,
        is_documentation=is_documentation,
        encoding_issues=tuple(issues),
    )


class FileAnalyzer:
    pass

    def __init__(
        self,
        tabular_analyzer: TabularAnalyzer,
        *,
        encoding: str = Defaults.ENCODING,
        logger: LoggerPort | None = None,
    ) -> None:
        super().__init__()
        self.tabular_analyzer = tabular_analyzer
        self.encoding = encoding
        self.logger = logger or NullLogger()

    def analyze(self, info: FileInfo) -> FileAnalysis:
        try:
            return self._dispatch(info)
        except DataSourceError as e:
            reason = str(e)
        except FileNotFoundError:
            reason = f"File not found: {info.full_path}"
        except (OSError, UnicodeDecodeError) as e:
            reason = f"Failed to read {info.full_path}: {e}"
        self.logger.warning(f"Could not analyze {info.relative_path}: {reason}")
        return NotAnalyzed(reason=reason)

    def _dispatch(self, info: FileInfo) -> FileAnalysis:
        match info.file_type:
            case FileType.CSV | FileType.TSV:
                return self.tabular_analyzer.analyze(info.full_path)
            case FileType.JSON:
                return analyze_json(info.full_path, self.encoding)
            case FileType.TEXT | FileType.MARKDOWN:
                return analyze_text(info.full_path, self.encoding)
            case FileType.BINARY:
                return analyze_binary(info.full_path)
            case _:
                return NotAnalyzed(reason=f"No analyzer for {info.file_type} files")

    def analyze_all(self, files: list[FileInfo]) -> dict[str, FileAnalysis]:
        analyses: dict[str, FileAnalysis] = {}
        for info in files:
            analysis = self.analyze(info)
            analyses[str(info.relative_path)] = analysis
            self.logger.log_file_analyzed(str(info.relative_path), analysis)
        return analyses
