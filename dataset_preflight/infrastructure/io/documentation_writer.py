"""Documentation generators.

Writes the files a dataset is missing: README, metadata.json, DATACARD,
a SHA-256 manifest, and one JSON Schema per analyzed tabular file. Existing
files are never overwritten; they are reported as skipped instead.
"""

from __future__ import annotations

from datetime import UTC, datetime
import json
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from ... import __version__
from ...application.models import GeneratedFile
from ...constants import Defaults
from ...domain.entities.column_type import ColumnType
from ...domain.entities.dataset_file import DatasetSummary
from ...domain.entities.tabular import TabularAnalysis
from ..logging.null_logger import NullLogger
from .exceptions import DocumentWriteError

if TYPE_CHECKING:
    from collections.abc import Callable

    from ...application.ports.services import LoggerPort
    from ...domain.entities.dataset_file import FileInfo
    from ...domain.entities.file_analysis import FileAnalysis

TOOL_NAME = "dataset-preflight"

_JSON_SCHEMA_TYPES = {
    ColumnType.INTEGER: "integer",
    ColumnType.FLOAT: "number",
    ColumnType.BOOLEAN: "boolean",
}


def _timestamp(moment: datetime | None = None) -> str:
    return (moment or datetime.now(UTC)).strftime("%Y-%m-%d %H:%M:%S UTC")


def _type_lines(summary: DatasetSummary) -> list[str]:
    return [f"- {file_type}: {count} files" for file_type, count in summary.type_counts.items()]


def render_readme(summary: DatasetSummary, generated_at: str) -> str:
    lines = [
        "# [TODO: Dataset Title]",
        "",
        "[TODO: One-paragraph description of what this dataset contains and why it exists.]",
        "",
        "## Contents",
        "",
        f"This dataset contains {summary.file_count} files totaling {summary.format_size()}.",
        "",
        *_type_lines(summary),
        "",
        "## Usage",
        "",
        "[TODO: Explain how to load and interpret the data.]",
        "",
        "## License",
        "",
        "[TODO: State the license, and add a LICENSE file.]",
        "",
        "## Citation",
        "",
        "[TODO: How should others cite this dataset?]",
        "",
        "---",
        "",
        f"Generated by {TOOL_NAME} {__version__} on {generated_at}.",
        "Review and complete all [TODO] sections before publication.",
        "",
    ]
    return "\n".join(lines)


def render_metadata(summary: DatasetSummary, generated_at: str) -> str:
    document = {
        "title": "[TODO: Dataset Title]",
        "description": "[TODO: Provide a comprehensive description of this dataset]",
        "creator": "[TODO: Name of dataset creator or organization]",
        "date": "[TODO: YYYY-MM-DD]",
        "license": "[TODO: License identifier, e.g., MIT, CC-BY-4.0]",
        "keywords": ["[TODO: keyword1]", "[TODO: keyword2]"],
        "contact": {
            "name": "[TODO: Contact name]",
            "email": "[TODO: contact@example.com]",
        },
        "files": {
            "count": summary.file_count,
            "total_size_bytes": summary.total_size,
            "types": {str(file_type): count for file_type, count in summary.type_counts.items()},
        },
        "dataset_preflight": {
            "version": __version__,
            "generated": generated_at,
            "note": "Review and complete all [TODO] fields before publication",
        },
    }
    return json.dumps(document, indent=2) + "\n"


def render_datacard(summary: DatasetSummary, generated_at: str) -> str:
    sections = [
        "# Data Card: [TODO: Dataset Name]",
        "",
        "## Overview",
        "",
        "[TODO: What the data represents, why it was collected, the time period and scope covered.]",
        "",
        "## Intended Use",
        "",
        "**Primary Uses:**",
        "- [TODO: List primary intended uses]",
        "",
        "**Out-of-Scope Uses:**",
        "- [TODO: List uses that are not appropriate for this data]",
        "",
        "## Data Collection",
        "",
        "**Collection Methods:**",
        "- [TODO: Describe instruments, techniques, or procedures]",
        "",
        "**Collection Period:**",
        "- [TODO: Specify dates or time range]",
        "",
        "**Quality Control:**",
        "- [TODO: Describe validation and quality control procedures]",
        "",
        "## Data Format",
        "",
        f"This dataset contains {summary.file_count} files totaling {summary.format_size()}.",
        "",
        "**File Types:**",
        *_type_lines(summary),
        "",
        "## Limitations",
        "",
        "[TODO: Missing data, measurement uncertainties, known biases, constraints on interpretation.]",
        "",
        "## Provenance",
        "",
        "**Dataset Version:**",
        "- [TODO: Version number or identifier]",
        "",
        "**Processing History:**",
        "- [TODO: Describe any processing or transformations applied]",
        "",
        "## Maintenance",
        "",
        "**Update Frequency:**",
        "- [TODO: How often will this dataset be updated?]",
        "",
        "---",
        "",
        f"**Generated:** {generated_at}",
        f"**Tool:** {TOOL_NAME} {__version__}",
        "",
        "Review and complete all [TODO] sections before publication.",
        "",
    ]
    return "\n".join(sections)


def render_manifest(files: list[FileInfo]) -> str:
    entries = sorted(
        (str(info.relative_path), info.sha256) for info in files if info.sha256
    )
    return "".join(f"{digest}  {path}\n" for path, digest in entries)


def build_schema(analysis: TabularAnalysis, filename: str) -> dict[str, object]:
    properties: dict[str, object] = {}
    for column in analysis.columns:
        description = f"Inferred type: {column.column_type}"
        if column.null_count:
            description += f" ({column.null_count} null values)"
        prop: dict[str, object] = {
            "type": _JSON_SCHEMA_TYPES.get(column.column_type, "string"),
            "description": description,
        }
        if column.sample_values:
            prop["examples"] = list(column.sample_values)
        properties[column.display_name] = prop
    return {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "title": f"Schema for {filename}",
        "description": "Auto-generated schema from tabular analysis",
        "type": "array",
        "items": {"type": "object", "properties": properties},
    }


def render_schema(analysis: TabularAnalysis, filename: str) -> str:
    return json.dumps(build_schema(analysis, filename), indent=2) + "\n"


def schema_file_name(relative_path: PurePosixPath) -> str:
    return f"{relative_path.stem}{Defaults.SCHEMA_SUFFIX}"


def profile_file_name(relative_path: PurePosixPath) -> str:
    return f"{relative_path.stem}{Defaults.PROFILE_SUFFIX}"


class DocumentationWriter:
    pass

    def __init__(
        self,
        logger: LoggerPort | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        super().__init__()
        self.logger = logger or NullLogger()
        self._clock = clock or (lambda: datetime.now(UTC))

    def write_missing(
        self,
        root: Path,
        output_dir: Path,
        files: list[FileInfo],
        analyses: dict[str, FileAnalysis],
        *,
        write_profiles: bool = False,
    ) -> list[GeneratedFile]:
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DocumentWriteError(
                f"Cannot create output directory {output_dir}: {e}"
            ) from e
        summary = DatasetSummary.from_files(root, files)
        generated_at = _timestamp(self._clock())
        names = [info.name for info in files]
        generated: list[GeneratedFile] = []

        has_readme = any(name.upper().startswith("README") for name in names)
        generated.append(
            self._write(
                output_dir / Defaults.README_FILE_NAME,
                "README",
                lambda: render_readme(summary, generated_at),
                skip_reason="dataset already has a README" if has_readme else None,
            )
        )
        has_metadata = Defaults.METADATA_FILE_NAME in names
        generated.append(
            self._write(
                output_dir / Defaults.METADATA_FILE_NAME,
                "dataset metadata",
                lambda: render_metadata(summary, generated_at),
                skip_reason="dataset already has metadata.json" if has_metadata else None,
            )
        )
        has_datacard = any(name.upper().startswith("DATACARD") for name in names)
        generated.append(
            self._write(
                output_dir / Defaults.DATACARD_FILE_NAME,
                "data card",
                lambda: render_datacard(summary, generated_at),
                skip_reason="dataset already has a data card" if has_datacard else None,
            )
        )
        has_hashes = any(info.sha256 for info in files)
        generated.append(
            self._write(
                output_dir / Defaults.MANIFEST_FILE_NAME,
                "SHA-256 manifest",
                lambda: render_manifest(files),
                skip_reason=None if has_hashes else "file hashing was disabled",
            )
        )

        for info in files:
            analysis = analyses.get(str(info.relative_path))
            if not isinstance(analysis, TabularAnalysis) or analysis.is_empty:
                continue
            generated.append(
                self._write(
                    output_dir / schema_file_name(info.relative_path),
                    f"schema for {info.relative_path}",
                    lambda a=analysis, n=info.name: render_schema(a, n),
                )
            )
            if write_profiles:
                generated.append(
                    self._write_profile(
                        output_dir / profile_file_name(info.relative_path),
                        info.relative_path,
                        analysis,
                    )
                )
        return generated

    def _write(
        self,
        path: Path,
        description: str,
        render: Callable[[], str],
        *,
        skip_reason: str | None = None,
    ) -> GeneratedFile:
        if skip_reason is None and path.exists():
            skip_reason = "file already exists"
        if skip_reason is not None:
            result = GeneratedFile(path, description, created=False, reason=skip_reason)
        else:
            try:
                path.write_text(render(), encoding="utf-8")
            except OSError as e:
                raise DocumentWriteError(f"Failed to write {path}: {e}") from e
            result = GeneratedFile(path, description, created=True)
        self.logger.log_generated_file(result)
        return result

    def _write_profile(
        self, path: Path, relative_path: PurePosixPath, analysis: TabularAnalysis
    ) -> GeneratedFile:
        description = f"column profile for {relative_path}"
        if path.exists():
            result = GeneratedFile(
                path, description, created=False, reason="file already exists"
            )
        else:
            try:
                analysis.to_frame().to_csv(path, index=False)
            except OSError as e:
                raise DocumentWriteError(f"Failed to write {path}: {e}") from e
            result = GeneratedFile(path, description, created=True)
        self.logger.log_generated_file(result)
        return result
