"""Tests for the preflight use case.

These tests drive the orchestration with mocked adapters, so no filesystem
access is needed.
"""

from pathlib import Path, PurePosixPath
from unittest.mock import Mock

import pytest

from dataset_preflight.application.models import (
    GeneratedFile,
    PreflightRequest,
    PreflightResponse,
)
from dataset_preflight.application.preflight_use_case import (
    PreflightDependencies,
    PreflightUseCase,
)
from dataset_preflight.domain.entities.dataset_file import FileInfo, FileType
from dataset_preflight.domain.entities.file_analysis import NotAnalyzed
from dataset_preflight.domain.entities.tabular import Delimiter, TabularAnalysis
from dataset_preflight.domain.services.rules import DocumentText
from dataset_preflight.infrastructure.io.exceptions import DatasetNotFoundError
from dataset_preflight.infrastructure.logging.null_logger import NullLogger

ROOT = Path("/data/ocean")

METADATA = (
    '{"title": "t", "description": "d", "creator": "c", '
    '"date": "2024-01-01", "license": "CC0-1.0", "keywords": ["buoys"]}'
)

CLEAN_README = (
    "# Readings\n\n"
    + "Hourly readings from coastal buoys. " * 8
    + "\n\n## Citation\n\nCite as Coastal Lab (2024).\n"
)


def file_info(relative, size=10):
    rel = PurePosixPath(relative)
    return FileInfo(
        full_path=ROOT / relative,
        relative_path=rel,
        size_bytes=size,
        modified=None,
        file_type=FileType.from_path(rel),
    )


CLEAN_FILES = [file_info("README.md"), file_info("LICENSE.txt"), file_info("metadata.json")]


def make_use_case(files, *, analyses=None, readme_text=CLEAN_README, writer=None, **kwargs):
    scanner = Mock()
    scanner.scan.return_value = files
    file_analyzer = Mock()
    file_analyzer.analyze_all.return_value = analyses or {}
    documents = Mock()
    documents.read_readme.return_value = DocumentText("README.md", text=readme_text)
    documents.read_metadata.return_value = DocumentText("metadata.json", text=METADATA)
    documents.read_license.return_value = None
    documents.read_datacard.return_value = None
    documents.read_manifest.return_value = None
    deps = PreflightDependencies(
        logger=NullLogger(),
        scanner=scanner,
        file_analyzer=file_analyzer,
        documents=documents,
        documentation_writer=writer,
        **kwargs,
    )
    return PreflightUseCase(deps), deps


class TestPreflightUseCase:
    """Tests for PreflightUseCase.execute."""

    def test_clean_dataset(self):
        use_case, deps = make_use_case(CLEAN_FILES)

        response = use_case.execute(PreflightRequest(dataset_path=ROOT))

        assert isinstance(response, PreflightResponse)
        assert response.validation_results == []
        assert response.score.score == 100
        assert response.exit_code == 0
        assert response.summary.file_count == 3
        assert response.generated_files == []
        deps.scanner.scan.assert_called_once_with(ROOT)
        deps.file_analyzer.analyze_all.assert_called_once_with(CLEAN_FILES)
        deps.documents.read_manifest.assert_called_once_with(ROOT)

    def test_empty_dataset_fails(self):
        use_case, _ = make_use_case([])

        response = use_case.execute(PreflightRequest(dataset_path=ROOT))

        assert response.exit_code == 2
        assert response.score.critical_count == 5
        assert response.validation_results[0].code == "FAIR-A001"

    def test_readme_threshold_comes_from_dependencies(self):
        use_case, _ = make_use_case(CLEAN_FILES, readme_text="short", min_readme_length=3)
        response = use_case.execute(PreflightRequest(dataset_path=ROOT))
        assert "META-001" not in [r.code for r in response.validation_results]

        use_case, _ = make_use_case(CLEAN_FILES, readme_text="short")
        response = use_case.execute(PreflightRequest(dataset_path=ROOT))
        assert "META-001" in [r.code for r in response.validation_results]

    def test_license_and_datacard_reach_the_content_rules(self):
        use_case, deps = make_use_case(CLEAN_FILES)
        deps.documents.read_license.return_value = DocumentText(
            "LICENSE.txt", text="All rights reserved.\n"
        )
        deps.documents.read_datacard.return_value = DocumentText(
            "DATACARD.md", text="# Data Card\n\n[TODO: describe the data]\n"
        )

        response = use_case.execute(PreflightRequest(dataset_path=ROOT))

        assert [r.code for r in response.validation_results] == [
            "CONTENT-030",
            "FAIR-A201",
        ]
        deps.documents.read_license.assert_called_once_with(CLEAN_FILES)

    def test_analyses_are_exposed_by_kind(self):
        table = TabularAnalysis(Delimiter.COMMA, True, 0, 0)
        analyses = {
            "a.csv": table,
            "b.json": NotAnalyzed("Cannot read file: permission denied"),
        }
        files = [*CLEAN_FILES, file_info("a.csv"), file_info("b.json")]
        use_case, _ = make_use_case(files, analyses=analyses)

        response = use_case.execute(PreflightRequest(dataset_path=ROOT))

        assert response.tabular_analyses == {"a.csv": table}
        assert list(response.failed_analyses) == ["b.json"]

    def test_generation_writes_into_dataset_by_default(self):
        writer = Mock()
        created = GeneratedFile(ROOT / "DATACARD.md", "data card", created=True)
        writer.write_missing.return_value = [created]
        use_case, deps = make_use_case(CLEAN_FILES, writer=writer)

        response = use_case.execute(PreflightRequest(dataset_path=ROOT, generate=True))

        writer.write_missing.assert_called_once_with(
            ROOT, ROOT, CLEAN_FILES, {}, write_profiles=False
        )
        assert response.generated_files == [created]
        assert created.status == "created"
        deps.scanner.scan.assert_called_once()

    def test_generation_honors_output_dir_and_profiles(self):
        writer = Mock()
        writer.write_missing.return_value = []
        use_case, _ = make_use_case(CLEAN_FILES, writer=writer)
        request = PreflightRequest(
            dataset_path=ROOT,
            output_dir=Path("/tmp/out"),
            generate=True,
            write_profiles=True,
        )

        use_case.execute(request)

        writer.write_missing.assert_called_once_with(
            ROOT, Path("/tmp/out"), CLEAN_FILES, {}, write_profiles=True
        )

    def test_no_generation_without_flag(self):
        writer = Mock()
        use_case, _ = make_use_case(CLEAN_FILES, writer=writer)

        use_case.execute(PreflightRequest(dataset_path=ROOT))

        writer.write_missing.assert_not_called()

    def test_generation_without_writer_is_skipped(self):
        use_case, _ = make_use_case(CLEAN_FILES)

        response = use_case.execute(PreflightRequest(dataset_path=ROOT, generate=True))

        assert response.generated_files == []

    def test_scan_errors_propagate(self):
        use_case, deps = make_use_case([])
        deps.scanner.scan.side_effect = DatasetNotFoundError(ROOT)

        with pytest.raises(DatasetNotFoundError):
            use_case.execute(PreflightRequest(dataset_path=ROOT))

        deps.file_analyzer.analyze_all.assert_not_called()


def test_request_resolves_output_dir():
    assert PreflightRequest(dataset_path=ROOT).resolved_output_dir == ROOT
    request = PreflightRequest(dataset_path=ROOT, output_dir=Path("out"))
    assert request.resolved_output_dir == Path("out")
