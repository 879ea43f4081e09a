"""Unit tests for the JSON report writer."""

from datetime import UTC, datetime
import json
from pathlib import Path, PurePosixPath

import pytest

from dataset_preflight import __version__
from dataset_preflight.application.models import GeneratedFile, PreflightResponse
from dataset_preflight.application.ports.services import ReportWriterPort
from dataset_preflight.domain.entities.column_type import ColumnType
from dataset_preflight.domain.entities.dataset_file import (
    DatasetSummary,
    FileInfo,
    FileType,
)
from dataset_preflight.domain.entities.report import PreflightReport
from dataset_preflight.domain.entities.tabular import (
    ColumnReport,
    Delimiter,
    TabularAnalysis,
)
from dataset_preflight.domain.entities.validation import (
    ValidationResult,
    ValidationSeverity,
)
from dataset_preflight.domain.services.compliance_score import score_results
from dataset_preflight.infrastructure.io.exceptions import DocumentWriteError
from dataset_preflight.infrastructure.services import JsonReportWriter, build_report


@pytest.fixture
def response() -> PreflightResponse:
    files = [
        FileInfo(
            full_path=Path("/data/obs.csv"),
            relative_path=PurePosixPath("obs.csv"),
            size_bytes=120,
            modified=None,
            file_type=FileType.CSV,
        )
    ]
    results = [
        ValidationResult.critical(
            "STRUCT-001", 'Missing "README" file', suggestion="Create README.md"
        ),
        ValidationResult.warning("NAME-001", "Spaces", file_path="a b.csv"),
    ]
    analysis = TabularAnalysis(
        Delimiter.TAB,
        True,
        1,
        4,
        (ColumnReport(0, "depth", ColumnType.FLOAT, 1, ("1.5", "2")),),
    )
    return PreflightResponse(
        dataset_path=Path("/data"),
        summary=DatasetSummary.from_files(Path("/data"), files),
        score=score_results(results),
        scan_timestamp=datetime(2024, 6, 1, 12, 0, tzinfo=UTC),
        files=files,
        analyses={"obs.csv": analysis},
        validation_results=results,
        generated_files=[GeneratedFile(Path("/data/README.md"), "README", True)],
    )


class TestBuildReport:
    """Mapping a PreflightResponse onto the report models."""

    def test_scores(self, response):
        report = build_report(response)

        assert report.score.total == 75
        assert report.score.critical_count == 1
        assert report.score.warning_count == 1
        assert report.score.findable == 25
        assert report.exit_code == 2
        assert not report.passed

    def test_files_and_tabular(self, response):
        report = build_report(response)

        assert report.files.count == 1
        assert report.files.total_size == 120
        assert report.files.types == {"csv": 1}
        tabular = report.tabular_files[0]
        assert tabular.path == "obs.csv"
        assert tabular.delimiter == "tab"
        assert tabular.columns[0].type == "float"
        assert tabular.columns[0].sample_values == ["1.5", "2"]

    def test_issues_and_generated(self, response):
        report = build_report(response)

        critical = report.issues_with_severity(ValidationSeverity.CRITICAL)
        assert [issue.code for issue in critical] == ["STRUCT-001"]
        assert report.validation_results[1].file_path == "a b.csv"
        assert report.generated_files[0].was_created is True
        assert report.tool_version == __version__


class TestJsonReportWriter:
    """Rendering and writing the JSON document."""

    def test_implements_port(self):
        assert isinstance(JsonReportWriter(), ReportWriterPort)

    def test_render_is_valid_json(self, response):
        document = json.loads(JsonReportWriter().render(response))

        assert document["dataset_path"] == "/data"
        assert document["scan_timestamp"] == "2024-06-01T12:00:00+00:00"
        assert document["score"]["total"] == 75
        assert document["validation_results"][0]["severity"] == "critical"
        assert document["validation_results"][0]["message"] == 'Missing "README" file'
        assert document["exit_code"] == 2

    def test_render_round_trips_through_model(self, response):
        rendered = JsonReportWriter().render(response)

        assert PreflightReport.model_validate_json(rendered) == build_report(response)

    def test_write_json(self, response, tmp_path):
        target = tmp_path / "reports" / "preflight-report.json"

        written = JsonReportWriter().write_json(target, response)

        assert written == target
        assert json.loads(target.read_text())["files"]["count"] == 1

    def test_write_json_failure(self, response, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file")

        with pytest.raises(DocumentWriteError):
            JsonReportWriter().write_json(blocker / "report.json", response)
