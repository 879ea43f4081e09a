"""Integration tests for CLI commands.

These tests drive every command end to end against datasets built on disk,
from flag parsing through the rendered report and the files written.
"""

import json

import pytest
from click.testing import CliRunner

from dataset_preflight import __version__
from dataset_preflight.cli import app

BARE_DATASET = {"data.csv": "site,depth\nA,1.5\nB,2.0\n"}


@pytest.fixture
def runner():
    return CliRunner()


@pytest.mark.integration
class TestApp:
    """Top-level group behavior."""

    def test_help_lists_commands(self, runner):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "Lint a dataset directory" in result.output
        for command in ("scan", "generate", "report"):
            assert command in result.output

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"dataset-preflight, version {__version__}" in result.output

    def test_scan_help(self, runner):
        result = runner.invoke(app, ["scan", "--help"])

        assert result.exit_code == 0
        assert "DATASET_PATH" in result.output
        assert "--no-hash" in result.output
        assert "--output-dir" in result.output


@pytest.mark.integration
class TestScanCommand:
    """Integration tests for the scan command."""

    def test_complete_dataset_passes(self, runner, complete_dataset):
        result = runner.invoke(app, ["scan", str(complete_dataset)])

        assert result.exit_code == 0, result.output
        assert "Compliance score: 99/100" in result.output
        assert "FAIR-A002" in result.output
        assert "Dataset meets minimum compliance standards." in result.output

    def test_bare_dataset_fails(self, runner, make_dataset):
        dataset = make_dataset(BARE_DATASET)

        result = runner.invoke(app, ["scan", str(dataset)])

        assert result.exit_code == 2
        assert "STRUCT-001" in result.output
        assert "Missing LICENSE file" in result.output

    def test_warnings_exit_one(self, runner, complete_dataset):
        (complete_dataset / "raw data.csv").write_text("a,b\n1,2\n")

        result = runner.invoke(app, ["scan", str(complete_dataset)])

        assert result.exit_code == 1
        assert "NAME-001" in result.output

    def test_quiet_prints_nothing(self, runner, make_dataset):
        dataset = make_dataset(BARE_DATASET)

        result = runner.invoke(app, ["scan", str(dataset), "-q"])

        assert result.exit_code == 2
        assert result.output == ""

    def test_verbose_and_quiet_conflict(self, runner, complete_dataset):
        result = runner.invoke(app, ["scan", str(complete_dataset), "-v", "-q"])

        assert result.exit_code == 2
        assert "Cannot use --verbose and --quiet together" in result.output

    def test_missing_dataset_is_fatal(self, runner, tmp_path):
        result = runner.invoke(app, ["scan", str(tmp_path / "absent")])

        assert result.exit_code == 2
        assert "Dataset path not found" in result.output

    def test_file_instead_of_directory_is_fatal(self, runner, tmp_path):
        target = tmp_path / "file.csv"
        target.write_text("a\n")

        result = runner.invoke(app, ["scan", str(target)])

        assert result.exit_code == 2
        assert "not a directory" in result.output

    def test_modified_file_breaks_manifest(self, runner, complete_dataset):
        generate = runner.invoke(app, ["generate", str(complete_dataset), "-q"])
        assert generate.exit_code == 0
        assert (complete_dataset / "MANIFEST.sha256").exists()

        (complete_dataset / "readings.csv").write_text("station_id\nB9\n")
        result = runner.invoke(app, ["scan", str(complete_dataset)])

        assert result.exit_code == 2
        assert "INTEGRITY-001" in result.output

    def test_bracketed_path_in_warning(self, runner, make_dataset):
        dataset = make_dataset({"a[/x].csv": b"site,caf\xe9\nA,1\n"})

        result = runner.invoke(app, ["scan", str(dataset), "--no-hash"])

        assert result.exit_code == 2, result.output
        assert "Could not analyze a[/x].csv" in result.output

    def test_config_file_option(self, runner, complete_dataset, tmp_path):
        config_file = tmp_path / "strict.toml"
        config_file.write_text("[rules]\nmin_readme_length = 5000\n")

        result = runner.invoke(
            app, ["scan", str(complete_dataset), "--config", str(config_file)]
        )

        assert result.exit_code == 1
        assert "META-001" in result.output


@pytest.mark.integration
class TestGenerateCommand:
    """Integration tests for the generate command."""

    def test_generates_missing_documentation(self, runner, make_dataset):
        dataset = make_dataset(BARE_DATASET)

        result = runner.invoke(app, ["generate", str(dataset)])

        # Validation reflects the dataset before generation.
        assert result.exit_code == 2
        for name in (
            "README.md",
            "metadata.json",
            "DATACARD.md",
            "MANIFEST.sha256",
            "data.schema.json",
        ):
            assert (dataset / name).exists(), name
        assert "Created: README.md" in result.output
        schema = json.loads((dataset / "data.schema.json").read_text())
        assert schema["items"]["properties"]["depth"]["type"] == "number"

    def test_generated_placeholders_are_flagged_on_rescan(self, runner, make_dataset):
        dataset = make_dataset(BARE_DATASET)
        runner.invoke(app, ["generate", str(dataset), "-q"])

        result = runner.invoke(app, ["report", str(dataset), "--json"])

        found = {issue["code"] for issue in json.loads(result.stdout)["validation_results"]}
        assert {"FAIR-F101", "FAIR-F102", "CONTENT-002", "CONTENT-011", "CONTENT-030"} <= found
        assert "STRUCT-001" not in found

    def test_output_dir_and_profiles(self, runner, make_dataset, tmp_path):
        dataset = make_dataset(BARE_DATASET)
        output_dir = tmp_path / "docs"

        result = runner.invoke(
            app, ["generate", str(dataset), "-o", str(output_dir), "--profiles"]
        )

        assert result.exit_code == 2
        assert (output_dir / "README.md").exists()
        assert (output_dir / "data.profile.csv").exists()
        assert not (dataset / "README.md").exists()

    def test_existing_files_are_skipped(self, runner, complete_dataset):
        readme_before = (complete_dataset / "README.md").read_text()

        result = runner.invoke(app, ["generate", str(complete_dataset)])

        assert result.exit_code == 0
        assert "Skipped: README.md" in result.output
        assert (complete_dataset / "README.md").read_text() == readme_before

    def test_no_hash_skips_manifest(self, runner, make_dataset):
        dataset = make_dataset(BARE_DATASET)

        result = runner.invoke(app, ["generate", str(dataset), "--no-hash"])

        assert result.exit_code == 2
        assert not (dataset / "MANIFEST.sha256").exists()
        assert "file hashing was disabled" in result.output


@pytest.mark.integration
class TestReportCommand:
    """Integration tests for the report command."""

    def test_detailed_report(self, runner, complete_dataset):
        result = runner.invoke(app, ["report", str(complete_dataset)])

        assert result.exit_code == 0
        assert "Columns of readings.csv" in result.output
        assert "temperature" in result.output

    def test_json_to_stdout(self, runner, complete_dataset):
        result = runner.invoke(app, ["report", str(complete_dataset), "--json"])

        assert result.exit_code == 0
        report = json.loads(result.stdout)
        assert report["score"]["total"] == 99
        assert report["exit_code"] == 0
        assert report["tool_version"] == __version__
        assert report["files"]["count"] == 6
        assert report["validation_results"][0]["code"] == "FAIR-A002"
        table = report["tabular_files"][0]
        assert table["path"] == "readings.csv"
        assert table["delimiter"] == "comma"
        assert table["row_count"] == 3
        assert [c["name"] for c in table["columns"]] == [
            "station_id",
            "reading_date",
            "temperature",
            "valid",
        ]

    def test_json_exit_code_follows_score(self, runner, make_dataset):
        dataset = make_dataset(BARE_DATASET)

        result = runner.invoke(app, ["report", str(dataset), "--json"])

        assert result.exit_code == 2
        assert json.loads(result.stdout)["exit_code"] == 2

    def test_json_to_output_dir(self, runner, complete_dataset, tmp_path):
        output_dir = tmp_path / "artifacts"

        result = runner.invoke(
            app, ["report", str(complete_dataset), "--json", "-o", str(output_dir)]
        )

        assert result.exit_code == 0
        report_path = output_dir / "preflight-report.json"
        assert report_path.exists()
        assert "Report written to" in result.output
        assert json.loads(report_path.read_text())["score"]["total"] == 99
