from __future__ import annotations

from collections.abc import Callable
import os
from pathlib import Path

import pytest

LONG_README = (
    "# Ocean temperature readings\n\n"
    "Hourly sea surface temperature readings collected by three coastal buoys "
    "between May and September 2024. See metadata.json for provenance and the "
    "schema files for column types.\n\n"
    "## Citation\n\n"
    "Please cite this dataset as Coastal Observatory (2024), Ocean temperature readings.\n"
)

COMPLETE_METADATA = """{
  "title": "Ocean temperature readings",
  "description": "Hourly sea surface temperatures from coastal buoys",
  "keywords": ["oceanography", "temperature"],
  "creator": "Coastal Observatory",
  "date": "2024-05-01",
  "license": "CC-BY-4.0"
}
"""


@pytest.fixture(autouse=True)
def _isolate_preflight_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    """Keep developer PREFLIGHT_* variables and a stray ./preflight.toml out of tests."""
    for key in list(os.environ):
        if key.startswith("PREFLIGHT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))


@pytest.fixture
def make_dataset(tmp_path: Path) -> Callable[[dict[str, str | bytes]], Path]:
    """Build a dataset directory from a mapping of relative path to content."""

    def _make(files: dict[str, str | bytes]) -> Path:
        root = tmp_path / "dataset"
        root.mkdir(exist_ok=True)
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def complete_dataset(make_dataset: Callable[[dict[str, str | bytes]], Path]) -> Path:
    """A dataset that passes every rule apart from informational ones."""
    return make_dataset(
        {
            "README.md": LONG_README,
            "LICENSE": "Creative Commons Attribution 4.0 International\n",
            "metadata.json": COMPLETE_METADATA,
            "DATACARD.md": "# Data Card\n\nCollected 2024.\n",
            "readings.csv": (
                "station_id,reading_date,temperature,valid\n"
                "B1,2024-05-01,12.5,true\n"
                "B2,2024-05-01,13.1,false\n"
                "B3,2024-05-02,12.9,true\n"
            ),
            "readings.schema.json": "{}\n",
        }
    )
