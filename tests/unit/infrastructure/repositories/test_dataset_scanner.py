"""Unit tests for DatasetScanner."""

import hashlib
from pathlib import PurePosixPath

import pytest

from dataset_preflight.domain.entities.dataset_file import FileType
from dataset_preflight.infrastructure.io.exceptions import (
    DatasetNotDirectoryError,
    DatasetNotFoundError,
)
from dataset_preflight.infrastructure.repositories.dataset_scanner import (
    DatasetScanner,
    sha256_file,
)


class TestDatasetScanner:
    """Test suite for walking a dataset directory."""

    def test_lists_files_sorted_with_types(self, make_dataset):
        root = make_dataset(
            {
                "b.csv": "x\n",
                "a/notes.md": "# hi\n",
                "a/raw.bin": b"\x00\x01",
                "z.weird": "?",
            }
        )

        files = DatasetScanner().scan(root)

        assert [str(f.relative_path) for f in files] == [
            "a/notes.md",
            "a/raw.bin",
            "b.csv",
            "z.weird",
        ]
        assert [f.file_type for f in files] == [
            FileType.MARKDOWN,
            FileType.BINARY,
            FileType.CSV,
            FileType.UNKNOWN,
        ]
        assert files[0].relative_path == PurePosixPath("a/notes.md")
        assert files[0].depth == 2

    def test_skips_hidden_and_tool_directories(self, make_dataset):
        root = make_dataset(
            {
                ".hidden.csv": "x\n",
                ".git/config": "[core]\n",
                "node_modules/pkg/index.json": "{}",
                "__pycache__/m.pyc": b"\x00",
                "kept.csv": "x\n",
            }
        )

        files = DatasetScanner().scan(root)

        assert [f.name for f in files] == ["kept.csv"]

    def test_skips_symlinks(self, make_dataset):
        root = make_dataset({"real.csv": "x\n"})
        try:
            (root / "link.csv").symlink_to(root / "real.csv")
        except OSError:
            pytest.skip("symlinks not supported here")

        files = DatasetScanner().scan(root)

        assert [f.name for f in files] == ["real.csv"]

    def test_hashes_files(self, make_dataset):
        root = make_dataset({"a.txt": "hello\n"})

        files = DatasetScanner().scan(root)

        assert files[0].sha256 == hashlib.sha256(b"hello\n").hexdigest()
        assert files[0].size_bytes == 6

    def test_hashing_can_be_disabled(self, make_dataset):
        root = make_dataset({"a.txt": "hello\n"})

        files = DatasetScanner(compute_hashes=False).scan(root)

        assert files[0].sha256 is None

    def test_max_depth(self, make_dataset):
        root = make_dataset({"l1/l2/l3/deep.csv": "x\n", "l1/shallow.csv": "x\n"})

        files = DatasetScanner(max_depth=1).scan(root)

        assert [str(f.relative_path) for f in files] == ["l1/shallow.csv"]

    def test_missing_root(self, tmp_path):
        with pytest.raises(DatasetNotFoundError):
            DatasetScanner().scan(tmp_path / "nope")

    def test_root_is_a_file(self, tmp_path):
        path = tmp_path / "file.csv"
        path.write_text("x\n")

        with pytest.raises(DatasetNotDirectoryError):
            DatasetScanner().scan(path)


class TestSha256File:
    """Chunked hashing matches a one-shot digest."""

    def test_chunked_digest(self, tmp_path):
        payload = bytes(range(256)) * 100
        path = tmp_path / "blob.bin"
        path.write_bytes(payload)

        assert sha256_file(path, chunk_size=1000) == hashlib.sha256(payload).hexdigest()
