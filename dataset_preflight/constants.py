from typing import ClassVar


class Defaults:
    ENCODING = "utf-8"
    CONFIG_FILE_NAME = "preflight.toml"
    MANIFEST_FILE_NAME = "MANIFEST.sha256"
    METADATA_FILE_NAME = "metadata.json"
    README_FILE_NAME = "README.md"
    DATACARD_FILE_NAME = "DATACARD.md"
    SCHEMA_SUFFIX = ".schema.json"
    PROFILE_SUFFIX = ".profile.csv"
    REPORT_FILE_NAME = "preflight-report.json"


class Limits:
    SAMPLE_LINES = 10
    MAX_UNIQUE_VALUES = 1000
    MAX_SAMPLE_VALUES = 5
    MAX_SCAN_DEPTH = 20
    MAX_RECOMMENDED_DEPTH = 10
    MAX_FILENAME_LENGTH = 255
    MAX_IDENTIFIER_LENGTH = 100
    MIN_README_LENGTH = 100
    MIN_README_CONTENT = 200
    MIN_README_SECTIONS = 2
    MIN_SECTION_CONTENT = 50
    MIN_DESCRIPTIVE_STEM = 3
    LARGE_FILE_BYTES = 1024 * 1024 * 1024
    HASH_CHUNK_BYTES = 8192
    BINARY_SAMPLE_BYTES = 8192


class Thresholds:
    STATISTICAL_MAJORITY = 0.8
    NAME_HINT_MATCH = 0.5
    BATCH_NAME_HINT_MATCH = 0.7
    DELIMITER_MAX_VARIANCE = 1.0
    DELIMITER_MIN_MEAN_FIELDS = 2.0
    NON_PRINTABLE_RATIO = 0.3
    MIXED_CASE_RATIO = 0.3
    MIXED_CASE_MIN_FILES = 5
    UNKNOWN_FILE_RATIO = 0.1
    DOCUMENTATION_RATIO = 0.1


class ScoreWeights:
    MAX_SCORE = 100
    FAIR_PRINCIPLE_MAX = 25
    FAIR_PRINCIPLES: ClassVar[tuple[str, ...]] = ("F", "A", "I", "R")
    FAILING_SCORE = 50
    PASSING_SCORE = 80


class Patterns:
    DOCUMENTATION_PREFIXES: ClassVar[tuple[str, ...]] = (
        "README",
        "LICENSE",
        "CONTRIBUTING",
    )
    WELL_KNOWN_DOCS: ClassVar[tuple[str, ...]] = (
        "README",
        "LICENSE",
        "CONTRIBUTING",
        "CHANGELOG",
    )
    DOCUMENTATION_KEYWORDS: ClassVar[tuple[str, ...]] = (
        "introduction",
        "usage",
        "license",
        "installation",
        "getting started",
        "documentation",
    )
    TODO_MARKERS: ClassVar[tuple[str, ...]] = ("[TODO", "TODO:", "FIXME", "XXX")
    PLACEHOLDER_MARKERS: ClassVar[tuple[str, ...]] = ("[todo]", "todo:", "fixme", "xxx")
    CITATION_KEYWORDS: ClassVar[tuple[str, ...]] = ("citation", "cite", "reference")
    DATACARD_SECTIONS: ClassVar[tuple[tuple[str, str, str], ...]] = (
        ("FAIR-R301", "provenance", "Provenance"),
        ("FAIR-R302", "methodology", "Methodology"),
        ("FAIR-R303", "data collection", "Data collection"),
    )
    NAMED_DATA_EXTENSIONS: ClassVar[frozenset[str]] = frozenset(
        {".csv", ".tsv", ".json", ".txt", ".dat"}
    )
    GENERIC_FILE_STEMS: ClassVar[frozenset[str]] = frozenset(
        {
            "data", "data1", "data2", "data3",
            "file", "file1", "file2",
            "test", "test1", "test2",
            "temp", "tmp", "new", "new1",
            "untitled", "document", "copy",
        }
    )
    SKIP_DIRS: ClassVar[frozenset[str]] = frozenset(
        {".git", "node_modules", "__pycache__", "target", ".svn", ".hg"}
    )
    BOOLEAN_LITERALS: ClassVar[frozenset[str]] = frozenset(
        {"true", "false", "yes", "no", "y", "n", "1", "0", "t", "f"}
    )
