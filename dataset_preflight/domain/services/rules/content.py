"""Content checks for the documentation a dataset ships.

The structure and metadata rules only ask whether README, LICENSE and
metadata.json exist and parse. These rules read what is inside them:
placeholder ``[TODO: ...]`` text left over from generated templates, README
files without real prose, license text that matches no known license, and
data files whose names say nothing about their content.
"""

from enum import StrEnum
import json
from pathlib import PurePosixPath

from ....constants import Limits, Patterns
from ...entities.validation import ValidationResult
from .context import DocumentText, RuleContext
from .metadata import is_filled

_REQUIRED_METADATA = (
    ("FAIR-F101", "title", "Dataset title is required for findability"),
    ("FAIR-F102", "description", "Dataset description is required for findability"),
)

_RECOMMENDED_METADATA = (
    ("FAIR-F103", "keywords", "Keywords help others discover your dataset"),
    ("FAIR-F104", "creator", "Creator/author information aids attribution"),
    ("FAIR-A101", "license", "License information is required for accessibility"),
)


class LicenseType(StrEnum):
    MIT = "MIT"
    APACHE_2 = "Apache-2.0"
    BSD_3 = "BSD-3-Clause"
    GPL_3 = "GPL-3.0"
    LGPL_3 = "LGPL-3.0"
    CC0 = "CC0-1.0"
    CC_BY_4 = "CC-BY-4.0"
    CC_BY_SA_4 = "CC-BY-SA-4.0"
    PUBLIC_DOMAIN = "Public Domain"
    UNKNOWN = "Unknown"


def count_todo_markers(text: str) -> int:
    """Count lines carrying a TODO, FIXME or XXX marker (once per line)."""
    return sum(
        1
        for line in text.splitlines()
        if any(marker in line.upper() for marker in Patterns.TODO_MARKERS)
    )


def is_substantive(text: str, min_length: int) -> bool:
    """True when ``text`` holds at least ``min_length`` characters of prose.

    Blank lines and lines with placeholder markers are dropped; of the rest
    only letters, digits and whitespace count.
    """
    kept = [
        line
        for line in text.splitlines()
        if line.strip()
        and not any(marker in line.lower() for marker in Patterns.PLACEHOLDER_MARKERS)
    ]
    content = "\n".join(kept)
    return sum(1 for char in content if char.isalnum() or char.isspace()) >= min_length


def detect_license_type(text: str) -> LicenseType:
    lower = text.lower()
    if "mit license" in lower or "permission is hereby granted, free of charge" in lower:
        return LicenseType.MIT
    if "apache license" in lower and "version 2.0" in lower:
        return LicenseType.APACHE_2
    if "bsd" in lower and "redistributions of source code" in lower:
        return LicenseType.BSD_3
    if "gnu general public license" in lower and "version 3" in lower:
        return LicenseType.GPL_3
    if "gnu lesser general public license" in lower:
        return LicenseType.LGPL_3
    if "cc0" in lower or "creative commons zero" in lower:
        return LicenseType.CC0
    if "creative commons" in lower and "attribution" in lower and "4.0" in lower:
        if "sharealike" in lower:
            return LicenseType.CC_BY_SA_4
        return LicenseType.CC_BY_4
    if "public domain" in lower or "no copyright" in lower:
        return LicenseType.PUBLIC_DOMAIN
    return LicenseType.UNKNOWN


def is_descriptive_filename(name: str) -> bool:
    stem = PurePosixPath(name).stem.lower()
    if stem in Patterns.GENERIC_FILE_STEMS:
        return False
    if stem.isdigit():
        return False
    return len(stem) >= Limits.MIN_DESCRIPTIVE_STEM


def check_content(context: RuleContext) -> list[ValidationResult]:
    results: list[ValidationResult] = []
    if context.metadata is not None and context.metadata.text is not None:
        results.extend(_check_metadata_content(context.metadata))
    if context.readme is not None and context.readme.text is not None:
        results.extend(_check_readme_content(context.readme))
    if context.license is not None:
        results.extend(_check_license_content(context.license))
    if context.datacard is not None and context.datacard.text is not None:
        results.extend(_check_datacard_content(context.datacard))
    results.extend(_check_data_filenames(context))
    return results


def _check_metadata_content(metadata: DocumentText) -> list[ValidationResult]:
    results: list[ValidationResult] = []
    try:
        document = json.loads(metadata.text)
    except json.JSONDecodeError:
        # Reported by the metadata rules as META-004
        document = None

    if isinstance(document, dict):
        for code, key, reason in _REQUIRED_METADATA:
            if not is_filled(document.get(key)):
                results.append(
                    ValidationResult.critical(
                        code,
                        f"{reason}: '{key}' field missing or empty",
                        file_path=metadata.relative_path,
                        suggestion=f"Add a meaningful '{key}' field to metadata.json",
                    )
                )
        for code, key, reason in _RECOMMENDED_METADATA:
            if not is_filled(document.get(key)):
                results.append(
                    ValidationResult.warning(
                        code,
                        f"{reason}: '{key}' field missing or empty",
                        file_path=metadata.relative_path,
                        suggestion=f"Add a '{key}' field to metadata.json",
                    )
                )

    todos = count_todo_markers(metadata.text)
    if todos:
        results.append(
            ValidationResult.warning(
                "CONTENT-002",
                f"metadata.json contains {todos} TODO marker(s) that need completion",
                file_path=metadata.relative_path,
                suggestion="Complete all TODO sections in metadata.json before submission",
            )
        )
    return results


def _check_readme_content(readme: DocumentText) -> list[ValidationResult]:
    text = readme.text
    results: list[ValidationResult] = []
    if not is_substantive(text, Limits.MIN_README_CONTENT):
        results.append(
            ValidationResult.warning(
                "FAIR-F201",
                f"README lacks substantive content (< {Limits.MIN_README_CONTENT} "
                "characters of real content)",
                file_path=readme.relative_path,
                suggestion="Add meaningful documentation to help others understand your dataset",
            )
        )

    sections = sum(1 for line in text.splitlines() if line.startswith("#"))
    if sections < Limits.MIN_README_SECTIONS:
        results.append(
            ValidationResult.info(
                "FAIR-F202",
                f"README has only {sections} section header(s); consider adding more structure",
                file_path=readme.relative_path,
                suggestion="Add sections like Description, Data Files, Usage, Citation, License",
            )
        )

    todos = count_todo_markers(text)
    if todos:
        results.append(
            ValidationResult.warning(
                "CONTENT-011",
                f"README contains {todos} TODO marker(s) that need completion",
                file_path=readme.relative_path,
                suggestion="Complete all TODO sections in README before submission",
            )
        )

    lower = text.lower()
    if not any(keyword in lower for keyword in Patterns.CITATION_KEYWORDS):
        results.append(
            ValidationResult.info(
                "FAIR-R201",
                "README does not include citation information",
                file_path=readme.relative_path,
                suggestion="Add a Citation section explaining how to cite this dataset",
            )
        )
    return results


def _check_license_content(license_text: DocumentText) -> list[ValidationResult]:
    if license_text.text is None:
        return [
            ValidationResult.critical(
                "CONTENT-020",
                f"Cannot read LICENSE file: {license_text.error}",
                file_path=license_text.relative_path,
                suggestion="Ensure the LICENSE file is readable and contains valid text",
            )
        ]
    results: list[ValidationResult] = []
    if detect_license_type(license_text.text) is LicenseType.UNKNOWN:
        results.append(
            ValidationResult.warning(
                "FAIR-A201",
                "LICENSE file does not contain recognized license text",
                file_path=license_text.relative_path,
                suggestion="Use a standard license (MIT, Apache-2.0, CC-BY-4.0) for clarity",
            )
        )
    if count_todo_markers(license_text.text):
        results.append(
            ValidationResult.warning(
                "CONTENT-021",
                "LICENSE contains TODO markers; the license may be incomplete",
                file_path=license_text.relative_path,
                suggestion="Complete all placeholders in the LICENSE file",
            )
        )
    return results


def _section_body(lines: list[str], keyword: str) -> str | None:
    for index, line in enumerate(lines):
        if keyword in line.lower():
            body: list[str] = []
            for following in lines[index + 1 :]:
                if following.startswith("#"):
                    break
                body.append(following)
            return "\n".join(body)
    return None


def _check_datacard_content(datacard: DocumentText) -> list[ValidationResult]:
    text = datacard.text
    results: list[ValidationResult] = []
    todos = count_todo_markers(text)
    if todos:
        results.append(
            ValidationResult.warning(
                "CONTENT-030",
                f"DATACARD.md contains {todos} TODO marker(s); provenance documentation incomplete",
                file_path=datacard.relative_path,
                suggestion="Complete all TODO sections in DATACARD.md for full provenance",
            )
        )

    lines = text.splitlines()
    for code, keyword, title in Patterns.DATACARD_SECTIONS:
        body = _section_body(lines, keyword)
        if body is not None and not is_substantive(body, Limits.MIN_SECTION_CONTENT):
            results.append(
                ValidationResult.info(
                    code,
                    f"{title} section exists but lacks substantive content",
                    file_path=datacard.relative_path,
                    suggestion=f"Add detailed information to the {title} section",
                )
            )
    return results


def _check_data_filenames(context: RuleContext) -> list[ValidationResult]:
    results: list[ValidationResult] = []
    for info in context.files:
        if info.relative_path.suffix.lower() not in Patterns.NAMED_DATA_EXTENSIONS:
            continue
        if not is_descriptive_filename(info.name):
            results.append(
                ValidationResult.info(
                    "FAIR-F301",
                    f"Data file '{info.name}' has a non-descriptive name",
                    file_path=str(info.relative_path),
                    suggestion="Use descriptive filenames that indicate the content "
                    "(e.g., 'temperature_readings.csv')",
                )
            )
    return results
