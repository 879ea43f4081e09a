from ....constants import Thresholds
from ...entities.dataset_file import FileType
from ...entities.validation import ValidationResult
from .context import RuleContext


def check_fair(context: RuleContext) -> list[ValidationResult]:
    return [
        *_check_findable(context),
        *_check_accessible(context),
        *_check_interoperable(context),
        *_check_reusable(context),
    ]


def _check_findable(context: RuleContext) -> list[ValidationResult]:
    if context.has_metadata:
        return []
    return [
        ValidationResult.warning(
            "FAIR-F001",
            "No metadata.json for findability",
            suggestion="Create metadata.json with title, description, keywords, and identifiers",
        )
    ]


def _check_accessible(context: RuleContext) -> list[ValidationResult]:
    results: list[ValidationResult] = []
    if not context.has_license:
        results.append(
            ValidationResult.critical(
                "FAIR-A001",
                "No LICENSE file for accessibility",
                suggestion="Add LICENSE file specifying usage rights and permissions",
            )
        )
    non_standard = sum(
        1
        for info in context.files
        if info.file_type in (FileType.UNKNOWN, FileType.BINARY)
    )
    if non_standard and non_standard / len(context.files) > Thresholds.UNKNOWN_FILE_RATIO:
        results.append(
            ValidationResult.info(
                "FAIR-A002",
                f"{non_standard} files use non-standard or unknown formats",
                suggestion="Consider converting to standard formats (CSV, JSON, HDF5, NetCDF)",
            )
        )
    return results


def _check_interoperable(context: RuleContext) -> list[ValidationResult]:
    results: list[ValidationResult] = []
    has_csv = any(info.file_type is FileType.CSV for info in context.files)
    has_schema = any(
        name.endswith(("schema.json", ".schema")) for name in context.names()
    )
    if has_csv and not has_schema:
        results.append(
            ValidationResult.info(
                "FAIR-I001",
                "No schema file for CSV data",
                suggestion="Create schema.json file(s) describing data structure and types",
            )
        )
    if not context.has_readme:
        results.append(
            ValidationResult.critical(
                "FAIR-I002",
                "No README for interoperability",
                suggestion="Create README documenting dataset structure and variables",
            )
        )
    return results


def _check_reusable(context: RuleContext) -> list[ValidationResult]:
    results: list[ValidationResult] = []
    if not context.has_readme:
        results.append(
            ValidationResult.critical(
                "FAIR-R001",
                "No README for reusability",
                suggestion="Create README with usage instructions and examples",
            )
        )
    if not (context.has_metadata or context.has_name_prefix("DATACARD")):
        results.append(
            ValidationResult.warning(
                "FAIR-R002",
                "No provenance information",
                suggestion="Create metadata.json or DATACARD.md documenting data origin and processing",
            )
        )
    has_citation = context.has_metadata or any(
        "CITATION" in name.upper() for name in context.names()
    )
    if not has_citation:
        results.append(
            ValidationResult.info(
                "FAIR-R003",
                "No citation information",
                suggestion="Add citation information to README or create CITATION file",
            )
        )
    return results
