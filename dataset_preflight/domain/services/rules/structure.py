from ....constants import Limits
from ...entities.validation import ValidationResult
from .context import RuleContext


def check_structure(context: RuleContext) -> list[ValidationResult]:
    results: list[ValidationResult] = []
    if not context.has_readme:
        results.append(
            ValidationResult.critical(
                "STRUCT-001",
                "Missing README file",
                suggestion="Create a README.md file describing your dataset",
            )
        )
    if not context.has_license:
        results.append(
            ValidationResult.critical(
                "STRUCT-002",
                "Missing LICENSE file",
                suggestion="Add a LICENSE file specifying usage terms and permissions",
            )
        )
    if not context.has_metadata:
        results.append(
            ValidationResult.warning(
                "STRUCT-003",
                "Missing metadata.json file",
                suggestion="Create a metadata.json file with dataset description and provenance",
            )
        )
    for info in context.files:
        if info.depth > Limits.MAX_RECOMMENDED_DEPTH:
            results.append(
                ValidationResult.warning(
                    "STRUCT-004",
                    f"File is nested {info.depth} levels deep",
                    file_path=str(info.relative_path),
                    suggestion=f"Flatten the directory structure to at most {Limits.MAX_RECOMMENDED_DEPTH} levels",
                )
            )
        if len(info.name) > Limits.MAX_FILENAME_LENGTH:
            results.append(
                ValidationResult.warning(
                    "STRUCT-005",
                    f"Filename is {len(info.name)} characters long",
                    file_path=str(info.relative_path),
                    suggestion=f"Shorten filename to under {Limits.MAX_FILENAME_LENGTH} characters",
                )
            )
    return results
