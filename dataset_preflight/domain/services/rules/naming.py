from collections import defaultdict

from ....constants import Patterns, Thresholds
from ...entities.validation import ValidationResult
from .context import RuleContext


def _is_valid_filename_char(char: str) -> bool:
    return (char.isascii() and char.isalnum()) or char in "-_."


def check_naming(context: RuleContext) -> list[ValidationResult]:
    results: list[ValidationResult] = []
    for info in context.files:
        name = info.name
        if " " in name:
            results.append(
                ValidationResult.warning(
                    "NAME-001",
                    f"Filename contains spaces: {name}",
                    file_path=str(info.relative_path),
                    suggestion=f"Rename to use underscores or hyphens: {name.replace(' ', '_')}",
                )
            )
        invalid = "".join(
            char for char in name if not _is_valid_filename_char(char)
        )
        if invalid:
            results.append(
                ValidationResult.warning(
                    "NAME-002",
                    f"Filename contains special characters: {invalid}",
                    file_path=str(info.relative_path),
                    suggestion="Use only letters, numbers, hyphens, underscores, and dots",
                )
            )
    results.extend(_check_mixed_case(context))
    results.extend(_check_duplicates(context))
    return results


def _check_mixed_case(context: RuleContext) -> list[ValidationResult]:
    considered = [
        name
        for name in context.names()
        if not name.upper().startswith(Patterns.WELL_KNOWN_DOCS)
    ]
    total = len(considered)
    mixed = sum(
        1 for name in considered if any(char.isupper() for char in name.rsplit(".", 1)[0])
    )
    if total > Thresholds.MIXED_CASE_MIN_FILES and mixed / total > Thresholds.MIXED_CASE_RATIO:
        return [
            ValidationResult.info(
                "NAME-003",
                f"Mixed case filenames detected ({mixed} of {total} files)",
                suggestion="Consider using consistent lowercase naming for better compatibility",
            )
        ]
    return []


def _check_duplicates(context: RuleContext) -> list[ValidationResult]:
    seen: dict[str, set[str]] = defaultdict(set)
    for info in context.files:
        seen[info.name.lower()].add(str(info.relative_path))
    results: list[ValidationResult] = []
    for name, paths in sorted(seen.items()):
        if len(paths) > 1:
            results.append(
                ValidationResult.warning(
                    "NAME-004",
                    f"Duplicate filename (case-insensitive): {name} appears {len(paths)} times",
                    suggestion=f"Give these files distinct names: {', '.join(sorted(paths))}",
                )
            )
    return results
