from ....constants import Thresholds
from ...entities.tabular import TabularAnalysis
from ...entities.validation import ValidationResult
from .context import RuleContext

_GIB = 1024 * 1024 * 1024


def check_data_quality(context: RuleContext) -> list[ValidationResult]:
    results: list[ValidationResult] = []
    if context.files:
        docs = sum(1 for info in context.files if info.is_documentation)
        total = len(context.files)
        ratio = docs / total
        if ratio < Thresholds.DOCUMENTATION_RATIO:
            results.append(
                ValidationResult.warning(
                    "QUALITY-001",
                    f"Low documentation ratio: {ratio:.1%} ({docs} of {total} files)",
                    suggestion="Add more documentation files (README, guides, data dictionaries)",
                )
            )
    for info in context.files:
        if info.size_bytes == 0:
            results.append(
                ValidationResult.warning(
                    "QUALITY-002",
                    "File is empty",
                    file_path=str(info.relative_path),
                    suggestion="Remove empty file or add content",
                )
            )
        elif info.size_bytes > context.large_file_bytes:
            results.append(
                ValidationResult.info(
                    "QUALITY-003",
                    f"Large file: {info.size_bytes / _GIB:.2f} GB",
                    file_path=str(info.relative_path),
                    suggestion="Consider splitting large files for better accessibility and processing",
                )
            )
    for path, analysis in sorted(context.analyses.items()):
        if isinstance(analysis, TabularAnalysis):
            results.extend(_check_tabular(path, analysis))
    return results


def _check_tabular(path: str, analysis: TabularAnalysis) -> list[ValidationResult]:
    if analysis.is_empty:
        return []
    if analysis.row_count == 0:
        return [
            ValidationResult.warning(
                "QUALITY-005",
                "Tabular file has no data rows",
                file_path=path,
                suggestion="Add data rows or remove the file",
            )
        ]
    return [
        ValidationResult.warning(
            "QUALITY-004",
            f"Column '{column.display_name}' is entirely empty ({column.null_count} nulls)",
            file_path=path,
            suggestion="Drop the column or document why it is empty",
        )
        for column in analysis.columns
        if column.is_entirely_null
    ]
