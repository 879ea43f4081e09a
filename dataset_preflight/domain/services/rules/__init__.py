"""Compliance rules.

Each rule module exposes one ``check_*`` function taking a ``RuleContext``
and returning ``ValidationResult`` records. ``run_all_rules`` evaluates every
module and orders the results most severe first.
"""

from ...entities.validation import ValidationResult, ValidationSeverity
from .content import check_content
from .context import (
    DocumentText,
    ManifestSnapshot,
    RuleContext,
    find_datacard,
    find_license,
    find_metadata,
    find_readme,
)
from .data_quality import check_data_quality
from .fair import check_fair
from .integrity import check_integrity
from .metadata import check_metadata
from .naming import check_naming
from .structure import check_structure

RULES = (
    check_structure,
    check_naming,
    check_metadata,
    check_content,
    check_data_quality,
    check_fair,
    check_integrity,
)

_SEVERITY_RANK = {
    ValidationSeverity.CRITICAL: 0,
    ValidationSeverity.WARNING: 1,
    ValidationSeverity.INFO: 2,
}


def run_all_rules(context: RuleContext) -> list[ValidationResult]:
    results = [result for rule in RULES for result in rule(context)]
    return sorted(
        results,
        key=lambda r: (_SEVERITY_RANK[r.severity], r.code, r.file_path or ""),
    )


__all__ = [
    "RULES",
    "DocumentText",
    "ManifestSnapshot",
    "RuleContext",
    "check_content",
    "check_data_quality",
    "check_fair",
    "check_integrity",
    "check_metadata",
    "check_naming",
    "check_structure",
    "find_datacard",
    "find_license",
    "find_metadata",
    "find_readme",
    "run_all_rules",
]
