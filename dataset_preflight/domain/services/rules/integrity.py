"""Compare the current file set against a previously written manifest."""

from ....constants import Defaults
from ...entities.validation import ValidationResult
from .context import RuleContext

_GENERATED_NAMES = frozenset(
    {
        Defaults.MANIFEST_FILE_NAME,
        Defaults.README_FILE_NAME,
        Defaults.METADATA_FILE_NAME,
        Defaults.DATACARD_FILE_NAME,
        Defaults.REPORT_FILE_NAME,
    }
)


def _is_generated(path: str) -> bool:
    return path in _GENERATED_NAMES or path.endswith(
        (Defaults.SCHEMA_SUFFIX, Defaults.PROFILE_SUFFIX)
    )


def check_integrity(context: RuleContext) -> list[ValidationResult]:
    manifest = context.manifest
    if manifest is None:
        return []
    if manifest.error is not None:
        return [
            ValidationResult.warning(
                "INTEGRITY-004",
                f"Could not parse manifest: {manifest.error}",
                file_path=Defaults.MANIFEST_FILE_NAME,
                suggestion="Regenerate the manifest",
            )
        ]
    results: list[ValidationResult] = []
    current = {str(info.relative_path): info for info in context.files}
    for path, expected in sorted(manifest.entries.items()):
        if path == Defaults.MANIFEST_FILE_NAME:
            continue
        info = current.pop(path, None)
        if info is None:
            results.append(
                ValidationResult.critical(
                    "INTEGRITY-002",
                    f"File listed in manifest is missing: {path}",
                    file_path=path,
                    suggestion="Restore the missing file or regenerate the manifest if removal was intentional.",
                )
            )
        # Unhashed scans cannot be compared.
        elif info.sha256 is not None and info.sha256.lower() != expected:
            results.append(
                ValidationResult.critical(
                    "INTEGRITY-001",
                    f"File has been modified since manifest was created: {path}",
                    file_path=path,
                    suggestion=f"Expected hash: {expected}, actual hash: {info.sha256}. Regenerate manifest if changes are intentional.",
                )
            )
    for path in sorted(current):
        if _is_generated(path):
            continue
        results.append(
            ValidationResult.warning(
                "INTEGRITY-003",
                f"File not in manifest (added after manifest was created): {path}",
                file_path=path,
                suggestion="Regenerate the manifest to include new files.",
            )
        )
    return results
