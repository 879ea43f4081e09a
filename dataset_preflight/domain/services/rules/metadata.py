import json

from ...entities.validation import ValidationResult
from .context import DocumentText, RuleContext

_REQUIRED_FIELDS: tuple[tuple[str, tuple[str, ...], str], ...] = (
    ("META-005", ("title",), "title"),
    ("META-006", ("description",), "description"),
    ("META-007", ("creator", "author"), "creator or author"),
    ("META-008", ("date", "created"), "date or created"),
    ("META-009", ("license",), "license"),
)


def check_metadata(context: RuleContext) -> list[ValidationResult]:
    results: list[ValidationResult] = []
    if context.readme is not None:
        results.extend(_check_readme(context.readme, context.min_readme_length))
    if context.metadata is not None:
        results.extend(_check_metadata_json(context.metadata))
    return results


def _check_readme(readme: DocumentText, min_length: int) -> list[ValidationResult]:
    if readme.text is None:
        return [
            ValidationResult.warning(
                "META-002",
                f"Cannot read README file: {readme.error}",
                file_path=readme.relative_path,
                suggestion="Ensure README file is readable and contains valid text",
            )
        ]
    length = len(readme.text.strip())
    if length < min_length:
        return [
            ValidationResult.warning(
                "META-001",
                f"README is too short ({length} characters)",
                file_path=readme.relative_path,
                suggestion=f"Expand README to at least {min_length} characters with meaningful description",
            )
        ]
    return []


def is_filled(value: object) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        text = value.strip()
        return bool(text) and not text.upper().startswith("[TODO")
    if isinstance(value, list):
        return any(is_filled(item) for item in value)
    if isinstance(value, dict):
        return bool(value)
    return True


def _check_metadata_json(metadata: DocumentText) -> list[ValidationResult]:
    if metadata.text is None:
        return [
            ValidationResult.critical(
                "META-003",
                f"Cannot read metadata.json file: {metadata.error}",
                file_path=metadata.relative_path,
                suggestion="Ensure metadata.json file is readable",
            )
        ]
    try:
        document = json.loads(metadata.text)
    except json.JSONDecodeError as exc:
        return [
            ValidationResult.critical(
                "META-004",
                f"metadata.json is not valid JSON: {exc.msg} (line {exc.lineno})",
                file_path=metadata.relative_path,
                suggestion="Fix the JSON syntax in metadata.json",
            )
        ]
    if not isinstance(document, dict):
        return [
            ValidationResult.critical(
                "META-004",
                "metadata.json must contain a JSON object",
                file_path=metadata.relative_path,
                suggestion="Wrap the metadata fields in a top-level object",
            )
        ]
    results: list[ValidationResult] = []
    for code, keys, label in _REQUIRED_FIELDS:
        if not any(is_filled(document.get(key)) for key in keys):
            results.append(
                ValidationResult.warning(
                    code,
                    f"metadata.json is missing a {label} field",
                    file_path=metadata.relative_path,
                    suggestion=f"Add a non-placeholder '{keys[0]}' value to metadata.json",
                )
            )
    return results
