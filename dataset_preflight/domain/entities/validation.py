from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ValidationSeverity(StrEnum):
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"

    @property
    def deduction(self) -> int:
        return _DEDUCTIONS[self]

    @property
    def fair_deduction(self) -> int:
        return _FAIR_DEDUCTIONS[self]


_DEDUCTIONS = {
    ValidationSeverity.INFO: 1,
    ValidationSeverity.WARNING: 5,
    ValidationSeverity.CRITICAL: 20,
}

_FAIR_DEDUCTIONS = {
    ValidationSeverity.INFO: 1,
    ValidationSeverity.WARNING: 3,
    ValidationSeverity.CRITICAL: 10,
}


@dataclass(frozen=True, slots=True)
class ValidationResult:
    severity: ValidationSeverity
    code: str
    message: str
    file_path: str | None = None
    line_number: int | None = None
    suggestion: str | None = None

    @classmethod
    def info(
        cls,
        code: str,
        message: str,
        *,
        file_path: str | None = None,
        suggestion: str | None = None,
    ) -> ValidationResult:
        return cls(
            ValidationSeverity.INFO,
            code,
            message,
            file_path=file_path,
            suggestion=suggestion,
        )

    @classmethod
    def warning(
        cls,
        code: str,
        message: str,
        *,
        file_path: str | None = None,
        suggestion: str | None = None,
    ) -> ValidationResult:
        return cls(
            ValidationSeverity.WARNING,
            code,
            message,
            file_path=file_path,
            suggestion=suggestion,
        )

    @classmethod
    def critical(
        cls,
        code: str,
        message: str,
        *,
        file_path: str | None = None,
        suggestion: str | None = None,
    ) -> ValidationResult:
        return cls(
            ValidationSeverity.CRITICAL,
            code,
            message,
            file_path=file_path,
            suggestion=suggestion,
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "severity": str(self.severity),
            "code": self.code,
            "message": self.message,
            "file_path": self.file_path,
            "line_number": self.line_number,
            "suggestion": self.suggestion,
        }
