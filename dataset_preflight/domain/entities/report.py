"""Machine-readable preflight report.

These pydantic models define the JSON document emitted by
``dataset-preflight report --json``; field names are part of the output
contract consumed by CI pipelines.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .validation import ValidationSeverity


class FileStats(BaseModel):
    count: int = Field(ge=0)
    total_size: int = Field(ge=0)
    types: dict[str, int] = Field(default_factory=dict)


class ReportScore(BaseModel):
    total: int = Field(ge=0, le=100)
    findable: int = Field(ge=0, le=25)
    accessible: int = Field(ge=0, le=25)
    interoperable: int = Field(ge=0, le=25)
    reusable: int = Field(ge=0, le=25)
    critical_count: int = Field(ge=0)
    warning_count: int = Field(ge=0)
    info_count: int = Field(ge=0)


class ReportIssue(BaseModel):
    severity: ValidationSeverity
    code: str
    message: str
    suggestion: str | None = None
    file_path: str | None = None
    line_number: int | None = None


class ReportGeneratedFile(BaseModel):
    path: str
    description: str
    was_created: bool
    reason: str | None = None


class ReportColumn(BaseModel):
    index: int = Field(ge=0)
    name: str
    type: str
    null_count: int = Field(ge=0)
    unique_count: int = Field(ge=0)
    sample_values: list[str] = Field(default_factory=list)


class ReportTabularFile(BaseModel):
    path: str
    delimiter: str
    has_header: bool
    column_count: int = Field(ge=0)
    row_count: int = Field(ge=0)
    columns: list[ReportColumn] = Field(default_factory=list)


class PreflightReport(BaseModel):
    dataset_path: str
    scan_timestamp: str
    tool_version: str
    score: ReportScore
    files: FileStats
    tabular_files: list[ReportTabularFile] = Field(default_factory=list)
    validation_results: list[ReportIssue] = Field(default_factory=list)
    generated_files: list[ReportGeneratedFile] = Field(default_factory=list)
    exit_code: int = Field(ge=0, le=2)

    @property
    def passed(self) -> bool:
        return self.exit_code == 0

    def issues_with_severity(self, severity: ValidationSeverity) -> list[ReportIssue]:
        return [issue for issue in self.validation_results if issue.severity is severity]
