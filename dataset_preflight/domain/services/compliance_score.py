from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ...constants import ScoreWeights
from ..entities.validation import ValidationResult, ValidationSeverity


@dataclass(frozen=True, slots=True)
class ComplianceScore:
    score: int
    fair_scores: dict[str, int]
    critical_count: int
    warning_count: int
    info_count: int
    exit_code: int

    @property
    def passed(self) -> bool:
        return self.exit_code == 0

    @property
    def grade(self) -> str:
        if self.score >= ScoreWeights.PASSING_SCORE:
            return "good"
        if self.score >= ScoreWeights.FAILING_SCORE:
            return "needs work"
        return "poor"


def calculate_score(results: Sequence[ValidationResult]) -> int:
    deductions = sum(result.severity.deduction for result in results)
    return max(0, ScoreWeights.MAX_SCORE - deductions)


def calculate_fair_scores(results: Sequence[ValidationResult]) -> dict[str, int]:
    scores: dict[str, int] = {}
    for principle in ScoreWeights.FAIR_PRINCIPLES:
        prefix = f"FAIR-{principle}"
        deductions = sum(
            result.severity.fair_deduction
            for result in results
            if result.code.startswith(prefix)
        )
        scores[principle] = max(0, ScoreWeights.FAIR_PRINCIPLE_MAX - deductions)
    return scores


def determine_exit_code(results: Sequence[ValidationResult], score: int) -> int:
    has_critical = any(r.severity is ValidationSeverity.CRITICAL for r in results)
    has_warning = any(r.severity is ValidationSeverity.WARNING for r in results)
    if has_critical or score < ScoreWeights.FAILING_SCORE:
        return 2
    if has_warning or score < ScoreWeights.PASSING_SCORE:
        return 1
    return 0


def score_results(results: Sequence[ValidationResult]) -> ComplianceScore:
    score = calculate_score(results)
    return ComplianceScore(
        score=score,
        fair_scores=calculate_fair_scores(results),
        critical_count=sum(
            1 for r in results if r.severity is ValidationSeverity.CRITICAL
        ),
        warning_count=sum(
            1 for r in results if r.severity is ValidationSeverity.WARNING
        ),
        info_count=sum(1 for r in results if r.severity is ValidationSeverity.INFO),
        exit_code=determine_exit_code(results, score),
    )
