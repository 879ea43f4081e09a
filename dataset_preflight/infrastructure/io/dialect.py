"""Delimiter and header detection over a small sample of leading lines."""

from collections.abc import Sequence
from statistics import fmean, pvariance

from ...constants import Thresholds
from ...domain.entities.tabular import Delimiter
from ...domain.services.value_types import is_float, is_integer
from .field_parser import field_count, parse_fields

# Order matters: earlier candidates win ties.
DELIMITER_CANDIDATES: tuple[Delimiter, ...] = (
    Delimiter.COMMA,
    Delimiter.TAB,
    Delimiter.SEMICOLON,
    Delimiter.PIPE,
)


def consistency_score(lines: Sequence[str], delimiter: Delimiter) -> float:
    if not lines:
        return 0.0
    counts = [field_count(line, delimiter) for line in lines]
    mean = fmean(counts)
    variance = pvariance(counts, mu=mean)
    if variance < Thresholds.DELIMITER_MAX_VARIANCE and mean >= Thresholds.DELIMITER_MIN_MEAN_FIELDS:
        return mean / (variance + 1.0)
    return 0.0


def detect_delimiter(lines: Sequence[str]) -> Delimiter:
    best = DELIMITER_CANDIDATES[0]
    best_score = 0.0
    for candidate in DELIMITER_CANDIDATES:
        score = consistency_score(lines, candidate)
        if score > best_score:
            best, best_score = candidate, score
    return best


def _is_numeric(value: str) -> bool:
    return is_integer(value) or is_float(value)


def detect_header(lines: Sequence[str], delimiter: Delimiter) -> bool:
    if len(lines) < 2:
        return False
    first = parse_fields(lines[0], delimiter)
    second = parse_fields(lines[1], delimiter)
    if len(first) != len(second):
        return False
    first_all_text = not any(_is_numeric(value) for value in first)
    second_has_number = any(_is_numeric(value) for value in second)
    return first_all_text and second_has_number
