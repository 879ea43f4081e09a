"""Column type inference.

Two strategies share the predicates in ``value_types`` but aggregate the
per-value evidence differently:

- ``infer_incremental`` works from the category counters a streaming
  accumulator has collected. It applies column-name overrides, then a
  cascade of 80% thresholds, and falls back to ``string``.
- ``infer_batch`` works on an in-memory sample. Each candidate type is
  counted independently (a value may match several), the plurality wins if
  it covers 80% of the sample, and a confidence is reported alongside.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import pandas as pd

from ...constants import Thresholds
from ..entities.column_type import ColumnType, InferredType, ValueTypeCategory
from .value_types import TYPE_PREDICATES

_PLURALITY_ORDER: tuple[ColumnType, ...] = (
    ColumnType.BOOLEAN,
    ColumnType.INTEGER,
    ColumnType.FLOAT,
    ColumnType.TIMESTAMP,
    ColumnType.DATE,
    ColumnType.TIME,
)


def _ratio(count: int, total: int) -> float:
    return count / total if total else 0.0


def _mentions_timestamp(name: str) -> bool:
    return "timestamp" in name or "datetime" in name


def _mentions_date(name: str) -> bool:
    return "date" in name and "update" not in name


def _mentions_identifier(name: str) -> bool:
    return "id" in name or name.endswith("_id")


def infer_incremental(
    type_counts: Mapping[ValueTypeCategory, int], column_name: str | None = None
) -> ColumnType:
    total = sum(type_counts.values())
    if total == 0:
        return ColumnType.STRING

    def share(*categories: ValueTypeCategory) -> float:
        return _ratio(sum(type_counts.get(c, 0) for c in categories), total)

    if column_name:
        name = column_name.lower()
        if (
            _mentions_timestamp(name)
            and share(ValueTypeCategory.TIMESTAMP) >= Thresholds.NAME_HINT_MATCH
        ):
            return ColumnType.TIMESTAMP
        if (
            _mentions_date(name)
            and share(ValueTypeCategory.DATE) >= Thresholds.NAME_HINT_MATCH
        ):
            return ColumnType.DATE
        # Identifier override ignores the value distribution entirely.
        if _mentions_identifier(name):
            return ColumnType.IDENTIFIER

    cascade: tuple[tuple[tuple[ValueTypeCategory, ...], ColumnType], ...] = (
        ((ValueTypeCategory.INTEGER,), ColumnType.INTEGER),
        ((ValueTypeCategory.INTEGER, ValueTypeCategory.FLOAT), ColumnType.FLOAT),
        ((ValueTypeCategory.BOOLEAN,), ColumnType.BOOLEAN),
        ((ValueTypeCategory.TIMESTAMP,), ColumnType.TIMESTAMP),
        ((ValueTypeCategory.DATE,), ColumnType.DATE),
    )
    for categories, column_type in cascade:
        if share(*categories) >= Thresholds.STATISTICAL_MAJORITY:
            return column_type
    return ColumnType.STRING


def name_hint(column_name: str) -> ColumnType | None:
    """Semantic type suggested by a column name, if any.

    Checked in order, first match wins: identifier ("id" anywhere, except
    inside "valid" or "solid"), timestamp ("timestamp", "datetime" or exactly
    "ts"), time, date (not "update"), then boolean ("is_"/"has_" prefixes,
    "flag" or "bool"). So ``paid_flag`` hints identifier, not boolean.
    """
    name = column_name.lower()
    if "id" in name and "valid" not in name and "solid" not in name:
        return ColumnType.IDENTIFIER
    if _mentions_timestamp(name) or name == "ts":
        return ColumnType.TIMESTAMP
    if "time" in name:
        return ColumnType.TIME
    if _mentions_date(name):
        return ColumnType.DATE
    if name.startswith(("is_", "has_")) or "flag" in name or "bool" in name:
        return ColumnType.BOOLEAN
    return None


def infer_batch(
    values: Iterable[str], column_name: str | None = None
) -> InferredType:
    sample = [value.strip() for value in values if value and value.strip()]
    if not sample:
        return InferredType(ColumnType.UNKNOWN, 0.0)
    total = len(sample)

    if column_name and (hint := name_hint(column_name)) is not None:
        predicate = TYPE_PREDICATES[hint]
        ratio = _ratio(sum(1 for value in sample if predicate(value)), total)
        if ratio >= Thresholds.BATCH_NAME_HINT_MATCH:
            return InferredType(hint, ratio)

    counts = [
        (column_type, sum(1 for value in sample if TYPE_PREDICATES[column_type](value)))
        for column_type in _PLURALITY_ORDER
    ]
    # sorted() is stable, so ties keep _PLURALITY_ORDER.
    top_type, top_count = sorted(counts, key=lambda item: item[1], reverse=True)[0]
    ratio = _ratio(top_count, total)
    if ratio >= Thresholds.STATISTICAL_MAJORITY:
        return InferredType(top_type, ratio)
    return InferredType.certain(ColumnType.STRING)


def infer_frame_types(
    frame: pd.DataFrame, *, sample_size: int | None = None
) -> dict[str, InferredType]:
    """Batch-infer a type for every column of a DataFrame."""
    inferred: dict[str, InferredType] = {}
    for column in frame.columns:
        series = frame[column].dropna().astype(str)
        if sample_size is not None:
            series = series.head(sample_size)
        inferred[str(column)] = infer_batch(series.tolist(), column_name=str(column))
    return inferred
