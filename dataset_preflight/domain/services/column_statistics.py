"""Streaming per-column statistics.

Memory per column is bounded by the unique-value cap and the display sample
cap, independent of how many rows are streamed through ``update``.
"""

from __future__ import annotations

from ...constants import Limits
from ..entities.column_type import ValueTypeCategory
from ..entities.tabular import ColumnReport
from .type_inference import infer_incremental
from .value_types import detect_value_type, parse_numeric


class ColumnAccumulator:
    __slots__ = (
        "index",
        "total_count",
        "null_count",
        "type_counts",
        "_unique_values",
        "unique_saturated",
        "_samples",
        "numeric_min",
        "numeric_max",
        "numeric_sum",
        "numeric_count",
        "_max_unique",
        "_max_samples",
    )

    def __init__(
        self,
        index: int,
        *,
        max_unique: int = Limits.MAX_UNIQUE_VALUES,
        max_samples: int = Limits.MAX_SAMPLE_VALUES,
    ) -> None:
        self.index = index
        self.total_count = 0
        self.null_count = 0
        self.type_counts: dict[ValueTypeCategory, int] = dict.fromkeys(
            ValueTypeCategory, 0
        )
        self._unique_values: set[str] = set()
        self.unique_saturated = False
        self._samples: list[str] = []
        self.numeric_min: float | None = None
        self.numeric_max: float | None = None
        self.numeric_sum = 0.0
        self.numeric_count = 0
        self._max_unique = max_unique
        self._max_samples = max_samples

    @property
    def unique_count(self) -> int:
        return len(self._unique_values)

    @property
    def samples(self) -> tuple[str, ...]:
        return tuple(self._samples)

    def update(self, value: str) -> None:
        if not value:
            self.null_count += 1
            return

        self.total_count += 1
        if not self.unique_saturated:
            self._unique_values.add(value)
            if len(self._unique_values) >= self._max_unique:
                self.unique_saturated = True
        if len(self._samples) < self._max_samples and value not in self._samples:
            self._samples.append(value)

        category = detect_value_type(value)
        self.type_counts[category] += 1
        if category in (ValueTypeCategory.INTEGER, ValueTypeCategory.FLOAT):
            self._fold_numeric(value)

    def _fold_numeric(self, value: str) -> None:
        number = parse_numeric(value)
        if number is None:
            return
        if self.numeric_min is None or number < self.numeric_min:
            self.numeric_min = number
        if self.numeric_max is None or number > self.numeric_max:
            self.numeric_max = number
        self.numeric_sum += number
        self.numeric_count += 1

    def finalize(self, column_name: str | None = None) -> ColumnReport:
        mean = self.numeric_sum / self.numeric_count if self.numeric_count else None
        return ColumnReport(
            index=self.index,
            name=column_name,
            column_type=infer_incremental(self.type_counts, column_name),
            null_count=self.null_count,
            sample_values=self.samples,
            total_count=self.total_count,
            unique_count=self.unique_count,
            unique_saturated=self.unique_saturated,
            numeric_min=self.numeric_min,
            numeric_max=self.numeric_max,
            numeric_mean=mean,
            type_counts={
                category: count
                for category, count in self.type_counts.items()
                if count
            },
        )
