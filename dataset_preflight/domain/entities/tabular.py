from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

import pandas as pd

from .column_type import ColumnType, ValueTypeCategory


class Delimiter(StrEnum):
    COMMA = ","
    TAB = "\t"
    SEMICOLON = ";"
    PIPE = "|"

    @property
    def display_name(self) -> str:
        return self.name.lower()


def _empty_type_counts() -> dict[ValueTypeCategory, int]:
    return {}


@dataclass(frozen=True, slots=True)
class ColumnReport:
    index: int
    name: str | None
    column_type: ColumnType
    null_count: int
    sample_values: tuple[str, ...] = ()
    total_count: int = 0
    unique_count: int = 0
    unique_saturated: bool = False
    numeric_min: float | None = None
    numeric_max: float | None = None
    numeric_mean: float | None = None
    type_counts: dict[ValueTypeCategory, int] = field(
        default_factory=_empty_type_counts
    )

    @property
    def display_name(self) -> str:
        return self.name if self.name else f"column_{self.index}"

    @property
    def is_entirely_null(self) -> bool:
        return self.total_count == 0 and self.null_count > 0

    def to_dict(self) -> dict[str, object]:
        return {
            "index": self.index,
            "name": self.name,
            "type": str(self.column_type),
            "null_count": self.null_count,
            "total_count": self.total_count,
            "unique_count": self.unique_count,
            "unique_saturated": self.unique_saturated,
            "numeric_min": self.numeric_min,
            "numeric_max": self.numeric_max,
            "numeric_mean": self.numeric_mean,
            "sample_values": list(self.sample_values),
        }


@dataclass(frozen=True, slots=True)
class TabularAnalysis:
    delimiter: Delimiter
    has_header: bool
    column_count: int
    row_count: int
    columns: tuple[ColumnReport, ...] = ()

    @classmethod
    def empty(cls, delimiter: Delimiter = Delimiter.COMMA) -> TabularAnalysis:
        return cls(delimiter=delimiter, has_header=False, column_count=0, row_count=0)

    @property
    def is_empty(self) -> bool:
        return self.column_count == 0

    def column_names(self) -> list[str]:
        return [column.display_name for column in self.columns]

    def to_dict(self) -> dict[str, object]:
        return {
            "delimiter": self.delimiter.display_name,
            "has_header": self.has_header,
            "column_count": self.column_count,
            "row_count": self.row_count,
            "columns": [column.to_dict() for column in self.columns],
        }

    def to_frame(self) -> pd.DataFrame:
        """Column profile as a DataFrame, one row per column."""
        records = []
        for column in self.columns:
            record = column.to_dict()
            record["name"] = column.display_name
            record["sample_values"] = "; ".join(column.sample_values)
            records.append(record)
        frame = pd.DataFrame.from_records(
            records,
            columns=[
                "index",
                "name",
                "type",
                "null_count",
                "total_count",
                "unique_count",
                "unique_saturated",
                "numeric_min",
                "numeric_max",
                "numeric_mean",
                "sample_values",
            ],
        )
        return frame
