"""Type vocabulary shared by value classification and column inference."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum


class ValueTypeCategory(Enum):
    """Category of a single scalar value."""

    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    DATE = "date"
    STRING = "string"


class ColumnType(StrEnum):
    """Finalized type of a whole column."""

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    DATE = "date"
    TIME = "time"
    IDENTIFIER = "identifier"
    UNKNOWN = "unknown"

    @property
    def is_numeric(self) -> bool:
        return self in (ColumnType.INTEGER, ColumnType.FLOAT)

    @property
    def is_temporal(self) -> bool:
        return self in (ColumnType.TIMESTAMP, ColumnType.DATE, ColumnType.TIME)


@dataclass(frozen=True, slots=True)
class InferredType:
    column_type: ColumnType
    confidence: float

    def __post_init__(self) -> None:
        # Frozen dataclass: clamp through object.__setattr__.
        object.__setattr__(self, "confidence", min(max(self.confidence, 0.0), 1.0))

    @classmethod
    def certain(cls, column_type: ColumnType) -> InferredType:
        return cls(column_type, 1.0)

    @classmethod
    def uncertain(cls, column_type: ColumnType) -> InferredType:
        return cls(column_type, 0.5)

    def __str__(self) -> str:
        return f"{self.column_type} ({self.confidence:.0%})"
