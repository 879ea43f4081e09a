"""Unit tests for incremental and batch column type inference."""

import pandas as pd
import pytest

from dataset_preflight.domain.entities.column_type import (
    ColumnType,
    InferredType,
    ValueTypeCategory,
)
from dataset_preflight.domain.services.type_inference import (
    infer_batch,
    infer_frame_types,
    infer_incremental,
    name_hint,
)

INTEGER = ValueTypeCategory.INTEGER
FLOAT = ValueTypeCategory.FLOAT
BOOLEAN = ValueTypeCategory.BOOLEAN
TIMESTAMP = ValueTypeCategory.TIMESTAMP
DATE = ValueTypeCategory.DATE
STRING = ValueTypeCategory.STRING


class TestInferIncremental:
    def test_no_evidence_is_string(self):
        assert infer_incremental({}) is ColumnType.STRING
        assert infer_incremental({INTEGER: 0}, "count") is ColumnType.STRING

    def test_integer_majority(self):
        counts = {INTEGER: 85, STRING: 15}
        assert infer_incremental(counts, "count") is ColumnType.INTEGER

    def test_integer_below_threshold_is_string(self):
        counts = {INTEGER: 79, STRING: 21}
        assert infer_incremental(counts, "count") is ColumnType.STRING

    def test_integers_and_floats_combine_into_float(self):
        counts = {INTEGER: 50, FLOAT: 40, STRING: 10}
        assert infer_incremental(counts) is ColumnType.FLOAT

    def test_boolean_majority(self):
        assert infer_incremental({BOOLEAN: 9, STRING: 1}) is ColumnType.BOOLEAN

    def test_bare_digits_count_as_integers(self):
        # "1"/"0" columns are classified per value as integers.
        assert infer_incremental({INTEGER: 10}) is ColumnType.INTEGER

    def test_temporal_cascade(self):
        assert infer_incremental({TIMESTAMP: 8, STRING: 2}) is ColumnType.TIMESTAMP
        assert infer_incremental({DATE: 9, STRING: 1}) is ColumnType.DATE

    def test_timestamp_name_override_at_half(self):
        counts = {TIMESTAMP: 5, STRING: 5}
        assert infer_incremental(counts, "created_timestamp") is ColumnType.TIMESTAMP
        assert infer_incremental(counts, "created") is ColumnType.STRING

    def test_date_name_override(self):
        counts = {DATE: 6, STRING: 4}
        assert infer_incremental(counts, "Event_Date") is ColumnType.DATE

    def test_update_is_not_a_date_hint(self):
        counts = {DATE: 6, STRING: 4}
        assert infer_incremental(counts, "last_update") is ColumnType.STRING

    def test_identifier_override_ignores_values(self):
        assert infer_incremental({STRING: 10}, "user_id") is ColumnType.IDENTIFIER
        assert infer_incremental({INTEGER: 10}, "ID") is ColumnType.IDENTIFIER

    def test_identifier_override_matches_substring(self):
        assert infer_incremental({INTEGER: 10}, "width") is ColumnType.IDENTIFIER


class TestNameHint:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("created_timestamp", ColumnType.TIMESTAMP),
            ("DateTime", ColumnType.TIMESTAMP),
            ("birth_date", ColumnType.DATE),
            ("is_active", ColumnType.BOOLEAN),
            ("has_children", ColumnType.BOOLEAN),
            ("error_flag", ColumnType.BOOLEAN),
            ("start_time", ColumnType.TIME),
            ("sample_id", ColumnType.IDENTIFIER),
            ("temperature", None),
            ("last_update", None),
            ("paid_flag", ColumnType.IDENTIFIER),
            ("TS", ColumnType.TIMESTAMP),
            ("is_valid", ColumnType.BOOLEAN),
            ("solid_fraction", None),
        ],
    )
    def test_hints(self, name, expected):
        assert name_hint(name) is expected


class TestInferBatch:
    def test_empty_sample_is_unknown(self):
        assert infer_batch([]) == InferredType(ColumnType.UNKNOWN, 0.0)
        assert infer_batch(["", "  "]) == InferredType(ColumnType.UNKNOWN, 0.0)

    def test_ties_resolve_in_plurality_order(self):
        # "1"/"0" satisfy the boolean, integer and float predicates alike.
        result = infer_batch(["1", "0", "1", "0"])
        assert result.column_type is ColumnType.BOOLEAN
        assert result.confidence == 1.0

    def test_integers(self):
        assert infer_batch(["10", "20", "30"]) == InferredType(ColumnType.INTEGER, 1.0)

    def test_floats_beat_partial_integers(self):
        result = infer_batch(["1.5", "2.5", "3"])
        assert result.column_type is ColumnType.FLOAT

    def test_blanks_are_filtered_before_counting(self):
        result = infer_batch(["4", "", "5", " "])
        assert result == InferredType(ColumnType.INTEGER, 1.0)

    def test_name_hint_applies_at_seventy_percent(self):
        values = ["yes", "no", "yes", "maybe"]
        assert infer_batch(values, "is_active") == InferredType(ColumnType.BOOLEAN, 0.75)

    def test_time_hint(self):
        result = infer_batch(["10:30", "11:00:15"], "start_time")
        assert result == InferredType(ColumnType.TIME, 1.0)

    def test_failed_hint_falls_back_to_string(self):
        result = infer_batch(["a-1", "b-2", "c 3"], "record_id")
        assert result == InferredType.certain(ColumnType.STRING)

    def test_mixed_values_are_string(self):
        assert infer_batch(["a", "b", "1"]) == InferredType(ColumnType.STRING, 1.0)


class TestInferFrameTypes:
    def test_per_column_inference(self):
        frame = pd.DataFrame({"n": [1, 2, 3], "label": ["x", "y", None]})

        inferred = infer_frame_types(frame)

        assert inferred["n"].column_type is ColumnType.INTEGER
        assert inferred["label"].column_type is ColumnType.STRING

    def test_sample_size_limits_rows(self):
        frame = pd.DataFrame({"value": ["1", "2", "x", "y"]})

        inferred = infer_frame_types(frame, sample_size=2)

        assert inferred["value"] == InferredType(ColumnType.INTEGER, 1.0)
