"""Unit tests for delimiter and header detection."""

import pytest

from dataset_preflight.domain.entities.tabular import Delimiter
from dataset_preflight.infrastructure.io.dialect import (
    consistency_score,
    detect_delimiter,
    detect_header,
)


class TestDetectDelimiter:
    """Test suite for detect_delimiter."""

    def test_comma(self):
        assert detect_delimiter(["a,b,c", "1,2,3", "4,5,6"]) is Delimiter.COMMA

    def test_tab(self):
        assert detect_delimiter(["a\tb\tc", "1\t2\t3"]) is Delimiter.TAB

    def test_semicolon(self):
        assert detect_delimiter(["a;b;c", "1,5;2,5;3,5"]) is Delimiter.SEMICOLON

    def test_pipe(self):
        assert detect_delimiter(["id|name", "1|x", "2|y"]) is Delimiter.PIPE

    def test_empty_sample_defaults_to_comma(self):
        assert detect_delimiter([]) is Delimiter.COMMA

    def test_single_column_defaults_to_comma(self):
        assert detect_delimiter(["alpha", "beta", "gamma"]) is Delimiter.COMMA

    def test_inconsistent_counts_are_rejected(self):
        """Variance of 1.0 or more disqualifies a candidate."""
        lines = ["a;b", "a;b;c;d", "a"]
        assert consistency_score(lines, Delimiter.SEMICOLON) == 0.0
        assert detect_delimiter(lines) is Delimiter.COMMA

    def test_tie_goes_to_earlier_candidate(self):
        lines = ["a,b\tc", "d,e\tf"]
        assert consistency_score(lines, Delimiter.COMMA) == consistency_score(
            lines, Delimiter.TAB
        )
        assert detect_delimiter(lines) is Delimiter.COMMA

    def test_quoted_commas_do_not_count(self):
        lines = ['"a,b";"c,d"', '"1,2";"3,4"']
        assert detect_delimiter(lines) is Delimiter.SEMICOLON


class TestConsistencyScore:
    """Test suite for consistency_score."""

    def test_perfectly_consistent(self):
        assert consistency_score(["a,b,c", "1,2,3"], Delimiter.COMMA) == pytest.approx(3.0)

    def test_small_variance_is_penalized(self):
        # counts 3, 3, 3, 4 -> mean 3.25, variance 0.1875
        lines = ["a,b,c", "1,2,3", "4,5,6", "7,8,9,10"]
        expected = 3.25 / (0.1875 + 1.0)
        assert consistency_score(lines, Delimiter.COMMA) == pytest.approx(expected)

    def test_empty_sample(self):
        assert consistency_score([], Delimiter.COMMA) == 0.0


class TestDetectHeader:
    """Test suite for detect_header."""

    def test_text_over_numbers_is_header(self):
        assert detect_header(["name,age,city", "Alice,30,NYC"], Delimiter.COMMA)

    def test_all_numeric_is_not_header(self):
        assert not detect_header(["1,2,3", "4,5,6"], Delimiter.COMMA)

    def test_requires_two_lines(self):
        assert not detect_header(["name,age"], Delimiter.COMMA)

    def test_field_count_mismatch(self):
        assert not detect_header(["name,age,city", "Alice,30"], Delimiter.COMMA)

    def test_numeric_cell_in_first_row_blocks_header(self):
        assert not detect_header(["name,2024", "Alice,30"], Delimiter.COMMA)

    def test_all_text_second_row_is_not_header(self):
        """Favor false negatives: text over text is treated as data."""
        assert not detect_header(["name,city", "Alice,NYC"], Delimiter.COMMA)

    def test_float_in_second_row(self):
        assert detect_header(["x|y", "a|1.5e3"], Delimiter.PIPE)
