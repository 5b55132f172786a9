"""Test per core/operations.py - righe, colonne e somme."""
from __future__ import annotations

import pytest

from core.errors import CsvParseError, IndexOutOfBoundsError, ParseIntError
from core.operations import (
    column_of,
    get_column,
    get_line,
    line_of,
    parse_int,
    sum_column,
    sum_of,
)


class TestGetLine:
    """Test per get_line()."""

    def test_second_line(self, sample_text):
        assert get_line(sample_text, 1) == "Bert, M, 42, 68, 166"

    def test_first_line(self, sample_text):
        assert get_line(sample_text, 0) == "Alex, M, 41, 74, 170"

    def test_out_of_range(self, sample_text):
        with pytest.raises(IndexOutOfBoundsError) as exc:
            get_line(sample_text, 3)
        assert exc.value.kind == "line"
        assert exc.value.index == 3
        assert exc.value.size == 3

    def test_negative_index_is_out_of_range(self, sample_text):
        with pytest.raises(IndexOutOfBoundsError):
            get_line(sample_text, -1)

    def test_parse_failure(self):
        with pytest.raises(CsvParseError):
            get_line("", 0)

    def test_biostats_third_line(self, biostats_path):
        text = biostats_path.read_text(encoding="utf-8")
        assert get_line(text, 2) == "Bert, M, 42, 68, 166"


class TestGetColumn:
    """Test per get_column()."""

    def test_first_column(self, sample_text):
        assert get_column(sample_text, 0) == ["Alex", "Bert", "Carl"]

    def test_missing_column(self, sample_text):
        with pytest.raises(IndexOutOfBoundsError) as exc:
            get_column(sample_text, 99)
        assert exc.value.kind == "column"

    def test_ragged_record_fails_whole_column(self):
        with pytest.raises(IndexOutOfBoundsError):
            get_column("a,b\nc\n", 1)

    def test_index_error_compat(self, sample_text):
        with pytest.raises(IndexError):
            get_column(sample_text, 5)

    def test_biostats_names(self, biostats_path):
        column = get_column(biostats_path.read_text(encoding="utf-8"), 0)
        assert column[0] == "Name"
        assert column[1:4] == ["Alex", "Bert", "Carl"]
        assert len(column) == 19


class TestSumColumn:
    """Test per sum_column()."""

    def test_sum_ages(self, sample_text):
        assert sum_column(sample_text, 2) == 115

    def test_non_integer_value(self):
        with pytest.raises(ParseIntError) as exc:
            sum_column("Alex,41\nBert,abc\n", 1)
        assert exc.value.value == "abc"
        assert exc.value.row == 1

    def test_text_column(self, sample_text):
        with pytest.raises(ParseIntError) as exc:
            sum_column(sample_text, 0)
        assert exc.value.value == "Alex"

    def test_empty_field_is_not_an_integer(self):
        with pytest.raises(ParseIntError):
            sum_column("1\n\n2\n", 0)

    def test_missing_column(self, sample_text):
        with pytest.raises(IndexOutOfBoundsError):
            sum_column(sample_text, 6)

    def test_header_fails_without_skip(self, biostats_path):
        with pytest.raises(ParseIntError):
            sum_column(biostats_path.read_text(encoding="utf-8"), 4)

    def test_skip_header(self, biostats_path):
        text = biostats_path.read_text(encoding="utf-8")
        assert sum_column(text, 4, skip_header=True) == 2641

    def test_skip_header_row_numbers(self):
        with pytest.raises(ParseIntError) as exc:
            sum_column("h\n1\nx\n", 0, skip_header=True)
        assert exc.value.row == 2


class TestTableAccessors:
    """Test per le varianti su tabella già parsata."""

    TABLE = [["a", "1"], ["b", "2"], ["c", "30"]]

    def test_line_of(self):
        assert line_of(self.TABLE, 2) == "c, 30"

    def test_column_of(self):
        assert column_of(self.TABLE, 1) == ["1", "2", "30"]

    def test_sum_of(self):
        assert sum_of(self.TABLE, 1) == 33

    def test_parse_int_signed(self):
        assert parse_int("+7", 0) == 7
        assert parse_int("-7", 0) == -7

    @pytest.mark.parametrize("value", ["", "1.5", "1e3", " 1", "٣"])
    def test_parse_int_rejects(self, value):
        with pytest.raises(ParseIntError):
            parse_int(value, 0)
