"""
Tests for reading CSV files into a RowSet.
"""
import csv

import pytest

from CSVNF.core.exceptions import (
    CsvParseError,
    CsvReadError,
    MalformedHeaderError,
    MalformedRowError,
)
from CSVNF.etl.csv_reader import read_csv


def test_reads_header_and_rows(write_csv):
    rowset = read_csv(write_csv("name,age\nAlice,30\nBob,25\n"))

    assert rowset.header == ["name", "age"]
    assert rowset.rows == [["Alice", "30"], ["Bob", "25"]]
    assert rowset.column_count == 2
    assert rowset.row_count == 2


def test_header_only_file_has_no_rows(write_csv):
    rowset = read_csv(write_csv("name,age\n"))

    assert rowset.header == ["name", "age"]
    assert rowset.rows == []


def test_quoted_fields_keep_delimiters_and_newlines(write_csv):
    rowset = read_csv(write_csv('name,note\n"Smith, J","line one\nline two"\n'))

    assert rowset.rows == [["Smith, J", "line one\nline two"]]


def test_blank_lines_are_skipped(write_csv):
    rowset = read_csv(write_csv("a,b\n\n1,2\n\n3,4\n"))

    assert rowset.rows == [["1", "2"], ["3", "4"]]


def test_custom_delimiter(write_csv):
    rowset = read_csv(write_csv("a;b\n1;2\n"), delimiter=";")

    assert rowset.header == ["a", "b"]
    assert rowset.rows == [["1", "2"]]


def test_missing_file_is_read_error(tmp_path):
    with pytest.raises(CsvReadError) as exc_info:
        read_csv(tmp_path / "missing.csv")

    assert exc_info.value.details["path"].endswith("missing.csv")


def test_directory_is_read_error(tmp_path):
    with pytest.raises(CsvReadError):
        read_csv(tmp_path)


def test_empty_file_is_parse_error(write_csv):
    with pytest.raises(CsvParseError, match="empty"):
        read_csv(write_csv(""))


def test_unterminated_quote_is_parse_error(write_csv):
    with pytest.raises(CsvParseError, match="Malformed CSV"):
        read_csv(write_csv('a,b\n"unterminated,1\n'))


def test_undecodable_bytes_are_parse_error(tmp_path):
    path = tmp_path / "latin.csv"
    path.write_bytes(b"a,b\n\xff\xfe,1\n")

    with pytest.raises(CsvParseError, match="decode"):
        read_csv(path)


def test_short_row_is_rejected_with_line_number(write_csv):
    with pytest.raises(MalformedRowError) as exc_info:
        read_csv(write_csv("a,b\n1,2\n3\n"))

    assert exc_info.value.details == {"line": 3, "expected": 2, "actual": 1}


def test_long_row_is_rejected(write_csv):
    with pytest.raises(MalformedRowError):
        read_csv(write_csv("a,b\n1,2,3\n"))


def test_repeated_header_names_are_rejected(write_csv):
    with pytest.raises(MalformedHeaderError) as exc_info:
        read_csv(write_csv("id,name,id\n1,x,2\n"))

    assert exc_info.value.details["duplicates"] == ["id"]


def test_blank_header_name_is_rejected(write_csv):
    with pytest.raises(MalformedHeaderError):
        read_csv(write_csv("id,,name\n1,2,3\n"))


def test_cell_larger_than_default_field_limit(write_csv):
    note = "x" * 200_000

    rowset = read_csv(write_csv(f"name,note\nAlice,{note}\n"))

    assert rowset.rows == [["Alice", note]]


def test_field_limit_is_restored_after_read(write_csv):
    before = csv.field_size_limit()

    read_csv(write_csv("a\n1\n"))

    assert csv.field_size_limit() == before
