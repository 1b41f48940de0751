"""
Tests for CREATE TABLE generation.
"""
from CSVNF.etl.csv_schema import TableDefinition, build_create_table_sql


def test_two_column_schema_text():
    sql = build_create_table_sql("csvimport", ["name", "age"])

    assert sql == "CREATE TABLE csvimport (\n\tname, \n\tage\n);"


def test_single_column_schema_text():
    assert build_create_table_sql("t", ["only"]) == "CREATE TABLE t (\n\tonly\n);"


def test_rows_do_not_change_schema():
    with_rows = build_create_table_sql("t", ["a", "b"], [["1", "2"]])

    assert with_rows == build_create_table_sql("t", ["a", "b"])


def test_column_names_are_written_verbatim():
    sql = build_create_table_sql("t", ["first name", "a", "a"])

    assert "\tfirst name, \n\ta, \n\ta\n" in sql


def test_table_definition_create_sql():
    table = TableDefinition(name="people", columns=["name"])

    assert table.create_sql() == "CREATE TABLE people (\n\tname\n);"
