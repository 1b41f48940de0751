"""
Build the CREATE TABLE statement for a CSV header.

Columns are declared without a SQL type so the target database applies its
loosest affinity. Column names are written as-is: no quoting and no
deduplication happens here.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence

from CSVNF.core.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class TableDefinition:
    name: str
    columns: List[str]

    def create_sql(self) -> str:
        return build_create_table_sql(self.name, self.columns)


def build_create_table_sql(
    table: str,
    columns: Sequence[str],
    rows: Optional[Sequence[Sequence[str]]] = None,
) -> str:
    """
    Generate the CREATE TABLE DDL for untyped columns.

    Args:
        table (str): Target table name
        columns (Sequence[str]): Column names in header order
        rows: Data rows; accepted for later type inference, unused

    Returns:
        str: CREATE TABLE statement

    Example Output:
        CREATE TABLE csvimport (
            name,
            age
        );
    """
    cols_sql = ", \n".join(f"\t{name}" for name in columns)
    schema = f"CREATE TABLE {table} (\n{cols_sql}\n);"
    logger.info("Created schema from CSV:\n%s", schema)
    return schema
