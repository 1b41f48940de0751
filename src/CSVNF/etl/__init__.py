"""
CSV extraction, table creation and batched loading.
"""

from .csv_reader import RowSet, read_csv
from .csv_schema import TableDefinition, build_create_table_sql
from .batching import compute_batch_size, iter_batches, build_insert_sql, flatten_batch
from .db import StatementExecutor, SqlAlchemyExecutor, get_engine
from .loader import CsvToDbLoader, LoadResult, batch_insert

__all__ = [
    "RowSet", "read_csv",
    "TableDefinition", "build_create_table_sql",
    "compute_batch_size", "iter_batches", "build_insert_sql", "flatten_batch",
    "StatementExecutor", "SqlAlchemyExecutor", "get_engine",
    "CsvToDbLoader", "LoadResult", "batch_insert",
]
