"""
CSV to SQL table loader.

Reads a CSV file, creates an untyped table named after the configured table
name, then inserts the data rows in batches sized to stay under the
bound-parameter ceiling.

Module Input:
    - CSV file path
    - StatementExecutor for the destination database
    - Table name and parameter ceiling

Module Output:
    - Populated destination table
    - LoadResult with row and batch counts
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from CSVNF.core.settings import settings
from CSVNF.core.logging_config import get_logger
from CSVNF.core.exceptions import BatchInsertError, SchemaCreationError
from CSVNF.etl.batching import (
    batch_count,
    build_insert_sql,
    compute_batch_size,
    flatten_batch,
    iter_batches,
)
from CSVNF.etl.csv_reader import read_csv
from CSVNF.etl.csv_schema import TableDefinition
from CSVNF.etl.db import StatementExecutor

_module_logger = get_logger(__name__)


@dataclass
class LoadResult:
    table: str
    columns: List[str]
    rows_inserted: int
    batch_count: int


def batch_insert(
    executor: StatementExecutor,
    table: str,
    columns: Sequence[str],
    rows: Sequence[Sequence[str]],
    max_bound_params: int = 900,
    logger: Optional[logging.Logger] = None,
) -> int:
    """
    Insert `rows` in order, one bound INSERT statement per batch.

    Args:
        executor: Destination database
        table: Existing table to insert into
        columns: Column names, matching each row's field order
        rows: Data rows
        max_bound_params: Ceiling on parameters per statement
        logger: Logger to report progress on

    Returns:
        int: Number of rows inserted

    Raises:
        BatchSizeError: If a single row needs more parameters than allowed
        BatchInsertError: On the first failing batch; earlier batches
            remain committed and are reported in `details["rows_committed"]`
    """
    log = logger or _module_logger
    batch_size = compute_batch_size(len(columns), max_bound_params)
    total_batches = batch_count(len(rows), batch_size)

    log.info("Loading %d rows of data, %d fields per row", len(rows), len(columns))
    log.debug("Batch size: %d", batch_size)
    log.debug("Batch count: %d", total_batches)

    inserted = 0
    for i, batch in enumerate(iter_batches(rows, batch_size)):
        sql = build_insert_sql(table, columns, len(batch))
        try:
            executor.execute(sql, flatten_batch(batch))
        except Exception as exc:
            log.error("Error at batch %d of %d: %s", i, total_batches, exc)
            raise BatchInsertError(
                f"Insert failed at batch {i} of {total_batches}",
                {
                    "batch_index": i,
                    "batch_count": total_batches,
                    "rows_committed": inserted,
                    "error": str(exc),
                },
            ) from exc
        inserted += len(batch)

    return inserted


class CsvToDbLoader:
    """
    Load one CSV file into one new table.

    Attributes:
        executor (StatementExecutor): Destination database
        csv_path (Path): Source CSV file
        table_name (str): Table to create
        max_bound_params (int): Ceiling on parameters per INSERT
        logger (logging.Logger): Where progress and errors are reported
    """

    def __init__(
        self,
        executor: StatementExecutor,
        csv_path: Union[str, Path],
        table_name: Optional[str] = None,
        max_bound_params: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.executor = executor
        self.csv_path = Path(csv_path)
        self.table_name = table_name or settings.table_name
        self.max_bound_params = settings.max_bound_params if max_bound_params is None else max_bound_params
        self.logger = logger or _module_logger

    def create_table(self, table: TableDefinition) -> None:
        try:
            self.executor.execute(table.create_sql())
        except Exception as exc:
            self.logger.error("Error in creating sql table %s: %s", table.name, exc)
            raise SchemaCreationError(
                f"Could not create table {table.name}",
                {"table": table.name, "error": str(exc)},
            ) from exc

    def run(self) -> LoadResult:
        """
        Read the CSV, create the table and insert every data row.

        Returns:
            LoadResult: table name, columns, rows inserted and batch count

        Raises:
            CsvReadError, CsvParseError: Before any database interaction
            BatchSizeError: If the header is wider than the parameter ceiling
            SchemaCreationError: If CREATE TABLE fails (e.g. table exists)
            BatchInsertError: If a batch fails mid-load
        """
        t0 = time.time()
        try:
            rowset = read_csv(self.csv_path)
        except Exception:
            self.logger.error("Error in reading csv %s", self.csv_path)
            raise

        # Fail on an over-wide header before creating anything
        batch_size = compute_batch_size(rowset.column_count, self.max_bound_params)

        table = TableDefinition(name=self.table_name, columns=list(rowset.header))
        self.create_table(table)

        inserted = batch_insert(
            self.executor,
            table.name,
            table.columns,
            rowset.rows,
            max_bound_params=self.max_bound_params,
            logger=self.logger,
        )

        duration_ms = int((time.time() - t0) * 1000)
        self.logger.info("Loaded %d rows into %s in %dms", inserted, table.name, duration_ms)
        return LoadResult(
            table=table.name,
            columns=table.columns,
            rows_inserted=inserted,
            batch_count=batch_count(inserted, batch_size),
        )
