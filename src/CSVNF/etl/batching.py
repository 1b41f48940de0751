"""
batching.py
Split data rows into INSERT batches that respect a bound-parameter ceiling.
"""

from __future__ import annotations
from typing import Iterator, List, Sequence

from CSVNF.core.exceptions import BatchSizeError

# Conservative bound-parameter limit for embedded SQL engines
DEFAULT_MAX_BOUND_PARAMS = 900


def compute_batch_size(column_count: int, max_bound_params: int = DEFAULT_MAX_BOUND_PARAMS) -> int:
    """Rows per INSERT so that rows * columns never exceeds the ceiling."""
    if column_count <= 0:
        raise BatchSizeError("Cannot batch rows with no columns", {"column_count": column_count})
    if column_count > max_bound_params:
        raise BatchSizeError(
            f"{column_count} columns exceed the limit of {max_bound_params} bound parameters per statement",
            {"column_count": column_count, "max_bound_params": max_bound_params},
        )
    return max_bound_params // column_count


def batch_count(row_count: int, batch_size: int) -> int:
    return -(-row_count // batch_size)


def iter_batches(rows: Sequence[Sequence[str]], batch_size: int) -> Iterator[Sequence[Sequence[str]]]:
    """Yield contiguous slices of `rows`; no batch is ever empty."""
    if batch_size < 1:
        raise BatchSizeError("Batch size must be positive", {"batch_size": batch_size})
    for start in range(0, len(rows), batch_size):
        yield rows[start:start + batch_size]


def build_insert_sql(table: str, columns: Sequence[str], row_count: int) -> str:
    """
    INSERT with one `(?, ...)` group per row, e.g.
    ``INSERT INTO csvimport(name, age) VALUES (?, ?), (?, ?);``
    """
    if row_count < 1:
        raise ValueError("An INSERT needs at least one row")
    group = "(" + ", ".join("?" for _ in columns) + ")"
    values = ", ".join(group for _ in range(row_count))
    return f"INSERT INTO {table}({', '.join(columns)}) VALUES {values};"


def flatten_batch(batch: Sequence[Sequence[str]]) -> List[str]:
    """Cell values in row-major order, matching the placeholder order."""
    return [value for row in batch for value in row]
