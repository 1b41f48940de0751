"""
Shared fixtures for the CSVNF test suite.
"""
import os

# Keep test runs from writing log files; must be set before CSVNF is imported
os.environ.setdefault("CSVNF_LOG_TO_FILE", "false")

import pytest
from sqlalchemy import create_engine, text

from CSVNF.etl.db import SqlAlchemyExecutor, dispose_engines


def count_rows(engine, table):
    with engine.connect() as conn:
        return conn.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar_one()


def fetch_rows(engine, table, columns):
    """All rows of `table` with `columns` in the given order."""
    with engine.connect() as conn:
        result = conn.execute(text(f"SELECT {', '.join(columns)} FROM {table}"))
        return [tuple(row) for row in result]


class RecordingExecutor:
    """StatementExecutor that records statements instead of running them."""

    def __init__(self):
        self.calls = []

    def execute(self, sql, params=()):
        self.calls.append((sql, list(params)))

    @property
    def inserts(self):
        return [(sql, params) for sql, params in self.calls if sql.startswith("INSERT")]


class FailingExecutor(SqlAlchemyExecutor):
    """Runs statements for real but fails the Nth INSERT (0-based)."""

    def __init__(self, engine, fail_on_insert):
        super().__init__(engine)
        self.fail_on_insert = fail_on_insert
        self.insert_calls = 0

    def execute(self, sql, params=()):
        if sql.startswith("INSERT"):
            if self.insert_calls == self.fail_on_insert:
                raise RuntimeError("simulated insert failure")
            self.insert_calls += 1
        super().execute(sql, params)


@pytest.fixture
def write_csv(tmp_path):
    """Write text to a CSV file under tmp_path and return its path."""
    def _write(content, name="data.csv", encoding="utf-8"):
        path = tmp_path / name
        path.write_text(content, encoding=encoding)
        return path
    return _write


@pytest.fixture
def engine():
    eng = create_engine("sqlite://")
    yield eng
    eng.dispose()


@pytest.fixture
def recorder():
    return RecordingExecutor()


@pytest.fixture(autouse=True)
def _dispose_cached_engines():
    yield
    dispose_engines()


def make_csv(columns, rows):
    """CSV text with `columns` header names and `rows` generated data rows."""
    header = ",".join(columns)
    body = "\n".join(
        ",".join(f"r{r}c{c}" for c in range(len(columns))) for r in range(rows)
    )
    return header + "\n" + (body + "\n" if rows else "")


@pytest.fixture(name="make_csv")
def make_csv_fixture():
    return make_csv


@pytest.fixture
def failing_executor(engine):
    def _build(fail_on_insert):
        return FailingExecutor(engine, fail_on_insert)
    return _build
