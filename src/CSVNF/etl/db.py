"""
db.py
SQLAlchemy engine factory + the statement executor the loader writes through.

The loader only needs "execute one statement with positional bound
parameters", expressed by the StatementExecutor protocol, so the storage
engine can be swapped without touching loader logic.
"""

from __future__ import annotations
import re
import time
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.sql.elements import TextClause

from CSVNF.core.settings import settings
from CSVNF.core.logging_config import get_logger

logger = get_logger(__name__)
_engines: Dict[str, Engine] = {}
_QMARK = re.compile(r"\?")


class StatementExecutor(Protocol):
    def execute(self, sql: str, params: Sequence[Any] = ()) -> None:
        ...


def get_engine(url: Optional[str] = None) -> Engine:
    """
    Return a cached SQLAlchemy Engine for `url` (default: settings.db_url).

    An in-memory SQLite URL keeps one connection per thread, so a table
    created by one statement is visible to the next.
    """
    url = url or settings.db_url
    if url in _engines:
        return _engines[url]

    logger.info("Initializing SQLAlchemy engine")
    logger.debug("Database URL (password masked): %s", settings.masked_db_url(url))
    eng = create_engine(url)
    _engines[url] = eng
    return eng


def dispose_engines() -> None:
    """Dispose every cached engine; in-memory databases are discarded."""
    for url, eng in list(_engines.items()):
        eng.dispose()
        del _engines[url]


def bind_positional(sql: str, params: Sequence[Any]) -> Tuple[TextClause, Dict[str, Any]]:
    """
    Turn `?` placeholders into named binds so SQLAlchemy renders the
    driver's own paramstyle (qmark, format, pyformat, ...).

    Literal colons are escaped so `text()` does not read them as binds.

    Raises:
        ValueError: If the placeholder count differs from len(params)
    """
    names: List[str] = []

    def _name(_match: re.Match) -> str:
        names.append(f"p{len(names)}")
        return f":{names[-1]}"

    named_sql = _QMARK.sub(_name, sql.replace(":", "\\:"))
    if len(names) != len(params):
        raise ValueError(
            f"Statement has {len(names)} placeholders but {len(params)} parameters were given"
        )
    return text(named_sql), dict(zip(names, params))


class SqlAlchemyExecutor:
    """
    StatementExecutor backed by a SQLAlchemy Engine.

    Each call runs in its own transaction and is committed on success, so
    statements executed before a failure stay committed.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def execute(self, sql: str, params: Sequence[Any] = ()) -> None:
        logger.debug(
            "Executing SQL (%d params): %s",
            len(params),
            sql[:100] + "..." if len(sql) > 100 else sql,
        )
        start_time = time.time()

        try:
            with self.engine.begin() as conn:
                clause, bound = bind_positional(sql, params)
                conn.execute(clause, bound)
        except Exception as e:
            duration = (time.time() - start_time) * 1000
            logger.error("SQL execution failed after %.2fms: %s", duration, e)
            raise

        duration = (time.time() - start_time) * 1000
        logger.debug("SQL executed successfully in %.2fms", duration)

