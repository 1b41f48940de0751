"""
Command-line interface for loading a CSV file into a SQL table.

The main entry point takes exactly one positional argument, the CSV path,
creates the destination table and bulk-loads the rows. Destination, table
name and log level come from settings (CSVNF_* environment variables or
.env) and can be overridden with flags.

Usage:
    csvnf ./data/people.csv
    csvnf ./data/people.csv --db-url sqlite:///people.db --table people
    csvnf-tools schema ./data/people.csv
    csvnf-tools recommenders
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

import click
from sqlalchemy.exc import SQLAlchemyError

from CSVNF.core.settings import settings
from CSVNF.core.logging_config import get_logger, set_level, setup_root_logger
from CSVNF.core.exceptions import CSVNFError
from CSVNF.etl.csv_reader import read_csv
from CSVNF.etl.csv_schema import build_create_table_sql
from CSVNF.etl.db import SqlAlchemyExecutor, get_engine
from CSVNF.etl.loader import CsvToDbLoader
from CSVNF.normalize.recommender import available_recommenders, get_recommender

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csvnf",
        description="Load a CSV file into a new SQL table",
    )
    parser.add_argument("csv_file", type=Path, help="CSV file to load (first row is the header)")
    parser.add_argument(
        "--table",
        default=settings.table_name,
        help=f"Destination table name (default: {settings.table_name})",
    )
    parser.add_argument(
        "--db-url",
        default=settings.db_url,
        help="SQLAlchemy database URL (default: in-memory SQLite)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Log verbosity (default: {settings.log_level})",
    )
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments, run the load and return a process exit code.

    Returns:
        0 on success, 1 on any load or database error. Usage errors exit
        with code 2 from argparse.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        set_level(args.log_level)

    logger.info("Loading %s into table %s", args.csv_file, args.table)
    engine = None
    try:
        engine = get_engine(args.db_url)
        loader = CsvToDbLoader(
            SqlAlchemyExecutor(engine),
            args.csv_file,
            table_name=args.table,
            logger=logger,
        )
        result = loader.run()

        if settings.recommender:
            recommender = get_recommender(settings.recommender)
            script = recommender.recommend_update(loader.executor, result.table)
            click.echo(script)
        else:
            logger.info("No 2NF recommender configured; skipping normalization")

    except CSVNFError as e:
        logger.error("Load failed: %s", e.message)
        if e.details:
            logger.debug("Error details: %s", e.details)
        return 1
    except SQLAlchemyError as e:
        logger.error("Database error: %s", e)
        return 1
    finally:
        if engine is not None:
            engine.dispose()

    click.echo(
        f"Loaded {result.rows_inserted} rows into {result.table} "
        f"({len(result.columns)} columns, {result.batch_count} batches)"
    )
    return 0


def main():
    """Console entry point for `csvnf`."""
    setup_root_logger()
    sys.exit(run())


# Click CLI group for additional commands
@click.group()
def csvnf():
    """CSVNF helper commands."""
    pass


@csvnf.command("schema")
@click.argument("csv_file", type=click.Path(path_type=Path))
@click.option("--table", default=settings.table_name, show_default=True, help="Table name")
def schema_cmd(csv_file: Path, table: str):
    """
    Print the CREATE TABLE statement for a CSV file without loading it.
    Example:
      csvnf-tools schema ./data/people.csv --table people
    """
    try:
        rowset = read_csv(csv_file)
    except CSVNFError as e:
        raise click.ClickException(e.message)
    click.echo(build_create_table_sql(table, rowset.header, rowset.rows))


@csvnf.command("recommenders")
def recommenders_cmd():
    """List registered normal-form recommenders."""
    names = available_recommenders()
    if not names:
        click.echo("No normal-form recommenders are registered.")
        return
    for name in names:
        click.echo(name)


if __name__ == "__main__":
    main()
