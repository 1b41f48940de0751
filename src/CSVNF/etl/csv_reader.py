"""
Read a CSV file fully into memory as a header plus data rows.

Module Input:
    - Path to a delimited text file
    - Encoding and delimiter (defaults from settings)

Module Output:
    - RowSet with the header (column names) and the data rows in file order

The whole file must fit in memory; there is no streaming.
"""

from __future__ import annotations
import csv
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from CSVNF.core.settings import settings
from CSVNF.core.logging_config import get_logger
from CSVNF.core.exceptions import (
    CsvReadError,
    CsvParseError,
    MalformedRowError,
    MalformedHeaderError,
)

logger = get_logger(__name__)


@dataclass
class RowSet:
    header: List[str]
    rows: List[List[str]] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return len(self.header)

    @property
    def row_count(self) -> int:
        return len(self.rows)


def _validate_header(header: List[str]) -> None:
    blanks = [i for i, name in enumerate(header, 1) if not name.strip()]
    if blanks:
        raise MalformedHeaderError(
            "CSV header has blank column names",
            {"positions": blanks},
        )

    seen: set[str] = set()
    duplicates: List[str] = []
    for name in header:
        if name in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(name)
    if duplicates:
        raise MalformedHeaderError(
            f"CSV header repeats column names: {', '.join(duplicates)}",
            {"duplicates": duplicates},
        )


def read_csv(
    path: Union[str, Path],
    encoding: Optional[str] = None,
    delimiter: Optional[str] = None,
) -> RowSet:
    """
    Parse a CSV file into a RowSet.

    Blank lines are skipped. Every data row must have the same number of
    fields as the header.

    Args:
        path: CSV file location
        encoding: Text encoding (default: settings.csv_encoding)
        delimiter: Field delimiter (default: settings.csv_delimiter)

    Returns:
        RowSet: header and data rows

    Raises:
        CsvReadError: If the file cannot be opened or read
        CsvParseError: If the file is empty, undecodable or malformed
        MalformedHeaderError: If header names are blank or repeated
        MalformedRowError: If a data row's field count differs from the header
    """
    path = Path(path)
    encoding = encoding or settings.csv_encoding
    delimiter = delimiter or settings.csv_delimiter

    records: List[tuple[int, List[str]]] = []
    # Lift the csv module's 128 KiB per-field cap for this read
    previous_limit = csv.field_size_limit(sys.maxsize)
    try:
        with path.open("r", encoding=encoding, newline="") as f:
            rdr = csv.reader(f, delimiter=delimiter, strict=True)
            for record in rdr:
                if not record:
                    continue
                records.append((rdr.line_num, record))
    except UnicodeDecodeError as exc:
        raise CsvParseError(
            f"Cannot decode {path} as {encoding}",
            {"path": str(path), "error": str(exc)},
        ) from exc
    except csv.Error as exc:
        raise CsvParseError(
            f"Malformed CSV in {path}: {exc}",
            {"path": str(path), "error": str(exc)},
        ) from exc
    except OSError as exc:
        raise CsvReadError(
            f"Cannot read CSV file {path}: {exc.strerror or exc}",
            {"path": str(path), "errno": exc.errno},
        ) from exc
    finally:
        csv.field_size_limit(previous_limit)

    if not records:
        raise CsvParseError("CSV file is empty", {"path": str(path)})

    _, header = records[0]
    _validate_header(header)
    logger.info("CSV header: %s", header)

    rows: List[List[str]] = []
    for line, record in records[1:]:
        if len(record) != len(header):
            raise MalformedRowError(
                f"Line {line}: expected {len(header)} fields, got {len(record)}",
                {"line": line, "expected": len(header), "actual": len(record)},
            )
        rows.append(record)

    logger.debug("Read %d data rows from %s", len(rows), path)
    return RowSet(header=header, rows=rows)
