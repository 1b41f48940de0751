"""
Custom exceptions for the CSVNF loader.

This module defines a hierarchy of domain-specific exceptions so every stage
(CSV reading, schema creation, batched inserts, normalization) reports failures
the same way. Each exception inherits from `CSVNFError`, which carries a
message plus optional structured details.
"""
from typing import Optional, Any


class CSVNFError(Exception):
    """Base exception for all CSVNF errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize exception with message and optional details."""
        super().__init__(message)
        self.message = message
        self.details = details or {}


class CsvReadError(CSVNFError):
    """Raised when the CSV file cannot be opened or read."""
    pass


class CsvParseError(CSVNFError):
    """Raised when the file is not valid delimited text."""
    pass


class MalformedRowError(CsvParseError):
    """Raised when a data row's field count differs from the header's."""
    pass


class MalformedHeaderError(CsvParseError):
    """Raised when the header has blank or repeated column names."""
    pass


class BatchSizeError(CSVNFError):
    """Raised when no batch of whole rows fits under the parameter ceiling."""
    pass


class SchemaCreationError(CSVNFError):
    """Raised when the CREATE TABLE statement fails."""
    pass


class BatchInsertError(CSVNFError):
    """Raised when a batch INSERT fails; earlier batches stay committed."""
    pass


class RecommenderNotAvailableError(CSVNFError):
    """Raised when a normal-form recommender is requested but not registered."""
    pass
