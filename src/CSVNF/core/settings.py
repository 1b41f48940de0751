"""
Centralized configuration management using Pydantic.

This module defines the Settings class which loads and validates application
configuration from environment variables (prefixed ``CSVNF_``) or a .env file.

Module Input:
    - Environment variables from OS
    - .env file in project root (optional)
    - Default values defined in class

Module Output:
    - Validated configuration object (singleton)
    - Masked database URL for log output
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables and .env file.

    Attributes:
        Logging Configuration:
            log_level (str): Minimum log level (default: "DEBUG")
            log_dir (Path): Directory for log files (default: "logs")
            log_file (str): Log file name (default: "csvnf.log")
            log_to_file (bool): Attach the rotating file handler (default: True)

        Database Configuration:
            db_url (str): SQLAlchemy URL of the destination database
                (default: in-memory SQLite, nothing persists past exit)
            table_name (str): Destination table name (default: "csvimport")
            max_bound_params (int): Ceiling on bound parameters per INSERT

        CSV Configuration:
            csv_encoding (str): Text encoding of the input file
            csv_delimiter (str): Field delimiter

        Normalization:
            recommender (Optional[str]): Name of the 2NF recommender to run
                after the load, if any
    """

    # ---------------- Logging ----------------
    log_level: str = "DEBUG"
    log_dir: Path = Path("logs")
    log_file: str = "csvnf.log"
    log_to_file: bool = True

    # ---------------- Database ----------------
    db_url: str = "sqlite://"
    table_name: str = "csvimport"
    max_bound_params: int = Field(default=900, gt=0)

    # ---------------- CSV ----------------
    csv_encoding: str = "utf-8"
    csv_delimiter: str = Field(default=",", min_length=1, max_length=1)

    # ---------------- Normalization ----------------
    recommender: Optional[str] = None

    # ---------------- Pydantic Settings ----------------
    model_config = SettingsConfigDict(
        env_prefix="CSVNF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def masked_db_url(self, url: Optional[str] = None) -> str:
        """Render the database URL with any password hidden."""
        return make_url(url or self.db_url).render_as_string(hide_password=True)


# Singleton instance shared across the app
settings = Settings()
