"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads the record-source configuration from the environment (a `.env` file at
the project root is loaded first).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

RECORD_SOURCES = ("json", "mongo")


@dataclass(frozen=True)
class Settings:
    """Container for dashboard configuration read from the environment.

    Attributes:
        record_source: Where records come from, `json` or `mongo`.
        sales_data_location: Path or http(s) URL of the JSON record array.
        mongo_uri: MongoDB connection URI (only used by the `mongo` source).
        mongo_db: MongoDB database name.
        sales_collection: Collection holding one document per record.
        log_path: File the CLI writes logs to.
    """
    record_source: str
    sales_data_location: str
    mongo_uri: str
    mongo_db: str
    sales_collection: str
    log_path: Path

    @property
    def source_key(self) -> tuple[str, ...]:
        """Every setting that decides which records are fetched."""
        return (
            self.record_source,
            self.sales_data_location,
            self.mongo_uri,
            self.mongo_db,
            self.sales_collection,
        )


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `RECORD_SOURCE` is unknown, or is `mongo` while
            `MONGO_URI` is not set.
    """
    record_source = os.getenv("RECORD_SOURCE", "json").strip().lower()
    sales_data_location = os.getenv("SALES_DATA_LOCATION", "data/SalesData.json")
    mongo_uri = os.getenv("MONGO_URI", "").strip()
    mongo_db = os.getenv("MONGO_DB", "sales")
    sales_collection = os.getenv("SALES_COLLECTION", "sales_records")
    log_path = Path(os.getenv("LOG_PATH", "logs/dashboard.log"))

    if record_source not in RECORD_SOURCES:
        raise RuntimeError(
            f"RECORD_SOURCE must be one of {', '.join(RECORD_SOURCES)} "
            f"(got {record_source!r})."
        )
    if record_source == "mongo" and not mongo_uri:
        raise RuntimeError(
            "MONGO_URI is required when RECORD_SOURCE=mongo. Set it in .env."
        )

    return Settings(
        record_source=record_source,
        sales_data_location=sales_data_location,
        mongo_uri=mongo_uri,
        mongo_db=mongo_db,
        sales_collection=sales_collection,
        log_path=log_path,
    )
