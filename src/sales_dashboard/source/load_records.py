"""Fetch the sales record collection and keep it in memory.

`RecordStore` performs the fetch at most once per instance. A failed fetch is
logged and leaves the store holding an empty collection; there is no retry.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import pandas as pd
from pymongo.errors import PyMongoError

from sales_dashboard.config import Settings
from sales_dashboard.db import get_client, get_db
from sales_dashboard.source.validate import records_to_frame, validate_records

log = logging.getLogger(__name__)

Loader = Callable[[], list[dict[str, Any]]]


def _is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def fetch_sales_data(location: str, timeout: int = 60) -> list[dict[str, Any]]:
    """Read the JSON array of sales records from a path or an http(s) URL.

    Args:
        location: Local file path or http(s) URL of the JSON document.
        timeout: HTTP timeout in seconds.

    Returns:
        List of raw record dicts.

    Raises:
        requests.HTTPError if the remote request fails (non-2xx status).
        ValueError if the document is not valid JSON or not a JSON array.
    """
    if _is_url(location):
        log.info("Downloading %s", location)
        import requests  # type: ignore[import-untyped]  # local import to avoid requiring type stubs at module import
        r = requests.get(location, timeout=timeout)
        r.raise_for_status()
        payload = r.json()
    else:
        path = Path(location)
        log.info("Reading %s", path)
        payload = json.loads(path.read_text(encoding="utf-8"))

    if not isinstance(payload, list):
        raise ValueError(f"Expected a JSON array of records in {location}")
    return payload


def load_records_from_mongo(collection: Any) -> list[dict[str, Any]]:
    """Read every document of a MongoDB collection as a raw record dict.

    Args:
        collection: PyMongo collection (anything exposing `find`).
    """
    return list(collection.find({}, {"_id": False}))


class RecordStore:
    """Fetch-once holder for the record collection.

    Args:
        loader: Zero-argument callable returning raw record dicts.
    """

    def __init__(self, loader: Loader) -> None:
        self._loader = loader
        self._frame: pd.DataFrame | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "RecordStore":
        """Build a store reading from the source named in `settings`."""
        if settings.record_source == "mongo":
            def _mongo_loader() -> list[dict[str, Any]]:
                client = get_client(settings.mongo_uri)
                try:
                    db = get_db(client, settings.mongo_db)
                    return load_records_from_mongo(db[settings.sales_collection])
                finally:
                    client.close()

            return cls(_mongo_loader)

        return cls(lambda: fetch_sales_data(settings.sales_data_location))

    @property
    def loaded(self) -> bool:
        return self._frame is not None

    @property
    def frame(self) -> pd.DataFrame:
        """The full, unfiltered record frame (fetched on first access)."""
        if self._frame is None:
            self._frame = self._load()
        return self._frame

    def _load(self) -> pd.DataFrame:
        try:
            raw = self._loader()
        except (OSError, ValueError, PyMongoError):
            # requests.RequestException derives from OSError
            log.exception("Record load failed; continuing with an empty collection")
            return records_to_frame([])

        records, bad = validate_records(raw)
        log.info("Loaded %d sales records (bad=%d)", len(records), bad)
        return records_to_frame(records)
