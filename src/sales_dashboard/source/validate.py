"""Validation utilities for raw sales records.

Each raw dict is validated against the Pydantic `SalesRecord` model; rows that
fail are counted and dropped rather than aborting the load.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable

import pandas as pd
from pydantic import ValidationError

from sales_dashboard.models import SalesRecord

log = logging.getLogger(__name__)

RECORD_COLUMNS: list[str] = list(SalesRecord.model_fields)


def validate_records(raw: Iterable[dict[str, Any]]) -> tuple[list[SalesRecord], int]:
    """Validate raw record dicts using Pydantic.

    Args:
        raw: Iterable of dicts as decoded from the record source.

    Returns:
        A tuple of (list_of_validated_records, bad_count).
    """
    good: list[SalesRecord] = []
    bad = 0

    for rec in raw:
        try:
            good.append(SalesRecord.model_validate(rec))
        except ValidationError:
            bad += 1

    if bad:
        log.warning("Dropped %d records that failed validation", bad)
    return good, bad


def records_to_frame(records: Iterable[SalesRecord]) -> pd.DataFrame:
    """Return a DataFrame with one row per record and the full column set.

    The column set is fixed so an empty collection still yields a frame every
    aggregation can consume.
    """
    rows = [r.model_dump() for r in records]
    return pd.DataFrame(rows, columns=RECORD_COLUMNS)
