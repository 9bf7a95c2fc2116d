"""Record predicates built from `FilterCriteria`.

One clause table drives both the per-record predicate and the vectorised
pandas mask, so the two can never disagree. Year bounds compare 4-digit year
strings lexicographically, which equals numeric order.
"""

from __future__ import annotations

import operator
from typing import Any, Callable

import pandas as pd

from sales_dashboard.filters.state import ALL_FIELDS, FilterField
from sales_dashboard.models import FilterCriteria, SalesRecord

# field -> (record attribute, comparison applied as op(record_value, criterion))
_CLAUSES: dict[FilterField, tuple[str, Callable[[Any, Any], Any]]] = {
    FilterField.START_DATE: ("year", operator.ge),
    FilterField.END_DATE: ("year", operator.le),
    FilterField.CHOSEN_YEAR: ("year", operator.eq),
    FilterField.SELECTED_CATEGORY: ("product_category", operator.eq),
    FilterField.REGION: ("region", operator.eq),
}


def year_of(date: str) -> str:
    """Return the 4-character year prefix of a `YYYY-MM-DD` string."""
    return date[:4]


def month_of(date: str) -> str:
    """Return the 2-character month of a `YYYY-MM-DD` string."""
    return date[5:7]


def _active_clauses(
    criteria: FilterCriteria,
    active_fields: frozenset[FilterField],
) -> list[tuple[str, Callable[[Any, Any], Any], str]]:
    clauses = []
    for field, (attr, op) in _CLAUSES.items():
        value = getattr(criteria, field.value)
        if field in active_fields and value != "":
            clauses.append((attr, op, value))
    return clauses


def build_predicate(
    criteria: FilterCriteria,
    active_fields: frozenset[FilterField] = ALL_FIELDS,
) -> Callable[[SalesRecord], bool]:
    """Return a predicate accepting the records that satisfy `criteria`."""
    clauses = _active_clauses(criteria, active_fields)

    def accept(record: SalesRecord) -> bool:
        for attr, op, value in clauses:
            actual = year_of(record.date) if attr == "year" else getattr(record, attr)
            if not op(actual, value):
                return False
        return True

    return accept


def filter_frame(
    df: pd.DataFrame,
    criteria: FilterCriteria,
    active_fields: frozenset[FilterField] = ALL_FIELDS,
    fallback: bool = False,
) -> pd.DataFrame:
    """Return the rows of `df` accepted by `criteria`.

    Args:
        df: Record frame (see `source.validate.records_to_frame`).
        criteria: Current filter state.
        active_fields: Fields the calling view applies.
        fallback: When True and no row matches, return `df` unfiltered.

    Returns:
        Filtered DataFrame, preserving input row order.
    """
    clauses = _active_clauses(criteria, active_fields)
    if not clauses:
        return df

    years = df["date"].astype(str).str[:4]
    mask = pd.Series(True, index=df.index)
    for attr, op, value in clauses:
        column = years if attr == "year" else df[attr]
        mask &= op(column, value).astype(bool)

    out = df[mask]
    if out.empty and fallback:
        return df
    return out
