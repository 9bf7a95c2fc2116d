"""Aggregation functions behind the dashboard charts.

Expectations:
- Input: a pandas DataFrame with the `SalesRecord` columns, already filtered
  for the calling view.
- Grouping keeps first-encountered order (`groupby(sort=False)`), so the
  period axis follows input record order rather than chronological order.
- Every function is total: an empty frame yields an empty but valid result.
- Sums are plain left-to-right float additions in record order, not
  pandas' pairwise or compensated reductions.
"""
from __future__ import annotations

import functools
import operator
from typing import Any, Iterable

import pandas as pd

from sales_dashboard.vocab import CATEGORIES

YEARLY_COLUMNS = ["year", "sales", "expenses", "profit", "satisfaction", "market_share"]
REGION_METRIC_COLUMNS = ["sales", "expenses", "profit"]


def fold_sum(values: Iterable[float]) -> float:
    """Add `values` left to right, starting from 0.0."""
    return functools.reduce(operator.add, (float(v) for v in values), 0.0)


def _sum(series: pd.Series) -> float:
    return fold_sum(series.tolist())


def _mean(series: pd.Series) -> float:
    return fold_sum(series.tolist()) / len(series)


def _with_periods(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of `df` with `year` and `month` string columns added."""
    dates = df["date"].astype(str)
    x = df.copy()
    x["year"] = dates.str[:4]
    x["month"] = x["year"] + "-" + dates.str[5:7]
    return x


def _category_matrix(x: pd.DataFrame, period_col: str, value_col: str) -> pd.DataFrame:
    """Sum `value_col` per (period, category) over the fixed vocabulary.

    Every period seen in `x` gets a row and every vocabulary category a
    column, zero-filled where no record contributes. Records whose category is
    outside the vocabulary still register their period.
    """
    periods = pd.Index(x[period_col].unique(), name=period_col)
    in_vocab = x[x["product_category"].isin(CATEGORIES)]

    if in_vocab.empty:
        return pd.DataFrame(0.0, index=periods, columns=list(CATEGORIES))

    table = (
        in_vocab.groupby([period_col, "product_category"], sort=False)[value_col]
        .agg(_sum)
        .unstack(fill_value=0.0)
        .reindex(index=periods, columns=list(CATEGORIES), fill_value=0.0)
        .astype(float)
    )
    table.columns.name = None
    return table


def yearly_totals(df: pd.DataFrame) -> pd.DataFrame:
    """Return per-year sums and averages.

    Args:
        df: Record frame.

    Returns:
        DataFrame with columns `year`, `sales`, `expenses`, `profit` (sums) and
        `satisfaction`, `market_share` (means over the year's record count).
    """
    if df.empty:
        return pd.DataFrame(columns=YEARLY_COLUMNS)

    x = _with_periods(df)
    return (
        x.groupby("year", sort=False)
        .agg(
            sales=("sales", _sum),
            expenses=("expenses", _sum),
            profit=("profit", _sum),
            satisfaction=("customer_satisfaction", _mean),
            market_share=("market_share", _mean),
        )
        .reset_index()
    )


def yearly_profit_by_category(df: pd.DataFrame) -> pd.DataFrame:
    """Return profit per (year, category), indexed by year.

    Columns are `vocab.CATEGORIES` in vocabulary order; missing cells are 0.0.
    """
    return _category_matrix(_with_periods(df), "year", "profit")


def monthly_sales_by_category(df: pd.DataFrame) -> pd.DataFrame:
    """Return sales per (`YYYY-MM`, category), indexed by month label.

    Columns are `vocab.CATEGORIES` in vocabulary order; missing cells are 0.0.
    """
    return _category_matrix(_with_periods(df), "month", "sales")


def yearly_totals_by_region(df: pd.DataFrame) -> dict[str, dict[str, dict[str, float]]]:
    """Return sales/expenses/profit sums nested as `{year: {region: {...}}}`.

    Only (year, region) pairs that have records are present; callers treat a
    missing pair as absent.
    """
    out: dict[str, dict[str, dict[str, float]]] = {}
    if df.empty:
        return out

    x = _with_periods(df)
    sums = x.groupby(["year", "region"], sort=False)[REGION_METRIC_COLUMNS].agg(_sum)
    for (year, region), row in sums.iterrows():
        out.setdefault(str(year), {})[str(region)] = {
            col: float(row[col]) for col in REGION_METRIC_COLUMNS
        }
    return out


def scatter_projection(df: pd.DataFrame, fx: str, fy: str) -> list[tuple[float, float]]:
    """Return one `(record[fx], record[fy])` pair per record, in input order."""
    return [(float(a), float(b)) for a, b in zip(df[fx].tolist(), df[fy].tolist())]


def distinct_values(df: pd.DataFrame, field: str) -> list[Any]:
    """Return the distinct values of `field` in order of first appearance.

    `field="year"` extracts the year prefix of `date`.
    """
    if field == "year":
        series = df["date"].astype(str).str[:4]
    else:
        series = df[field]
    return series.unique().tolist()
