"""Per-chart view registry.

Each `ViewSpec` names the filter fields its chart responds to, whether an
empty filter result falls back to the full collection, and how the filtered
frame becomes chart data. `build_view` runs predicate -> aggregation ->
assembly for one chart.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Union

import pandas as pd

from sales_dashboard.aggregate.build_views import (
    distinct_values,
    monthly_sales_by_category,
    scatter_projection,
    yearly_profit_by_category,
    yearly_totals,
    yearly_totals_by_region,
)
from sales_dashboard.charts.datasets import (
    category_series,
    metric_series,
    region_axis,
    region_labels,
    region_series,
    scatter_data,
)
from sales_dashboard.filters.predicate import filter_frame
from sales_dashboard.filters.state import FilterField
from sales_dashboard.models import ChartData, FilterCriteria, ScatterData
from sales_dashboard.vocab import (
    SECONDARY_AXIS_METRICS,
    THROUGH_THE_YEARS_METRICS,
    YEARLY_METRICS,
)

log = logging.getLogger(__name__)

ViewData = Union[ChartData, ScatterData]
# (filtered frame, full frame, criteria) -> chart data
Builder = Callable[[pd.DataFrame, pd.DataFrame, FilterCriteria], ViewData]

YEAR_RANGE = frozenset({FilterField.START_DATE, FilterField.END_DATE})


@dataclass(frozen=True)
class ViewSpec:
    """Configuration of one dashboard chart.

    Attributes:
        name: Registry key.
        title: Chart heading.
        active_fields: Filter fields the chart responds to.
        fallback: Whether an empty filter result reverts to the full frame.
        build: Builder turning the filtered frame into chart data.
    """
    name: str
    title: str
    active_fields: frozenset[FilterField]
    fallback: bool
    build: Builder


def _yearly_totals_chart(filtered: pd.DataFrame, _: pd.DataFrame, __: FilterCriteria) -> ChartData:
    totals = yearly_totals(filtered)
    return ChartData(
        title=VIEWS["yearly_totals"].title,
        labels=[str(y) for y in totals["year"].tolist()],
        series=metric_series(totals, YEARLY_METRICS),
    )


def _through_the_years_chart(filtered: pd.DataFrame, _: pd.DataFrame, __: FilterCriteria) -> ChartData:
    totals = yearly_totals(filtered)
    return ChartData(
        title=VIEWS["through_the_years"].title,
        labels=[str(y) for y in totals["year"].tolist()],
        series=metric_series(totals, THROUGH_THE_YEARS_METRICS, SECONDARY_AXIS_METRICS),
    )


def _profit_by_category_chart(filtered: pd.DataFrame, _: pd.DataFrame, __: FilterCriteria) -> ChartData:
    matrix = yearly_profit_by_category(filtered)
    return ChartData(
        title=VIEWS["profit_by_category"].title,
        labels=[str(p) for p in matrix.index.tolist()],
        series=category_series(matrix),
    )


def _monthly_by_category_chart(filtered: pd.DataFrame, _: pd.DataFrame, __: FilterCriteria) -> ChartData:
    matrix = monthly_sales_by_category(filtered)
    return ChartData(
        title=VIEWS["monthly_by_category"].title,
        labels=[str(p) for p in matrix.index.tolist()],
        series=category_series(matrix),
    )


def _region_totals_chart(filtered: pd.DataFrame, full: pd.DataFrame, criteria: FilterCriteria) -> ChartData:
    # Axis comes from the unfiltered years so it stays stable under filtering
    years = sorted(str(y) for y in distinct_values(full, "year"))
    axis = region_axis(years, criteria.chosen_year)
    return ChartData(
        title=VIEWS["region_totals"].title,
        labels=region_labels(axis),
        series=region_series(yearly_totals_by_region(filtered), axis),
    )


def _sales_vs_expenses_chart(filtered: pd.DataFrame, _: pd.DataFrame, __: FilterCriteria) -> ScatterData:
    return scatter_data(
        scatter_projection(filtered, "expenses", "sales"),
        title=VIEWS["sales_vs_expenses"].title,
        label="Sales vs Expenses",
        color="rgb(251, 136, 174)",
        x_title="Expenses",
        y_title="Sales",
    )


def _profit_vs_employees_chart(filtered: pd.DataFrame, _: pd.DataFrame, __: FilterCriteria) -> ScatterData:
    return scatter_data(
        scatter_projection(filtered, "employee_count", "profit"),
        title=VIEWS["profit_vs_employees"].title,
        label="Profit vs Number of employees",
        color="#FF9800",
        x_title="Number of employees",
        y_title="Profit",
    )


VIEWS: dict[str, ViewSpec] = {
    spec.name: spec
    for spec in (
        ViewSpec(
            "profit_by_category",
            "Yearly Profit by Product Category",
            YEAR_RANGE | {FilterField.SELECTED_CATEGORY},
            False,
            _profit_by_category_chart,
        ),
        ViewSpec("sales_vs_expenses", "Sales vs Expenses", frozenset(), False, _sales_vs_expenses_chart),
        ViewSpec(
            "profit_vs_employees",
            "Profit vs Number of Employees",
            frozenset(),
            False,
            _profit_vs_employees_chart,
        ),
        ViewSpec(
            "yearly_totals",
            "Yearly Profit, Sales and Expenses",
            YEAR_RANGE,
            True,
            _yearly_totals_chart,
        ),
        ViewSpec(
            "region_totals",
            "Profit, Sales and Expenses by Region",
            frozenset({FilterField.CHOSEN_YEAR, FilterField.REGION}),
            False,
            _region_totals_chart,
        ),
        ViewSpec(
            "monthly_by_category",
            "Monthly Sales by Product Category",
            YEAR_RANGE | {FilterField.CHOSEN_YEAR, FilterField.SELECTED_CATEGORY},
            False,
            _monthly_by_category_chart,
        ),
        ViewSpec(
            "through_the_years",
            "Profit, Sales, Expenses, Market shares and Customer satisfaction by Year",
            YEAR_RANGE,
            True,
            _through_the_years_chart,
        ),
    )
}


def build_view(name: str, df: pd.DataFrame, criteria: FilterCriteria | None = None) -> ViewData:
    """Compute chart data for the view `name`.

    Args:
        name: Key into `VIEWS`.
        df: Full, unfiltered record frame.
        criteria: The view's current filter state (defaults to unconstrained).

    Returns:
        `ChartData` for category/time charts, `ScatterData` for projections.

    Raises:
        KeyError: if `name` is not a registered view.
    """
    if name not in VIEWS:
        raise KeyError(f"Unknown view {name!r}; expected one of {', '.join(VIEWS)}")

    spec = VIEWS[name]
    criteria = criteria or FilterCriteria()
    filtered = filter_frame(df, criteria, spec.active_fields, fallback=spec.fallback)
    log.debug("View %s: %d of %d records after filtering", name, len(filtered), len(df))
    return spec.build(filtered, df, criteria)


def filter_options(df: pd.DataFrame) -> dict[str, list[str]]:
    """Return the control values: distinct years, categories and regions."""
    return {
        "years": [str(v) for v in distinct_values(df, "year")],
        "categories": [str(v) for v in distinct_values(df, "product_category")],
        "regions": [str(v) for v in distinct_values(df, "region")],
    }
