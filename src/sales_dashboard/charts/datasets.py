"""Build renderer-ready series from aggregation output."""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from sales_dashboard.models import ChartSeries, ScatterData, ScatterPoint
from sales_dashboard.vocab import CATEGORIES, REGION_METRICS, REGIONS, category_color


def category_series(matrix: pd.DataFrame) -> list[ChartSeries]:
    """Return one series per vocabulary category, aligned to `matrix.index`.

    Args:
        matrix: Period x category frame from `_category_matrix`.
    """
    return [
        ChartSeries(
            label=category,
            values=[float(v) for v in matrix[category].tolist()],
            color=category_color(i),
        )
        for i, category in enumerate(CATEGORIES)
    ]


def metric_series(
    frame: pd.DataFrame,
    metrics: Iterable[tuple[str, str, str]],
    secondary_axis: frozenset[str] = frozenset(),
) -> list[ChartSeries]:
    """Return one series per `(label, column, colour)` metric of `frame`.

    When `secondary_axis` is non-empty every series is tagged with a y-axis id:
    `y1` for the listed columns and `y` for the rest.
    """
    series = []
    for label, column, color in metrics:
        axis = None
        if secondary_axis:
            axis = "y1" if column in secondary_axis else "y"
        series.append(
            ChartSeries(
                label=label,
                values=[float(v) for v in frame[column].tolist()],
                color=color,
                axis=axis,
            )
        )
    return series


def region_axis(years: Iterable[str], chosen_year: str = "") -> list[tuple[str, str]]:
    """Return the (year, region) pairs of the region chart's axis.

    A chosen year pins the axis to that year's four regions; otherwise it is
    the cross product of `years` and the region vocabulary.
    """
    if chosen_year:
        return [(chosen_year, region) for region in REGIONS]
    return [(year, region) for year in years for region in REGIONS]


def region_labels(axis: Iterable[tuple[str, str]]) -> list[str]:
    return [f"{year} - {region}" for year, region in axis]


def region_series(
    cells: dict[str, dict[str, dict[str, float]]],
    axis: list[tuple[str, str]],
) -> list[ChartSeries]:
    """Return sales/expenses/profit series over `axis`; absent cells are 0.0."""
    return [
        ChartSeries(
            label=label,
            values=[cells.get(year, {}).get(region, {}).get(column, 0.0) for year, region in axis],
            color=color,
        )
        for label, column, color in REGION_METRICS
    ]


def scatter_data(
    points: list[tuple[float, float]],
    title: str,
    label: str,
    color: str,
    x_title: str,
    y_title: str,
) -> ScatterData:
    return ScatterData(
        title=title,
        label=label,
        color=color,
        x_title=x_title,
        y_title=y_title,
        points=[ScatterPoint(x=x, y=y) for x, y in points],
    )
