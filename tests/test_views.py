from __future__ import annotations

import pandas as pd
import pytest

from sales_dashboard.charts.views import VIEWS, build_view, filter_options
from sales_dashboard.models import ChartData, FilterCriteria, ScatterData
from sales_dashboard.source.validate import records_to_frame
from sales_dashboard.vocab import CATEGORIES, CATEGORY_COLORS


def _series(chart: ChartData, label: str) -> list[float]:
    return next(s.values for s in chart.series if s.label == label)


def test_yearly_totals_view(two_books: pd.DataFrame) -> None:
    chart = build_view("yearly_totals", two_books)
    assert isinstance(chart, ChartData)
    assert chart.labels == ["2021"]
    assert [s.label for s in chart.series] == ["Sales", "Expenses", "Profit"]
    assert _series(chart, "Sales") == [150]
    assert _series(chart, "Profit") == [90]


def test_yearly_totals_falls_back_to_full_collection(multi_year: pd.DataFrame) -> None:
    filtered = build_view("yearly_totals", multi_year, FilterCriteria(start_date="2030"))
    unfiltered = build_view("yearly_totals", multi_year)
    assert filtered == unfiltered


def test_yearly_totals_applies_year_range(multi_year: pd.DataFrame) -> None:
    chart = build_view("yearly_totals", multi_year, FilterCriteria(start_date="2021", end_date="2021"))
    assert chart.labels == ["2021"]


def test_yearly_totals_ignores_category_filter(multi_year: pd.DataFrame) -> None:
    chart = build_view("yearly_totals", multi_year, FilterCriteria(selected_category="Books"))
    assert chart == build_view("yearly_totals", multi_year)


def test_through_the_years_puts_averages_on_secondary_axis(two_books: pd.DataFrame) -> None:
    chart = build_view("through_the_years", two_books)
    axes = {s.label: s.axis for s in chart.series}
    assert axes["Sales"] == "y"
    assert axes["Customer Satisfaction"] == "y1"
    assert axes["Market Share"] == "y1"
    assert _series(chart, "Customer Satisfaction") == [pytest.approx(3)]


def test_profit_by_category_series_order_and_colors(multi_year: pd.DataFrame) -> None:
    chart = build_view("profit_by_category", multi_year)
    assert [s.label for s in chart.series] == list(CATEGORIES)
    assert [s.color for s in chart.series] == list(CATEGORY_COLORS)
    assert all(len(s.values) == len(chart.labels) for s in chart.series)


def test_profit_by_category_unmatched_category_renders_empty(two_books: pd.DataFrame) -> None:
    chart = build_view("profit_by_category", two_books, FilterCriteria(selected_category="Furniture"))
    assert chart.labels == []
    assert all(s.values == [] for s in chart.series)


def test_monthly_by_category_scenario(two_books: pd.DataFrame) -> None:
    chart = build_view("monthly_by_category", two_books)
    assert chart.labels == ["2021-03", "2021-07"]
    assert _series(chart, "Books") == [100, 50]
    for category in CATEGORIES:
        if category != "Books":
            assert _series(chart, category) == [0, 0]


def test_monthly_by_category_chosen_year(multi_year: pd.DataFrame) -> None:
    chart = build_view("monthly_by_category", multi_year, FilterCriteria(chosen_year="2022"))
    assert chart.labels == ["2022-05", "2022-06"]


def test_region_axis_is_sorted_cross_product(multi_year: pd.DataFrame) -> None:
    chart = build_view("region_totals", multi_year)
    assert chart.labels[:4] == ["2020 - North", "2020 - West", "2020 - East", "2020 - South"]
    assert len(chart.labels) == 3 * 4
    sales = _series(chart, "Sales")
    assert sales[chart.labels.index("2022 - East")] == 40
    assert sales[chart.labels.index("2022 - North")] == 0


def test_region_axis_stable_under_region_filter(multi_year: pd.DataFrame) -> None:
    chart = build_view("region_totals", multi_year, FilterCriteria(region="South"))
    assert len(chart.labels) == 12
    sales = _series(chart, "Sales")
    assert sales[chart.labels.index("2021 - South")] == 40
    assert sum(sales) == 40


def test_region_axis_pinned_to_chosen_year(multi_year: pd.DataFrame) -> None:
    chart = build_view("region_totals", multi_year, FilterCriteria(chosen_year="2022"))
    assert chart.labels == ["2022 - North", "2022 - West", "2022 - East", "2022 - South"]
    assert _series(chart, "Sales") == [0, 0, 40, 0]


def test_scatter_views_are_unfiltered(multi_year: pd.DataFrame) -> None:
    chart = build_view("sales_vs_expenses", multi_year, FilterCriteria(region="Nowhere"))
    assert isinstance(chart, ScatterData)
    assert len(chart.points) == len(multi_year)
    assert (chart.points[0].x, chart.points[0].y) == (40, 10)

    employees = build_view("profit_vs_employees", multi_year)
    assert [p.y for p in employees.points] == [1, 2, 3, 4]


def test_every_view_handles_empty_collection() -> None:
    empty = records_to_frame([])
    for name in VIEWS:
        chart = build_view(name, empty, FilterCriteria(start_date="2020"))
        if isinstance(chart, ScatterData):
            assert chart.points == []
        else:
            assert chart.labels == []


def test_unknown_view_raises_key_error(two_books: pd.DataFrame) -> None:
    with pytest.raises(KeyError):
        build_view("pie_chart", two_books)


def test_filter_options(multi_year: pd.DataFrame) -> None:
    assert filter_options(multi_year) == {
        "years": ["2022", "2020", "2021"],
        "categories": ["Furniture", "Books", "Electronics"],
        "regions": ["East", "North", "South"],
    }


def test_through_the_years_falls_back_to_full_collection(multi_year: pd.DataFrame) -> None:
    filtered = build_view("through_the_years", multi_year, FilterCriteria(end_date="1999"))
    assert filtered == build_view("through_the_years", multi_year)
    assert filtered.labels == ["2022", "2020", "2021"]


def test_monthly_by_category_has_no_fallback(multi_year: pd.DataFrame) -> None:
    chart = build_view("monthly_by_category", multi_year, FilterCriteria(start_date="2030"))
    assert chart.labels == []
    assert all(s.values == [] for s in chart.series)


def test_region_totals_has_no_fallback(multi_year: pd.DataFrame) -> None:
    chart = build_view("region_totals", multi_year, FilterCriteria(region="Nowhere"))
    assert len(chart.labels) == 12
    for s in chart.series:
        assert s.values == [0.0] * 12
