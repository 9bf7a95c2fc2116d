"""Shared vocabularies and colour palettes.

Every view reads categories, regions and colours from here so that axis
membership and colour assignment are identical across charts.
"""

from __future__ import annotations

CATEGORIES: tuple[str, ...] = (
    "Food & Beverage",
    "Furniture",
    "Electronics",
    "Toys & Games",
    "Clothing",
    "Sports Equipment",
    "Books",
    "Health & Beauty",
)

REGIONS: tuple[str, ...] = ("North", "West", "East", "South")

CATEGORY_COLORS: tuple[str, ...] = (
    "#FF69B4",
    "yellow",
    "aquamarine",
    "#89CFF0",
    "#CBC3E3",
    "#AB47BC",
    "#FF9800",
    "#66BB6A",
)

# (label, column, colour)
YEARLY_METRICS: tuple[tuple[str, str, str], ...] = (
    ("Sales", "sales", "#89CFF0"),
    ("Expenses", "expenses", "#AB47BC"),
    ("Profit", "profit", "#FF9800"),
)

REGION_METRICS: tuple[tuple[str, str, str], ...] = (
    ("Sales", "sales", "#fe938c"),
    ("Expenses", "expenses", "#7d92b8"),
    ("Profit", "profit", "#1b998b"),
)

THROUGH_THE_YEARS_METRICS: tuple[tuple[str, str, str], ...] = (
    ("Sales", "sales", "#29d2f2"),
    ("Expenses", "expenses", "#70d46c"),
    ("Profit", "profit", "#f28abf"),
    ("Customer Satisfaction", "satisfaction", "#e3c476"),
    ("Market Share", "market_share", "#cb7dfa"),
)

# Plotted against the right-hand axis in the multi-metric view
SECONDARY_AXIS_METRICS = frozenset({"satisfaction", "market_share"})


def category_color(index: int) -> str:
    """Return the series colour for the category at `index`."""
    return CATEGORY_COLORS[index % len(CATEGORY_COLORS)]
