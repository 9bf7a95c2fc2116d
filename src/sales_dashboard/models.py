"""Pydantic models for sales records, filter state and chart output.

`SalesRecord` validates rows coming from the record source. The chart models
define what the renderer receives: an ordered label axis plus named, coloured
series of equal length.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SalesRecord(BaseModel):
    """One transaction observation.

    Attributes:
        date: Raw `YYYY-MM-DD` string. Kept as text so a malformed date is
            tolerated downstream instead of failing validation.
        sales: Sales amount.
        expenses: Expense amount.
        profit: Profit amount (independent of sales - expenses).
        region: Region name, normally one of `vocab.REGIONS`.
        product_category: Product category, normally one of `vocab.CATEGORIES`.
        customer_segment: Customer segment label.
        marketing_channel: Marketing channel label.
        customer_satisfaction: Satisfaction score, averaged when grouped.
        market_share: Market share, averaged when grouped.
        employee_count: Head count, used by the scatter projection.
    """
    model_config = ConfigDict(extra="ignore")
    date: str
    sales: float
    expenses: float
    profit: float
    region: str
    product_category: str
    customer_segment: str = ""
    marketing_channel: str = ""
    customer_satisfaction: float = 0.0
    market_share: float = 0.0
    employee_count: float = 0.0


class FilterCriteria(BaseModel):
    """Current filter selection for one view. Empty string means unconstrained."""
    model_config = ConfigDict(frozen=True, extra="forbid")
    start_date: str = ""
    end_date: str = ""
    chosen_year: str = ""
    selected_category: str = ""
    region: str = ""


class ChartSeries(BaseModel):
    """A named, coloured series aligned to its chart's label axis."""
    model_config = ConfigDict(extra="forbid")
    label: str
    values: list[float]
    color: str
    axis: str | None = None


class ChartData(BaseModel):
    """Label axis plus series for a category/time chart."""
    model_config = ConfigDict(extra="forbid")
    title: str
    labels: list[str]
    series: list[ChartSeries] = Field(default_factory=list)


class ScatterPoint(BaseModel):
    model_config = ConfigDict(extra="forbid")
    x: float
    y: float


class ScatterData(BaseModel):
    """Point cloud for a paired-field projection."""
    model_config = ConfigDict(extra="forbid")
    title: str
    label: str
    color: str
    x_title: str
    y_title: str
    points: list[ScatterPoint] = Field(default_factory=list)
