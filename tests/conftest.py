from __future__ import annotations

from typing import Any

import pandas as pd
import pytest

from sales_dashboard.models import SalesRecord
from sales_dashboard.source.validate import records_to_frame


def make_record(**overrides: Any) -> dict[str, Any]:
    rec: dict[str, Any] = {
        "date": "2021-03-01",
        "sales": 100,
        "expenses": 40,
        "profit": 60,
        "region": "North",
        "product_category": "Books",
        "customer_segment": "Retail",
        "marketing_channel": "Online",
        "customer_satisfaction": 4,
        "market_share": 0.1,
        "employee_count": 5,
    }
    rec.update(overrides)
    return rec


def to_frame(rows: list[dict[str, Any]]) -> pd.DataFrame:
    return records_to_frame(SalesRecord.model_validate(r) for r in rows)


@pytest.fixture
def two_books() -> pd.DataFrame:
    return to_frame([
        make_record(),
        make_record(
            date="2021-07-01",
            sales=50,
            expenses=20,
            profit=30,
            region="West",
            marketing_channel="Email",
            customer_satisfaction=2,
            market_share=0.3,
        ),
    ])


@pytest.fixture
def multi_year() -> pd.DataFrame:
    # Deliberately not chronological
    return to_frame([
        make_record(date="2022-05-10", sales=10, profit=1, region="East", product_category="Furniture"),
        make_record(date="2020-01-02", sales=20, profit=2, region="North", product_category="Books"),
        make_record(date="2022-06-11", sales=30, profit=3, region="East", product_category="Books"),
        make_record(date="2021-09-09", sales=40, profit=4, region="South", product_category="Electronics"),
    ])
