from __future__ import annotations

import pytest
from pydantic import ValidationError

from sales_dashboard.models import ChartSeries, FilterCriteria, SalesRecord
from conftest import make_record


def test_sales_record_validates() -> None:
    rec = SalesRecord.model_validate(make_record())
    assert rec.date == "2021-03-01"
    assert rec.sales == 100.0
    assert rec.product_category == "Books"


def test_sales_record_keeps_malformed_date_as_text() -> None:
    rec = SalesRecord.model_validate(make_record(date="03/01/2021"))
    assert rec.date == "03/01/2021"


def test_sales_record_rejects_missing_sales() -> None:
    rec = make_record()
    del rec["sales"]
    with pytest.raises(ValidationError):
        SalesRecord.model_validate(rec)


def test_sales_record_ignores_unknown_fields() -> None:
    rec = SalesRecord.model_validate(make_record(store_id="X1"))
    assert not hasattr(rec, "store_id")


def test_filter_criteria_defaults_empty_and_frozen() -> None:
    criteria = FilterCriteria()
    assert criteria.model_dump() == {
        "start_date": "",
        "end_date": "",
        "chosen_year": "",
        "selected_category": "",
        "region": "",
    }
    with pytest.raises(ValidationError):
        criteria.region = "North"


def test_chart_series_rejects_extra_fields() -> None:
    with pytest.raises(ValidationError):
        ChartSeries.model_validate({"label": "a", "values": [1], "color": "red", "width": 2})
