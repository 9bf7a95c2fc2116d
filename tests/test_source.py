from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from sales_dashboard.source.load_records import (
    RecordStore,
    fetch_sales_data,
    load_records_from_mongo,
)
from sales_dashboard.source.validate import RECORD_COLUMNS, validate_records
from conftest import make_record


class FakeCollection:
    def __init__(self, docs: list[dict[str, Any]]) -> None:
        self.docs = docs
        self.calls: list[tuple[Any, Any]] = []

    def find(self, query: dict[str, Any], projection: dict[str, Any]) -> list[dict[str, Any]]:
        self.calls.append((query, projection))
        return [dict(d) for d in self.docs]


def test_fetch_sales_data_reads_json_file(tmp_path: Path) -> None:
    path = tmp_path / "SalesData.json"
    path.write_text(json.dumps([make_record(), make_record(sales=5)]), encoding="utf-8")
    rows = fetch_sales_data(str(path))
    assert [r["sales"] for r in rows] == [100, 5]


def test_fetch_sales_data_rejects_non_array(tmp_path: Path) -> None:
    path = tmp_path / "SalesData.json"
    path.write_text(json.dumps({"records": []}), encoding="utf-8")
    with pytest.raises(ValueError):
        fetch_sales_data(str(path))


def test_load_records_from_mongo_drops_id() -> None:
    collection = FakeCollection([make_record()])
    rows = load_records_from_mongo(collection)
    assert rows == [make_record()]
    assert collection.calls == [({}, {"_id": False})]


def test_validate_records_counts_bad_rows() -> None:
    bad = make_record()
    del bad["profit"]
    good, bad_count = validate_records([make_record(), bad, make_record(sales="lots")])
    assert len(good) == 1
    assert bad_count == 2


def test_record_store_fetches_once() -> None:
    calls = []

    def loader() -> list[dict[str, Any]]:
        calls.append(1)
        return [make_record()]

    store = RecordStore(loader)
    assert not store.loaded
    assert len(store.frame) == 1
    assert len(store.frame) == 1
    assert store.loaded
    assert calls == [1]


def test_record_store_failed_load_yields_empty_collection(tmp_path: Path) -> None:
    store = RecordStore(lambda: fetch_sales_data(str(tmp_path / "missing.json")))
    df = store.frame
    assert df.empty
    assert list(df.columns) == RECORD_COLUMNS


def test_record_store_invalid_json_yields_empty_collection(tmp_path: Path) -> None:
    path = tmp_path / "SalesData.json"
    path.write_text("{not json", encoding="utf-8")
    assert RecordStore(lambda: fetch_sales_data(str(path))).frame.empty
