import logging
import json

from core.data import list_categories, load_dashboard_data, load_transactions, prepare_context
from core.filters import DashboardFilters


def test_list_categories_first_seen_order(mixed_records):
    assert list_categories(mixed_records) == ["All", "Electronics", "Clothing", "Home"]


def test_list_categories_empty():
    assert list_categories([]) == ["All"]


def test_load_dashboard_data(dataset_path):
    data_ctx = load_dashboard_data()
    assert data_ctx["files"] == ["data.json"]
    assert len(data_ctx["transactions"]) == 5
    assert data_ctx["categories"] == ["All", "Electronics", "Clothing", "Home"]


def test_load_dashboard_data_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv("DASHBOARD_DATA_PATH", str(tmp_path / "nope.json"))
    data_ctx = load_dashboard_data()
    assert data_ctx["files"] == []
    assert data_ctx["transactions"].empty
    assert data_ctx["categories"] == ["All"]


def test_load_transactions_warns_on_malformed_dates(tmp_path, caplog):
    path = tmp_path / "bad.json"
    path.write_text(
        json.dumps([{"id": 1, "product": "A", "category": "B", "country": "C", "quantity": 1, "price": 1, "date": "2024"}]),
        encoding="utf-8",
    )
    with caplog.at_level(logging.WARNING, logger="core.data"):
        df = load_transactions(path)
    assert len(df) == 1
    assert df.iloc[0]["date"] == "2024"
    assert "no YYYY-MM date prefix" in caplog.text


def test_prepare_context_runs_engine(dataset_path):
    ctx = prepare_context({"selected_category": "Clothing"}, load_dashboard_data())
    assert ctx["filters"] == DashboardFilters(selected_category="Clothing", search="")
    assert ctx["aggregates"].total_units == 9
    assert ctx["categories"][0] == "All"
