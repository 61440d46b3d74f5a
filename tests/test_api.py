from fastapi.testclient import TestClient

from api.main import app

client = TestClient(app)


def test_meta_categories(dataset_path):
    rv = client.get("/meta/categories")
    assert rv.status_code == 200
    assert rv.json() == {"categories": ["All", "Electronics", "Clothing", "Home"]}


def test_overview_endpoint(dataset_path):
    rv = client.post("/overview", json={"selected_category": "Electronics", "search": ""})
    assert rv.status_code == 200
    j = rv.json()
    assert j["row_count"] == 2
    assert j["kpis"]["total_revenue"] == 7000
    assert j["kpis"]["top_category"] == "Electronics"
    assert "monthly_trend" in j["charts"]


def test_overview_defaults_to_all(dataset_path):
    rv = client.post("/overview", json={})
    assert rv.status_code == 200
    assert rv.json()["filters"] == {"selected_category": "All", "search": ""}


def test_transactions_endpoint(dataset_path):
    rv = client.post("/transactions", json={"search": "INDONESIA"})
    assert rv.status_code == 200
    j = rv.json()
    assert [r["id"] for r in j["rows"]] == [5, 4, 1]


def test_debug_endpoint(dataset_path):
    rv = client.post("/debug", json={})
    assert rv.status_code == 200
    assert rv.json()["row_counts"]["transactions"] == 5


def test_missing_dataset_returns_empty_payload(tmp_path, monkeypatch):
    monkeypatch.setenv("DASHBOARD_DATA_PATH", str(tmp_path / "missing.json"))
    rv = client.post("/overview", json={})
    assert rv.status_code == 200
    j = rv.json()
    assert j["row_count"] == 0
    assert j["kpis"]["top_category"] == "-"


def test_unreadable_dataset_returns_500(tmp_path, monkeypatch):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    monkeypatch.setenv("DASHBOARD_DATA_PATH", str(path))
    rv = client.post("/overview", json={})
    assert rv.status_code == 500
    assert "error" in rv.json()
