from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from core.data import DATA_PATH_ENV


SCENARIO_RECORDS = [
    {"id": 1, "category": "Electronics", "country": "ID", "product": "Phone", "quantity": 2, "price": 1000, "date": "2024-01-15"},
    {"id": 2, "category": "Electronics", "country": "ID", "product": "Phone", "quantity": 1, "price": 1000, "date": "2024-02-01"},
]

MIXED_RECORDS = [
    {"id": 1, "product": "Phone", "category": "Electronics", "country": "Indonesia", "quantity": 2, "price": 1000, "date": "2024-01-15"},
    {"id": 2, "product": "T-Shirt", "category": "Clothing", "country": "Malaysia", "quantity": 5, "price": 100, "date": "2024-01-20"},
    {"id": 3, "product": "Laptop", "category": "Electronics", "country": "Singapore", "quantity": 1, "price": 5000, "date": "2024-02-03"},
    {"id": 4, "product": "Blender", "category": "Home", "country": "Indonesia", "quantity": 3, "price": 300, "date": "2024-03-11"},
    {"id": 5, "product": "T-Shirt", "category": "Clothing", "country": "Indonesia", "quantity": 4, "price": 100, "date": "2024-03-12"},
]


@pytest.fixture
def scenario_records() -> list[dict]:
    return [dict(r) for r in SCENARIO_RECORDS]


@pytest.fixture
def mixed_records() -> list[dict]:
    return [dict(r) for r in MIXED_RECORDS]


@pytest.fixture
def dataset_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, mixed_records: list[dict]) -> Path:
    """Write the mixed records to a temp JSON file and point the loader at it."""
    path = tmp_path / "data.json"
    path.write_text(json.dumps(mixed_records), encoding="utf-8")
    monkeypatch.setenv(DATA_PATH_ENV, os.fspath(path))
    return path
