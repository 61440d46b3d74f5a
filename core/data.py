from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pandas as pd

from core.aggregates import compute_aggregates
from core.filters import ALL_CATEGORIES, DashboardFilters, normalize_filters
from core.records import RecordsLike, malformed_date_mask, to_frame

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parents[1]
DATA_FILE = "data.json"
DATA_PATH_ENV = "DASHBOARD_DATA_PATH"


def get_data_path() -> Path:
    override = os.environ.get(DATA_PATH_ENV)
    if override:
        return Path(override)
    return DATA_DIR / DATA_FILE


def get_source_files() -> List[Path]:
    path = get_data_path()
    return [path] if path.is_file() else []


def file_signature(files: List[Path]) -> Tuple[Tuple[str, float], ...]:
    return tuple((str(f.resolve()), f.stat().st_mtime) for f in files)


def list_categories(records: RecordsLike) -> List[str]:
    """'All' followed by each distinct category in first-seen order."""
    df = to_frame(records)
    if df.empty:
        return [ALL_CATEGORIES]
    return [ALL_CATEGORIES] + df["category"].drop_duplicates().tolist()


def load_transactions(path: Path) -> pd.DataFrame:
    raw = pd.read_json(path, orient="records", dtype=False, convert_dates=False)
    df = to_frame(raw)

    bad_dates = int(malformed_date_mask(df).sum())
    if bad_dates:
        logger.warning("%d of %d transactions in %s have no YYYY-MM date prefix", bad_dates, len(df), path.name)
    logger.info("Loaded %d transactions from %s", len(df), path)
    return df


# ---------------- Public API (Streamlit + FastAPI use) ----------------
@lru_cache(maxsize=4)
def _load_dashboard_data_cached(files_sig: Tuple[Tuple[str, float], ...]) -> Dict[str, object]:
    frames = [load_transactions(Path(name)) for name, _ in files_sig]
    transactions = pd.concat(frames, ignore_index=True) if frames else to_frame(None)
    return {
        "files": [Path(name).name for name, _ in files_sig],
        "transactions": transactions,
        "categories": list_categories(transactions),
    }


def load_dashboard_data() -> Dict[str, object]:
    files = get_source_files()
    if not files:
        logger.warning("No dataset found at %s", get_data_path())
        return {"files": [], "transactions": to_frame(None), "categories": [ALL_CATEGORIES]}
    return _load_dashboard_data_cached(file_signature(files))


def prepare_context(filters: Optional[dict | DashboardFilters], data_ctx: Dict[str, object]) -> Dict[str, object]:
    transactions: pd.DataFrame = data_ctx.get("transactions", to_frame(None)).copy()
    filt = filters if isinstance(filters, DashboardFilters) else normalize_filters(filters or {})

    aggregates = compute_aggregates(transactions, filt.selected_category, filt.search)
    return {
        "filters": filt,
        "transactions": transactions,
        "categories": data_ctx.get("categories") or list_categories(transactions),
        "aggregates": aggregates,
    }
