from __future__ import annotations

from dataclasses import asdict, dataclass, is_dataclass
from typing import Any, Dict, Iterable, List, Mapping, Union

import pandas as pd

RECORD_COLUMNS = ["id", "product", "category", "country", "quantity", "price", "date"]
TEXT_COLUMNS = ["product", "category", "country", "date"]
NUMERIC_COLUMNS = ["quantity", "price"]

MONTH_PREFIX_PATTERN = r"^\d{4}-\d{2}"


@dataclass(frozen=True)
class TransactionRecord:
    id: Any
    product: str
    category: str
    country: str
    quantity: int
    price: float
    date: str

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "TransactionRecord":
        return cls(**{col: raw.get(col) for col in RECORD_COLUMNS})


RecordsLike = Union[pd.DataFrame, Iterable[Union[TransactionRecord, Mapping[str, Any]]], None]


def _as_row(item: Union[TransactionRecord, Mapping[str, Any]]) -> Dict[str, Any]:
    if is_dataclass(item):
        return asdict(item)
    return dict(item)


def to_frame(records: RecordsLike) -> pd.DataFrame:
    """Coerce records into a DataFrame with the canonical column set.

    Rows are never dropped: missing numbers become 0 and missing text becomes
    an empty string, so a malformed row still reaches the aggregates.
    """
    if records is None:
        df = pd.DataFrame(columns=RECORD_COLUMNS)
    elif isinstance(records, pd.DataFrame):
        df = records.copy()
    else:
        rows: List[Dict[str, Any]] = [_as_row(r) for r in records]
        df = pd.DataFrame(rows)

    for col in RECORD_COLUMNS:
        if col not in df.columns:
            df[col] = pd.NA
    df = df[RECORD_COLUMNS].reset_index(drop=True)

    for col in NUMERIC_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors="coerce").fillna(0)
        if (df[col] % 1 == 0).all():
            df[col] = df[col].astype("int64")
    for col in TEXT_COLUMNS:
        df[col] = df[col].where(df[col].notna(), "").astype(str)
    return df


def malformed_date_mask(df: pd.DataFrame) -> pd.Series:
    """Rows whose date does not start with a YYYY-MM prefix."""
    if df.empty or "date" not in df.columns:
        return pd.Series(False, index=df.index, dtype=bool)
    return ~df["date"].astype(str).str.match(MONTH_PREFIX_PATTERN)
