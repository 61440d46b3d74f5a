"""Aggregation engine: filter transactions and derive dashboard KPIs.

Everything here is a pure function of ``(records, selected_category, search_text)``.
Empty input never raises; aggregates fall back to ``0``, ``"-"`` and empty
collections.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Tuple

import pandas as pd

from core.filters import ALL_CATEGORIES
from core.formatting import round_half_up
from core.records import RECORD_COLUMNS, RecordsLike, to_frame

TOP_PRODUCTS_LIMIT = 5
NO_TOP_CATEGORY = "-"
SEARCH_SEPARATOR = " "


def _native(value: Any) -> Any:
    return value.item() if hasattr(value, "item") else value


def _ordered_totals(series: pd.Series) -> Dict[str, Any]:
    return {str(k): _native(v) for k, v in series.items()}


@dataclass(frozen=True)
class AggregateResult:
    filtered_records: List[Dict[str, Any]] = field(default_factory=list)
    total_revenue: float = 0
    total_units: int = 0
    average_unit_price: int = 0
    revenue_by_category: Dict[str, float] = field(default_factory=dict)
    revenue_by_country: Dict[str, float] = field(default_factory=dict)
    revenue_by_month: Dict[str, float] = field(default_factory=dict)
    top_category: str = NO_TOP_CATEGORY
    top_products: List[Tuple[str, int]] = field(default_factory=list)

    @property
    def top_product_labels(self) -> List[str]:
        return [product for product, _ in self.top_products]

    @property
    def recent_records(self) -> List[Dict[str, Any]]:
        """Filtered records, last input row first."""
        return list(reversed(self.filtered_records))

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["top_products"] = [list(p) for p in self.top_products]
        return out


def filter_transactions(df: pd.DataFrame, selected_category: str = ALL_CATEGORIES, search_text: str = "") -> pd.DataFrame:
    if df.empty:
        return df.copy()

    mask = pd.Series(True, index=df.index)
    if selected_category != ALL_CATEGORIES:
        mask &= df["category"] == selected_category

    q = (search_text or "").strip().lower()
    if q:
        haystack = df["product"].str.cat([df["country"], df["category"]], sep=SEARCH_SEPARATOR)
        mask &= haystack.str.lower().str.contains(q, regex=False, na=False)
    return df[mask].copy()


def compute_aggregates(
    records: RecordsLike,
    selected_category: str = ALL_CATEGORIES,
    search_text: str = "",
) -> AggregateResult:
    df = to_frame(records)
    filtered = filter_transactions(df, selected_category, search_text)
    if filtered.empty:
        return AggregateResult()

    filtered["revenue"] = filtered["quantity"] * filtered["price"]
    # Truncated as-is: a malformed date yields whatever 7-char prefix it has.
    filtered["month"] = filtered["date"].str.slice(0, 7)

    by_category = filtered.groupby("category", sort=False, dropna=False)["revenue"].sum()
    by_country = filtered.groupby("country", sort=False, dropna=False)["revenue"].sum()
    by_month = filtered.groupby("month", sort=False, dropna=False)["revenue"].sum()
    product_units = filtered.groupby("product", sort=False, dropna=False)["quantity"].sum()

    total_revenue = _native(filtered["revenue"].sum())
    total_units = int(filtered["quantity"].sum())
    average_unit_price = int(round_half_up(total_revenue / total_units)) if total_units else 0

    # idxmax/nlargest(keep="first") both resolve ties by first-seen group order.
    top_category = str(by_category.idxmax())
    top = product_units.nlargest(TOP_PRODUCTS_LIMIT, keep="first")

    return AggregateResult(
        filtered_records=filtered[RECORD_COLUMNS].to_dict(orient="records"),
        total_revenue=total_revenue,
        total_units=total_units,
        average_unit_price=average_unit_price,
        revenue_by_category=_ordered_totals(by_category),
        revenue_by_country=_ordered_totals(by_country),
        revenue_by_month=_ordered_totals(by_month),
        top_category=top_category,
        top_products=[(str(k), int(v)) for k, v in top.items()],
    )
