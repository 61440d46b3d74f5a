from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

from core.aggregates import AggregateResult
from core.filters import DashboardFilters
from core.formatting import format_currency

TABLE_COLUMNS = ["id", "product", "category", "quantity", "price", "date", "country"]


def compute_transactions(filters: DashboardFilters, ctx: Dict[str, Any]) -> Dict[str, Any]:
    agg: AggregateResult = ctx.get("aggregates") or AggregateResult()
    # Reversed input order, not a date sort.
    rows = [
        {**{col: r.get(col) for col in TABLE_COLUMNS}, "price_display": format_currency(r.get("price"))}
        for r in agg.recent_records
    ]
    return {
        "filters": asdict(filters),
        "columns": TABLE_COLUMNS,
        "row_count": len(rows),
        "rows": rows,
    }
