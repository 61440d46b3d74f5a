from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

import pandas as pd

from core.aggregates import AggregateResult
from core.filters import DashboardFilters
from core.records import malformed_date_mask, to_frame


def compute_debug(filters: DashboardFilters, ctx: Dict[str, Any]) -> Dict[str, Any]:
    transactions: pd.DataFrame = ctx.get("transactions", to_frame(None))
    agg: AggregateResult = ctx.get("aggregates") or AggregateResult()
    payload = {
        "filters": asdict(filters),
        "row_counts": {
            "transactions": int(len(transactions)),
            "filtered": int(len(agg.filtered_records)),
        },
        "categories": ctx.get("categories", []),
        "malformed_dates": [],
        "duplicate_ids": [],
    }
    if transactions.empty:
        return payload

    bad = transactions[malformed_date_mask(transactions)]
    if not bad.empty:
        payload["malformed_dates"] = bad[["id", "product", "date"]].to_dict(orient="records")

    ids = transactions["id"].astype(str)
    dupes = ids[ids.duplicated(keep=False)]
    if not dupes.empty:
        payload["duplicate_ids"] = (
            dupes.value_counts(sort=False).reset_index(name="count").rename(columns={"index": "id"}).to_dict(orient="records")
        )
    return payload
