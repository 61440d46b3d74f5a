from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

from core.aggregates import AggregateResult
from core.charts import category_bar_chart, country_pie_chart, monthly_trend_chart, to_vega_spec
from core.filters import DashboardFilters
from core.formatting import format_currency, format_number


def compute_overview(filters: DashboardFilters, ctx: Dict[str, Any]) -> Dict[str, Any]:
    agg: AggregateResult = ctx.get("aggregates") or AggregateResult()
    row_count = len(agg.filtered_records)

    months = sorted(agg.revenue_by_month)
    top_products = [
        {"rank": rank, "product": product, "units": units}
        for rank, (product, units) in enumerate(agg.top_products, start=1)
    ]

    charts: Dict[str, Any] = {}
    if row_count:
        charts = {
            "monthly_trend": to_vega_spec(monthly_trend_chart(agg.revenue_by_month)),
            "by_category": to_vega_spec(category_bar_chart(agg.revenue_by_category)),
            "by_country": to_vega_spec(country_pie_chart(agg.revenue_by_country)),
        }

    return {
        "filters": asdict(filters),
        "categories": ctx.get("categories", []),
        "row_count": row_count,
        "kpis": {
            "total_revenue": agg.total_revenue,
            "total_units": agg.total_units,
            "average_unit_price": agg.average_unit_price,
            "top_category": agg.top_category,
        },
        "cards": [
            {"title": "Total Sales", "value": format_currency(agg.total_revenue)},
            {"title": "Units Sold", "value": format_number(agg.total_units)},
            {"title": "Average Price", "value": format_currency(agg.average_unit_price)},
            {"title": "Top Category", "value": agg.top_category},
        ],
        "summary": {
            "total_revenue": format_currency(agg.total_revenue),
            "total_units": agg.total_units,
            "row_count": row_count,
        },
        "breakdowns": {
            "by_category": [{"category": k, "revenue": v} for k, v in agg.revenue_by_category.items()],
            "by_country": [{"country": k, "revenue": v} for k, v in agg.revenue_by_country.items()],
            "by_month": [{"month": m, "revenue": agg.revenue_by_month[m]} for m in months],
        },
        "top_products": top_products,
        "charts": charts,
    }
