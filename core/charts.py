from __future__ import annotations

from typing import Any, Dict, Mapping

import altair as alt
import pandas as pd

alt.data_transformers.disable_max_rows()

ACCENT = "#6366f1"
COUNTRY_PALETTE = ["#6366f1", "#2563eb", "#22c55e", "#f97316"]
CURRENCY_FORMAT = ",.0f"


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()


def _totals_frame(totals: Mapping[str, float], key: str) -> pd.DataFrame:
    return pd.DataFrame({key: list(totals.keys()), "revenue": list(totals.values())})


def monthly_trend_chart(revenue_by_month: Mapping[str, float]) -> alt.Chart:
    months = sorted(revenue_by_month)
    df = _totals_frame({m: revenue_by_month[m] for m in months}, "month")
    return (
        alt.Chart(df)
        .mark_area(line={"color": ACCENT}, point={"filled": True, "size": 60, "color": ACCENT}, color=ACCENT, opacity=0.12, interpolate="monotone")
        .encode(
            x=alt.X("month:O", title="Month", sort=months, axis=alt.Axis(grid=False)),
            y=alt.Y("revenue:Q", title="Revenue (Rp)", axis=alt.Axis(format="~s", gridDash=[4, 4], domain=False, ticks=False)),
            tooltip=[alt.Tooltip("month", title="Month"), alt.Tooltip("revenue:Q", title="Revenue", format=CURRENCY_FORMAT)],
        )
        .properties(height=280)
    )


def category_bar_chart(revenue_by_category: Mapping[str, float]) -> alt.Chart:
    df = _totals_frame(revenue_by_category, "category")
    hover = alt.selection_point(fields=["category"], on="mouseover", empty="all")
    return (
        alt.Chart(df)
        .mark_bar(cornerRadiusTopLeft=8, cornerRadiusTopRight=8, size=32, color=ACCENT)
        .encode(
            x=alt.X("category:N", title="Category", sort=list(revenue_by_category), axis=alt.Axis(grid=False)),
            y=alt.Y("revenue:Q", title="Revenue (Rp)", axis=alt.Axis(format="~s", gridDash=[4, 4], domain=False, ticks=False)),
            opacity=alt.condition(hover, alt.value(0.85), alt.value(0.5)),
            tooltip=[alt.Tooltip("category", title="Category"), alt.Tooltip("revenue:Q", title="Revenue", format=CURRENCY_FORMAT)],
        )
        .add_params(hover)
        .properties(height=150)
    )


def country_pie_chart(revenue_by_country: Mapping[str, float]) -> alt.Chart:
    df = _totals_frame(revenue_by_country, "country")
    return (
        alt.Chart(df)
        .mark_arc()
        .encode(
            theta=alt.Theta("revenue:Q", stack=True),
            color=alt.Color(
                "country:N",
                sort=list(revenue_by_country),
                scale=alt.Scale(range=COUNTRY_PALETTE),
                legend=alt.Legend(orient="bottom", title=None),
            ),
            tooltip=[alt.Tooltip("country", title="Country"), alt.Tooltip("revenue:Q", title="Revenue", format=CURRENCY_FORMAT)],
        )
        .properties(height=150)
    )
