import altair as alt
import pandas as pd
import streamlit as st
from contextlib import contextmanager
from typing import Dict, List, Optional

from core.charts import category_bar_chart, country_pie_chart, monthly_trend_chart
from core.data import get_data_path, load_dashboard_data, prepare_context
from core.formatting import format_currency
from core.metrics_overview import compute_overview
from core.metrics_transactions import compute_transactions

alt.data_transformers.disable_max_rows()


# ---------- UI / layout helpers ----------
def inject_base_styles():
    if st.session_state.get("_base_css_injected"):
        return
    st.markdown(
        """
        <style>
        .app-top-bar {padding: 6px 0 4px;border-bottom: 1px solid #e5e7eb;margin-bottom: 10px;}
        .app-top-bar .subtitle {color: #6b7280;font-size: 0.9rem;margin-top: 2px;}
        .app-top-bar .page-title {font-size: 1.8rem;font-weight: 800;color: #111827;}
        .card {border: 1px solid #f3f4f6;border-radius: 12px;padding: 16px;background: #ffffff;
               box-shadow: 0 1px 2px rgba(0,0,0,0.04); margin-bottom: 12px;}
        .card-title {font-weight: 600;font-size: 1.0rem;color: #111827;margin-bottom: 8px;}
        .stat-title {font-size: 0.85rem;color: #6b7280;}
        .stat-value {font-size: 1.5rem;font-weight: 600;color: #1f2937;margin-top: 4px;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.session_state["_base_css_injected"] = True


@contextmanager
def card(title: str):
    container = st.container()
    container.markdown(f"<div class='card'><div class='card-title'>{title}</div>", unsafe_allow_html=True)
    body = container.container()
    with body:
        yield body
    container.markdown("</div>", unsafe_allow_html=True)


def render_stat_cards(cards: List[Dict[str, str]]):
    cols = st.columns(len(cards))
    for col, c in zip(cols, cards):
        col.markdown(
            f"<div class='card'><div class='stat-title'>{c['title']}</div><div class='stat-value'>{c['value']}</div></div>",
            unsafe_allow_html=True,
        )


def render_chart(chart: Optional[alt.Chart], empty_msg: str = "No data for the selected filters."):
    if chart is None:
        st.info(empty_msg)
        return
    st.altair_chart(chart, use_container_width=True)


# ---------- UI setup ----------
st.set_page_config(page_title="Sales Analysis Dashboard", layout="wide")
inject_base_styles()

data_ctx = load_dashboard_data()
if not data_ctx.get("files"):
    st.error(f"No dataset found. Place data.json at {get_data_path()} or set DASHBOARD_DATA_PATH.")
    st.stop()

with st.sidebar:
    st.markdown("### Filters")
    selected_category = st.selectbox("Category", options=data_ctx.get("categories", ["All"]), index=0)
    search = st.text_input("Search product, country, category", "")

filters = {"selected_category": selected_category, "search": search}
ctx = prepare_context(filters, data_ctx)
f = ctx["filters"]
overview = compute_overview(f, ctx)
table = compute_transactions(f, ctx)
agg = ctx["aggregates"]

st.markdown(
    "<div class='app-top-bar'><div class='page-title'>Sales Analysis Dashboard</div>"
    f"<div class='subtitle'>Sales summary and trends. Rows: {overview['row_count']}</div></div>",
    unsafe_allow_html=True,
)

left, right = st.columns([3, 1])
with left:
    render_stat_cards(overview["cards"])
with right:
    with card("Quick Summary"):
        summary = overview["summary"]
        st.markdown(
            f"Total Revenue: **{summary['total_revenue']}**  \n"
            f"Units Sold: **{summary['total_units']}**  \n"
            f"Rows shown: **{summary['row_count']}**"
        )

has_rows = overview["row_count"] > 0
c1, c2 = st.columns([2, 1])
with c1:
    with card("Monthly Sales Trend"):
        render_chart(monthly_trend_chart(agg.revenue_by_month) if has_rows else None)
with c2:
    with card("Sales by Category"):
        render_chart(category_bar_chart(agg.revenue_by_category) if has_rows else None)
    with card("Distribution by Country"):
        render_chart(country_pie_chart(agg.revenue_by_country) if has_rows else None)

with card("Top Products (units)"):
    if overview["top_products"]:
        st.dataframe(pd.DataFrame(overview["top_products"]), hide_index=True, use_container_width=True)
    else:
        st.info("No products for the selected filters.")

with card("Recent Transactions"):
    if table["rows"]:
        table_df = pd.DataFrame(table["rows"])
        table_df["price"] = table_df["price"].apply(format_currency)
        st.dataframe(table_df[table["columns"]], hide_index=True, use_container_width=True)
    else:
        st.info("No transactions match the selected filters.")
