"""Core (UI-agnostic) dashboard logic.

This package contains:
- data loading (JSON -> pandas)
- filter normalization
- the aggregation engine (filtered transactions -> KPIs and breakdowns)
- page compute functions (JSON-serializable payloads)
- chart helpers (Altair -> Vega-Lite spec dict)
"""
