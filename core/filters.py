from __future__ import annotations

from dataclasses import dataclass

ALL_CATEGORIES = "All"


@dataclass(frozen=True)
class DashboardFilters:
    selected_category: str = ALL_CATEGORIES
    search: str = ""


def normalize_filters(raw: dict) -> DashboardFilters:
    raw = raw or {}

    selected_category = raw.get("selected_category")
    selected_category = str(selected_category).strip() if selected_category is not None else ""
    if not selected_category:
        selected_category = ALL_CATEGORIES

    search = raw.get("search")
    search = str(search).strip() if search is not None else ""

    return DashboardFilters(selected_category=selected_category, search=search)
