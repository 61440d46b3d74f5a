from __future__ import annotations

from typing import List

from pydantic import BaseModel


class DashboardFiltersModel(BaseModel):
    selected_category: str = "All"
    search: str = ""


class MetaCategoriesResponse(BaseModel):
    categories: List[str]
