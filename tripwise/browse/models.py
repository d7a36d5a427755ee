from __future__ import annotations

from pydantic import BaseModel

from ..catalog.models import Category, VisiblePlace


class SearchTextRequest(BaseModel):
    text: str = ""


class CategoryRequest(BaseModel):
    category: Category | None = None


class BrowseResponse(BaseModel):
    search_text: str
    selected_category: Category | None
    total_places: int
    places: list[VisiblePlace]


class FavoritesResponse(BaseModel):
    favorites: list[str]
