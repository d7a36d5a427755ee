from __future__ import annotations

from collections.abc import Collection, Sequence

from ..catalog.models import Category, Place, VisiblePlace
from .cache import cache_get, cache_set
from .config import DEFAULT_BROWSE_CONFIG, BrowseConfig


def _matches_category(place: Place, selected_category: Category | None) -> bool:
    return selected_category is None or place.category == selected_category


def _matches_search(place: Place, search_text: str) -> bool:
    if not search_text or search_text.isspace():
        return True
    return search_text.lower() in place.name.lower()


def query_places(
    places: Sequence[Place],
    favorites: Collection[str],
    search_text: str = "",
    selected_category: Category | None = None,
) -> list[VisiblePlace]:
    """
    Compute the visible list for the given inputs.

    A place is kept when it passes both the category filter and the
    case-insensitive name search. Catalog order is preserved; nothing is
    re-sorted. ``is_favorite`` comes from ``favorites`` membership only.
    """
    return [
        VisiblePlace.from_place(p, is_favorite=p.id in favorites)
        for p in places
        if _matches_category(p, selected_category) and _matches_search(p, search_text)
    ]


def cached_query_places(
    places: Sequence[Place],
    favorites: Collection[str],
    search_text: str = "",
    selected_category: Category | None = None,
    config: BrowseConfig = DEFAULT_BROWSE_CONFIG,
) -> list[VisiblePlace]:
    """Same as :func:`query_places`, memoized on all four inputs."""
    if not config.cache_enabled:
        return query_places(places, favorites, search_text, selected_category)

    # frozen places hash by value, so equal catalogs share entries
    key = (
        tuple(places),
        frozenset(favorites),
        search_text,
        selected_category,
    )
    cached = cache_get(key)
    if cached is not None:
        return list(cached)

    result = query_places(places, favorites, search_text, selected_category)
    cache_set(key, tuple(result), max_entries=config.cache_max_entries)
    return result
