from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..catalog.models import Category, VisiblePlace
from ..catalog.store import CatalogStore
from .config import DEFAULT_BROWSE_CONFIG, BrowseConfig
from .query import cached_query_places

logger = logging.getLogger(__name__)

Listener = Callable[[list[VisiblePlace]], None]


@dataclass(frozen=True)
class FilterState:
    search_text: str = ""
    selected_category: Category | None = None


class BrowseSession:
    """
    Filter state plus favorites for one user, with a derived visible list.

    Every setter recomputes the list from scratch and hands it to the
    subscribed listeners. Single writer: callers drive it serially.
    """

    def __init__(self, store: CatalogStore, config: BrowseConfig = DEFAULT_BROWSE_CONFIG) -> None:
        self._store = store
        self._config = config
        self._filters = FilterState()
        self._listeners: list[Listener] = []

    @property
    def store(self) -> CatalogStore:
        return self._store

    @property
    def filter_state(self) -> FilterState:
        return self._filters

    def get_visible_places(self) -> list[VisiblePlace]:
        return cached_query_places(
            self._store.get_places(),
            self._store.get_favorites(),
            self._filters.search_text,
            self._filters.selected_category,
            config=self._config,
        )

    def set_search_text(self, text: str) -> list[VisiblePlace]:
        self._filters = FilterState(text, self._filters.selected_category)
        logger.debug("Search text set to %r", text)
        return self._publish()

    def set_selected_category(self, category: Category | None) -> list[VisiblePlace]:
        """Select ``category``; selecting the current one again clears it."""
        if category is not None and category == self._filters.selected_category:
            category = None
        self._filters = FilterState(self._filters.search_text, category)
        logger.debug("Selected category is now %s", category.value if category else None)
        return self._publish()

    def toggle_favorite(self, place_id: str) -> list[VisiblePlace]:
        self._store.toggle_favorite(place_id)
        return self._publish()

    def reset_filters(self) -> list[VisiblePlace]:
        self._filters = FilterState()
        return self._publish()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; the returned callable removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self) -> list[VisiblePlace]:
        visible = self.get_visible_places()
        for listener in list(self._listeners):
            try:
                listener(list(visible))
            except Exception:
                logger.warning("Browse listener failed, skipping it", exc_info=True)
        return visible
