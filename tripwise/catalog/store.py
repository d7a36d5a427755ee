from __future__ import annotations

import logging
from collections.abc import Iterable

from .models import Place

logger = logging.getLogger(__name__)


class CatalogStore:
    """Source of truth for one browsing session.

    Holds the catalog snapshot (fixed at construction) and the favorite
    set. ``toggle_favorite`` is the only mutator; readers get immutable
    views.
    """

    def __init__(self, places: Iterable[Place]) -> None:
        snapshot = tuple(places)
        seen: set[str] = set()
        for place in snapshot:
            if place.id in seen:
                raise ValueError(f"Duplicate place id in catalog: {place.id!r}")
            seen.add(place.id)

        self._places = snapshot
        self._by_id: dict[str, Place] = {p.id: p for p in snapshot}
        self._favorites: set[str] = set()

    def get_places(self) -> tuple[Place, ...]:
        return self._places

    def get_favorites(self) -> frozenset[str]:
        return frozenset(self._favorites)

    def has_place(self, place_id: str) -> bool:
        return place_id in self._by_id

    def get_place(self, place_id: str) -> Place | None:
        return self._by_id.get(place_id)

    def toggle_favorite(self, place_id: str) -> bool:
        """Flip favorite membership for ``place_id``.

        Unknown ids are ignored. Returns whether the place is a favorite
        after the call.
        """
        if place_id not in self._by_id:
            logger.debug("Ignoring favorite toggle for unknown place id %r", place_id)
            return False

        if place_id in self._favorites:
            self._favorites.remove(place_id)
            return False
        self._favorites.add(place_id)
        return True
