from __future__ import annotations

import logging
import os
import uuid

from fastapi import FastAPI, Request
from starlette.middleware.sessions import SessionMiddleware

from .browse.cache import get_cache_stats
from .browse.models import (
    BrowseResponse,
    CategoryRequest,
    FavoritesResponse,
    SearchTextRequest,
)
from .browse.registry import end_session, get_session
from .browse.session import BrowseSession
from .catalog.models import Category, VisiblePlace

logger = logging.getLogger(__name__)

app = FastAPI(title="TripWise Nearby Places API", version="0.1.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "tripwise-secret-change-in-production"),
)


def _browse_session(request: Request) -> BrowseSession:
    browse_id = request.session.get("browse_id")
    if not browse_id:
        browse_id = uuid.uuid4().hex
        request.session["browse_id"] = browse_id
        logger.debug("Started browse session %s", browse_id)
    return get_session(browse_id)


def _browse_response(
    session: BrowseSession,
    places: list[VisiblePlace] | None = None,
) -> BrowseResponse:
    filters = session.filter_state
    return BrowseResponse(
        search_text=filters.search_text,
        selected_category=filters.selected_category,
        total_places=len(session.store.get_places()),
        places=places if places is not None else session.get_visible_places(),
    )


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/categories")
def categories() -> list[str]:
    return [c.value for c in Category]


# ── Browse endpoints ─────────────────────────────────────────────────────


@app.get("/places", response_model=BrowseResponse)
def places(request: Request) -> BrowseResponse:
    return _browse_response(_browse_session(request))


@app.put("/browse/search", response_model=BrowseResponse)
def set_search(body: SearchTextRequest, request: Request) -> BrowseResponse:
    session = _browse_session(request)
    return _browse_response(session, session.set_search_text(body.text))


@app.post("/browse/category", response_model=BrowseResponse)
def select_category(body: CategoryRequest, request: Request) -> BrowseResponse:
    session = _browse_session(request)
    return _browse_response(session, session.set_selected_category(body.category))


@app.post("/favorites/{place_id}/toggle", response_model=BrowseResponse)
def toggle_favorite(place_id: str, request: Request) -> BrowseResponse:
    session = _browse_session(request)
    return _browse_response(session, session.toggle_favorite(place_id))


@app.get("/favorites", response_model=FavoritesResponse)
def favorites(request: Request) -> FavoritesResponse:
    session = _browse_session(request)
    favs = session.store.get_favorites()
    # Report in catalog order rather than set order
    ordered = [p.id for p in session.store.get_places() if p.id in favs]
    return FavoritesResponse(favorites=ordered)


@app.post("/session/end")
def session_end(request: Request) -> dict:
    browse_id = request.session.pop("browse_id", None)
    ended = end_session(browse_id) if browse_id else False
    return {"status": "ended" if ended else "no_session"}


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()
