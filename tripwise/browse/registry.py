from __future__ import annotations

import logging
import threading

from ..catalog.data_store import get_catalog
from ..catalog.store import CatalogStore
from .config import DEFAULT_BROWSE_CONFIG
from .session import BrowseSession

logger = logging.getLogger(__name__)

_sessions: dict[str, BrowseSession] = {}
_lock = threading.Lock()


def get_session(session_id: str, max_sessions: int = DEFAULT_BROWSE_CONFIG.max_sessions) -> BrowseSession:
    """
    Return the browse session for ``session_id``, creating it on first use.

    At most ``max_sessions`` are kept; the least recently used one is
    dropped when a new session would exceed that.
    """
    with _lock:
        session = _sessions.pop(session_id, None)
        if session is None:
            session = BrowseSession(CatalogStore(get_catalog()))
        _sessions[session_id] = session
        while len(_sessions) > max(max_sessions, 1):
            evicted = next(iter(_sessions))
            _sessions.pop(evicted, None)
            logger.debug("Evicted idle browse session %s", evicted)
        return session


def end_session(session_id: str) -> bool:
    with _lock:
        return _sessions.pop(session_id, None) is not None


def active_session_count() -> int:
    return len(_sessions)


def clear_sessions() -> None:
    with _lock:
        _sessions.clear()
