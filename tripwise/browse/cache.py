from __future__ import annotations

import threading
from collections.abc import Hashable
from typing import Any

from .config import DEFAULT_BROWSE_CONFIG

_cache: dict[Hashable, Any] = {}
_lock = threading.Lock()
_hits: int = 0
_misses: int = 0


def cache_get(key: Hashable) -> Any | None:
    global _hits, _misses
    with _lock:
        if key in _cache:
            _hits += 1
            return _cache[key]
        _misses += 1
        return None


def cache_set(key: Hashable, value: Any, max_entries: int = DEFAULT_BROWSE_CONFIG.cache_max_entries) -> None:
    with _lock:
        _cache.pop(key, None)
        _cache[key] = value
        # dicts keep insertion order, so the first key is the oldest
        while len(_cache) > max(max_entries, 1):
            _cache.pop(next(iter(_cache)), None)


def get_cache_stats() -> dict:
    with _lock:
        total = _hits + _misses
        return {
            "size": len(_cache),
            "hits": _hits,
            "misses": _misses,
            "hit_rate": round(_hits / total * 100, 1) if total > 0 else 0.0,
        }


def clear_cache() -> None:
    global _hits, _misses
    with _lock:
        _cache.clear()
        _hits = 0
        _misses = 0
