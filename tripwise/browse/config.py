from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class BrowseConfig:
    cache_enabled: bool = os.getenv("TRIPWISE_QUERY_CACHE", "1").lower() not in ("0", "false", "no")
    cache_max_entries: int = int(os.getenv("TRIPWISE_QUERY_CACHE_MAX", "256"))
    max_sessions: int = int(os.getenv("TRIPWISE_MAX_SESSIONS", "1000"))


DEFAULT_BROWSE_CONFIG = BrowseConfig()
