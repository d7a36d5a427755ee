from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class CatalogConfig:
    """
    Where the place catalog comes from.

    When ``catalog_csv`` is unset the built-in sample catalog is used.
    """

    catalog_csv: Path | None = (
        Path(os.environ["TRIPWISE_CATALOG_CSV"])
        if os.getenv("TRIPWISE_CATALOG_CSV")
        else None
    )


DEFAULT_CATALOG_CONFIG = CatalogConfig()
