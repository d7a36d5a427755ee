from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import pandas as pd

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import Category, Place

logger = logging.getLogger(__name__)

CATALOG_COLUMNS: List[str] = [
    "id",
    "name",
    "category",
    "distance_meters",
    "rating",
    "address",
]

_REQUIRED_COLUMNS = {"id", "name", "category", "distance_meters", "rating"}

# Chip labels are plural ("Hotels"); accept both forms in catalog files
_CATEGORY_ALIASES: dict[str, str] = {
    "attractions": Category.attraction.value,
    "restaurants": Category.restaurant.value,
    "hotels": Category.hotel.value,
}

_places: tuple[Place, ...] | None = None


def sample_places() -> list[Place]:
    """The built-in demo catalog."""
    return [
        Place(id="1", name="Riverside Museum", category=Category.attraction,
              distance_meters=450, rating=4.6, address="12 River St, City"),
        Place(id="2", name="Skyline Viewpoint", category=Category.attraction,
              distance_meters=900, rating=4.8, address="Hilltop Rd, City"),
        Place(id="3", name="Blue Harbor Hotel", category=Category.hotel,
              distance_meters=1200, rating=4.3, address="45 Ocean Ave, City"),
        Place(id="4", name="Bella Italia", category=Category.restaurant,
              distance_meters=300, rating=4.5, address="22 Market Ln, City"),
        Place(id="5", name="City Art Gallery", category=Category.attraction,
              distance_meters=1500, rating=4.7, address="Museum Sq, City"),
        Place(id="6", name="Maple Inn", category=Category.hotel,
              distance_meters=850, rating=4.1, address="78 Park Rd, City"),
    ]


def _normalize_category(raw: object) -> str:
    value = str(raw).strip().lower()
    return _CATEGORY_ALIASES.get(value, value)


def load_places_csv(path: Path | str) -> list[Place]:
    """
    Read a catalog CSV into Place objects, preserving file order.

    Raises ``ValueError`` when a required column is missing; bad row values
    surface as pydantic validation errors.
    """
    df = pd.read_csv(path, dtype={"id": str})

    missing = _REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(f"Catalog file {path} is missing columns: {sorted(missing)}")

    if "address" not in df.columns:
        df["address"] = ""
    # blank text cells must reach validation as "", not as "nan"
    for col in ("id", "name", "address"):
        df[col] = df[col].fillna("")
    df["category"] = df["category"].apply(_normalize_category)

    places: list[Place] = []
    for _, row in df[CATALOG_COLUMNS].iterrows():
        places.append(Place(
            id=str(row["id"]).strip(),
            name=str(row["name"]).strip(),
            category=row["category"],
            distance_meters=int(row["distance_meters"]),
            rating=float(row["rating"]),
            address=str(row["address"]),
        ))
    return places


def get_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> tuple[Place, ...]:
    """Return the catalog snapshot, loading it on first call."""
    global _places
    if _places is None:
        if config.catalog_csv is not None:
            _places = tuple(load_places_csv(config.catalog_csv))
            logger.info("Loaded %d places from %s", len(_places), config.catalog_csv)
        else:
            _places = tuple(sample_places())
            logger.info("Using built-in sample catalog (%d places)", len(_places))
    return _places


def reset_catalog() -> None:
    global _places
    _places = None
