from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    attraction = "attraction"
    restaurant = "restaurant"
    hotel = "hotel"


class Place(BaseModel):
    """A point of interest as held in the catalog.

    Favorite status is not stored here; it only exists on
    :class:`VisiblePlace`, computed from the favorite set at query time.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    category: Category
    distance_meters: int = Field(..., ge=0, description="Distance from the reference point")
    rating: float
    address: str = ""


class VisiblePlace(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: Category
    distance_meters: int
    rating: float
    address: str
    is_favorite: bool

    @classmethod
    def from_place(cls, place: Place, is_favorite: bool) -> VisiblePlace:
        return cls(**place.model_dump(), is_favorite=is_favorite)
