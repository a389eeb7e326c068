"""Pydantic DTOs (Data Transfer Objects) for the Record feature.

Bodies are exchanged in camelCase (``imageUrl``, ``rarityScore``);
snake_case field names are accepted on input as well.
"""

from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

_CAMEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class RecordCreate(BaseModel):
    """Schema for creating a new record. ``id`` and timestamps are assigned by the server."""

    name: str = Field(..., examples=["Golden Ape #42"])
    description: str = Field(..., examples=["One of the rarest apes in the collection."])
    image_url: str = Field(..., examples=["https://example.com/nfts/42.png"])
    rarity_score: float = Field(0, examples=[87.5])

    model_config = _CAMEL_CONFIG


class RecordUpdate(BaseModel):
    """Schema for a partial update — every field optional, unknown fields ignored."""

    name: str | None = None
    description: str | None = None
    image_url: str | None = None
    rarity_score: float | None = None

    model_config = _CAMEL_CONFIG


class RecordResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    name: str
    description: str
    image_url: str
    rarity_score: float
    created_at: datetime
    updated_at: datetime | None = None

    model_config = {**_CAMEL_CONFIG, "from_attributes": True}
