"""
Favorites API schemas (request/response models).
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, StrictInt

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Strict: "7" and 7.0 are rejected, only JSON integers in bigint range pass.
Int64 = Annotated[StrictInt, Field(ge=INT64_MIN, le=INT64_MAX)]


class FavoriteCreate(BaseModel):
    item_id: Int64


class FavoriteOut(BaseModel):
    id: int
    item_id: int
    title: str
    price: int
    image_url: str
    is_favorite: bool
    favorite_id: int | None = None
    is_added: bool
