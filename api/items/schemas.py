"""
Catalog item schemas.
"""

from __future__ import annotations

from pydantic import BaseModel


class ItemOut(BaseModel):
    id: int
    title: str
    price: int
    image_url: str
    is_favorite: bool
    favorite_id: int | None = None
    is_added: bool
