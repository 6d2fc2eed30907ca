"""
Catalog listing logic.

`sortBy` used to be pasted into ORDER BY verbatim. It is now checked against
the sneaker columns, with an optional asc/desc suffix, and rejected otherwise.
"""

from __future__ import annotations

from fastapi import HTTPException, status

from . import repository

# Accepted spellings (lower-cased) -> column as written in SQL.
SORTABLE_COLUMNS = {
    "id": "id",
    "title": "title",
    "price": "price",
    "imageurl": "imageUrl",
    "image_url": "imageUrl",
    "isfavorite": "isFavorite",
    "is_favorite": "isFavorite",
    "favoriteid": "favoriteId",
    "favorite_id": "favoriteId",
    "isadded": "isAdded",
    "is_added": "isAdded",
}
SORT_DIRECTIONS = {"asc": "ASC", "desc": "DESC"}


def _invalid_sort() -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid sort column")


def parse_sort(sort_by: str) -> str | None:
    """
    Turn a `sortBy` value ("price", "price desc", "image_url ASC") into a safe
    ORDER BY fragment. Empty input means no ordering.
    """
    parts = (sort_by or "").split()
    if not parts:
        return None
    if len(parts) > 2:
        raise _invalid_sort()

    column = SORTABLE_COLUMNS.get(parts[0].lower())
    if column is None:
        raise _invalid_sort()
    if len(parts) == 1:
        return column

    direction = SORT_DIRECTIONS.get(parts[1].lower())
    if direction is None:
        raise _invalid_sort()
    return f"{column} {direction}"


async def list_items(*, title: str = "", sort_by: str = "") -> list[dict]:
    order_by = parse_sort(sort_by)
    return await repository.list_items(title=title, order_by=order_by)
