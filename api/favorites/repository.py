"""
Favorites persistence (raw SQL).

`favorite(id, item_id)` is joined against `sneakers` on read. Unquoted
camelCase sneaker columns fold to lower case in Postgres, so they are
aliased to the snake_case names the API returns.
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_favorites() -> list[dict[str, Any]]:
    # Inner join: favorites pointing at a missing sneaker are dropped.
    return await db.fetch_all(
        """
        SELECT
          f.id,
          f.item_id,
          s.title,
          s.price,
          s.imageUrl AS image_url,
          s.isFavorite AS is_favorite,
          s.favoriteId AS favorite_id,
          s.isAdded AS is_added
        FROM favorite f
        INNER JOIN sneakers s ON f.item_id = s.id
        """
    )


async def create_favorite(item_id: int) -> None:
    await db.execute(
        """
        INSERT INTO favorite (item_id)
        VALUES ($1)
        """,
        item_id,
    )


async def delete_favorite(favorite_id: int) -> str:
    """
    Delete by id. Returns the status tag; "DELETE 0" is not treated as an error.
    """
    return await db.execute(
        """
        DELETE FROM favorite
        WHERE id = $1
        """,
        favorite_id,
    )
