"""
Catalog (sneakers) SQL (raw).

The ORDER BY fragment is interpolated, so callers must only pass values
produced by `service.parse_sort`.
"""

from __future__ import annotations

from typing import Any

from core import db

ITEM_COLUMNS = """
  id,
  title,
  price,
  imageUrl AS image_url,
  isFavorite AS is_favorite,
  favoriteId AS favorite_id,
  isAdded AS is_added
"""


def build_list_items_query(*, title_filter: bool, order_by: str | None) -> str:
    sql = f"SELECT {ITEM_COLUMNS}FROM sneakers"
    if title_filter:
        sql += "\nWHERE title ILIKE $1"
    if order_by:
        sql += f"\nORDER BY {order_by}"
    return sql


async def list_items(*, title: str = "", order_by: str | None = None) -> list[dict[str, Any]]:
    sql = build_list_items_query(title_filter=bool(title), order_by=order_by)
    if title:
        return await db.fetch_all(sql, f"%{title}%")
    return await db.fetch_all(sql)
