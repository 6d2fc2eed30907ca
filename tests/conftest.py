from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from favorites import repository as favorites_repository
from items import repository as items_repository
from main import app

SNEAKERS = [
    {
        "id": 1,
        "title": "Air Max 90",
        "price": 12999,
        "image_url": "/img/sneakers/1.jpg",
        "is_favorite": False,
        "favorite_id": None,
        "is_added": False,
    },
    {
        "id": 2,
        "title": "Classic Runner",
        "price": 8999,
        "image_url": "/img/sneakers/2.jpg",
        "is_favorite": True,
        "favorite_id": 10,
        "is_added": False,
    },
    {
        "id": 3,
        "title": "Blazer Mid AIR",
        "price": 10500,
        "image_url": "/img/sneakers/3.jpg",
        "is_favorite": False,
        "favorite_id": None,
        "is_added": True,
    },
]

_SQL_TO_FIELD = {
    "id": "id",
    "title": "title",
    "price": "price",
    "imageUrl": "image_url",
    "isFavorite": "is_favorite",
    "favoriteId": "favorite_id",
    "isAdded": "is_added",
}


class FakeStore:
    """In-memory stand-in for the favorites and items repositories."""

    def __init__(self, sneakers: list[dict]) -> None:
        self.sneakers = [dict(s) for s in sneakers]
        self.favorites: list[dict] = []
        self._next_id = 1

    def add_favorite(self, item_id: int) -> int:
        favorite_id = self._next_id
        self._next_id += 1
        self.favorites.append({"id": favorite_id, "item_id": item_id})
        return favorite_id

    async def list_favorites(self) -> list[dict]:
        by_id = {s["id"]: s for s in self.sneakers}
        rows = []
        for fav in self.favorites:
            sneaker = by_id.get(fav["item_id"])
            if sneaker is None:
                continue
            row = {k: v for k, v in sneaker.items() if k != "id"}
            rows.append({"id": fav["id"], "item_id": fav["item_id"], **row})
        return rows

    async def create_favorite(self, item_id: int) -> None:
        self.add_favorite(item_id)

    async def delete_favorite(self, favorite_id: int) -> str:
        before = len(self.favorites)
        self.favorites = [f for f in self.favorites if f["id"] != favorite_id]
        return f"DELETE {before - len(self.favorites)}"

    async def list_items(self, *, title: str = "", order_by: str | None = None) -> list[dict]:
        rows = [dict(s) for s in self.sneakers]
        if title:
            rows = [r for r in rows if title.lower() in r["title"].lower()]
        if order_by:
            column, _, direction = order_by.partition(" ")
            rows.sort(key=lambda r: r[_SQL_TO_FIELD[column]], reverse=direction == "DESC")
        return rows


@pytest.fixture
def store(monkeypatch: pytest.MonkeyPatch) -> FakeStore:
    fake = FakeStore(SNEAKERS)
    monkeypatch.setattr(favorites_repository, "list_favorites", fake.list_favorites)
    monkeypatch.setattr(favorites_repository, "create_favorite", fake.create_favorite)
    monkeypatch.setattr(favorites_repository, "delete_favorite", fake.delete_favorite)
    monkeypatch.setattr(items_repository, "list_items", fake.list_items)
    return fake


@pytest.fixture
def client() -> TestClient:
    # Not used as a context manager: the lifespan (and its DB pool) never starts.
    return TestClient(app)
