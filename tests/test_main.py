"""Tests for application assembly."""

from __future__ import annotations

import asyncio

import pytest

import main
from core import db


def test_routes_are_registered():
    routes = {(route.path, method) for route in main.app.routes for method in getattr(route, "methods", ())}

    assert ("/favorites", "GET") in routes
    assert ("/favorites", "POST") in routes
    assert ("/favorites/{favorite_id}", "DELETE") in routes
    assert ("/items", "GET") in routes


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_unknown_route_is_plain_text_404(client):
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.text == "Not Found"


def test_lifespan_opens_and_closes_pool(monkeypatch):
    events: list[str] = []

    async def init_pool() -> None:
        events.append("init")

    async def close_pool() -> None:
        events.append("close")

    monkeypatch.setattr(db, "init_pool", init_pool)
    monkeypatch.setattr(db, "close_pool", close_pool)

    async def run_lifespan() -> None:
        async with main.lifespan(main.app):
            events.append("serving")

    asyncio.run(run_lifespan())

    assert events == ["init", "serving", "close"]


def test_lifespan_startup_failure_is_fatal(monkeypatch):
    async def init_pool() -> None:
        raise ConnectionRefusedError("Connection refused")

    monkeypatch.setattr(db, "init_pool", init_pool)

    async def run_lifespan() -> None:
        async with main.lifespan(main.app):
            pass

    with pytest.raises(ConnectionRefusedError):
        asyncio.run(run_lifespan())


def test_run_uses_configured_port(monkeypatch):
    captured: dict = {}
    monkeypatch.delenv("API_HOST", raising=False)
    monkeypatch.setenv("API_PORT", "9090")
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: captured.update(kwargs))

    main.run()

    assert captured == {"host": "0.0.0.0", "port": 9090}
