"""
Catalog API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from . import schemas, service

router = APIRouter()


@router.get("/items", response_model=list[schemas.ItemOut])
async def list_items(
    title: str = Query(default=""),
    sort_by: str = Query(default="", alias="sortBy"),
) -> list[dict]:
    return await service.list_items(title=title, sort_by=sort_by)
