"""
Favorites API endpoints.
"""

from __future__ import annotations

import logging
import re

from fastapi import APIRouter, HTTPException, Request, Response, status

from . import repository, schemas

logger = logging.getLogger(__name__)

router = APIRouter()

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_favorite_id(raw: str) -> int:
    if not _INT_PATTERN.fullmatch(raw):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid favorite ID")
    value = int(raw)
    if not schemas.INT64_MIN <= value <= schemas.INT64_MAX:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid favorite ID")
    return value


@router.get("/favorites", response_model=list[schemas.FavoriteOut])
async def list_favorites() -> list[dict]:
    return await repository.list_favorites()


@router.post("/favorites", status_code=status.HTTP_201_CREATED, response_class=Response)
async def create_favorite(request: Request) -> Response:
    # Decoded as JSON regardless of Content-Type.
    payload = schemas.FavoriteCreate.model_validate_json(await request.body())
    await repository.create_favorite(payload.item_id)
    logger.info("favorite_created item_id=%s", payload.item_id)
    return Response(status_code=status.HTTP_201_CREATED)


@router.delete(
    "/favorites/{favorite_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_favorite(favorite_id: str) -> Response:
    parsed_id = parse_favorite_id(favorite_id)
    result = await repository.delete_favorite(parsed_id)
    logger.info("favorite_deleted favorite_id=%s status=%s", parsed_id, result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
