"""
Permissive CORS for the single front-end client.

Every response carries the allow-* headers, and any OPTIONS request is
answered here with an empty 200 before routing happens.
"""

from __future__ import annotations

from fastapi import FastAPI, Request, Response, status
from starlette.middleware.base import RequestResponseEndpoint

from . import settings

ALLOW_ORIGIN = "*"
ALLOW_METHODS = ("POST", "GET", "OPTIONS", "PUT", "DELETE")
ALLOW_HEADERS = (
    "Accept",
    "Content-Type",
    "Content-Length",
    "Accept-Encoding",
    "X-CSRF-Token",
    "Authorization",
)


def cors_headers() -> dict[str, str]:
    allow_headers = settings.cors_allow_headers() or list(ALLOW_HEADERS)
    return {
        "Access-Control-Allow-Origin": ALLOW_ORIGIN,
        "Access-Control-Allow-Methods": ", ".join(ALLOW_METHODS),
        "Access-Control-Allow-Headers": ", ".join(allow_headers),
    }


async def permissive_cors(request: Request, call_next: RequestResponseEndpoint) -> Response:
    headers = cors_headers()
    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_200_OK, headers=headers)

    response = await call_next(request)
    response.headers.update(headers)
    return response


def install_cors(app: FastAPI) -> None:
    app.middleware("http")(permissive_cors)
