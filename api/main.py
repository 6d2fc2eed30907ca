import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from core import db, settings
from core.cors import install_cors
from core.errors import register_exception_handlers
from favorites import router as favorites_router
from items import router as items_router

logging.basicConfig(
    level=settings.log_level(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Open and ping the DB pool once per process; a failure here aborts startup.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="sneakers-api", version="0.1.0", lifespan=lifespan)

install_cors(app)
register_exception_handlers(app)

app.include_router(favorites_router.router, tags=["favorites"])
app.include_router(items_router.router, tags=["items"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


def run() -> None:
    host = settings.api_host()
    port = settings.api_port()
    logger.info("api_starting host=%s port=%s", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
