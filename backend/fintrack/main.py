from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fintrack.api.errors import register_exception_handlers
from fintrack.api.routes import categories, health, transactions
from fintrack.core.config import settings
from fintrack.database.init_db import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("fintrack API up (env=%s)", settings.ENV)
    yield


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # -------------------------------------------------------------------------
    # App
    # -------------------------------------------------------------------------
    app = FastAPI(title="Fintrack API", lifespan=lifespan)

    # -------------------------------------------------------------------------
    # CORS: the session travels in a cookie, so credentials must be allowed
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[
            "X-Total-Count",
            "X-Total-Pages",
            "X-Page",
            "X-Page-Size",
        ],
    )

    register_exception_handlers(app)

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------
    app.include_router(health.router, tags=["health"])
    app.include_router(transactions.router, tags=["transactions"])
    app.include_router(categories.router, tags=["categories"])

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("fintrack.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
