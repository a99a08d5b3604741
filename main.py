"""
Product Management API — application entry point.
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import register_exception_handlers, register_middleware
from api.routes import router as product_router
from auth.jwt import TokenService
from auth.routes import router as auth_router
from config.settings import Settings, config
from database.session import Database
from utils.random_string import generate_random_string

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("sqlalchemy.engine", "asyncio", "uvicorn.access"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

_GENERATED_SECRET_LENGTH = 32


def _signing_secret(settings: Settings) -> str:
    if settings.jwt_secret:
        return settings.jwt_secret
    logger.warning(
        "JWT_SECRET is not set — using a random secret; tokens will not survive a restart"
    )
    return generate_random_string(_GENERATED_SECRET_LENGTH)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or config
    database = Database(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Synchronising database schema…")
        await database.create_all()
        logger.info("Application ready to accept requests.")
        yield
        await database.dispose()

    app = FastAPI(
        title="Product Management",
        version="1.0.0",
        description="User registration, JWT login and product CRUD.",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.token_service = TokenService(
        _signing_secret(settings), expiry_seconds=settings.jwt_expiry_seconds
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)
    register_exception_handlers(app)

    # Routes
    app.include_router(auth_router)
    app.include_router(product_router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
