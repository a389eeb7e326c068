"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import make_url

from nft_catalog.config import get_settings
from nft_catalog.infrastructure.database import Base, engine
from nft_catalog.infrastructure.logging.log_config import setup_logging
from nft_catalog.presentation.api.error_handlers import register_error_handlers
from nft_catalog.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _ensure_database_exists() -> None:
    """Make sure the configured database can be opened.

    SQLite: creates the parent directory of the database file.
    PostgreSQL: connects to the ``postgres`` maintenance database and issues
    ``CREATE DATABASE`` when the target database is missing.
    """
    settings = get_settings()
    url = make_url(settings.database_url)

    if url.get_backend_name() == "sqlite":
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        return

    if url.get_backend_name() != "postgresql" or not url.database:
        return

    import asyncpg

    db_name = url.database
    maintenance_url = settings.database_url.rsplit("/", 1)[0] + "/postgres"

    try:
        conn = await asyncpg.connect(maintenance_url)
        try:
            exists = await conn.fetchval(
                "SELECT 1 FROM pg_database WHERE datname = $1", db_name
            )
            if not exists:
                # CREATE DATABASE cannot run inside a transaction block
                await conn.execute(f'CREATE DATABASE "{db_name}"')
                logger.info("Created database '%s'", db_name)
            else:
                logger.debug("Database '%s' already exists", db_name)
        finally:
            await conn.close()
    except Exception as exc:
        logger.warning("Could not auto-create database '%s': %s", db_name, exc)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and create the records table."""
    setup_logging()

    await _ensure_database_exists()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Record store ready at %s", engine.url.render_as_string(hide_password=True))

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


def main() -> None:
    """Console entry point — serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "nft_catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=(settings.app_env == "development"),
    )


if __name__ == "__main__":
    main()
