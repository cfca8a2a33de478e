"""Main FastAPI application."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from application.ports.repositories.blog_store import BlogStore
from infrastructure.config import settings
from infrastructure.logging import setup_logging
from infrastructure.stores.mongo_blog_store import MongoBlogStore
from interfaces.api.routes.blog_routes import router as blog_router
from interfaces.dependencies import get_container

# Configure structured logging
setup_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:  # noqa: ARG001
    """Handle application startup and shutdown."""
    logger.info("app_starting", env=settings.app_env, store_backend=settings.store_backend)

    store = get_container()[BlogStore]
    if isinstance(store, MongoBlogStore) and not store.ping():
        # Don't fail startup; requests will answer 500 until MongoDB is reachable
        logger.warning("mongo_unreachable", mongo_uri=settings.mongo_uri)

    logger.info("app_ready")

    yield

    logger.info("app_shutting_down")
    logger.info("app_stopped")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Blog List API",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure properly for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(blog_router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Create app instance
app = create_app()


def main() -> None:
    uvicorn.run(
        "interfaces.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
