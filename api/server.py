"""
FastAPI application entry point.

Sets up the application with:
- Lifespan management (startup/shutdown)
- Route registration
- Error handling
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.auth import has_session
from api.rendering import render_error
from api.routes import articles_router, health_router, products_router, users_router
from core.config import Settings, get_settings
from core.errors import StorageError, StoreError
from core.logging import configure_logging, get_logger
from core.storage import BaseProductRepository
from manager.store import StoreManager


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Startup: configure logging, initialize the store manager (the
    product repository logs, but never raises, connection problems).
    Shutdown: close the product repository.
    """
    configure_logging(app.state.settings)

    settings: Settings = app.state.settings
    store: StoreManager = app.state.store

    logger.info(
        "Starting storefront...",
        product_backend=settings.product_backend,
        environment=settings.environment,
    )

    await store.initialize()

    logger.info(
        "Storefront started",
        host=settings.server_host,
        port=settings.server_port,
    )

    yield

    logger.info("Shutting down storefront...")
    await store.shutdown()
    logger.info("Storefront stopped")


def create_app(
    settings: Optional[Settings] = None,
    product_repository: Optional[BaseProductRepository] = None,
) -> FastAPI:
    """
    Application factory.

    Creates and configures the FastAPI application. Each app owns its
    own StoreManager, so tests can build isolated apps side by side.

    Args:
        settings: Settings override (default: environment settings)
        product_repository: Product repository override (default: from settings)
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Storefront",
        description=(
            "Product catalog, articles and a demo login.\n\n"
            "Every page is available as HTML, JSON or XML via the Accept header."
        ),
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.settings = settings
    app.state.store = StoreManager(
        settings=settings,
        product_repository=product_repository,
    )

    app.include_router(health_router)
    app.include_router(articles_router)
    app.include_router(users_router)
    app.include_router(products_router)

    @app.exception_handler(StoreError)
    async def store_exception_handler(request: Request, exc: StoreError):
        if isinstance(exc, StorageError):
            logger.warning(
                "Storage unavailable",
                path=request.url.path,
                error=str(exc),
            )
        return render_error(
            request,
            exc.status_code,
            str(exc),
            is_logged_in=has_session(request, settings),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "message": str(exc) if settings.debug else "An error occurred",
            },
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    server_settings = get_settings()
    uvicorn.run(
        "api.server:app",
        host=server_settings.server_host,
        port=server_settings.server_port,
        reload=server_settings.debug,
    )
