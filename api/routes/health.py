"""
Health check endpoints.

Provides endpoints for monitoring and load balancer health checks.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_store
from manager.store import StoreManager


router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """
    Basic health check.

    Returns 200 if the service is running.
    """
    return {
        "status": "healthy",
        "service": "storefront",
    }


@router.get("/ready")
async def readiness_check(store: StoreManager = Depends(get_store)) -> JSONResponse:
    """
    Readiness check.

    Returns 503 while the product backend does not answer. Articles
    and users live in memory and are always ready.
    """
    products_ok = await store.products_ready()

    return JSONResponse(
        status_code=200 if products_ok else 503,
        content={
            "status": "ready" if products_ok else "degraded",
            "checks": {
                "articles": "ok",
                "users": "ok",
                "products": "ok" if products_ok else "unavailable",
            },
        },
    )
