"""
API route modules.
"""

from api.routes.articles import router as articles_router
from api.routes.health import router as health_router
from api.routes.products import router as products_router
from api.routes.users import router as users_router

__all__ = ["articles_router", "health_router", "products_router", "users_router"]
