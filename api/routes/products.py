"""
Product catalog endpoint.

- GET /products - Every product from the external store
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from api.auth import get_is_logged_in
from api.dependencies import get_store
from api.rendering import render
from api.schemas.product import ProductResponse
from manager.store import StoreManager


router = APIRouter(tags=["Products"])


@router.get("/products")
async def show_products_page(
    request: Request,
    store: StoreManager = Depends(get_store),
    is_logged_in: bool = Depends(get_is_logged_in),
) -> Response:
    """
    List the catalog.

    A StorageError from the repository propagates to the app-level
    handler and becomes a 503.
    """
    products = await store.list_products()

    return render(
        request,
        "products.html",
        title="Products",
        is_logged_in=is_logged_in,
        payload=[ProductResponse.from_record(p) for p in products],
        schema=ProductResponse,
    )
