"""
Article endpoints.

- GET / - Index page listing every article
- GET /article/view/{article_id} - Single article
- GET /article/create - Article creation form (logged in only)
- POST /article/create - Create a new article (logged in only)
"""

import re

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import Response

from api.auth import get_is_logged_in, require_authenticated
from api.dependencies import get_store
from api.rendering import render
from api.schemas.article import ArticleResponse
from core.errors import NotFoundError
from manager.store import StoreManager


router = APIRouter(tags=["Articles"])

# Optional sign, then ASCII digits only
ARTICLE_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


@router.get("/")
async def show_index_page(
    request: Request,
    store: StoreManager = Depends(get_store),
    is_logged_in: bool = Depends(get_is_logged_in),
) -> Response:
    """List all articles in creation order."""
    articles = await store.list_articles()

    return render(
        request,
        "index.html",
        title="Home Page",
        is_logged_in=is_logged_in,
        payload=[ArticleResponse.from_record(a) for a in articles],
        schema=ArticleResponse,
    )


@router.get("/article/view/{article_id}")
async def get_article(
    article_id: str,
    request: Request,
    store: StoreManager = Depends(get_store),
    is_logged_in: bool = Depends(get_is_logged_in),
) -> Response:
    """
    Show one article.

    A non-numeric identifier is answered like an unknown one: 404.
    Whitespace, digit separators and non-ASCII digits, all of which
    int() would accept, count as non-numeric.
    """
    if not ARTICLE_ID_PATTERN.fullmatch(article_id):
        raise NotFoundError(f"Article {article_id} not found")

    article = await store.get_article(int(article_id))

    return render(
        request,
        "article.html",
        title=article.title,
        is_logged_in=is_logged_in,
        payload=ArticleResponse.from_record(article),
    )


@router.get("/article/create", dependencies=[Depends(require_authenticated)])
async def show_article_creation_page(request: Request) -> Response:
    return render(
        request,
        "create-article.html",
        title="Create New Article",
        is_logged_in=True,
    )


@router.post("/article/create", dependencies=[Depends(require_authenticated)])
async def create_article(
    request: Request,
    title: str = Form(default=""),
    content: str = Form(default=""),
    store: StoreManager = Depends(get_store),
) -> Response:
    """
    Create an article from the posted form.

    Missing fields are stored as empty strings.
    """
    article = await store.create_article(title, content)

    return render(
        request,
        "submission-successful.html",
        title="Submission Successful",
        is_logged_in=True,
        payload=ArticleResponse.from_record(article),
    )
