"""
Access-control gate and session cookie helpers.

The session indicator is a single cookie whose presence alone means
"logged in". Its value is random but never checked: there is no
server-side session table, expiry or signature. This mirrors the
demo login flow and must not be mistaken for real authentication.
"""

import secrets

from fastapi import Depends, Request, Response

from api.dependencies import get_app_settings
from core.config import Settings
from core.errors import UnauthorizedError


def has_session(request: Request, settings: Settings) -> bool:
    """True iff the session cookie is present, whatever its value."""
    return settings.session_cookie_name in request.cookies


def get_is_logged_in(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> bool:
    """Dependency exposing the session indicator to handlers."""
    return has_session(request, settings)


def require_authenticated(is_logged_in: bool = Depends(get_is_logged_in)) -> None:
    """Deny the request unless the session cookie is present."""
    if not is_logged_in:
        raise UnauthorizedError("You need to log in first")


def require_anonymous(is_logged_in: bool = Depends(get_is_logged_in)) -> None:
    """Deny the request when the session cookie is already present."""
    if is_logged_in:
        raise UnauthorizedError("You are already logged in")


def generate_session_token() -> str:
    return secrets.token_urlsafe(16)


def issue_session(response: Response, settings: Settings) -> None:
    """Set the session cookie on a response."""
    response.set_cookie(
        key=settings.session_cookie_name,
        value=generate_session_token(),
        max_age=settings.session_cookie_max_age,
        path="/",
        httponly=True,
    )


def clear_session(response: Response, settings: Settings) -> None:
    """Expire the session cookie."""
    response.delete_cookie(key=settings.session_cookie_name, path="/")
