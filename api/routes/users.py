"""
User endpoints.

- GET/POST /u/login - Login form and credential check (anonymous only)
- GET/POST /u/logout - Drop the session cookie (logged in only)
- GET/POST /u/register - Registration form and account creation (anonymous only)
"""

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse, Response

from api.auth import clear_session, issue_session, require_anonymous, require_authenticated
from api.dependencies import get_app_settings, get_store
from api.rendering import ResponseFormat, negotiate, render, render_error
from api.schemas.user import UserResponse
from core.config import Settings
from core.errors import BadRequestError
from core.logging import get_logger
from manager.store import StoreManager


logger = get_logger(__name__)
router = APIRouter(prefix="/u", tags=["Users"])


def _rejected_form(
    request: Request,
    template: str,
    *,
    title: str,
    error_title: str,
    error_message: str,
) -> Response:
    """
    Answer a rejected form submission with a 400.

    HTML clients get the form back with the error box; JSON and XML
    clients get the error detail, like any other failed request.
    """
    if negotiate(request.headers.get("accept")) != ResponseFormat.HTML:
        return render_error(request, 400, error_message, is_logged_in=False)

    return render(
        request,
        template,
        title=title,
        is_logged_in=False,
        status_code=400,
        context={
            "error_title": error_title,
            "error_message": error_message,
        },
    )


@router.get("/login", dependencies=[Depends(require_anonymous)])
async def show_login_page(request: Request) -> Response:
    return render(request, "login.html", title="Login", is_logged_in=False)


@router.post("/login", dependencies=[Depends(require_anonymous)])
async def perform_login(
    request: Request,
    username: str = Form(default=""),
    password: str = Form(default=""),
    store: StoreManager = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """
    Check credentials and start a session.

    Invalid credentials are rejected with a 400.
    """
    if not await store.validate_credentials(username, password):
        logger.info("Login failed", username=username)
        return _rejected_form(
            request,
            "login.html",
            title="Login",
            error_title="Login Failed",
            error_message="Invalid credentials provided",
        )

    response = render(
        request,
        "login-successful.html",
        title="Successful Login",
        is_logged_in=True,
        payload=UserResponse(username=username),
    )
    issue_session(response, settings)
    logger.info("User logged in", username=username)
    return response


@router.api_route(
    "/logout",
    methods=["GET", "POST"],
    dependencies=[Depends(require_authenticated)],
)
async def logout(settings: Settings = Depends(get_app_settings)) -> Response:
    """Expire the session cookie and go back to the index page."""
    response = RedirectResponse(url="/", status_code=303)
    clear_session(response, settings)
    return response


@router.get("/register", dependencies=[Depends(require_anonymous)])
async def show_registration_page(request: Request) -> Response:
    return render(request, "register.html", title="Register", is_logged_in=False)


@router.post("/register", dependencies=[Depends(require_anonymous)])
async def register(
    request: Request,
    username: str = Form(default=""),
    password: str = Form(default=""),
    store: StoreManager = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """
    Register a user and log them in.

    Empty passwords and taken usernames are rejected with a 400
    and leave the session cookie untouched.
    """
    try:
        user = await store.register_user(username, password)
    except BadRequestError as e:
        logger.info("Registration rejected", username=username, reason=str(e))
        return _rejected_form(
            request,
            "register.html",
            title="Register",
            error_title="Registration Failed",
            error_message=str(e),
        )

    response = render(
        request,
        "login-successful.html",
        title="Successful registration & Login",
        is_logged_in=True,
        payload=UserResponse.from_record(user),
    )
    issue_session(response, settings)
    return response
