"""Session cookie helpers.

Learn: The session token travels in an HTTP-only cookie, so browser
JavaScript can't read it. The cookie is scoped to the API path and
lives exactly as long as the token it carries. `secure` is only set in
production so local HTTP development still works.
"""

from typing import Optional

from starlette.requests import Request
from starlette.responses import Response

from authapi.config import Settings


def set_token_cookie(
    response: Response, name: str, token: str, settings: Settings
) -> None:
    response.set_cookie(
        key=name,
        value=token,
        max_age=settings.token_max_age_seconds,
        path=settings.cookie_path,
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )


def get_token_cookie(request: Request, name: str) -> Optional[str]:
    """Return the cookie value, or None when absent or empty."""
    return request.cookies.get(name) or None


def clear_token_cookie(response: Response, name: str, settings: Settings) -> None:
    """Expire the cookie. Path and flags must match the ones it was set with."""
    response.delete_cookie(
        key=name,
        path=settings.cookie_path,
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )
