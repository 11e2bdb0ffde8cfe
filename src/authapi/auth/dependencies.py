"""FastAPI auth dependencies.

Learn: These are used as Depends() in route handlers. Everything they
hand out (settings, token service, user service) was built once in
create_app() and lives on app.state.
"""

from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from authapi.auth.cookies import get_token_cookie
from authapi.auth.jwt import TokenService
from authapi.config import Settings
from authapi.db.engine import get_db
from authapi.schemas.auth import TokenClaims
from authapi.services.user_service import UserService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_user_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> UserService:
    return UserService(db, bcrypt_rounds=settings.bcrypt_rounds)


def get_current_claims(
    request: Request,
    settings: Settings = Depends(get_settings),
    tokens: TokenService = Depends(get_token_service),
) -> TokenClaims:
    """Identity from the session cookie (required, 401 if missing or bad).

    Learn: InvalidTokenError from verify() propagates to the exception
    handler in authapi.api.errors, which turns it into a 401.
    """
    token = get_token_cookie(request, settings.cookie_name)
    if not token:
        raise HTTPException(status_code=401, detail="Authentication required")
    return tokens.verify(token)

