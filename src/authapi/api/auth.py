"""Auth API — sign-up, sign-in, sign-out.

Learn: Routes for the session lifecycle:
- POST /auth/sign-up → create account, set session cookie
- POST /auth/sign-in → check credentials, set session cookie
- POST /auth/sign-out → clear session cookie
- GET /auth/me → user behind the session cookie

Routes only orchestrate: the service raises tagged domain errors
(DuplicateEmailError, UserNotFoundError, InvalidPasswordError) and the
handlers in authapi.api.errors turn them into 409 / 404 / 401.
/me is the exception: a token for a deleted account is a dead session, so
it answers 401 like any other missing or bad token.
"""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request, Response

from authapi.auth.cookies import clear_token_cookie, get_token_cookie, set_token_cookie
from authapi.auth.dependencies import (
    get_current_claims,
    get_settings,
    get_token_service,
    get_user_service,
)
from authapi.auth.jwt import TokenService
from authapi.config import Settings
from authapi.db.models import User
from authapi.errors import UserNotFoundError
from authapi.schemas.auth import (
    AuthResponse,
    MeResponse,
    MessageResponse,
    SignInRequest,
    SignUpRequest,
    TokenClaims,
    UserRead,
)
from authapi.services.user_service import UserService

logger = structlog.get_logger()

router = APIRouter(prefix="/auth")


def _start_session(
    response: Response, user: User, tokens: TokenService, settings: Settings
) -> None:
    token = tokens.sign(TokenClaims(id=user.id, email=user.email, role=user.role))
    set_token_cookie(response, settings.cookie_name, token, settings)


# ─── Sign-up ────────────────────────────────────────────


@router.post("/sign-up", response_model=AuthResponse, status_code=201)
async def sign_up(
    body: SignUpRequest,
    response: Response,
    svc: UserService = Depends(get_user_service),
    tokens: TokenService = Depends(get_token_service),
    settings: Settings = Depends(get_settings),
):
    """Create a new account and start a session."""
    user = await svc.create_user(
        name=body.name,
        email=body.email,
        password=body.password,
        role=body.role,
    )
    _start_session(response, user, tokens, settings)

    logger.info("auth.user_signed_up", email=user.email)
    return AuthResponse(
        message="User created successfully",
        user=UserRead.model_validate(user),
    )


# ─── Sign-in ────────────────────────────────────────────


@router.post("/sign-in", response_model=AuthResponse)
async def sign_in(
    body: SignInRequest,
    response: Response,
    svc: UserService = Depends(get_user_service),
    tokens: TokenService = Depends(get_token_service),
    settings: Settings = Depends(get_settings),
):
    """Check email/password and start a session."""
    user = await svc.authenticate_user(body.email, body.password)
    _start_session(response, user, tokens, settings)

    logger.info("auth.user_signed_in", email=user.email)
    return AuthResponse(
        message="User signed in successfully",
        user=UserRead.model_validate(user),
    )


# ─── Sign-out ───────────────────────────────────────────


@router.post("/sign-out", response_model=MessageResponse)
async def sign_out(
    request: Request,
    response: Response,
    settings: Settings = Depends(get_settings),
):
    """End the session by clearing the cookie.

    Tokens aren't stored server-side, so there is nothing to revoke;
    the cookie just has to be present.
    """
    if not get_token_cookie(request, settings.cookie_name):
        raise HTTPException(status_code=400, detail="No active session")

    clear_token_cookie(response, settings.cookie_name, settings)
    logger.info("auth.user_signed_out")
    return MessageResponse(message="User signed out successfully")


# ─── Current user ───────────────────────────────────────


@router.get("/me", response_model=MeResponse)
async def get_me(
    claims: TokenClaims = Depends(get_current_claims),
    svc: UserService = Depends(get_user_service),
):
    """Get the user behind the current session."""
    try:
        user = await svc.get_user(claims.id)
    except UserNotFoundError:
        # Validly signed, but the account is gone: treat as signed out
        raise HTTPException(status_code=401, detail="Authentication required")
    return MeResponse(user=UserRead.model_validate(user))
