"""Exception handlers — turn errors into JSON responses.

Learn: Domain errors carry an AuthErrorKind tag. STATUS_BY_KIND is the
one place kinds become HTTP status codes, so a new error kind only needs
a row here. Validation errors become 400 with per-field detail; anything
unclassified is logged and returned as a generic 500.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from authapi.errors import AuthError, AuthErrorKind

logger = structlog.get_logger()

STATUS_BY_KIND: dict[AuthErrorKind, int] = {
    AuthErrorKind.DUPLICATE_EMAIL: 409,
    AuthErrorKind.USER_NOT_FOUND: 404,
    AuthErrorKind.INVALID_PASSWORD: 401,
    AuthErrorKind.INVALID_TOKEN: 401,
    AuthErrorKind.HASHING_FAILED: 500,
    AuthErrorKind.COMPARISON_FAILED: 500,
}

# Client-facing messages. Internal failures don't echo their cause.
PUBLIC_MESSAGE_BY_KIND: dict[AuthErrorKind, str] = {
    AuthErrorKind.DUPLICATE_EMAIL: "Email already exists",
    AuthErrorKind.USER_NOT_FOUND: "User not found",
    AuthErrorKind.INVALID_PASSWORD: "Invalid password",
    AuthErrorKind.HASHING_FAILED: "Internal server error",
    AuthErrorKind.COMPARISON_FAILED: "Internal server error",
}


def format_validation_errors(exc: RequestValidationError) -> list[dict]:
    """Flatten pydantic errors into [{field, message}].

    The leading "body"/"query" location segment is dropped, so a bad
    email in the JSON body reports field "email".
    """
    details = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in ("body", "query", "path", "header", "cookie"):
            loc = loc[1:]
        details.append({
            "field": ".".join(loc) or "body",
            "message": err.get("msg", "Invalid value"),
        })
    return details


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "error": "Validation failed",
            "details": format_validation_errors(exc),
        },
    )


async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    status_code = STATUS_BY_KIND.get(exc.kind, 500)
    if status_code >= 500:
        logger.error(
            "auth.error",
            kind=exc.kind.value,
            path=request.url.path,
            exc_info=exc,
        )
    else:
        logger.info("auth.rejected", kind=exc.kind.value, path=request.url.path)
    message = PUBLIC_MESSAGE_BY_KIND.get(exc.kind, exc.message)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
        headers=headers,
    )


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("authapi.unhandled_error", path=request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
