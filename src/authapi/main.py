"""FastAPI application factory.

Learn: App factory pattern. create_app() returns a configured FastAPI
instance. Settings are loaded here (or passed in by tests) and handed to
the engine, session factory and token service, which all live on
app.state. Lifespan logs startup and disposes the engine on shutdown.

There is no module-level `app`. Loading Settings fails when
AUTHAPI_JWT_SECRET is unset, so the app is built when the server starts:

    uvicorn authapi.main:create_app --factory
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from authapi import __version__
from authapi.api import api_router
from authapi.api.errors import register_exception_handlers
from authapi.auth.jwt import TokenService
from authapi.config import Settings
from authapi.db.engine import build_engine, build_session_factory
from authapi.middleware.errors import UnhandledErrorMiddleware
from authapi.middleware.request_id import RequestIdMiddleware
from authapi.middleware.security import SecurityHeadersMiddleware

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle.

    Learn: Anything before `yield` runs at startup, after `yield` runs at shutdown.
    """
    settings: Settings = app.state.settings
    logger.info(
        "authapi.starting",
        version=__version__,
        environment=settings.environment,
        port=settings.port,
    )

    yield

    logger.info("authapi.shutdown")
    await app.state.engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build and return the FastAPI application."""
    settings = settings or Settings()

    app = FastAPI(
        title="authapi",
        description="User authentication API: sign-up, sign-in, sign-out",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)
    app.state.token_service = TokenService.from_settings(settings)

    # ── Middleware stack ──────────────────────────────────────
    # Note: Starlette middleware executes in reverse order of registration.
    # Request flow: CORS → RequestId → Security → UnhandledError → handler
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    return app
