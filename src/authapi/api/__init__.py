"""API route aggregation.

All routers registered here get mounted in main.py under /api.
Both routers are open. The auth routes establish sessions rather
than require them (GET /auth/me checks the cookie itself).
"""

from fastapi import APIRouter

from authapi.api.auth import router as auth_router
from authapi.api.health import router as health_router

api_router = APIRouter(prefix="/api")

api_router.include_router(health_router, tags=["health"])
api_router.include_router(auth_router, tags=["auth"])
