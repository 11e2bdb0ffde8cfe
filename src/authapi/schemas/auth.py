"""Pydantic schemas for the auth endpoints.

Learn: Pydantic v2 models validate request/response data. Separate
"Request" schemas (input) from "Read" schemas (output) for clean APIs.
UserRead is the only shape a user leaves the API in. It has no
password field, so the hash can't leak by accident.
"""

import uuid
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, EmailStr, Field, StringConstraints

from authapi.db.models import UserRole


# ─── Requests ───────────────────────────────────────────

class SignUpRequest(BaseModel):
    name: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=2, max_length=255)
    ]
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    role: UserRole = UserRole.USER


class SignInRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


# ─── Responses ──────────────────────────────────────────

class UserRead(BaseModel):
    id: uuid.UUID
    name: str
    email: str
    role: UserRole
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class AuthResponse(BaseModel):
    message: str
    user: UserRead


class MeResponse(BaseModel):
    user: UserRead


class MessageResponse(BaseModel):
    message: str


# ─── Token claims ───────────────────────────────────────

class TokenClaims(BaseModel):
    """Identity carried inside a session token."""

    id: uuid.UUID
    email: str
    role: UserRole
