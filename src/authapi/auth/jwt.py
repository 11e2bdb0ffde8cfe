"""JWT token creation and verification.

Learn: JWT (JSON Web Token) provides stateless authentication. Nothing
is stored server-side: a token is valid as long as its signature
checks out and its `exp` hasn't passed. Sessions last one day.

The payload carries the user's id, email and role so handlers can
identify the caller without a database round-trip.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
import structlog
from pydantic import ValidationError

from authapi.config import Settings
from authapi.errors import InvalidTokenError
from authapi.schemas.auth import TokenClaims

logger = structlog.get_logger()

DEFAULT_EXPIRES_IN = timedelta(days=1)


class TokenService:
    """Signs and verifies session tokens with a shared secret."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = DEFAULT_EXPIRES_IN,
    ):
        if not secret:
            raise ValueError("A signing secret is required")
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expires_in=timedelta(days=settings.token_expire_days),
        )

    def sign(self, claims: TokenClaims, now: Optional[datetime] = None) -> str:
        """Create a signed token for the given identity claims."""
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "id": str(claims.id),
            "email": claims.email,
            "role": claims.role.value,
            "iat": issued_at,
            "exp": issued_at + self.expires_in,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Verify and decode a token.

        Returns the identity claims on success.
        Raises InvalidTokenError on a bad signature, expiry or missing claims.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise InvalidTokenError("expired")
        except jwt.InvalidTokenError as e:
            logger.info("auth.token.rejected", error=str(e))
            raise InvalidTokenError("invalid")

        try:
            return TokenClaims.model_validate(payload)
        except ValidationError:
            raise InvalidTokenError("invalid")
