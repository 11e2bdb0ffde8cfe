"""Domain errors for the credential and session lifecycle.

Learn: Every error raised by the auth core carries an AuthErrorKind tag
plus structured data (the email, the user id, the reason a token was
rejected). The HTTP layer maps kinds to status codes in one table
(authapi.api.errors) instead of matching on message text.
"""

import enum
import uuid
from typing import Any, Optional


class AuthErrorKind(str, enum.Enum):
    DUPLICATE_EMAIL = "duplicate_email"
    USER_NOT_FOUND = "user_not_found"
    INVALID_PASSWORD = "invalid_password"
    INVALID_TOKEN = "invalid_token"
    HASHING_FAILED = "hashing_failed"
    COMPARISON_FAILED = "comparison_failed"


class AuthError(Exception):
    """Base class for auth domain errors."""

    kind: AuthErrorKind
    message: str = "Authentication error"

    def __init__(self, message: Optional[str] = None, **data: Any):
        self.message = message or self.message
        self.data = data
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, data={self.data!r})"


class DuplicateEmailError(AuthError):
    kind = AuthErrorKind.DUPLICATE_EMAIL
    message = "User with this email already exists"

    def __init__(self, email: str):
        super().__init__(email=email)
        self.email = email


class UserNotFoundError(AuthError):
    kind = AuthErrorKind.USER_NOT_FOUND
    message = "User not found"

    def __init__(
        self,
        email: Optional[str] = None,
        user_id: Optional[uuid.UUID] = None,
    ):
        super().__init__(email=email, user_id=user_id)
        self.email = email
        self.user_id = user_id


class InvalidPasswordError(AuthError):
    kind = AuthErrorKind.INVALID_PASSWORD
    message = "Invalid password"

    def __init__(self, email: str):
        super().__init__(email=email)
        self.email = email


class InvalidTokenError(AuthError):
    """Token rejected. reason is "expired" or "invalid"."""

    kind = AuthErrorKind.INVALID_TOKEN

    def __init__(self, reason: str = "invalid"):
        message = "Token has expired" if reason == "expired" else "Invalid token"
        super().__init__(message, reason=reason)
        self.reason = reason


class HashingError(AuthError):
    kind = AuthErrorKind.HASHING_FAILED
    message = "Error hashing password"


class ComparisonError(AuthError):
    kind = AuthErrorKind.COMPARISON_FAILED
    message = "Error comparing password"
