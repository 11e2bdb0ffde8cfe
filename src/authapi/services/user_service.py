"""User service — business logic for accounts and credentials.

Learn: Service layer separates business logic from HTTP routing.
API routes call services, services call the database.
This makes the code testable (test services without HTTP).

Email uniqueness is checked twice: a lookup before hashing (cheap
rejection of the common case) and the UNIQUE constraint on insert
(catches two sign-ups racing with the same email).
"""

import asyncio
import uuid

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from authapi.auth.password import DEFAULT_ROUNDS, hash_password, verify_password
from authapi.db.models import User, UserRole
from authapi.errors import DuplicateEmailError, InvalidPasswordError, UserNotFoundError

logger = structlog.get_logger()


class UserService:
    """Account creation and credential checks."""

    def __init__(self, db: AsyncSession, bcrypt_rounds: int = DEFAULT_ROUNDS):
        self.db = db
        self.bcrypt_rounds = bcrypt_rounds

    async def get_by_email(self, email: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.email == email).limit(1)
        )
        return result.scalars().first()

    async def get_user(self, user_id: uuid.UUID) -> User:
        user = await self.db.get(User, user_id)
        if not user:
            raise UserNotFoundError(user_id=user_id)
        return user

    async def create_user(
        self,
        name: str,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
    ) -> User:
        """Register a new account. Raises DuplicateEmailError if taken."""
        if await self.get_by_email(email):
            raise DuplicateEmailError(email)

        password_hash = await asyncio.to_thread(
            hash_password, password, self.bcrypt_rounds
        )
        user = User(name=name, email=email, password=password_hash, role=role)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning("auth.user.insert_conflict", email=email)
            raise DuplicateEmailError(email) from e

        await self.db.refresh(user)
        logger.info("auth.user.created", user_id=str(user.id), email=email)
        return user

    async def authenticate_user(self, email: str, password: str) -> User:
        """Check credentials and return the matching user.

        Raises UserNotFoundError for an unknown email and
        InvalidPasswordError when the password doesn't match.
        """
        user = await self.get_by_email(email)
        if not user:
            raise UserNotFoundError(email=email)

        matches = await asyncio.to_thread(verify_password, password, user.password)
        if not matches:
            raise InvalidPasswordError(email)
        return user
