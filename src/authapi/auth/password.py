"""Password hashing utilities.

Learn: Uses bcrypt for secure password hashing. bcrypt automatically
handles salting and is resistant to rainbow table attacks. The work
factor is tunable (AUTHAPI_BCRYPT_ROUNDS, default 10); each step
doubles the cost. Passwords are truncated to 72 bytes (bcrypt's limit).

Both functions are synchronous and CPU bound. The service layer runs
them in a worker thread so a sign-in doesn't stall the event loop.
"""

import bcrypt
import structlog

from authapi.errors import ComparisonError, HashingError

logger = structlog.get_logger()

DEFAULT_ROUNDS = 10
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a password with bcrypt. Raises HashingError on failure."""
    try:
        salt = bcrypt.gensalt(rounds=rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")
    except (ValueError, TypeError, AttributeError) as e:
        logger.error("auth.password.hash_failed", error=str(e))
        raise HashingError() from e


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored bcrypt hash.

    Returns False on mismatch. Raises ComparisonError when the comparison
    itself can't run (e.g. the stored value isn't a bcrypt hash).
    """
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except (ValueError, TypeError, AttributeError) as e:
        logger.error("auth.password.compare_failed", error=str(e))
        raise ComparisonError() from e
