"""authapi — user authentication API.

Sign-up, sign-in and sign-out over HTTP, backed by a relational users
table, bcrypt password hashes and JWT session tokens carried in an
HTTP-only cookie.
"""

__version__ = "0.1.0"
