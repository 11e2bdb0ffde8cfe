"""Authentication primitives.

Learn: Three small pieces make up a session:
1. password: bcrypt hashing and comparison
2. jwt: signed tokens carrying {id, email, role}, valid for one day
3. cookies: the token travels in an HTTP-only cookie

services.user_service combines them with the users table; the auth API
routes combine them into sign-up, sign-in and sign-out.
"""
