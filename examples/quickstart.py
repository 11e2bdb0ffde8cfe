#!/usr/bin/env python3
"""
authapi Quickstart — full session lifecycle in one script.

Signs up → reads /me → signs out → signs back in → signs out.
Run with: python examples/quickstart.py

Requires: pip install httpx
Backend must be running: http://localhost:8000
    AUTHAPI_JWT_SECRET=dev uvicorn authapi.main:create_app --factory
"""

import sys
import uuid

import httpx

BASE = "http://localhost:8000/api"


def main():
    run_id = uuid.uuid4().hex[:6]
    email = f"demo-{run_id}@example.com"
    password = "demo_password_123"

    # httpx.Client keeps the session cookie between requests
    client = httpx.Client(base_url=BASE, timeout=10)

    # ── Health check ──────────────────────────────────────────────
    print("Checking backend health...")
    try:
        resp = client.get("/health")
    except httpx.ConnectError:
        print(f"Backend not reachable at {BASE}")
        sys.exit(1)
    health = resp.json()
    print(f"  Database: {'✓' if health['database'] == 'ok' else '✗'}")

    # ── Sign up ───────────────────────────────────────────────────
    print("\n1. Signing up...")
    resp = client.post(
        "/auth/sign-up",
        json={"name": "Demo User", "email": email, "password": password},
    )
    assert resp.status_code == 201, f"Failed: {resp.text}"
    user = resp.json()["user"]
    print(f"   User: {user['email']} ({user['id'][:8]}...), role={user['role']}")

    # ── Duplicate sign up ─────────────────────────────────────────
    print("\n2. Signing up again with the same email...")
    resp = client.post(
        "/auth/sign-up",
        json={"name": "Demo User", "email": email, "password": password},
    )
    print(f"   {resp.status_code}: {resp.json()['error']}")

    # ── Who am I ──────────────────────────────────────────────────
    print("\n3. Reading the current session...")
    resp = client.get("/auth/me")
    assert resp.status_code == 200, f"Failed: {resp.text}"
    print(f"   Signed in as {resp.json()['user']['email']}")

    # ── Sign out ──────────────────────────────────────────────────
    print("\n4. Signing out...")
    resp = client.post("/auth/sign-out")
    print(f"   {resp.json()['message']}")
    resp = client.get("/auth/me")
    print(f"   /me now returns {resp.status_code}")

    # ── Sign in ───────────────────────────────────────────────────
    print("\n5. Signing in with a wrong password...")
    resp = client.post("/auth/sign-in", json={"email": email, "password": "nope"})
    print(f"   {resp.status_code}: {resp.json()['error']}")

    print("\n6. Signing in...")
    resp = client.post("/auth/sign-in", json={"email": email, "password": password})
    assert resp.status_code == 200, f"Failed: {resp.text}"
    print(f"   {resp.json()['message']}")

    client.post("/auth/sign-out")
    print("\nDone.")


if __name__ == "__main__":
    main()
