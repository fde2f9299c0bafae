"""
tests/conftest.py -- Shared test fixtures for the token auth service.

This module provides:
  - settings / hasher / issuer / verifier: unit-level collaborators with
    fixed, distinct secrets and a cheap bcrypt cost
  - store: a fresh in-memory UserStore per test
  - service: an AuthService wired from the fixtures above
  - client: TestClient over the real FastAPI app with a patched lifespan

Design: Named shared-memory SQLite URIs (not plain :memory:) are required for
the client fixture because TestClient runs sync route handlers in a thread
pool. Plain :memory: DBs are per-connection and would present a blank schema
to each worker thread.

DEBUG and BCRYPT_ROUNDS must be set before any api/ import so get_settings()
auto-generates the signing secrets instead of raising ValueError, and so
bcrypt stays fast.
"""

from __future__ import annotations

import os
import uuid
from collections.abc import Generator
from contextlib import asynccontextmanager

# CRITICAL: set before any api/core import.
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient

from api.main import app
from auth.passwords import PasswordHasher
from auth.service import AuthService
from auth.store import UserStore
from auth.tokens import TokenIssuer, TokenVerifier
from core.config import Settings

ACCESS_SECRET = "access-secret-for-tests-0123456789abcdef"
REFRESH_SECRET = "refresh-secret-for-tests-0123456789abcdef"


# ---------------------------------------------------------------------------
# Unit-level collaborators
# ---------------------------------------------------------------------------


@pytest.fixture
def access_secret() -> str:
    return ACCESS_SECRET


@pytest.fixture
def refresh_secret() -> str:
    return REFRESH_SECRET


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        debug=False,
        access_token_secret=ACCESS_SECRET,
        refresh_token_secret=REFRESH_SECRET,
        bcrypt_rounds=4,
    )


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def issuer() -> TokenIssuer:
    return TokenIssuer(access_secret=ACCESS_SECRET, refresh_secret=REFRESH_SECRET)


@pytest.fixture
def verifier() -> TokenVerifier:
    return TokenVerifier(access_secret=ACCESS_SECRET, refresh_secret=REFRESH_SECRET)


@pytest.fixture
def store() -> Generator[UserStore, None, None]:
    s = UserStore("sqlite:///:memory:")
    yield s
    s.close()


@pytest.fixture
def service(settings: Settings, store: UserStore) -> AuthService:
    return AuthService.from_settings(settings, store)


# ---------------------------------------------------------------------------
# Integration client
# ---------------------------------------------------------------------------


def _patch_lifespan(user_store: UserStore, auth_service: AuthService):
    """Return an async context manager that replaces the real lifespan.

    Wires the test store and service into app.state so routes hit an isolated
    database instead of the configured one.
    """

    @asynccontextmanager
    async def test_lifespan(app):
        app.state.user_store = user_store
        app.state.auth_service = auth_service
        yield

    return test_lifespan


@pytest.fixture
def client(settings: Settings) -> Generator[tuple[TestClient, AuthService], None, None]:
    """Yield (client, service) over a fresh named shared-memory database.

    The service is returned alongside the client so tests can mint tokens
    directly (e.g. an already-expired access token) with the same secrets
    the app verifies against.
    """
    db_url = f"sqlite:///file:test_auth_{uuid.uuid4().hex}?mode=memory&cache=shared&uri=true"
    user_store = UserStore(db_url)
    auth_service = AuthService.from_settings(settings, user_store)

    app.router.lifespan_context = _patch_lifespan(user_store, auth_service)

    with TestClient(app, raise_server_exceptions=False) as c:
        yield c, auth_service

    user_store.close()
