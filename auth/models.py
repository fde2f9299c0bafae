"""
auth/models.py -- Domain dataclasses for authentication entities.

Pattern: Data class (pure data container, zero logic). The store and the
service do the work; these only own shape.

Layer rule: no imports from api/ or core/.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A registered identity.

    Created once on signup and never updated. hashed_password is the full
    bcrypt string (salt embedded) and is opaque to everything except
    PasswordHasher.verify(). id and created_at are assigned by the store.
    """

    username: str
    hashed_password: str
    id: int | None = None
    created_at: str | None = None


@dataclass(frozen=True)
class TokenPair:
    """The access + refresh tokens issued together on signin."""

    access_token: str
    refresh_token: str
