"""
auth/passwords.py -- Salted one-way password hashing (bcrypt).

bcrypt is used directly rather than through passlib: passlib's wrap-bug
detection builds a password longer than 72 bytes, which bcrypt 4.x rejects.

bcrypt.gensalt() embeds a fresh random salt in every hash, so hashing the same
password twice yields two different stored strings. bcrypt.checkpw() compares
in constant time.

Layer rule: no imports from api/.
"""

from __future__ import annotations

import bcrypt

_DEFAULT_ROUNDS = 12
# bcrypt only reads the first 72 bytes of a password; bcrypt 5 raises instead
# of truncating, so both hash() and verify() truncate first.
_MAX_PASSWORD_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_MAX_PASSWORD_BYTES]


class PasswordHasher:
    """Hash and verify passwords with a configurable bcrypt cost.

    Usage:
        hasher = PasswordHasher(rounds=12)
        stored = hasher.hash("pw1")
        hasher.verify("pw1", stored)   # True
    """

    def __init__(self, rounds: int = _DEFAULT_ROUNDS) -> None:
        self.rounds = rounds
        # Computed once per hasher so the first unknown-user signin is not
        # measurably slower than later ones.
        self._dummy_hash = self.hash("tokenauth_timing_dummy")

    def hash(self, password: str) -> str:
        """Return a bcrypt hash of the plaintext password.

        Only the first 72 UTF-8 bytes are significant. Longer passwords are
        truncated the same way in verify(), so they still sign in.
        """
        return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        """Return True if the plaintext password matches the stored hash.

        A malformed stored hash is treated as a mismatch.
        """
        try:
            return bcrypt.checkpw(_password_bytes(password), hashed.encode("utf-8"))
        except ValueError:
            return False

    def dummy_verify(self, password: str) -> None:
        """Spend one bcrypt check against a throwaway hash.

        Call this when the username does not exist so the response time
        matches a wrong-password attempt and does not reveal which usernames
        are registered.
        """
        self.verify(password, self._dummy_hash)
