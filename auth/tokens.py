"""
auth/tokens.py -- Access and refresh token issuance and verification.

Security design decisions:
  JWT: python-jose with HS256. Both token kinds carry a single identity claim
       ("username") plus "iat". Access tokens also carry "exp"; refresh tokens
       do not expire.

  Secret separation: access tokens are signed with the access secret and
       refresh tokens with the refresh secret. Each verification path decodes
       with only its own secret, so a refresh token presented as an access
       token (or the reverse) fails the signature check.

  Algorithm pinning: decode() is given algorithms=["HS256"] so a token whose
       header names another algorithm (including "none") is rejected.

  Failures: every decode error becomes ForbiddenError. The caller never
       learns whether the signature, the expiry, or the claim shape failed.

Secrets are injected at construction. Nothing here reads configuration or the
environment; AuthService.from_settings() does the wiring.

Layer rule: no imports from api/.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from auth.errors import ForbiddenError

ALGORITHM = "HS256"
ACCESS_TOKEN_TTL = timedelta(minutes=30)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenIssuer:
    """Sign access and refresh tokens.

    Pure CPU work: no I/O, no shared mutable state. One instance is shared
    across all requests.
    """

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        access_ttl: timedelta = ACCESS_TOKEN_TTL,
    ) -> None:
        self._access_secret = access_secret
        self._refresh_secret = refresh_secret
        self.access_ttl = access_ttl

    def issue_access(self, username: str, issued_at: datetime | None = None) -> str:
        """Return an access token for username, valid for access_ttl from issued_at.

        issued_at defaults to now. Passing an earlier time is how callers mint
        an already-aged token (tests use it to produce expired tokens).
        """
        iat = issued_at or _utcnow()
        payload = {
            "username": username,
            "iat": iat,
            "exp": iat + self.access_ttl,
        }
        return jwt.encode(payload, self._access_secret, algorithm=ALGORITHM)

    def issue_refresh(self, username: str, issued_at: datetime | None = None) -> str:
        """Return a refresh token for username. It carries no expiry claim."""
        payload = {
            "username": username,
            "iat": issued_at or _utcnow(),
        }
        return jwt.encode(payload, self._refresh_secret, algorithm=ALGORITHM)


class TokenVerifier:
    """Validate tokens against the secret for their kind and return the claims."""

    def __init__(self, access_secret: str, refresh_secret: str) -> None:
        self._access_secret = access_secret
        self._refresh_secret = refresh_secret

    def verify_access(self, token: str) -> dict:
        """Return the claims of a valid, unexpired access token.

        Raises ForbiddenError on a bad signature, a malformed token, an
        expired token, or a missing username claim.
        """
        return _decode(token, self._access_secret, verify_exp=True)

    def verify_refresh(self, token: str) -> dict:
        """Return the claims of a validly signed refresh token.

        Expiry is not checked. Raises ForbiddenError on a bad signature, a
        malformed token, or a missing username claim.
        """
        return _decode(token, self._refresh_secret, verify_exp=False)


def _decode(token: str, secret: str, verify_exp: bool) -> dict:
    try:
        claims = jwt.decode(token, secret, algorithms=[ALGORITHM], options={"verify_exp": verify_exp})
    except JWTError as exc:
        raise ForbiddenError() from exc
    username = claims.get("username")
    if not isinstance(username, str) or not username:
        raise ForbiddenError()
    return claims
