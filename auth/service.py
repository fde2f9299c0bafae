"""
auth/service.py -- Signup, signin, refresh, and protected-access flows.

AuthService is thin orchestration over the four collaborators it is built
with (UserStore, PasswordHasher, TokenIssuer, TokenVerifier). Each flow either
returns its result or raises an AuthError subclass; the api/ layer maps those
to HTTP responses.

Ordering rules:
  Missing-field checks run before any store access.
  Signin always runs one bcrypt check, whether or not the username exists,
  so response time does not reveal which usernames are registered.

Passwords and tokens are never logged.

Layer rule: no imports from api/.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from auth.errors import ForbiddenError, InvalidCredentialsError, MissingFieldError, UnauthenticatedError
from auth.models import TokenPair, User
from auth.passwords import PasswordHasher
from auth.store import UserStore
from auth.tokens import TokenIssuer, TokenVerifier
from core.config import Settings

logger = logging.getLogger("tokenauth.auth")


class AuthService:
    def __init__(
        self,
        store: UserStore,
        hasher: PasswordHasher,
        issuer: TokenIssuer,
        verifier: TokenVerifier,
    ) -> None:
        self.store = store
        self.hasher = hasher
        self.issuer = issuer
        self.verifier = verifier

    @classmethod
    def from_settings(cls, settings: Settings, store: UserStore) -> "AuthService":
        """Build a service whose secrets, token lifetime, and bcrypt cost come from settings."""
        return cls(
            store=store,
            hasher=PasswordHasher(rounds=settings.bcrypt_rounds),
            issuer=TokenIssuer(
                access_secret=settings.access_token_secret,
                refresh_secret=settings.refresh_token_secret,
                access_ttl=timedelta(minutes=settings.access_token_expire_minutes),
            ),
            verifier=TokenVerifier(
                access_secret=settings.access_token_secret,
                refresh_secret=settings.refresh_token_secret,
            ),
        )

    # ------------------------------------------------------------------
    # Credential flows
    # ------------------------------------------------------------------

    def signup(self, username: str | None, password: str | None) -> User:
        """Register a new user.

        Raises MissingFieldError if either field is missing or empty,
        DuplicateUsernameError if the username is taken, StoreError if the
        store fails.
        """
        if not username or not password:
            raise MissingFieldError()
        user = self.store.create_user(User(username=username, hashed_password=self.hasher.hash(password)))
        logger.info("User registered: %s", username)
        return user

    def signin(self, username: str | None, password: str | None) -> TokenPair:
        """Check credentials and issue an access + refresh token pair.

        Unknown username and wrong password raise the same
        InvalidCredentialsError, and no tokens are issued for either.
        """
        if not username or not password:
            raise MissingFieldError()
        user = self.store.get_by_username(username)
        if user is None:
            # Equalize timing -- do NOT return before running bcrypt.
            self.hasher.dummy_verify(password)
            logger.info("Signin failed for unknown user")
            raise InvalidCredentialsError()
        if not self.hasher.verify(password, user.hashed_password):
            logger.info("Signin failed for %s: bad password", username)
            raise InvalidCredentialsError()
        logger.info("Signin succeeded for %s", username)
        return TokenPair(
            access_token=self.issuer.issue_access(user.username),
            refresh_token=self.issuer.issue_refresh(user.username),
        )

    # ------------------------------------------------------------------
    # Token flows
    # ------------------------------------------------------------------

    def refresh(self, token: str | None) -> str:
        """Mint a new access token for the identity in a valid refresh token.

        Raises UnauthenticatedError if no token was given, ForbiddenError if
        it does not verify under the refresh secret.
        """
        if not token:
            raise UnauthenticatedError()
        try:
            claims = self.verifier.verify_refresh(token)
        except ForbiddenError:
            logger.info("Refresh rejected: invalid refresh token")
            raise
        return self.issuer.issue_access(claims["username"])

    def authenticate(self, token: str | None) -> dict:
        """Return the verified claims of a bearer access token.

        Raises UnauthenticatedError if no token was given, ForbiddenError if
        it is invalid or expired.
        """
        if not token:
            raise UnauthenticatedError()
        return self.verifier.verify_access(token)
