"""
auth/errors.py -- Typed failures for the signup, signin, and token flows.

Every failure the auth layer can produce is an AuthError subclass carrying the
HTTP status and machine-readable code the gateway should return. The api/
exception handler renders them; auth/ itself never builds HTTP responses.

401 and 403 messages are deliberately generic so a client cannot tell which
check (signature, expiry, unknown user, wrong password) failed.

Layer rule: no imports from api/.
"""

from __future__ import annotations


class AuthError(Exception):
    """Base class for all auth-layer failures."""

    status_code: int = 500
    code: str = "auth_error"
    message: str = "Authentication failed."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingFieldError(AuthError):
    """A required request field was absent or empty."""

    status_code = 400
    code = "missing_field"
    message = "Username and password are required."


class InvalidCredentialsError(AuthError):
    """Unknown username or wrong password. Same error for both."""

    status_code = 401
    code = "invalid_credentials"
    message = "Invalid username or password."


class UnauthenticatedError(AuthError):
    """No token was presented."""

    status_code = 401
    code = "unauthenticated"
    message = "Authentication required."


class ForbiddenError(AuthError):
    """A token was presented but is malformed, badly signed, or expired."""

    status_code = 403
    code = "forbidden"
    message = "Access denied."


class DuplicateUsernameError(AuthError):
    status_code = 409
    code = "username_taken"
    message = "Username is already registered."


class StoreError(AuthError):
    """The credential store failed. Not retried."""

    status_code = 500
    code = "store_error"
    message = "Could not complete the request."
