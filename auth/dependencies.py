"""
auth/dependencies.py -- FastAPI Depends() helpers for authentication.

get_auth_service() pulls the shared AuthService off app.state (wired by the
lifespan in api/main.py).

get_bearer_token() extracts the token from an "Authorization: Bearer <token>"
header, returning None when the header is absent or uses another scheme.

require_access_claims() wraps both and returns the verified access-token
claims. AuthError subclasses propagate to the exception handler in
api/main.py: no token -> 401, bad or expired token -> 403.

Layer rule: no imports from api/.
  auth/dependencies.py may import from fastapi (for Request/Depends) because
  this module is part of the FastAPI dependency injection system.
"""

from __future__ import annotations

from fastapi import Depends, Request

from auth.service import AuthService


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_bearer_token(request: Request) -> str | None:
    """Return the bearer token from the Authorization header, or None."""
    auth_header = request.headers.get("Authorization", "")
    parts = auth_header.split()
    if len(parts) < 2 or parts[0].lower() != "bearer":
        return None
    # Anything after the first token is ignored.
    return parts[1]


def require_access_claims(
    token: str | None = Depends(get_bearer_token),
    service: AuthService = Depends(get_auth_service),
) -> dict:
    """Require a valid access token. Raises UnauthenticatedError or ForbiddenError.

    Use as a FastAPI dependency:
        @router.get("/protected")
        async def route(claims: dict = Depends(require_access_claims)): ...
    """
    return service.authenticate(token)
