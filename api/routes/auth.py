"""
api/routes/auth.py -- Signup, signin, and token refresh endpoints.

Routes:
  POST /api/auth/signup          -- create a user; 201 with empty body
  POST /api/auth/signin          -- check credentials; access + refresh token pair
  POST /api/auth/tokens/refresh  -- exchange a refresh token for a new access token

All three are public. Failures are raised as AuthError subclasses by
AuthService and rendered by the exception handlers in api/main.py:
  400 missing_field, 401 invalid_credentials / unauthenticated,
  403 forbidden, 409 username_taken, 500 store_error.

Security:
  Cache-Control: no-store on every response that carries a token.
  Handlers are plain def (not async def) so bcrypt and the blocking store
  calls run in FastAPI's thread pool instead of on the event loop.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from api.models import CredentialsRequest, RefreshRequest, RefreshResponse, SigninResponse
from auth.dependencies import get_auth_service
from auth.service import AuthService

router = APIRouter()


def _no_store(content: dict) -> JSONResponse:
    resp = JSONResponse(status_code=200, content=content)
    resp.headers["Cache-Control"] = "no-store"
    return resp


@router.post("/auth/signup", status_code=201)
def signup(
    body: Optional[CredentialsRequest] = None,
    service: AuthService = Depends(get_auth_service),
) -> Response:
    """Register a new user. Duplicate usernames answer 409."""
    body = body or CredentialsRequest()
    service.signup(body.username, body.password)
    return Response(status_code=201)


@router.post("/auth/signin", response_model=SigninResponse)
def signin(
    body: Optional[CredentialsRequest] = None,
    service: AuthService = Depends(get_auth_service),
) -> JSONResponse:
    """Authenticate with username and password; return an access + refresh token pair.

    Wrong username and wrong password produce the same 401 so the response
    does not reveal which usernames exist.
    """
    body = body or CredentialsRequest()
    pair = service.signin(body.username, body.password)
    return _no_store(
        SigninResponse(
            access_token=pair.access_token,
            refresh_token=pair.refresh_token,
        ).model_dump(by_alias=True)
    )


@router.post("/auth/tokens/refresh", response_model=RefreshResponse)
def refresh_token(
    body: Optional[RefreshRequest] = None,
    service: AuthService = Depends(get_auth_service),
) -> JSONResponse:
    """Mint a new access token from a refresh token. 401 if absent, 403 if invalid."""
    token = body.token if body else None
    access_token = service.refresh(token)
    return _no_store(RefreshResponse(access_token=access_token).model_dump(by_alias=True))
