"""
api/routes/protected.py -- Example resource guarded by a bearer access token.

Routes:
  GET /api/protected  -- 200 with the caller's verified claims;
                         401 without a token, 403 with a bad or expired one.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from api.models import ProtectedResponse
from auth.dependencies import require_access_claims

router = APIRouter()


@router.get("/protected", response_model=ProtectedResponse)
async def protected(claims: dict = Depends(require_access_claims)) -> ProtectedResponse:
    return ProtectedResponse(message="Access granted", user=claims)
