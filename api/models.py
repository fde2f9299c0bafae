"""
API request and response models for the token auth service.

These Pydantic v2 models define the HTTP transport contract. They are
intentionally separate from the dataclasses in auth/models.py, which own the
internal domain representation. Route handlers map between the two.

Wire names are camelCase (accessToken, refreshToken); Python attributes stay
snake_case and are exposed through serialization aliases.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Request models
#
# Every field is Optional so that a missing field reaches the service layer,
# which answers with a 400 missing_field error instead of FastAPI's 422.
# ---------------------------------------------------------------------------


class CredentialsRequest(BaseModel):
    """Request body for POST /api/auth/signup and POST /api/auth/signin."""

    username: Optional[str] = Field(default=None, max_length=255)
    # No length cap: PasswordHasher truncates to the 72 bytes bcrypt reads.
    password: Optional[str] = None


class RefreshRequest(BaseModel):
    """Request body for POST /api/auth/tokens/refresh."""

    token: Optional[str] = None


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class SigninResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    access_token: str = Field(serialization_alias="accessToken")
    refresh_token: str = Field(serialization_alias="refreshToken")


class RefreshResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    access_token: str = Field(serialization_alias="accessToken")


class ProtectedResponse(BaseModel):
    """Response for GET /api/protected.

    user is the verified access-token claim set: username, iat, exp.
    """

    model_config = ConfigDict(frozen=True)

    message: str
    user: dict


class ErrorDetail(BaseModel):
    """Machine-readable error payload."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str


class ErrorResponse(BaseModel):
    """Top-level error envelope returned on 4xx/5xx responses."""

    model_config = ConfigDict(frozen=True)

    error: ErrorDetail


class HealthResponse(BaseModel):
    """Response for GET /api/health."""

    model_config = ConfigDict(frozen=True)

    status: str = "healthy"
    version: str
    components: dict[str, str]
