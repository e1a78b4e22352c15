"""Request/response schemas for auth endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from product_api.core.security import PASSWORD_MAX_LEN, USERNAME_MAX_LEN, USERNAME_MIN_LEN


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(
        ..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN, description="Username"
    )
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")


class LoginResponse(BaseModel):
    """JWT access token returned after successful login."""

    token: str = Field(..., description="JWT access token; send as 'Authorization: Bearer <token>'")
    username: str
    role: str
    expiration: datetime = Field(..., description="UTC instant after which the token is rejected")


class CurrentUser(BaseModel):
    """Authenticated identity decoded from the access token."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    role: str
