"""JWT login and auth guards (get_current_user, require_role)."""

from collections.abc import Callable
from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from product_api.core.config import Settings
from product_api.core.database import get_db
from product_api.core.errors import ForbiddenError, InvalidCredentialsError, UnauthorizedError
from product_api.core.security import decode_access_token
from product_api.models import Role
from product_api.schemas.auth import CurrentUser, LoginRequest, LoginResponse
from product_api.services import auth as auth_service

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Dependency: the Settings instance the app was built with."""
    return request.app.state.settings


def _unauthorized(error: UnauthorizedError | InvalidCredentialsError) -> HTTPException:
    return HTTPException(
        status_code=error.status_code,
        detail=error.message,
        headers={"WWW-Authenticate": "Bearer"},
    )


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> LoginResponse:
    """
    Authenticate with username and password; returns a JWT access token valid for one hour.
    Include the token in the Authorization header as: Bearer <token>
    """
    try:
        return auth_service.login(db, body.username, body.password, settings)
    except InvalidCredentialsError as e:
        raise _unauthorized(e) from e


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> CurrentUser:
    """Dependency: require valid Bearer JWT and return the identity it asserts. Raises 401 otherwise."""
    if credentials is None:
        raise _unauthorized(UnauthorizedError("Not authenticated"))
    try:
        payload = decode_access_token(credentials.credentials, settings)
    except jwt.PyJWTError:
        raise _unauthorized(UnauthorizedError("Invalid or expired token"))
    try:
        return CurrentUser(
            id=int(payload["sub"]),
            username=payload.get("unique_name", ""),
            email=payload.get("email", ""),
            role=payload["role"],
        )
    except (KeyError, TypeError, ValueError):
        raise _unauthorized(UnauthorizedError("Invalid token payload"))


def require_role(role: Role) -> Callable[[CurrentUser], CurrentUser]:
    """Build a guard dependency that admits only users holding role. Raises 403 otherwise."""

    def guard(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if current_user.role != role.value:
            error = ForbiddenError(f"{role.value} role required")
            raise HTTPException(status_code=error.status_code, detail=error.message)
        return current_user

    return guard


require_admin = require_role(Role.ADMIN)


@router.get("/me", response_model=CurrentUser)
def read_current_user(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Return the identity asserted by the caller's token."""
    return current_user
