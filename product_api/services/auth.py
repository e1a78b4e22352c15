"""Credential check and token issuance for the login endpoint."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from product_api.core.errors import InvalidCredentialsError
from product_api.core.security import create_access_token, dummy_password_hash, verify_password
from product_api.models import User
from product_api.schemas.auth import LoginResponse

if TYPE_CHECKING:
    from product_api.core.config import Settings

logger = logging.getLogger(__name__)


def authenticate(session: Session, username: str, password: str, settings: "Settings") -> User:
    """
    Return the user whose username matches exactly and whose password verifies.

    Raises InvalidCredentialsError for an unknown username or a wrong password; the
    two cases are indistinguishable to the caller. Every attempt is audit-logged
    with the username only.
    """
    user = session.query(User).filter(User.username == username).first()
    if user is None:
        # Pay the bcrypt cost anyway so response time does not reveal unknown usernames.
        verify_password(password, dummy_password_hash(settings.BCRYPT_ROUNDS))
        _audit_failure(username)
        raise InvalidCredentialsError()
    if not verify_password(password, user.password_hash):
        _audit_failure(username)
        raise InvalidCredentialsError()
    logger.info(
        "Login succeeded",
        extra={"username": username, "auth_status": "success", "role": user.role},
    )
    return user


def login(session: Session, username: str, password: str, settings: "Settings") -> LoginResponse:
    """Authenticate and issue a one-hour access token."""
    user = authenticate(session, username, password, settings)
    token, expires_at = create_access_token(user, settings)
    return LoginResponse(
        token=token,
        username=user.username,
        role=user.role,
        expiration=expires_at,
    )


def _audit_failure(username: str) -> None:
    logger.warning(
        "Login failed",
        extra={"username": username, "auth_status": "failure"},
    )
