"""Password hashing and JWT creation/verification for authentication."""

import uuid
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

if TYPE_CHECKING:
    from product_api.core.config import Settings
    from product_api.models.user import User

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# Tokens are valid for exactly one hour from issuance.
ACCESS_TOKEN_LIFETIME = timedelta(hours=1)

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache
def dummy_password_hash(rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash checked against when the username is unknown, so both failures cost the same."""
    return hash_password(uuid.uuid4().hex, rounds=rounds)


def create_access_token(
    user: "User",
    settings: "Settings",
    now: datetime | None = None,
) -> tuple[str, datetime]:
    """
    Create a signed JWT for user; return (token, expires_at).

    Claims: sub (user id), email, unique_name (username), role, jti, iat, exp,
    plus iss/aud when configured.
    """
    issued_at = now or datetime.now(UTC)
    expires_at = issued_at + ACCESS_TOKEN_LIFETIME
    payload: dict[str, Any] = {
        "sub": str(user.id),
        "email": user.email,
        "unique_name": user.username,
        "role": user.role,
        "jti": uuid.uuid4().hex,
        "iat": issued_at,
        "exp": expires_at,
    }
    if settings.JWT_ISSUER:
        payload["iss"] = settings.JWT_ISSUER
    if settings.JWT_AUDIENCE:
        payload["aud"] = settings.JWT_AUDIENCE
    token = jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )
    return token, expires_at


def decode_access_token(token: str, settings: "Settings") -> dict[str, Any]:
    """
    Decode and validate JWT; return the claims.
    Raises jwt.PyJWTError on invalid, expired or mis-addressed token.
    """
    options = {"require": ["sub", "role", "exp", "iat", "jti"]}
    return jwt.decode(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
        issuer=settings.JWT_ISSUER,
        audience=settings.JWT_AUDIENCE,
        options=options,
    )
