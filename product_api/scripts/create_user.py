"""
Create a user (e.g. first admin). Run from project root:
  python -m product_api.scripts.create_user USERNAME PASSWORD EMAIL [role]
Example:
  python -m product_api.scripts.create_user admin your-secure-password admin@example.com Admin
"""
import argparse
import sys

from sqlalchemy.orm import Session

from product_api.core.config import get_settings
from product_api.core.database import build_engine, build_session_factory, init_db
from product_api.core.security import (
    BCRYPT_ROUNDS,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
    hash_password,
)
from product_api.models import Role, User


def create_user(
    db: Session,
    username: str,
    password: str,
    email: str,
    role: Role = Role.USER,
    rounds: int = BCRYPT_ROUNDS,
) -> User:
    """Insert a user with a bcrypt hash. Raises ValueError on bad input or duplicate username."""
    username = username.strip()
    if not USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN:
        raise ValueError("Invalid username length.")
    if len(password) < PASSWORD_MIN_LEN or len(password) > PASSWORD_MAX_LEN:
        raise ValueError(f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.")
    if db.query(User).filter(User.username == username).first():
        raise ValueError(f"User '{username}' already exists.")
    user = User(
        username=username,
        password_hash=hash_password(password, rounds=rounds),
        email=email.strip(),
        role=role.value,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a Product API user (no registration endpoint).")
    parser.add_argument("username", help=f"Username (1-{USERNAME_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("role", nargs="?", default=Role.USER.value, choices=[r.value for r in Role])
    args = parser.parse_args()

    settings = get_settings()
    engine = build_engine(settings)
    init_db(engine)
    db = build_session_factory(engine)()
    try:
        create_user(
            db,
            args.username,
            args.password,
            args.email,
            role=Role(args.role),
            rounds=settings.BCRYPT_ROUNDS,
        )
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 1
    finally:
        db.close()
        engine.dispose()
    print(f"Created user '{args.username.strip()}' with role '{args.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
