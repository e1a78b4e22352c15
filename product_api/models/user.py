"""ORM model for application users (auth and RBAC)."""

from enum import StrEnum

from sqlalchemy import Column, Integer, String

from product_api.models.base import Base


class Role(StrEnum):
    """Coarse authorization label asserted inside access tokens."""

    USER = "User"
    ADMIN = "Admin"


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    Created out of band (see scripts.create_user); the API only reads it.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, default="")
    role = Column(String(32), nullable=False, default=Role.USER.value)
