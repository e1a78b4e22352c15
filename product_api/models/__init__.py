"""SQLAlchemy ORM models."""

from product_api.models.base import Base
from product_api.models.product import Product
from product_api.models.user import Role, User

__all__ = ["Base", "Product", "Role", "User"]
