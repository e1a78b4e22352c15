"""ORM model for catalogue products."""

from sqlalchemy import Column, Integer, Numeric, String

from product_api.models.base import Base

NAME_MAX_LENGTH = 100
# Largest value an Integer column holds on every supported backend (int4).
INT_COLUMN_MAX = 2**31 - 1


class Product(Base):
    """Product exposed through the CRUD endpoints. No soft delete or versioning."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(NAME_MAX_LENGTH), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)
