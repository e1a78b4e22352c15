"""Pydantic request/response schemas."""

from product_api.schemas.auth import CurrentUser, LoginRequest, LoginResponse
from product_api.schemas.product import ProductCreate, ProductRead, ProductUpdate

__all__ = [
    "CurrentUser",
    "LoginRequest",
    "LoginResponse",
    "ProductCreate",
    "ProductRead",
    "ProductUpdate",
]
