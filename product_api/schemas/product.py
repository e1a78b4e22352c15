"""Pydantic schemas for product create/update payloads and responses."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from product_api.models.product import INT_COLUMN_MAX, NAME_MAX_LENGTH

PRICE_MAX = Decimal("1000")


class ProductBase(BaseModel):
    """Fields shared by create and update bodies."""

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Product name")
    price: Decimal = Field(
        ...,
        gt=0,
        le=PRICE_MAX,
        decimal_places=2,
        description="Unit price, greater than 0 and at most 1000",
    )
    stock: int = Field(..., ge=0, le=INT_COLUMN_MAX, description="Units in stock")

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip()
        return v


class ProductCreate(ProductBase):
    """Body for POST /products."""


class ProductUpdate(ProductBase):
    """Body for PUT /products/{id}. id is optional but must match the route when sent."""

    id: int | None = Field(default=None, description="Must equal the route id when present")


class ProductRead(BaseModel):
    """Product as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: Decimal
    stock: int

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)
