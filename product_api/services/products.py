"""Product CRUD. Each write touches exactly one row and commits on its own."""

import logging

from sqlalchemy.orm import Session

from product_api.core.errors import NotFoundError
from product_api.models import Product
from product_api.models.product import INT_COLUMN_MAX
from product_api.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


def list_products(session: Session) -> list[Product]:
    return session.query(Product).order_by(Product.id).all()


def get_product(session: Session, product_id: int) -> Product:
    """Return the product or raise NotFoundError. Ids outside the column range cannot exist."""
    if not 1 <= product_id <= INT_COLUMN_MAX:
        raise NotFoundError(f"Product {product_id} not found.")
    product = session.get(Product, product_id)
    if product is None:
        raise NotFoundError(f"Product {product_id} not found.")
    return product


def create_product(session: Session, data: ProductCreate) -> Product:
    product = Product(name=data.name, price=data.price, stock=data.stock)
    session.add(product)
    session.commit()
    session.refresh(product)
    logger.info("Product created", extra={"product_id": product.id})
    return product


def update_product(session: Session, product_id: int, data: ProductUpdate) -> Product:
    """Overwrite name, price and stock. Applying the same update twice yields the same row."""
    product = get_product(session, product_id)
    product.name = data.name
    product.price = data.price
    product.stock = data.stock
    session.commit()
    session.refresh(product)
    logger.info("Product updated", extra={"product_id": product.id})
    return product


def delete_product(session: Session, product_id: int) -> None:
    product = get_product(session, product_id)
    session.delete(product)
    session.commit()
    logger.info("Product deleted", extra={"product_id": product_id})
