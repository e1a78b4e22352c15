"""Product CRUD endpoints. Reads are public; writes require the Admin role."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from product_api.api.auth import require_admin
from product_api.core.database import get_db
from product_api.core.errors import NotFoundError, ValidationFailedError
from product_api.schemas.auth import CurrentUser
from product_api.schemas.product import ProductCreate, ProductRead, ProductUpdate
from product_api.services import products as product_service

router = APIRouter()


def _http_error(error: NotFoundError | ValidationFailedError) -> HTTPException:
    return HTTPException(status_code=error.status_code, detail=error.message)


@router.get("", response_model=list[ProductRead])
def list_products(db: Annotated[Session, Depends(get_db)]) -> list[ProductRead]:
    """Return all products ordered by id."""
    return [ProductRead.model_validate(p) for p in product_service.list_products(db)]


@router.get("/{product_id}", response_model=ProductRead, name="get_product")
def get_product(
    product_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> ProductRead:
    try:
        product = product_service.get_product(db, product_id)
    except NotFoundError as e:
        raise _http_error(e) from e
    return ProductRead.model_validate(product)


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(
    body: ProductCreate,
    request: Request,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> ProductRead:
    """Create a product; the Location header points at the new resource."""
    product = product_service.create_product(db, body)
    response.headers["Location"] = str(request.url_for("get_product", product_id=product.id))
    return ProductRead.model_validate(product)


@router.put("/{product_id}", response_model=ProductRead)
def update_product(
    product_id: int,
    body: ProductUpdate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> ProductRead:
    """Replace name, price and stock of an existing product."""
    if body.id is not None and body.id != product_id:
        raise _http_error(ValidationFailedError("Product id in body does not match the route id."))
    try:
        product = product_service.update_product(db, product_id, body)
    except NotFoundError as e:
        raise _http_error(e) from e
    return ProductRead.model_validate(product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> Response:
    try:
        product_service.delete_product(db, product_id)
    except NotFoundError as e:
        raise _http_error(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
