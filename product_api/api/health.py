"""Liveness endpoint with database connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from product_api.core.database import check_db_connected, get_db

router = APIRouter()


@router.get("/health", response_class=PlainTextResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> PlainTextResponse:
    """
    Return 'Healthy' when the database answers, 'Unhealthy' (503) otherwise.
    Used by load balancers and monitoring.
    """
    if check_db_connected(db):
        return PlainTextResponse("Healthy")
    return PlainTextResponse("Unhealthy", status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
