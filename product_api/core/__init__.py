"""Core app configuration, database and security."""

from product_api.core.config import Settings, get_settings
from product_api.core.database import get_db

__all__ = ["Settings", "get_settings", "get_db"]
