"""Database module."""

from fba_planner.db.base import get_db
from fba_planner.db.models import CatalogEntry

__all__ = ["get_db", "CatalogEntry"]
