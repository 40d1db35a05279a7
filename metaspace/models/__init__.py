"""SQLAlchemy ORM models."""

from metaspace.models.base import Base
from metaspace.models.catalog import Avatar, Element, Map, MapElement
from metaspace.models.user import User

__all__ = ["Avatar", "Base", "Element", "Map", "MapElement", "User"]
