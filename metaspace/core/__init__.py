"""Core configuration, database session, security helpers and domain errors."""

from metaspace.core.config import get_settings, settings
from metaspace.core.database import get_db
from metaspace.core.errors import MetaspaceError

__all__ = ["MetaspaceError", "get_settings", "get_db", "settings"]
