"""Database package."""

from .db import get_session, init_db, configure_engine, DatabaseSlot
from .models import StorageSlot

__all__ = ["get_session", "init_db", "configure_engine", "DatabaseSlot", "StorageSlot"]
