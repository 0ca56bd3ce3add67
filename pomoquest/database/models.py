"""SQLAlchemy ORM models for PomoQuest."""

from datetime import datetime, timezone
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import DeclarativeBase


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class StorageSlot(Base):
    """A named blob of text, the app's local-storage equivalent.

    Progress lives in a single row keyed by ``config.STORAGE_KEY``.
    """

    __tablename__ = "storage"

    key = Column(String(64), primary_key=True)
    value = Column(Text, nullable=False, default="")
    updated_at = Column(DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)

    def __repr__(self) -> str:
        return f"<StorageSlot key={self.key} size={len(self.value or '')}>"
