from sqlalchemy import Column, String, Text, DateTime
from datetime import datetime, timezone
from taskboard.core.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class StorageEntry(Base):
    __tablename__ = "storage_entries"

    key = Column(String, primary_key=True, index=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)
