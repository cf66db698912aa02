"""Durable key-value storage area backed by the storage_entries table."""

import logging
from typing import Optional

from sqlalchemy.orm import sessionmaker

from taskboard.core.database import SessionLocal
from taskboard.models.storage_entry import StorageEntry

logger = logging.getLogger(__name__)

# Clés utilisées par la session et le task store
TOKEN_KEY = "token"
USER_KEY = "user"
TASKS_KEY = "tasks"


class StorageArea:
    """get / set / remove sur des valeurs texte, une transaction par appel."""

    def __init__(self, session_factory: sessionmaker = None):
        self._session_factory = session_factory or SessionLocal

    def get(self, key: str) -> Optional[str]:
        db = self._session_factory()
        try:
            entry = db.get(StorageEntry, key)
            return entry.value if entry is not None else None
        finally:
            db.close()

    def set(self, key: str, value: str) -> None:
        db = self._session_factory()
        try:
            entry = db.get(StorageEntry, key)
            if entry is None:
                db.add(StorageEntry(key=key, value=value))
            else:
                entry.value = value
            db.commit()
        finally:
            db.close()
        logger.debug(f"Stored key={key} size={len(value)}")

    def remove(self, key: str) -> None:
        db = self._session_factory()
        try:
            entry = db.get(StorageEntry, key)
            if entry is not None:
                db.delete(entry)
                db.commit()
        finally:
            db.close()
