from dataclasses import dataclass
from typing import Callable, Optional

from sqlalchemy.orm import sessionmaker

from taskboard.core.database import SessionLocal, init_db
from taskboard.core.logging_setup import setup_logging
from taskboard.core.security import TokenStrategy, get_token_strategy
from taskboard.services.session_service import SessionManager
from taskboard.services.storage import StorageArea
from taskboard.services.task_store import TaskStore


@dataclass
class TaskboardClient:
    storage: StorageArea
    session: SessionManager
    tasks: TaskStore


def create_client(
    session_factory: sessionmaker = None,
    tokens: TokenStrategy = None,
    navigate: Optional[Callable[[str], None]] = None,
    latency: Optional[float] = None,
    configure_logging: bool = True,
) -> TaskboardClient:
    """Assemble storage, session manager and task store, then restore the session."""
    if configure_logging:
        setup_logging()

    session_factory = session_factory or SessionLocal
    # Init DB
    init_db(bind=session_factory.kw["bind"])

    storage = StorageArea(session_factory)
    tokens = tokens or get_token_strategy()
    client = TaskboardClient(
        storage=storage,
        session=SessionManager(storage, tokens=tokens, navigate=navigate),
        tasks=TaskStore(storage, tokens=tokens, latency=latency),
    )
    client.session.restore()
    return client
