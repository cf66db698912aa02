import sys
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from taskboard.core.database import Base
from taskboard.models.storage_entry import StorageEntry  # noqa: F401
from taskboard.services.storage import StorageArea
from taskboard.services.session_service import SessionManager
from taskboard.services.task_store import TaskStore

# Engine SQLite pour les tests
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///./test.db"
test_engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

# Latence courte mais non nulle pour que updated_at progresse
TEST_LATENCY = 0.01


@pytest.fixture(autouse=True)
def setup_teardown():
    """Crée et nettoie la DB avant/après chaque test"""
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def session_factory():
    return TestingSessionLocal


@pytest.fixture
def storage(session_factory):
    return StorageArea(session_factory)


@pytest.fixture
def routes():
    """Routes demandées par le session manager"""
    return []


@pytest.fixture
def session_manager(storage, routes):
    manager = SessionManager(storage, navigate=routes.append)
    manager.restore()
    return manager


@pytest.fixture
def task_store(storage):
    return TaskStore(storage, latency=TEST_LATENCY)


@pytest.fixture
def auth_token(session_manager):
    """Ouvre une session et retourne son token"""
    session_manager.login("test@example.com", "pass123")
    return session_manager.token
