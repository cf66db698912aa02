import asyncio
import logging

from taskboard.core.logging_setup import setup_logging
from taskboard.main import create_client
from taskboard.schemas.task import TaskCreate


def test_create_client_restores_anonymous(session_factory):
    client = create_client(session_factory=session_factory, latency=0, configure_logging=False)
    assert client.session.state.loading is False
    assert client.session.state.is_authenticated is False


def test_client_end_to_end(session_factory):
    """Login, création, puis redémarrage du client"""
    routes = []
    client = create_client(session_factory=session_factory, navigate=routes.append, latency=0, configure_logging=False)
    token = client.session.login("user@example.com", "abc").token
    asyncio.run(client.tasks.create(token, TaskCreate(title="T")))

    restarted = create_client(session_factory=session_factory, latency=0, configure_logging=False)
    assert restarted.session.state.is_authenticated is True
    tasks = asyncio.run(restarted.tasks.list(restarted.session.require_token()))
    assert [t.title for t in tasks] == ["T"]
    assert routes == ["/"]


def test_setup_logging_is_idempotent():
    logger = setup_logging("DEBUG")
    setup_logging("INFO")
    console = [h for h in logger.handlers if h.get_name() == "taskboard-console"]
    assert len(console) == 1
    assert logger.level == logging.INFO
