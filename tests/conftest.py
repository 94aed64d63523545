import sys

import pytest
from fastapi.testclient import TestClient
from loguru import logger

from messaging_toolkit.api.config import DEFAULT_ALLOWED_ORIGIN, ServerSettings
from messaging_toolkit.api.server import create_app
from messaging_toolkit.message_database.controller import MessagingController
from messaging_toolkit.message_database.in_memory.message import create_seeded_message_database


@pytest.fixture
def allowed_origin():
    return DEFAULT_ALLOWED_ORIGIN


@pytest.fixture
def store():
    return create_seeded_message_database()


@pytest.fixture
def client(store, allowed_origin):
    app = create_app(MessagingController(store), ServerSettings(allowed_origin=allowed_origin))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def log_levels():
    """Collect the level name of every record logged during the test."""
    levels: list[str] = []
    handler_id = logger.add(lambda message: levels.append(message.record["level"].name), level="TRACE")
    yield levels
    logger.remove(handler_id)


@pytest.fixture
def restore_logger():
    """Put back loguru's default stderr sink after code that reconfigures it."""
    yield
    logger.remove()
    logger.add(sys.__stderr__)
