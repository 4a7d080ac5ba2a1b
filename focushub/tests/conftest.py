import os

# Keep test runs off the rotating log file
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from fastapi.testclient import TestClient

from focushub.core.config import settings
from focushub.data_layer.memory.store import MemoryStore
from focushub.main import create_app


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def api():
    return settings.api_prefix


@pytest.fixture
def user_id():
    return settings.mock_user_id
