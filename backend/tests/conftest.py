import os

# Keep test runs from writing rotating log files
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from fastapi.testclient import TestClient

from travelmate.seed import seed
from travelmate.services.storage import MemStorage


@pytest.fixture
def store():
    s = MemStorage()
    seed(s)
    return s


@pytest.fixture
def empty_store():
    return MemStorage()


@pytest.fixture
def client():
    from travelmate.main import app

    # Entering the client runs the lifespan, so every test gets a fresh store
    with TestClient(app) as c:
        yield c
