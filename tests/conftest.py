import random

import pytest
from fastapi.testclient import TestClient

from phonebook_api.app.core.store import Directory
from phonebook_api.app.main import create_app


@pytest.fixture
def directory():
    return Directory.seeded()


@pytest.fixture
def app(directory):
    return create_app(directory=directory, id_rng=random.Random(1234))


@pytest.fixture
def client(app):
    return TestClient(app)
