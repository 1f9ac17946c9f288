# flake8: noqa
import sys
from pathlib import Path

# Ensure project root is on sys.path so `shelf_api` can be imported when tests are run
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))  # noqa: E402

import pytest
from fastapi.testclient import TestClient  # noqa: E402

from shelf_api.app import create_app
from shelf_api.config import Settings
from shelf_api.seed import seed_collections
from shelf_api.store import memory_collections

DATA_DIR = Path(__file__).resolve().parent.parent / "data"

# bcrypt's minimum cost keeps the suite fast
TEST_ROUNDS = 4


@pytest.fixture
def settings():
    return Settings(
        environment="production",
        bcrypt_rounds=TEST_ROUNDS,
        store_backend="memory",
        seed_data=False,
        data_dir=DATA_DIR,
    )


@pytest.fixture
def collections():
    cols = memory_collections()
    seed_collections(cols, DATA_DIR, rounds=TEST_ROUNDS)
    return cols


@pytest.fixture
def app(settings, collections):
    return create_app(settings, collections=collections)


@pytest.fixture
def client(app):
    return TestClient(app)
