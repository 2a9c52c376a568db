"""Shared pytest fixtures for tripboard tests."""

import pytest
from fastapi.testclient import TestClient

from tripboard.core.config_loader import Settings
from tripboard.db.sqlite_store import TripStore
from tripboard.main import create_app


ADMIN_SECRET = "admin-s3cret"
TRUSTED_SECRET = "trusted-s3cret"
HEADER = "x-trip-secret"


@pytest.fixture
def settings(tmp_path):
    """Settings with both secrets configured and a throwaway database.

    _env_file=None keeps a developer's local .env out of the tests.
    """
    return Settings(
        _env_file=None,
        ADMIN_SECRET_KEY=ADMIN_SECRET,
        TRUSTED_SECRET_KEY=TRUSTED_SECRET,
        DB_PATH=str(tmp_path / "test_trip.sqlite3"),
        log_dir=str(tmp_path / "logs"),
    )


@pytest.fixture
def store(tmp_path):
    store = TripStore(str(tmp_path / "store.sqlite3"))
    yield store
    store.close()


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture
def admin_headers():
    return {HEADER: ADMIN_SECRET}


@pytest.fixture
def trusted_headers():
    return {HEADER: TRUSTED_SECRET}


@pytest.fixture
def stop_payload():
    return {
        "day": 1,
        "time": "09:30",
        "name": "Ben Thanh Market",
        "purpose": "food",
        "notes": "Go early",
        "latitude": 10.7725,
        "longitude": 106.6980,
    }
