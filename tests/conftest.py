"""Shared fixtures: stores, a sample user and a fixed clock."""

import os

# keep config away from any real Mongo deployment
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("APP_TIMEZONE", "UTC")

from datetime import datetime

import mongomock
import pytest
import pytz

from core.models import User
from core.storage import MemoryStore, MongoStore


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def mongo_store():
    client = mongomock.MongoClient()
    return MongoStore(client["glrs_test"]["local_storage"])


@pytest.fixture(params=["memory", "mongo"])
def store(request):
    if request.param == "memory":
        return MemoryStore()
    return MongoStore(mongomock.MongoClient()["glrs_test"]["local_storage"])


@pytest.fixture
def fixed_now():
    return pytz.utc.localize(datetime(2024, 1, 15, 14, 30))


@pytest.fixture
def user():
    return User(
        id="1705329000000",
        email="sam@example.com",
        name="Sam",
        recovery_date="2023-12-01",
        joined_date="2024-01-15T14:30:00+00:00",
    )
