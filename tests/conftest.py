from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from roster_tracker.container import build_container
from roster_tracker.main import create_app
from roster_tracker.roster.store import RosterStore
from roster_tracker.storage.memory_store import InMemoryKeyValueStore


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


class CountingIds:
    def __init__(self):
        self.issued = 0

    def __call__(self) -> str:
        self.issued += 1
        return f"r{self.issued}"


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 3, 2, 9, 15, 0)


@pytest.fixture
def clock(fixed_now) -> FakeClock:
    return FakeClock(fixed_now)


@pytest.fixture
def ids() -> CountingIds:
    return CountingIds()


@pytest.fixture
def storage() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def store(storage, clock, ids) -> RosterStore:
    return RosterStore(storage, clock=clock, id_factory=ids)


@pytest.fixture
def container(storage, clock, ids):
    return build_container(storage_config={"backend": "memory"}, storage=storage, clock=clock, id_factory=ids)


@pytest.fixture
def app():
    return create_app("config.testing")


@pytest.fixture
def client(app):
    return app.test_client()
