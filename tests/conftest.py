"""Common test fixtures."""

from __future__ import annotations

import datetime as dt

import pytest

from shift_planner.models.config import StoreConfig
from shift_planner.notifications.center import NotificationCenter
from shift_planner.store.domain_store import DomainStore
from shift_planner.store.storage import MemoryStorage

FIXED_NOW = dt.datetime(2024, 6, 10, 9, 30, 15)


class FakeClock:
    """Clock that advances one second per call."""

    def __init__(self, start: dt.datetime = FIXED_NOW) -> None:
        self.now = start

    def __call__(self) -> dt.datetime:
        current = self.now
        self.now = current + dt.timedelta(seconds=1)
        return current


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def notifications(clock) -> NotificationCenter:
    return NotificationCenter(clock=clock)


@pytest.fixture
def store(storage, notifications, clock) -> DomainStore:
    """Store seeded with the demo dataset for June 2024."""
    return DomainStore(storage=storage, notify=notifications, clock=clock)


@pytest.fixture
def empty_store(storage, notifications, clock) -> DomainStore:
    return DomainStore(
        storage=storage,
        notify=notifications,
        config=StoreConfig(seed_on_empty=False),
        clock=clock,
    )
