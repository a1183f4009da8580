"""Notification sink and the transient display list behind it."""

from __future__ import annotations

import datetime as dt
import itertools
from typing import Callable, Protocol

from shift_planner.models.config import StoreConfig
from shift_planner.models.notification import Notification, Severity

Clock = Callable[[], dt.datetime]


class NotificationSink(Protocol):
    """Fire-and-forget receiver of ``(message, severity)`` pairs."""

    def __call__(self, message: str, severity: Severity = Severity.INFO) -> None: ...


def discard(message: str, severity: Severity = Severity.INFO) -> None:
    """Sink that drops every notification."""


class NotificationCenter:
    """Keeps the notifications currently on display.

    Entries are dismissed by the user or expire ``ttl`` after creation.
    Nothing here touches domain state.
    """

    def __init__(self, ttl: dt.timedelta = dt.timedelta(seconds=5), clock: Clock | None = None) -> None:
        self.ttl = ttl
        self._clock = clock or dt.datetime.now
        self._ids = itertools.count(1)
        self._items: list[Notification] = []

    @classmethod
    def from_config(cls, config: StoreConfig, clock: Clock | None = None) -> NotificationCenter:
        return cls(ttl=dt.timedelta(seconds=config.notification_ttl_seconds), clock=clock)

    def __call__(self, message: str, severity: Severity = Severity.INFO) -> None:
        self.notify(message, severity)

    def notify(self, message: str, severity: Severity = Severity.INFO) -> Notification:
        item = Notification(
            id=next(self._ids),
            message=message,
            severity=Severity(severity),
            created_at=self._clock(),
        )
        self._items.append(item)
        return item

    @property
    def active(self) -> list[Notification]:
        return list(self._items)

    def dismiss(self, notification_id: int) -> None:
        self._items = [n for n in self._items if n.id != notification_id]

    def expire(self, now: dt.datetime | None = None) -> list[Notification]:
        """Drop notifications older than ``ttl``; returns the removed ones."""
        now = now or self._clock()
        expired = [n for n in self._items if now - n.created_at >= self.ttl]
        if expired:
            gone = {n.id for n in expired}
            self._items = [n for n in self._items if n.id not in gone]
        return expired

    def clear(self) -> None:
        self._items.clear()
