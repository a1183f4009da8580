"""Tests for the notification center."""

from __future__ import annotations

import datetime as dt

from shift_planner.models.config import StoreConfig
from shift_planner.models.notification import Severity
from shift_planner.notifications.center import NotificationCenter, discard


class TestNotificationCenter:
    def test_notify_records_in_order(self, clock):
        center = NotificationCenter(clock=clock)
        center("Shift added successfully", Severity.SUCCESS)
        center.notify("Cannot delete", Severity.ERROR)

        assert [n.message for n in center.active] == ["Shift added successfully", "Cannot delete"]
        assert [n.id for n in center.active] == [1, 2]

    def test_default_severity_is_info(self, clock):
        center = NotificationCenter(clock=clock)
        center("hello")
        assert center.active[0].severity == Severity.INFO

    def test_string_severity_is_coerced(self, clock):
        center = NotificationCenter(clock=clock)
        item = center.notify("oops", "error")
        assert item.severity == Severity.ERROR

    def test_dismiss(self, clock):
        center = NotificationCenter(clock=clock)
        first = center.notify("a")
        center.notify("b")
        center.dismiss(first.id)
        assert [n.message for n in center.active] == ["b"]

    def test_expire_after_ttl(self):
        start = dt.datetime(2024, 6, 10, 9, 0, 0)
        center = NotificationCenter(ttl=dt.timedelta(seconds=5), clock=lambda: start)
        center.notify("a")

        assert center.expire(start + dt.timedelta(seconds=4)) == []
        expired = center.expire(start + dt.timedelta(seconds=5))
        assert [n.message for n in expired] == ["a"]
        assert center.active == []

    def test_clear(self, clock):
        center = NotificationCenter(clock=clock)
        center.notify("a")
        center.clear()
        assert center.active == []

    def test_discard_sink(self):
        assert discard("anything", Severity.ERROR) is None

    def test_ttl_from_config(self, clock):
        center = NotificationCenter.from_config(StoreConfig(notification_ttl_seconds=2.5), clock=clock)
        assert center.ttl == dt.timedelta(seconds=2.5)
