"""Audit log entries."""

from __future__ import annotations

import datetime as dt

from pydantic import field_validator

from shift_planner.models.base import Record


class HistoryEntry(Record):
    """One human-readable line per mutation.

    Timestamps are stored as timezone-aware UTC. Naive values are taken as
    local time, so entries made by a naive clock still order correctly
    against entries loaded from ``...Z`` strings.
    """

    id: str
    timestamp: dt.datetime
    description: str

    @field_validator("timestamp")
    @classmethod
    def to_utc(cls, value: dt.datetime) -> dt.datetime:
        return value.astimezone(dt.timezone.utc)
