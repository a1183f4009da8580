"""User feedback messages."""

from __future__ import annotations

import datetime as dt
from enum import Enum

from pydantic import BaseModel


class Severity(str, Enum):
    """Severity levels of a notification."""

    SUCCESS = "success"
    INFO = "info"
    ERROR = "error"


class Notification(BaseModel):
    """A transient message shown to the planner."""

    id: int
    message: str
    severity: Severity = Severity.INFO
    created_at: dt.datetime
