"""Full state of the domain store."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from shift_planner.models.history import HistoryEntry
from shift_planner.models.leave import LeaveRequest
from shift_planner.models.roster import DEPARTMENTS, Department, Machine, Worker
from shift_planner.models.shift import Shift

# Storage key -> snapshot field
COLLECTION_KEYS: dict[str, str] = {
    "departments": "departments",
    "machines": "machines",
    "workers": "workers",
    "shifts": "shifts",
    "history": "history",
    "leaveRequests": "leave_requests",
}


class StoreSnapshot(BaseModel):
    """Every collection held by the store at one point in time."""

    departments: list[Department] = Field(default_factory=lambda: list(DEPARTMENTS))
    machines: list[Machine] = Field(default_factory=list)
    workers: list[Worker] = Field(default_factory=list)
    shifts: list[Shift] = Field(default_factory=list)
    history: list[HistoryEntry] = Field(default_factory=list)
    leave_requests: list[LeaveRequest] = Field(default_factory=list)

    def to_records(self) -> dict[str, list[dict[str, Any]]]:
        """Serialize each collection as a list of flat records keyed by storage key."""
        return {
            key: [item.to_record() for item in getattr(self, field)]
            for key, field in COLLECTION_KEYS.items()
        }
