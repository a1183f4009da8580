"""Sorted and filtered listings derived from store collections."""

from __future__ import annotations

import datetime as dt
from typing import Iterable

from shift_planner.models.leave import LeaveRequest, LeaveRequestType
from shift_planner.models.roster import (
    DepartmentName,
    Machine,
    Worker,
    WorkerAvailability,
    department_by_name,
)
from shift_planner.models.shift import Shift


def shifts_for_worker(shifts: Iterable[Shift], worker_id: str) -> list[Shift]:
    """Shifts assigned to a worker, newest date first."""
    return sorted(
        (s for s in shifts if s.worker_id == worker_id), key=lambda s: s.date, reverse=True
    )


def shifts_for_machine(shifts: Iterable[Shift], machine_id: str) -> list[Shift]:
    """Shifts planned on a machine, newest date first."""
    return sorted(
        (s for s in shifts if s.machine_id == machine_id), key=lambda s: s.date, reverse=True
    )


def shifts_in_range(shifts: Iterable[Shift], start: dt.date, end: dt.date) -> list[Shift]:
    """Shifts dated between ``start`` and ``end`` inclusive, oldest first."""
    return sorted((s for s in shifts if start <= s.date <= end), key=lambda s: s.date)


def shifts_on(shifts: Iterable[Shift], day: dt.date, machine_id: str) -> list[Shift]:
    """Shifts of one calendar cell."""
    return [s for s in shifts if s.date == day and s.machine_id == machine_id]


def sorted_leave_requests(requests: Iterable[LeaveRequest]) -> list[LeaveRequest]:
    return sorted(requests, key=lambda r: r.start_date, reverse=True)


def qualified_workers(workers: Iterable[Worker], machine: Machine) -> list[Worker]:
    """Workers whose skills cover the machine's type."""
    return [w for w in workers if w.can_operate(machine.type)]


def machines_in_department(
    machines: Iterable[Machine], department: DepartmentName
) -> list[Machine]:
    dep = department_by_name(department)
    return sorted((m for m in machines if m.department_id == dep.id), key=lambda m: m.name)


def workers_by_availability(
    workers: Iterable[Worker], availability: WorkerAvailability | None = None
) -> list[Worker]:
    """Workers with the given availability; all of them when None."""
    if availability is None:
        return list(workers)
    return [w for w in workers if w.availability == availability]


def leave_period_label(request: LeaveRequest) -> str:
    """Short period text, e.g. ``18/06/24 (09:00 - 11:00)``."""
    start = request.start_date.strftime("%d/%m/%y")
    end = request.end_date.strftime("%d/%m/%y")
    if request.type == LeaveRequestType.PERMISSION and request.start_time and request.end_time:
        return (
            f"{start} ({request.start_time.strftime('%H:%M')} - "
            f"{request.end_time.strftime('%H:%M')})"
        )
    if start == end:
        return start
    return f"{start} - {end}"
