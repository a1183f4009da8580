"""Demo dataset used when storage holds nothing for a collection."""

from __future__ import annotations

import datetime as dt

from shift_planner.models.leave import LeaveRequest, LeaveRequestStatus, LeaveRequestType
from shift_planner.models.roster import Machine, MachineType, Worker, WorkerAvailability
from shift_planner.models.shift import Shift, ShiftTypeName

# (worker, machine, shift type, department) placed on each seeded day
_SEED_ROTATION = (
    ("w1", "m1", ShiftTypeName.MATTINA, "dep1"),
    ("w2", "m3", ShiftTypeName.POMERIGGIO, "dep1"),
    ("w3", "m5", ShiftTypeName.NOTTE, "dep3"),
)
SEED_DAYS = 14


def seed_workers() -> list[Worker]:
    return [
        Worker(id="w1", name="Mario Rossi", skills=[MachineType.INIEZIONE],
               availability=WorkerAvailability.FULL_TIME),
        Worker(id="w2", name="Luigi Verdi", skills=[MachineType.SOFFIAGGIO],
               availability=WorkerAvailability.PART_TIME),
        Worker(id="w3", name="Giovanni Bianchi", skills=[MachineType.SERIGRAFIA],
               availability=WorkerAvailability.FULL_TIME),
        Worker(id="w4", name="Paola Neri", skills=[MachineType.INIEZIONE, MachineType.SOFFIAGGIO],
               availability=WorkerAvailability.ON_CALL),
    ]


def seed_machines() -> list[Machine]:
    return [
        Machine(id="m1", name="Iniezione 1", type=MachineType.INIEZIONE, department_id="dep1"),
        Machine(id="m2", name="Iniezione 2", type=MachineType.INIEZIONE, department_id="dep1"),
        Machine(id="m3", name="Soffiaggio 1", type=MachineType.SOFFIAGGIO, department_id="dep1"),
        Machine(id="m4", name="Vetro 1", type=MachineType.SOFFIAGGIO, department_id="dep2"),
        Machine(id="m5", name="Serigrafia 1", type=MachineType.SERIGRAFIA, department_id="dep3"),
    ]


def seed_shifts(today: dt.date) -> list[Shift]:
    """Two weeks of shifts from the first day of ``today``'s month."""
    shifts: list[Shift] = []
    seq = 1
    for day in range(1, SEED_DAYS + 1):
        date = today.replace(day=day)
        for worker_id, machine_id, shift_type, department_id in _SEED_ROTATION:
            shifts.append(
                Shift(
                    id=f"s{seq}",
                    date=date,
                    machine_id=machine_id,
                    worker_id=worker_id,
                    shift_type_id=shift_type,
                    department_id=department_id,
                )
            )
            seq += 1
    return shifts


def seed_leave_requests(today: dt.date) -> list[LeaveRequest]:
    return [
        LeaveRequest(
            id="lr1",
            worker_id="w1",
            start_date=today.replace(day=20),
            end_date=today.replace(day=22),
            type=LeaveRequestType.VACATION,
            status=LeaveRequestStatus.PENDING,
        ),
        LeaveRequest(
            id="lr2",
            worker_id="w2",
            start_date=today.replace(day=18),
            end_date=today.replace(day=18),
            type=LeaveRequestType.PERMISSION,
            status=LeaveRequestStatus.APPROVED,
            start_time=dt.time(9, 0),
            end_time=dt.time(11, 0),
        ),
    ]


def seed_collections(today: dt.date) -> dict[str, list]:
    """Seed values keyed by storage key."""
    return {
        "machines": seed_machines(),
        "workers": seed_workers(),
        "shifts": seed_shifts(today),
        "history": [],
        "leaveRequests": seed_leave_requests(today),
    }
