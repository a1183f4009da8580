"""Summary statistics for the dashboard."""

from __future__ import annotations

from typing import Iterable

import pandas as pd
from pydantic import BaseModel

from shift_planner.models.config import StoreConfig
from shift_planner.models.roster import Department, Machine, Worker
from shift_planner.models.shift import Shift
from shift_planner.models.snapshot import StoreSnapshot


class DashboardTotals(BaseModel):
    total_shifts: int
    total_workers: int
    total_machines: int


def _shift_frame(shifts: Iterable[Shift]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"worker_id": s.worker_id, "machine_id": s.machine_id, "department_id": s.department_id}
            for s in shifts
        ],
        columns=["worker_id", "machine_id", "department_id"],
    )


def totals(
    shifts: Iterable[Shift], workers: Iterable[Worker], machines: Iterable[Machine]
) -> DashboardTotals:
    return DashboardTotals(
        total_shifts=len(list(shifts)),
        total_workers=len(list(workers)),
        total_machines=len(list(machines)),
    )


def shifts_by_department(
    shifts: Iterable[Shift], departments: Iterable[Department]
) -> pd.DataFrame:
    """Shift count per department name, departments without shifts left out."""
    counts = _shift_frame(shifts)["department_id"].value_counts()
    rows = [
        {"name": d.name.value, "value": int(counts.get(d.id, 0))}
        for d in departments
    ]
    df = pd.DataFrame(rows, columns=["name", "value"])
    return df[df["value"] > 0].reset_index(drop=True)


def hours_by_worker(
    shifts: Iterable[Shift], workers: Iterable[Worker], hours_per_shift: int
) -> pd.DataFrame:
    """Planned hours per worker, highest first, idle workers left out."""
    counts = _shift_frame(shifts)["worker_id"].value_counts()
    rows = [
        {"name": w.name, "hours": int(counts.get(w.id, 0)) * hours_per_shift}
        for w in workers
    ]
    df = pd.DataFrame(rows, columns=["name", "hours"])
    df = df[df["hours"] > 0]
    return df.sort_values("hours", ascending=False, kind="stable").reset_index(drop=True)


def shifts_by_machine(shifts: Iterable[Shift], machines: Iterable[Machine]) -> pd.DataFrame:
    """Shift count per machine, busiest first, unused machines left out."""
    counts = _shift_frame(shifts)["machine_id"].value_counts()
    rows = [{"name": m.name, "shifts": int(counts.get(m.id, 0))} for m in machines]
    df = pd.DataFrame(rows, columns=["name", "shifts"])
    df = df[df["shifts"] > 0]
    return df.sort_values("shifts", ascending=False, kind="stable").reset_index(drop=True)


def dashboard_summary(
    snapshot: StoreSnapshot, config: StoreConfig | None = None
) -> dict[str, object]:
    """All dashboard figures for one snapshot of the store.

    Hours are counted with ``config.hours_per_shift``; pass the store's
    own ``config`` to keep the two in step.
    """
    config = config or StoreConfig()
    return {
        "totals": totals(snapshot.shifts, snapshot.workers, snapshot.machines),
        "shifts_by_department": shifts_by_department(snapshot.shifts, snapshot.departments),
        "hours_by_worker": hours_by_worker(
            snapshot.shifts, snapshot.workers, config.hours_per_shift
        ),
        "shifts_by_machine": shifts_by_machine(snapshot.shifts, snapshot.machines),
    }
