"""Month calendar helpers for the shift planning grid."""

from __future__ import annotations

import calendar
import datetime as dt
from typing import Iterable

import pandas as pd

from shift_planner.models.roster import DepartmentName, Machine, Worker
from shift_planner.models.shift import SHIFT_TYPES, Shift
from shift_planner.views.listings import machines_in_department

WEEKDAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def month_days(year: int, month: int) -> list[dt.date]:
    """Every day of the month, in order."""
    num_days = calendar.monthrange(year, month)[1]
    return [dt.date(year, month, d) for d in range(1, num_days + 1)]


def shift_month(anchor: dt.date, delta: int) -> dt.date:
    """First day of the month ``delta`` months away from ``anchor``."""
    index = anchor.year * 12 + (anchor.month - 1) + delta
    return dt.date(index // 12, index % 12 + 1, 1)


def day_label(day: dt.date) -> str:
    """Column label such as ``5 Wed``."""
    return f"{day.day} {WEEKDAY_LABELS[day.weekday()]}"


def calendar_grid(
    shifts: Iterable[Shift],
    machines: Iterable[Machine],
    workers: Iterable[Worker],
    department: DepartmentName,
    year: int,
    month: int,
) -> pd.DataFrame:
    """Machines of a department against the days of a month.

    Each cell lists ``"<worker> (<shift type>)"`` entries of that
    machine and day, joined by newlines; empty cells hold "".
    """
    days = month_days(year, month)
    dept_machines = machines_in_department(machines, department)
    names = {w.id: w.name for w in workers}

    cells: dict[tuple[str, dt.date], list[str]] = {}
    machine_ids = {m.id for m in dept_machines}
    for s in shifts:
        if s.machine_id in machine_ids and s.date.year == year and s.date.month == month:
            label = f"{names.get(s.worker_id, s.worker_id)} ({SHIFT_TYPES[s.shift_type_id].name})"
            cells.setdefault((s.machine_id, s.date), []).append(label)

    data: list[dict[str, str]] = []
    for m in dept_machines:
        row: dict[str, str] = {"Machine": m.name}
        for d in days:
            row[day_label(d)] = "\n".join(cells.get((m.id, d), []))
        data.append(row)

    columns = ["Machine"] + [day_label(d) for d in days]
    df = pd.DataFrame(data, columns=columns)
    return df.set_index("Machine")
