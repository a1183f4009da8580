"""Shift models and the fixed catalogue of daily shift windows."""

from __future__ import annotations

import datetime as dt
from enum import Enum

from pydantic import BaseModel

from shift_planner.models.base import Record


class ShiftTypeName(str, Enum):
    """Daily time windows."""

    MATTINA = "mattina"
    POMERIGGIO = "pomeriggio"
    NOTTE = "notte"


class ShiftType(BaseModel):
    """Display data for a shift window."""

    id: ShiftTypeName
    name: str
    start_time: str
    end_time: str
    color: str


SHIFT_TYPES: dict[ShiftTypeName, ShiftType] = {
    ShiftTypeName.MATTINA: ShiftType(
        id=ShiftTypeName.MATTINA, name="Mattina", start_time="06:00", end_time="14:00", color="sky"
    ),
    ShiftTypeName.POMERIGGIO: ShiftType(
        id=ShiftTypeName.POMERIGGIO, name="Pomeriggio", start_time="14:00", end_time="22:00", color="amber"
    ),
    ShiftTypeName.NOTTE: ShiftType(
        id=ShiftTypeName.NOTTE, name="Notte", start_time="22:00", end_time="06:00", color="indigo"
    ),
}


class ShiftData(Record):
    """Values chosen when placing a worker on a machine."""

    date: dt.date
    machine_id: str
    worker_id: str
    shift_type_id: ShiftTypeName = ShiftTypeName.MATTINA


class Shift(ShiftData):
    id: str
    department_id: str
