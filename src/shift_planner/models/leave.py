"""Leave request models."""

from __future__ import annotations

import datetime as dt
from enum import Enum

from pydantic import Field, ValidationInfo, field_serializer, field_validator, model_validator

from shift_planner.models.base import Record


class LeaveRequestType(str, Enum):
    VACATION = "vacation"
    PERMISSION = "permission"
    SICKNESS = "sickness"

    @classmethod
    def _missing_(cls, value):
        legacy = {"Ferie": cls.VACATION, "Permesso": cls.PERMISSION, "Malattia": cls.SICKNESS}
        return legacy.get(value)


class LeaveRequestStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @classmethod
    def _missing_(cls, value):
        legacy = {"In attesa": cls.PENDING, "Approvata": cls.APPROVED, "Rifiutata": cls.REJECTED}
        return legacy.get(value)


class LeaveRequestData(Record):
    """A worker's request as entered in the request form.

    A permission covers part of a single day, so it must carry an
    ordered ``start_time``/``end_time`` pair and ``start_date == end_date``.
    The time window is discarded for every other type.
    """

    worker_id: str = Field(min_length=1)
    start_date: dt.date
    end_date: dt.date
    type: LeaveRequestType = LeaveRequestType.VACATION
    start_time: dt.time | None = None
    end_time: dt.time | None = None
    notes: str | None = None

    @field_validator("start_time", "end_time")
    @classmethod
    def only_for_permission(cls, v: dt.time | None, info: ValidationInfo) -> dt.time | None:
        if info.data.get("type") != LeaveRequestType.PERMISSION:
            return None
        return v

    @field_serializer("start_time", "end_time")
    def serialize_hhmm(self, v: dt.time | None) -> str | None:
        return v.strftime("%H:%M") if v is not None else None

    @model_validator(mode="after")
    def check_period(self) -> LeaveRequestData:
        if self.start_date > self.end_date:
            raise ValueError("start_date cannot be after end_date")
        if self.type == LeaveRequestType.PERMISSION:
            if self.start_date != self.end_date:
                raise ValueError("a permission must start and end on the same day")
            if self.start_time is None or self.end_time is None:
                raise ValueError("a permission requires start_time and end_time")
            if self.start_time >= self.end_time:
                raise ValueError("start_time must be before end_time")
        return self


class LeaveRequest(LeaveRequestData):
    id: str
    status: LeaveRequestStatus = LeaveRequestStatus.PENDING
