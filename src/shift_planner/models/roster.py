"""Department, machine and worker models."""

from __future__ import annotations

from enum import Enum

from pydantic import Field, field_validator

from shift_planner.models.base import Record


class DepartmentName(str, Enum):
    """Fixed organizational groupings."""

    PLASTICA = "Plastica"
    VETRO = "Vetro"
    SERIGRAFIA = "Serigrafia"


class MachineType(str, Enum):
    """Machine families; also the unit of worker skill."""

    INIEZIONE = "Iniezione"
    SOFFIAGGIO = "Soffiaggio"
    SERIGRAFIA = "Serigrafia"


class WorkerAvailability(str, Enum):
    """Contract type of a worker."""

    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    ON_CALL = "on-call"

    @classmethod
    def _missing_(cls, value):
        legacy = {"Full-time": cls.FULL_TIME, "Part-time": cls.PART_TIME, "A chiamata": cls.ON_CALL}
        return legacy.get(value)


class Department(Record):
    id: str
    name: DepartmentName


DEPARTMENTS: tuple[Department, ...] = (
    Department(id="dep1", name=DepartmentName.PLASTICA),
    Department(id="dep2", name=DepartmentName.VETRO),
    Department(id="dep3", name=DepartmentName.SERIGRAFIA),
)

DEPARTMENT_IDS = frozenset(d.id for d in DEPARTMENTS)


def department_by_name(name: DepartmentName) -> Department:
    for dep in DEPARTMENTS:
        if dep.name == name:
            return dep
    raise KeyError(f"Unknown department: {name}")


class MachineData(Record):
    """User-supplied values for a new machine."""

    name: str = Field(min_length=1)
    type: MachineType
    department_id: str

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name is required")
        return v

    @field_validator("department_id")
    @classmethod
    def known_department(cls, v: str) -> str:
        if v not in DEPARTMENT_IDS:
            available = ", ".join(sorted(DEPARTMENT_IDS))
            raise ValueError(f"Unknown department id: {v}. Available: {available}")
        return v


class Machine(MachineData):
    id: str


class WorkerData(Record):
    """User-supplied values for a new worker."""

    name: str = Field(min_length=1)
    skills: list[MachineType] = Field(default_factory=list)
    availability: WorkerAvailability = WorkerAvailability.FULL_TIME

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name is required")
        return v

    @field_validator("skills")
    @classmethod
    def dedupe_skills(cls, v: list[MachineType]) -> list[MachineType]:
        # skills behave as a set but keep the order they were picked in
        return list(dict.fromkeys(v))

    def can_operate(self, machine_type: MachineType) -> bool:
        return machine_type in self.skills


class Worker(WorkerData):
    id: str
