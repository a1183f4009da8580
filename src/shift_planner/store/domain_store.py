"""DomainStore - the single owner of scheduling state."""

from __future__ import annotations

import datetime as dt
import logging
import uuid
from typing import Any, Callable, Iterable, TypeVar

from pydantic import TypeAdapter

from shift_planner.models.config import StoreConfig
from shift_planner.models.history import HistoryEntry
from shift_planner.models.leave import LeaveRequest, LeaveRequestData, LeaveRequestStatus
from shift_planner.models.notification import Severity
from shift_planner.models.roster import Department, Machine, MachineData, Worker, WorkerData
from shift_planner.models.shift import Shift, ShiftData, ShiftTypeName
from shift_planner.models.snapshot import StoreSnapshot
from shift_planner.notifications.center import NotificationSink, discard
from shift_planner.store.persistence import load_snapshot, save_snapshot
from shift_planner.store.storage import JsonFileStorage, KeyValueStorage, MemoryStorage

logger = logging.getLogger(__name__)

Clock = Callable[[], dt.datetime]
T = TypeVar("T", Machine, Worker, Shift, LeaveRequest)

_DATE = TypeAdapter(dt.date)


def _find(items: Iterable[T], item_id: str) -> T | None:
    return next((item for item in items if item.id == item_id), None)


def _index(items: list[T], item_id: str) -> int | None:
    return next((i for i, item in enumerate(items) if item.id == item_id), None)


def _local_now() -> dt.datetime:
    return dt.datetime.now().astimezone()


class DomainStore:
    """Holds departments, machines, workers, shifts, leave requests and history.

    State changes only through the mutation methods below. Every
    successful mutation prepends one history entry, emits one
    notification and mirrors the full snapshot to storage. Unknown ids
    on update/delete are silent no-ops that return None; deleting a
    worker or machine that still has shifts is rejected with an error
    notification.
    """

    def __init__(
        self,
        storage: KeyValueStorage | None = None,
        notify: NotificationSink | None = None,
        config: StoreConfig | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.config = config or StoreConfig()
        if storage is None:
            if self.config.data_dir is not None:
                storage = JsonFileStorage(self.config.data_dir)
            else:
                storage = MemoryStorage()
        self._storage = storage
        self._notify = notify or discard
        self._clock = clock or _local_now

        snapshot = load_snapshot(
            self._storage,
            today=self._clock().date(),
            seed_on_empty=self.config.seed_on_empty,
        )
        self._departments: list[Department] = list(snapshot.departments)
        self._machines: list[Machine] = list(snapshot.machines)
        self._workers: list[Worker] = list(snapshot.workers)
        self._shifts: list[Shift] = list(snapshot.shifts)
        self._history: list[HistoryEntry] = list(snapshot.history)
        self._leave_requests: list[LeaveRequest] = list(snapshot.leave_requests)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def departments(self) -> tuple[Department, ...]:
        return tuple(self._departments)

    @property
    def machines(self) -> tuple[Machine, ...]:
        return tuple(self._machines)

    @property
    def workers(self) -> tuple[Worker, ...]:
        return tuple(self._workers)

    @property
    def shifts(self) -> tuple[Shift, ...]:
        return tuple(self._shifts)

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        """Most recent first."""
        return tuple(self._history)

    @property
    def leave_requests(self) -> tuple[LeaveRequest, ...]:
        return tuple(self._leave_requests)

    def get_machine(self, machine_id: str) -> Machine | None:
        return _find(self._machines, machine_id)

    def get_worker(self, worker_id: str) -> Worker | None:
        return _find(self._workers, worker_id)

    def get_shift(self, shift_id: str) -> Shift | None:
        return _find(self._shifts, shift_id)

    def get_leave_request(self, request_id: str) -> LeaveRequest | None:
        return _find(self._leave_requests, request_id)

    def snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(
            departments=list(self._departments),
            machines=list(self._machines),
            workers=list(self._workers),
            shifts=list(self._shifts),
            history=list(self._history),
            leave_requests=list(self._leave_requests),
        )

    def save(self) -> bool:
        """Mirror the current snapshot to storage. Never raises."""
        return save_snapshot(self._storage, self.snapshot())

    # ------------------------------------------------------------------
    # Shifts
    # ------------------------------------------------------------------
    def add_shift(
        self,
        date: dt.date | str,
        machine_id: str,
        worker_id: str,
        shift_type_id: ShiftTypeName | str = ShiftTypeName.MATTINA,
    ) -> Shift | None:
        data = ShiftData(
            date=date, machine_id=machine_id, worker_id=worker_id, shift_type_id=shift_type_id
        )
        machine = self.get_machine(data.machine_id)
        if machine is None:
            logger.warning("add_shift: unknown machine %r, ignored", data.machine_id)
            return None
        worker = self.get_worker(data.worker_id)
        if worker is None:
            logger.warning("add_shift: unknown worker %r, ignored", data.worker_id)
            return None

        shift = Shift(
            id=self._new_id("s"),
            department_id=machine.department_id,
            **data.model_dump(),
        )
        self._shifts.append(shift)
        self._commit(
            f"Added shift for {worker.name} on {machine.name} on {self._fmt(shift.date)}.",
            "Shift added successfully",
            Severity.SUCCESS,
        )
        return shift

    def delete_shift(self, shift_id: str) -> Shift | None:
        idx = _index(self._shifts, shift_id)
        if idx is None:
            logger.debug("delete_shift: no shift %r", shift_id)
            return None
        shift = self._shifts.pop(idx)
        self._commit(
            f"Deleted shift for {self._worker_name(shift.worker_id)} on "
            f"{self._machine_name(shift.machine_id)} of {self._fmt(shift.date)}.",
            "Shift deleted",
            Severity.INFO,
        )
        return shift

    def update_shift(
        self, shift_id: str, new_date: dt.date | str, new_machine_id: str
    ) -> Shift | None:
        """Move a shift to another day and/or machine."""
        idx = _index(self._shifts, shift_id)
        if idx is None:
            logger.debug("update_shift: no shift %r", shift_id)
            return None
        new_machine = self.get_machine(new_machine_id)
        if new_machine is None:
            logger.warning("update_shift: unknown machine %r, ignored", new_machine_id)
            return None

        old = self._shifts[idx]
        moved = old.model_copy(
            update={
                "date": _DATE.validate_python(new_date),
                "machine_id": new_machine.id,
                "department_id": new_machine.department_id,
            }
        )
        self._shifts[idx] = moved
        self._commit(
            f"Moved shift of {self._worker_name(old.worker_id)} from "
            f"{self._machine_name(old.machine_id)} ({self._fmt(old.date)}) to "
            f"{new_machine.name} ({self._fmt(moved.date)}).",
            "Shift moved successfully",
            Severity.SUCCESS,
        )
        return moved

    # ------------------------------------------------------------------
    # Workers
    # ------------------------------------------------------------------
    def add_worker(self, data: WorkerData | dict[str, Any]) -> Worker:
        data = WorkerData.model_validate(data)
        worker = Worker(id=self._new_id("w"), **data.model_dump(exclude={"id"}))
        self._workers.append(worker)
        self._commit(f"Added worker: {worker.name}.", "Worker added", Severity.SUCCESS)
        return worker

    def update_worker(self, worker: Worker | dict[str, Any]) -> Worker | None:
        worker = Worker.model_validate(worker)
        idx = _index(self._workers, worker.id)
        if idx is None:
            logger.debug("update_worker: no worker %r", worker.id)
            return None
        self._workers[idx] = worker
        self._commit(f"Updated worker: {worker.name}.", "Worker updated", Severity.SUCCESS)
        return worker

    def delete_worker(self, worker_id: str) -> Worker | None:
        if any(s.worker_id == worker_id for s in self._shifts):
            self._notify("Cannot delete a worker with assigned shifts.", Severity.ERROR)
            return None
        idx = _index(self._workers, worker_id)
        if idx is None:
            logger.debug("delete_worker: no worker %r", worker_id)
            return None
        worker = self._workers.pop(idx)
        self._commit(f"Deleted worker: {worker.name}.", "Worker deleted", Severity.INFO)
        return worker

    # ------------------------------------------------------------------
    # Machines
    # ------------------------------------------------------------------
    def add_machine(self, data: MachineData | dict[str, Any]) -> Machine:
        data = MachineData.model_validate(data)
        machine = Machine(id=self._new_id("m"), **data.model_dump(exclude={"id"}))
        self._machines.append(machine)
        self._commit(f"Added machine: {machine.name}.", "Machine added", Severity.SUCCESS)
        return machine

    def update_machine(self, machine: Machine | dict[str, Any]) -> Machine | None:
        machine = Machine.model_validate(machine)
        idx = _index(self._machines, machine.id)
        if idx is None:
            logger.debug("update_machine: no machine %r", machine.id)
            return None
        self._machines[idx] = machine
        # shifts follow their machine into its new department
        self._shifts = [
            s.model_copy(update={"department_id": machine.department_id})
            if s.machine_id == machine.id and s.department_id != machine.department_id
            else s
            for s in self._shifts
        ]
        self._commit(f"Updated machine: {machine.name}.", "Machine updated", Severity.SUCCESS)
        return machine

    def delete_machine(self, machine_id: str) -> Machine | None:
        if any(s.machine_id == machine_id for s in self._shifts):
            self._notify("Cannot delete a machine with scheduled shifts.", Severity.ERROR)
            return None
        idx = _index(self._machines, machine_id)
        if idx is None:
            logger.debug("delete_machine: no machine %r", machine_id)
            return None
        machine = self._machines.pop(idx)
        self._commit(f"Deleted machine: {machine.name}.", "Machine deleted", Severity.INFO)
        return machine

    # ------------------------------------------------------------------
    # Leave requests
    # ------------------------------------------------------------------
    def add_leave_request(self, data: LeaveRequestData | dict[str, Any]) -> LeaveRequest | None:
        data = LeaveRequestData.model_validate(data)
        worker = self.get_worker(data.worker_id)
        if worker is None:
            logger.warning("add_leave_request: unknown worker %r, ignored", data.worker_id)
            return None
        request = LeaveRequest(
            id=self._new_id("lr"),
            status=LeaveRequestStatus.PENDING,
            **data.model_dump(exclude={"id", "status"}),
        )
        self._leave_requests.insert(0, request)
        self._commit(
            f"Added {request.type.value} request for {worker.name}.",
            "Request submitted",
            Severity.SUCCESS,
        )
        return request

    def update_leave_request_status(
        self, request_id: str, status: LeaveRequestStatus | str
    ) -> LeaveRequest | None:
        status = LeaveRequestStatus(status)
        idx = _index(self._leave_requests, request_id)
        if idx is None:
            logger.debug("update_leave_request_status: no request %r", request_id)
            return None
        request = self._leave_requests[idx].model_copy(update={"status": status})
        self._leave_requests[idx] = request
        self._commit(
            f"Status of request for {self._worker_name(request.worker_id)} "
            f"updated to {status.value}.",
            "Request status updated",
            Severity.INFO,
        )
        return request

    # ------------------------------------------------------------------
    # Action dispatch
    # ------------------------------------------------------------------
    def process(self, action: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Run a mutation described by an action name and a form payload.

        Raises:
            ValueError: If the action is not supported.
        """
        handler = getattr(self, f"_handle_{action}", None)
        if handler is None:
            raise ValueError(f"DomainStore does not support action '{action}'")
        return handler(payload)

    def _handle_add_shift(self, payload: dict[str, Any]) -> dict[str, Any]:
        data = ShiftData.model_validate(payload)
        return {
            "shift": self.add_shift(
                data.date, data.machine_id, data.worker_id, data.shift_type_id
            )
        }

    def _handle_delete_shift(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {"shift": self.delete_shift(_id_of(payload, "shiftId"))}

    def _handle_update_shift(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {
            "shift": self.update_shift(
                _id_of(payload, "shiftId"),
                _value_of(payload, "newDate"),
                _id_of(payload, "newMachineId"),
            )
        }

    def _handle_add_worker(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {"worker": self.add_worker(payload)}

    def _handle_update_worker(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {"worker": self.update_worker(payload)}

    def _handle_delete_worker(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {"worker": self.delete_worker(_id_of(payload, "workerId"))}

    def _handle_add_machine(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {"machine": self.add_machine(payload)}

    def _handle_update_machine(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {"machine": self.update_machine(payload)}

    def _handle_delete_machine(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {"machine": self.delete_machine(_id_of(payload, "machineId"))}

    def _handle_add_leave_request(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {"leave_request": self.add_leave_request(payload)}

    def _handle_update_leave_request_status(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {
            "leave_request": self.update_leave_request_status(
                _id_of(payload, "requestId"), _value_of(payload, "status")
            )
        }

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _commit(self, description: str, message: str, severity: Severity) -> None:
        entry = HistoryEntry(
            id=self._new_id("h"),
            timestamp=self._clock(),
            description=description,
        )
        self._history.insert(0, entry)
        self._notify(message, severity)
        self.save()

    def _new_id(self, prefix: str) -> str:
        return f"{prefix}-{uuid.uuid4().hex[:12]}"

    def _fmt(self, day: dt.date) -> str:
        return day.strftime(self.config.history_date_format)

    def _worker_name(self, worker_id: str) -> str:
        worker = self.get_worker(worker_id)
        return worker.name if worker else worker_id

    def _machine_name(self, machine_id: str) -> str:
        machine = self.get_machine(machine_id)
        return machine.name if machine else machine_id


def _value_of(payload: dict[str, Any], key: str) -> Any:
    """Look up a camelCase form key, accepting its snake_case spelling too."""
    if key in payload:
        return payload[key]
    snake = "".join(f"_{c.lower()}" if c.isupper() else c for c in key)
    if snake in payload:
        return payload[snake]
    raise KeyError(key)


def _id_of(payload: dict[str, Any], key: str) -> str:
    try:
        return str(_value_of(payload, key))
    except KeyError:
        if "id" in payload:
            return str(payload["id"])
        raise
