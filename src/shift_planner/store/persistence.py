"""Snapshot serialization between the domain store and a key-value storage."""

from __future__ import annotations

import datetime as dt
import json
import logging

from pydantic import BaseModel, ValidationError

from shift_planner.models.history import HistoryEntry
from shift_planner.models.leave import LeaveRequest
from shift_planner.models.roster import DEPARTMENTS, Department, Machine, Worker
from shift_planner.models.shift import Shift
from shift_planner.models.snapshot import COLLECTION_KEYS, StoreSnapshot
from shift_planner.store.seed import seed_collections
from shift_planner.store.storage import KeyValueStorage, StorageError

logger = logging.getLogger(__name__)

_MODELS: dict[str, type[BaseModel]] = {
    "departments": Department,
    "machines": Machine,
    "workers": Worker,
    "shifts": Shift,
    "history": HistoryEntry,
    "leaveRequests": LeaveRequest,
}


def load_collection(storage: KeyValueStorage, key: str, default: list[BaseModel]) -> list:
    """Read one collection, falling back to ``default`` when missing or unparsable.

    Records are validated one by one: an invalid record is dropped with
    a warning and the rest of the collection is kept. History timestamps
    come back as ISO-8601 strings and are parsed into datetimes by the
    model.
    """
    try:
        raw = storage.get(key)
    except StorageError:
        logger.exception("Error reading storage key %r", key)
        return list(default)
    if raw is None:
        return list(default)
    try:
        items = json.loads(raw)
    except ValueError:
        logger.warning("Discarding unparsable value for storage key %r", key, exc_info=True)
        return list(default)
    if not isinstance(items, list):
        logger.warning("Discarding non-list value for storage key %r", key)
        return list(default)

    model = _MODELS[key]
    records = []
    for position, item in enumerate(items):
        try:
            records.append(model.model_validate(item))
        except ValidationError as exc:
            logger.warning(
                "Dropping invalid record %d of storage key %r: %s", position, key, exc
            )
    return records


def load_snapshot(
    storage: KeyValueStorage, today: dt.date | None = None, seed_on_empty: bool = True
) -> StoreSnapshot:
    """Build the initial snapshot from storage, seeding missing collections."""
    defaults = seed_collections(today or dt.date.today()) if seed_on_empty else {}
    # departments are static seed data; a stored copy is ignored
    collections = {"departments": list(DEPARTMENTS)}
    for key, field in COLLECTION_KEYS.items():
        if key == "departments":
            continue
        collections[field] = load_collection(storage, key, defaults.get(key, []))
    return StoreSnapshot(**collections)


def save_snapshot(storage: KeyValueStorage, snapshot: StoreSnapshot) -> bool:
    """Write every collection of ``snapshot``; returns False if any write failed.

    Failures are logged and never raised: the in-memory state stays
    authoritative whatever happens to the mirror.
    """
    ok = True
    for key, records in snapshot.to_records().items():
        try:
            storage.set(key, json.dumps(records, ensure_ascii=False))
        except Exception:
            logger.exception("Failed to save %r to storage", key)
            ok = False
    return ok
