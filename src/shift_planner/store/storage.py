"""Key-value storages the domain store mirrors its collections to."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class StorageError(Exception):
    """Raised when a storage cannot read or write a key."""


class KeyValueStorage(Protocol):
    """Opaque get/set-by-key storage of serialized text."""

    def get(self, key: str) -> str | None:
        """Return the stored text for ``key`` or None when absent."""

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""


class MemoryStorage:
    """Dictionary-backed storage; contents live as long as the instance."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def keys(self) -> list[str]:
        return sorted(self._items)


class JsonFileStorage:
    """One ``<key>.json`` file per key inside ``directory``.

    Writes go to a temporary sibling file that then replaces the target,
    so a crash mid-write leaves the previous value intact.
    """

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise StorageError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Cannot read {path}: {exc}") from exc
        return raw if raw.strip() else None

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp = path.with_suffix(path.suffix + ".tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp.write_text(value, encoding="utf-8")
            tmp.replace(path)
        except OSError as exc:
            raise StorageError(f"Cannot write {path}: {exc}") from exc
