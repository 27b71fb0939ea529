"""JSON-file backed search history."""

from __future__ import annotations

import contextlib
import json
import logging
import os
import threading
import uuid
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from skycast.exceptions import HistoryStoreError
from skycast.models.history import HistoryEntry

logger = logging.getLogger(__name__)

_entries_adapter = TypeAdapter(list[HistoryEntry])


class HistoryStore:
    """Previously searched cities, stored as a JSON array of ``{id, name}``.

    The file is created on first write; a missing or empty file reads as an
    empty history. Duplicate names are allowed.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> list[HistoryEntry]:
        if not self.path.exists():
            return []
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise HistoryStoreError(f"Cannot read {self.path}: {exc}") from exc
        if not raw.strip():
            return []
        try:
            return _entries_adapter.validate_json(raw)
        except ValidationError as exc:
            raise HistoryStoreError(f"Malformed history file {self.path}: {exc}") from exc

    def _write(self, entries: list[HistoryEntry]) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        payload = [entry.model_dump() for entry in entries]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise HistoryStoreError(f"Cannot write {self.path}: {exc}") from exc

    def list_cities(self) -> list[HistoryEntry]:
        """Return all entries in insertion order."""
        with self._lock:
            return self._read()

    def add_city(self, name: str) -> HistoryEntry:
        """Append ``name`` under a fresh id and return the new entry."""
        entry = HistoryEntry(id=str(uuid.uuid4()), name=name)
        with self._lock:
            entries = self._read()
            entries.append(entry)
            self._write(entries)
        logger.info("Added %r to search history (%s)", name, entry.id)
        return entry

    def remove_city(self, entry_id: str) -> HistoryEntry | None:
        """Remove and return the entry with ``entry_id``, or None if missing."""
        with self._lock:
            entries = self._read()
            remaining: list[HistoryEntry] = []
            deleted: HistoryEntry | None = None
            for entry in entries:
                if deleted is None and entry.id == entry_id:
                    deleted = entry
                    continue
                remaining.append(entry)
            if deleted is not None:
                self._write(remaining)
        if deleted is not None:
            logger.info("Removed %r from search history (%s)", deleted.name, entry_id)
        return deleted
