"""
Entry Store: ordered CRUD primitives over the rundown.

The store owns the rundown. Reads return fresh lists of frozen entries, so
callers can never mutate the stored sequence; every write replaces the
whole sequence through the backend in a single ``set_entries`` call.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import asdict
from dataclasses import replace as dc_replace
from typing import Any, Protocol

from ..domain.entities import Entry, Event, build_entry, field_names
from ..infra.logging import get_logger
from .exceptions import EntryNotFoundError, InvalidFieldError
from .notifier import ChangeNotifier, event_sublist

logger = get_logger(__name__)

# Fields a caller can never set through an update.
ENGINE_MANAGED_FIELDS = frozenset({"revision", "order"})


class RundownBackend(Protocol):
    """Ordered document store holding the rundown."""

    def get_entries(self) -> list[Entry]:
        """Return the stored sequence in show order."""

    def set_entries(self, entries: list[Entry]) -> None:
        """Replace and persist the whole sequence atomically."""


def index_of(entries: Sequence[Entry], entry_id: str) -> int | None:
    for index, entry in enumerate(entries):
        if entry.id == entry_id:
            return index
    return None


class EntryStore:
    """Get, remove and update entries; commit whole new sequences."""

    def __init__(self, backend: RundownBackend, notifier: ChangeNotifier) -> None:
        self._backend = backend
        self._notifier = notifier

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_all(self) -> list[Entry]:
        return list(self._backend.get_entries())

    def count(self) -> int:
        return len(self._backend.get_entries())

    def event_entries(self) -> list[Event]:
        return event_sublist(self._backend.get_entries())

    def get_by_id(self, entry_id: str) -> Entry:
        for entry in self._backend.get_entries():
            if entry.id == entry_id:
                return entry
        raise EntryNotFoundError(entry_id)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def commit(self, entries: Sequence[Entry]) -> list[Entry]:
        """Replace the whole rundown with ``entries``."""
        new_entries = list(entries)
        self._backend.set_entries(new_entries)
        return list(new_entries)

    def remove_by_id(self, entry_id: str) -> Entry:
        """Remove one entry and return it.

        Raises EntryNotFoundError (rundown unchanged) if the id is unknown.
        """
        entries = self.get_all()
        index = index_of(entries, entry_id)
        if index is None:
            logger.warning("rundown_remove_rejected", code=EntryNotFoundError.code, entry_id=entry_id)
            raise EntryNotFoundError(entry_id)

        removed = entries.pop(index)
        committed = self.commit(entries)
        self._notifier.full_list_changed(committed)
        logger.info(
            "rundown_entry_removed",
            entry_id=entry_id,
            kind=removed.kind.value,
            index=index,
            count=len(committed),
        )
        return removed

    def replace(self, entry_id: str, fields: Mapping[str, Any]) -> Entry:
        """Merge ``fields`` into an existing entry and return the result.

        Events get their revision bumped. The timer is told about this one
        entry only, not the whole list.
        """
        entries = self.get_all()
        index = index_of(entries, entry_id)
        if index is None:
            logger.warning("rundown_update_rejected", code=EntryNotFoundError.code, entry_id=entry_id)
            raise EntryNotFoundError(entry_id)

        current = entries[index]
        changes = _validate_changes(current, fields)
        if isinstance(current, Event):
            changes["revision"] = current.revision + 1

        updated = dc_replace(current, **changes)
        entries[index] = updated
        self.commit(entries)
        self._notifier.single_changed(entry_id, changes)
        logger.info(
            "rundown_entry_updated",
            entry_id=entry_id,
            kind=current.kind.value,
            fields=sorted(changes),
        )
        return updated


def _validate_changes(current: Entry, fields: Mapping[str, Any]) -> dict[str, Any]:
    """Return the storable subset of ``fields`` for ``current``.

    ``id`` and ``type`` may be echoed back unchanged but never altered. Values
    are type-checked against the kind and returned coerced.
    """
    changes: dict[str, Any] = {}
    unknown: list[str] = []
    allowed = field_names(current.kind)

    for key, value in fields.items():
        if key == "id":
            if value != current.id:
                raise InvalidFieldError("Entry id cannot be changed", fields=["id"])
            continue
        if key == "type":
            if value != current.kind.value:
                raise InvalidFieldError("Entry type cannot be changed", fields=["type"])
            continue
        if key in ENGINE_MANAGED_FIELDS:
            continue
        if key not in allowed:
            unknown.append(key)
            continue
        changes[key] = value

    if unknown:
        raise InvalidFieldError(
            f"Unknown field(s) for {current.kind.value}: {', '.join(sorted(unknown))}",
            fields=sorted(unknown),
        )

    checked = build_entry(current.kind, {**asdict(current), **changes})
    return {key: getattr(checked, key) for key in changes}


__all__ = ["ENGINE_MANAGED_FIELDS", "EntryStore", "RundownBackend", "index_of"]
