"""
Rundown service: the single entry point for rundown operations.

Composes the entry factory, store, ordering and delay cascade engines
around one lock. Every operation reads the whole sequence, computes a new
one and writes it back while holding the lock, so two callers can never
interleave a read-compute-write cycle.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Any

from ..domain.entities import Entry, Event
from ..infra.logging import get_logger
from .delay import DelayCascadeEngine
from .exceptions import InvalidPositionError, MissingFieldError
from .factory import EntryFactory
from .notifier import ChangeNotifier, TimerSubsystem
from .ordering import OrderingEngine
from .store import EntryStore, RundownBackend

logger = get_logger(__name__)


class RundownService:
    """Operations exposed to use cases and any request-handling layer."""

    def __init__(
        self,
        *,
        backend: RundownBackend,
        timer: TimerSubsystem,
        factory: EntryFactory | None = None,
    ) -> None:
        self._notifier = ChangeNotifier(timer)
        self._store = EntryStore(backend, self._notifier)
        self._ordering = OrderingEngine(self._store, self._notifier)
        self._delays = DelayCascadeEngine(self._store, self._notifier)
        self._factory = factory or EntryFactory()
        self._factory.reserve(entry.id for entry in self._store.get_all())
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def list_entries(self) -> list[Entry]:
        with self._lock:
            return self._store.get_all()

    def list_events(self) -> list[Event]:
        with self._lock:
            return self._store.event_entries()

    def get_entry(self, entry_id: str) -> Entry:
        with self._lock:
            return self._store.get_by_id(entry_id)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def create_entry(self, kind: object, fields: Mapping[str, Any] | None = None) -> Entry:
        """Build a new entry and insert it at ``fields["order"]`` (default 0)."""
        fields = dict(fields or {})
        position = _parse_position(fields.get("order"))
        with self._lock:
            entry = self._factory.create(kind, fields)
            self._ordering.insert_at(entry, position)
            return entry

    def insert_entry(self, entry: Entry, position: int) -> list[Entry]:
        with self._lock:
            committed = self._ordering.insert_at(entry, position)
            self._factory.reserve([entry.id])
            return committed

    def reorder_entry(self, entry_id: str, from_index: int, to_index: int) -> list[Entry]:
        with self._lock:
            return self._ordering.reorder(entry_id, from_index, to_index)

    def apply_delay(self, delay_id: str) -> list[Entry]:
        with self._lock:
            return self._delays.apply_delay(delay_id)

    def update_entry(self, fields: Mapping[str, Any]) -> Entry:
        """Merge ``fields`` into the entry named by ``fields["id"]``."""
        entry_id = fields.get("id")
        if not entry_id:
            logger.warning("rundown_update_rejected", code=MissingFieldError.code)
            raise MissingFieldError("id")
        with self._lock:
            return self._store.replace(str(entry_id), fields)

    def delete_entry(self, entry_id: str) -> None:
        with self._lock:
            self._store.remove_by_id(entry_id)


def _parse_position(order: Any) -> int:
    if order is None:
        return 0
    not_integer = InvalidPositionError(order, f"Position must be an integer, got {order!r}")
    # int() would accept True and truncate 1.7
    if isinstance(order, bool) or (isinstance(order, float) and not order.is_integer()):
        raise not_integer
    try:
        position = int(order)
    except (TypeError, ValueError):
        raise not_integer from None
    if position < 0:
        raise InvalidPositionError(position)
    return position


__all__ = ["RundownService"]
