"""In-process timer collaborator that mirrors the rundown's event sublist."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from threading import Lock
from typing import Any

from ..domain.entities import Event, field_names
from ..infra.logging import get_logger
from ..shared.types import EntryKind

logger = get_logger(__name__)

_EVENT_FIELDS = field_names(EntryKind.EVENT) - {"id"}


class EventTimer:
    """Keeps the ordered list of events the runtime clock would play.

    Full-list notifications replace the mirror; single-entry notifications
    patch one event in place and are ignored for ids the timer does not
    track (delays and blocks never reach the mirror).
    """

    def __init__(self) -> None:
        self._events: list[Event] = []
        self._lock = Lock()

    @property
    def events(self) -> list[Event]:
        with self._lock:
            return list(self._events)

    def get_event(self, entry_id: str) -> Event | None:
        with self._lock:
            for event in self._events:
                if event.id == entry_id:
                    return event
            return None

    def on_full_event_list_changed(self, events: list[Event]) -> None:
        with self._lock:
            self._events = list(events)
        logger.debug("timer_event_list_loaded", count=len(events))

    def on_single_event_changed(self, entry_id: str, fields: Mapping[str, Any]) -> None:
        changes = {k: v for k, v in fields.items() if k in _EVENT_FIELDS}
        with self._lock:
            for index, event in enumerate(self._events):
                if event.id == entry_id:
                    self._events[index] = replace(event, **changes)
                    break
            else:
                return
        logger.debug("timer_event_updated", entry_id=entry_id, fields=sorted(changes))


__all__ = ["EventTimer"]
