"""Change notifier: the only path from rundown mutations to the timer."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

from ..domain.entities import Entry, Event, is_event


@runtime_checkable
class TimerSubsystem(Protocol):
    """Collaborator that derives runtime/clock state from the event entries."""

    def on_full_event_list_changed(self, events: list[Event]) -> None:
        """Replace the timer's view with the full, ordered event sublist."""

    def on_single_event_changed(self, entry_id: str, fields: Mapping[str, Any]) -> None:
        """Apply a field update to one entry the timer already knows about."""


def event_sublist(entries: Sequence[Entry]) -> list[Event]:
    """Event-kind entries of ``entries``, in rundown order."""
    return [entry for entry in entries if is_event(entry)]


class ChangeNotifier:
    """Forward committed changes to the timer subsystem.

    Bulk operations (insert, reorder, delete, delay cascade) send the whole
    event sublist; a targeted field update sends only that entry's fields.
    """

    def __init__(self, timer: TimerSubsystem) -> None:
        self._timer = timer

    @property
    def timer(self) -> TimerSubsystem:
        return self._timer

    def full_list_changed(self, entries: Sequence[Entry]) -> None:
        self._timer.on_full_event_list_changed(event_sublist(entries))

    def single_changed(self, entry_id: str, fields: Mapping[str, Any]) -> None:
        self._timer.on_single_event_changed(entry_id, dict(fields))


__all__ = ["ChangeNotifier", "TimerSubsystem", "event_sublist"]
