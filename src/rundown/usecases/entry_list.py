from __future__ import annotations

from typing import Any

from ..core.service import RundownService


def list_entries(service: RundownService, *, events_only: bool = False) -> dict[str, Any]:
    """Return the rundown (or only its events) in show order.

    Returns:
        Dictionary with ``count`` and ``entries`` (each entry as a dict with
        its position in the returned list under ``index``)
    """
    entries = service.list_events() if events_only else service.list_entries()
    return {
        "count": len(entries),
        "entries": [{"index": i, **entry.to_dict()} for i, entry in enumerate(entries)],
    }


def show_entry(service: RundownService, *, entry_id: str) -> dict[str, Any]:
    """Return a single entry.

    Raises:
        EntryNotFoundError: If no entry has ``entry_id``
    """
    return service.get_entry(entry_id).to_dict()


__all__ = ["list_entries", "show_entry"]
