from __future__ import annotations

from typing import Any

from ..core.service import RundownService


def reorder_entry(
    service: RundownService,
    *,
    entry_id: str,
    from_index: int,
    to_index: int,
) -> dict[str, Any]:
    """Move the entry at ``from_index`` to ``to_index``.

    ``entry_id`` must be the id currently at ``from_index``.

    Raises:
        StaleIndexError: If the caller's view of the rundown is out of date
        InvalidPositionError: If ``to_index`` is negative
    """
    entries = service.reorder_entry(entry_id, from_index, to_index)
    return {
        "id": entry_id,
        "from": from_index,
        "to": to_index,
        "count": len(entries),
        "order": [entry.id for entry in entries],
    }


__all__ = ["reorder_entry"]
