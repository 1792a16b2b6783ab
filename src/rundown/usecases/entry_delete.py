from __future__ import annotations

from typing import Any

from ..core.service import RundownService


def delete_entry(service: RundownService, *, entry_id: str) -> dict[str, Any]:
    """Remove an entry from the rundown.

    Raises:
        EntryNotFoundError: If the id is unknown (the rundown is unchanged)
    """
    service.delete_entry(entry_id)
    return {
        "status": "ok",
        "deleted": 1,
        "id": entry_id,
    }


__all__ = ["delete_entry"]
