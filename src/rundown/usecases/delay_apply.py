from __future__ import annotations

from typing import Any

from ..core.service import RundownService


def apply_delay(service: RundownService, *, delay_id: str) -> dict[str, Any]:
    """Cascade a delay over the following events and consume it.

    Returns:
        Dictionary with the applied delay id and the resulting rundown

    Raises:
        DelayNotFoundError: If ``delay_id`` is missing or not a delay
    """
    entries = service.apply_delay(delay_id)
    return {
        "id": delay_id,
        "count": len(entries),
        "entries": [entry.to_dict() for entry in entries],
    }


__all__ = ["apply_delay"]
