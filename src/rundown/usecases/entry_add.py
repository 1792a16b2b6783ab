from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..core.service import RundownService


def add_entry(
    service: RundownService,
    *,
    kind: str | None,
    fields: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Create an entry and insert it into the rundown.

    Args:
        service: Rundown service
        kind: Entry type tag (``event``, ``delay`` or ``block``)
        fields: Caller fields; ``order`` (default 0) is the insert position
            and is not stored on the entry

    Returns:
        The created entry as a dict

    Raises:
        UnrecognizedTypeError: If ``kind`` is missing or unknown
        InvalidFieldError: If a field does not belong to the kind
        InvalidPositionError: If ``order`` is negative or not an integer
    """
    entry = service.create_entry(kind, fields)
    return entry.to_dict()


__all__ = ["add_entry"]
