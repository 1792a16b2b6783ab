from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..core.service import RundownService


def update_entry(service: RundownService, *, fields: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``fields`` into the entry whose id is ``fields["id"]``.

    Event revisions are bumped by the store; a ``revision`` in ``fields`` is
    ignored.

    Raises:
        MissingFieldError: If ``fields`` has no ``id``
        EntryNotFoundError: If the id is unknown
        InvalidFieldError: If a field is unknown or tries to change id/type
    """
    return service.update_entry(fields).to_dict()


__all__ = ["update_entry"]
