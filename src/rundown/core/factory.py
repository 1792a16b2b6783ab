"""Entry factory: builds complete, defaulted entries with fresh ids."""

from __future__ import annotations

import uuid
from collections.abc import Callable, Iterable, Mapping
from dataclasses import replace
from typing import Any

from ..domain.entities import Entry, build_entry, entry_class, field_names
from .exceptions import InvalidFieldError, RundownError

# Keys the caller may send that never become entry state.
TRANSIENT_FIELDS = frozenset({"order", "type", "id"})

MAX_ID_ATTEMPTS = 32


def random_id(length: int) -> str:
    return uuid.uuid4().hex[:length]


class EntryFactory:
    """Create entries of a declared kind from partial caller fields.

    Ids are never handed out twice by one factory: every id it generates or
    is told about through :meth:`reserve` stays reserved, including ids of
    entries that have since been removed.
    """

    def __init__(
        self,
        *,
        id_length: int = 6,
        id_generator: Callable[[int], str] = random_id,
    ) -> None:
        if id_length < 4:
            raise ValueError("id_length must be at least 4")
        self._id_length = id_length
        self._id_generator = id_generator
        self._issued: set[str] = set()

    def reserve(self, ids: Iterable[str]) -> None:
        """Mark ids (e.g. loaded from storage) as already in use."""
        self._issued.update(ids)

    def new_id(self) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self._id_generator(self._id_length)
            if candidate not in self._issued:
                self._issued.add(candidate)
                return candidate
        raise RundownError(
            f"Could not generate a unique id after {MAX_ID_ATTEMPTS} attempts"
        )

    def create(self, kind: object, fields: Mapping[str, Any] | None = None) -> Entry:
        """Return a new entry of ``kind`` with caller ``fields`` over its defaults.

        ``order``, ``type`` and ``id`` in ``fields`` are ignored. Raises
        UnrecognizedTypeError for an unknown kind and InvalidFieldError for
        fields the kind does not have or values of the wrong type.
        """
        cls = entry_class(kind)
        supplied = {k: v for k, v in (fields or {}).items() if k not in TRANSIENT_FIELDS}

        unknown = sorted(set(supplied) - field_names(cls.kind))
        if unknown:
            raise InvalidFieldError(
                f"Unknown field(s) for {cls.kind.value}: {', '.join(unknown)}",
                fields=unknown,
            )

        # validate before spending an id on the entry
        entry = build_entry(cls.kind, {"id": "", **supplied})
        return replace(entry, id=self.new_id())


__all__ = ["EntryFactory", "TRANSIENT_FIELDS", "random_id"]
