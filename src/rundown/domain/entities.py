"""
Domain entities for Rundown.

A rundown entry is a tagged variant over three kinds: ``Event``, ``Delay``
and ``Block``. Each kind is a frozen dataclass whose field defaults form the
kind's default table; mutations always produce a new instance.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, ClassVar, Union

from pydantic import TypeAdapter, ValidationError

from ..core.exceptions import InvalidFieldError, UnrecognizedTypeError
from ..shared.types import EntryKind


@dataclass(frozen=True)
class Event:
    """A timed item in the show.

    ``time_start``/``time_end`` are milliseconds. ``revision`` counts every
    mutation the event has gone through and never decreases.
    """

    kind: ClassVar[EntryKind] = EntryKind.EVENT

    id: str
    title: str = ""
    subtitle: str = ""
    presenter: str = ""
    note: str = ""
    time_start: int = 0
    time_end: int = 0
    is_public: bool = True
    skip: bool = False
    colour: str = ""
    revision: int = 0

    def shifted(self, duration: int) -> Event:
        """Return a copy moved by ``duration`` ms with the revision bumped."""
        return replace(
            self,
            time_start=self.time_start + duration,
            time_end=self.time_end + duration,
            revision=self.revision + 1,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value, **asdict(self)}


@dataclass(frozen=True)
class Delay:
    """A pending delay; ``duration`` is milliseconds and may be negative."""

    kind: ClassVar[EntryKind] = EntryKind.DELAY

    id: str
    duration: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value, **asdict(self)}


@dataclass(frozen=True)
class Block:
    """A section boundary; a delay cascade never crosses it."""

    kind: ClassVar[EntryKind] = EntryKind.BLOCK

    id: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value, **asdict(self)}


Entry = Union[Event, Delay, Block]

ENTRY_CLASSES: dict[EntryKind, type[Event] | type[Delay] | type[Block]] = {
    EntryKind.EVENT: Event,
    EntryKind.DELAY: Delay,
    EntryKind.BLOCK: Block,
}


def entry_class(kind: object) -> type[Event] | type[Delay] | type[Block]:
    """Return the entry class for a kind tag.

    Raises UnrecognizedTypeError if the tag is missing or unknown.
    """
    parsed = EntryKind.parse(kind)
    if parsed is None:
        raise UnrecognizedTypeError(kind)
    return ENTRY_CLASSES[parsed]


def field_names(kind: EntryKind) -> frozenset[str]:
    """Names of the stored fields for ``kind``, ``id`` included."""
    return frozenset(f.name for f in fields(ENTRY_CLASSES[kind]))


_ADAPTERS = {kind: TypeAdapter(cls) for kind, cls in ENTRY_CLASSES.items()}


def build_entry(kind: EntryKind, values: Mapping[str, Any]) -> Entry:
    """Validate ``values`` against the field types of ``kind`` and build the entry.

    Numeric strings are coerced (``"100"`` becomes ``100``). Raises
    InvalidFieldError naming every field whose value does not fit.
    """
    try:
        return _ADAPTERS[kind].validate_python(dict(values))
    except ValidationError as exc:
        bad = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
        raise InvalidFieldError(
            f"Invalid value for {kind.value} field(s): {', '.join(bad)}",
            fields=bad,
        ) from None


def entry_from_dict(data: dict[str, Any]) -> Entry:
    """Rebuild a typed entry from its ``to_dict()`` mapping.

    Keys the kind does not define are dropped.
    """
    cls = entry_class(data.get("type"))
    known = field_names(cls.kind)
    return cls(**{k: v for k, v in data.items() if k in known})


def is_event(entry: Entry) -> bool:
    return entry.kind is EntryKind.EVENT


__all__ = [
    "Block",
    "Delay",
    "ENTRY_CLASSES",
    "Entry",
    "build_entry",
    "Event",
    "entry_class",
    "entry_from_dict",
    "field_names",
    "is_event",
]
