"""
Rundown persistence backends.

Both backends implement the ordered-store contract used by the entry store:
``get_entries()`` returns the sequence in show order, ``set_entries()``
replaces the whole sequence at once.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from sqlalchemy import JSON, Integer, String, delete, select
from sqlalchemy.orm import Mapped, Session, mapped_column

from ..domain.entities import Entry, entry_from_dict
from .db import Base
from .uow import session as uow_session


class RundownEntryRecord(Base):
    """One stored rundown entry; ``position`` carries the show order."""

    __tablename__ = "rundown_entries"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    kind: Mapped[str] = mapped_column(String(16), nullable=False)
    payload: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)

    def __repr__(self) -> str:
        return f"<RundownEntryRecord(id={self.id}, position={self.position}, kind={self.kind})>"


class InMemoryRundownBackend:
    """Process-local rundown, optionally seeded with entries."""

    def __init__(self, entries: list[Entry] | None = None) -> None:
        self._entries: list[Entry] = list(entries or [])
        self._lock = threading.Lock()

    def get_entries(self) -> list[Entry]:
        with self._lock:
            return list(self._entries)

    def set_entries(self, entries: list[Entry]) -> None:
        with self._lock:
            self._entries = list(entries)


class SqlRundownBackend:
    """Rundown stored as one row per entry in ``rundown_entries``.

    ``set_entries`` deletes and rewrites every row inside a single unit of
    work, so readers see either the old or the new sequence.
    """

    def __init__(self, session_factory: Callable[[], Session] | None = None) -> None:
        self._session_factory = session_factory

    def get_entries(self) -> list[Entry]:
        with uow_session(self._session_factory) as db:
            rows = db.execute(
                select(RundownEntryRecord).order_by(RundownEntryRecord.position)
            ).scalars()
            return [entry_from_dict({**row.payload, "type": row.kind}) for row in rows]

    def set_entries(self, entries: list[Entry]) -> None:
        with uow_session(self._session_factory) as db:
            db.execute(delete(RundownEntryRecord))
            db.add_all(
                RundownEntryRecord(
                    id=entry.id,
                    position=position,
                    kind=entry.kind.value,
                    payload=entry.to_dict(),
                )
                for position, entry in enumerate(entries)
            )


__all__ = ["InMemoryRundownBackend", "RundownEntryRecord", "SqlRundownBackend"]
