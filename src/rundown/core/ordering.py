"""Ordering engine: positional insert and index-checked reorder."""

from __future__ import annotations

from collections.abc import Sequence

from ..domain.entities import Entry
from ..infra.logging import get_logger
from .exceptions import DuplicateEntryError, InvalidPositionError, StaleIndexError
from .notifier import ChangeNotifier
from .store import EntryStore, index_of

logger = get_logger(__name__)


def insert_at_position(entries: Sequence[Entry], entry: Entry, position: int) -> list[Entry]:
    """Return a new list with ``entry`` placed at ``position``.

    0 puts it first, anything at or past the end appends, everything else
    splices it in and shifts the following entries down by one.
    """
    if position < 0:
        raise InvalidPositionError(position)

    result = list(entries)
    if position == 0:
        result.insert(0, entry)
    elif position >= len(result):
        result.append(entry)
    else:
        result.insert(position, entry)
    return result


def move_entry(
    entries: Sequence[Entry],
    entry_id: str,
    from_index: int,
    to_index: int,
) -> list[Entry]:
    """Return a new list with the entry at ``from_index`` moved to ``to_index``.

    Raises StaleIndexError when ``from_index`` does not hold ``entry_id``.
    """
    if to_index < 0:
        raise InvalidPositionError(to_index)

    if not 0 <= from_index < len(entries):
        raise StaleIndexError(entry_id, from_index)
    occupant = entries[from_index]
    if occupant.id != entry_id:
        raise StaleIndexError(entry_id, from_index, actual_id=occupant.id)

    result = list(entries)
    moved = result.pop(from_index)
    result.insert(to_index, moved)
    return result


class OrderingEngine:
    """Apply insert and reorder requests to the rundown held by ``store``."""

    def __init__(self, store: EntryStore, notifier: ChangeNotifier) -> None:
        self._store = store
        self._notifier = notifier

    def insert_at(self, entry: Entry, position: int) -> list[Entry]:
        entries = self._store.get_all()
        if index_of(entries, entry.id) is not None:
            logger.warning("rundown_insert_rejected", code=DuplicateEntryError.code, entry_id=entry.id)
            raise DuplicateEntryError(entry.id)

        committed = self._store.commit(insert_at_position(entries, entry, position))
        self._notifier.full_list_changed(committed)
        logger.info(
            "rundown_entry_inserted",
            entry_id=entry.id,
            kind=entry.kind.value,
            position=position,
            count=len(committed),
        )
        return committed

    def reorder(self, entry_id: str, from_index: int, to_index: int) -> list[Entry]:
        entries = self._store.get_all()
        try:
            reordered = move_entry(entries, entry_id, from_index, to_index)
        except StaleIndexError as exc:
            logger.warning(
                "rundown_reorder_rejected",
                code=exc.code,
                entry_id=entry_id,
                from_index=from_index,
                actual_id=exc.actual_id,
            )
            raise

        committed = self._store.commit(reordered)
        self._notifier.full_list_changed(committed)
        logger.info(
            "rundown_entry_reordered",
            entry_id=entry_id,
            from_index=from_index,
            to_index=to_index,
        )
        return committed


__all__ = ["OrderingEngine", "insert_at_position", "move_entry"]
