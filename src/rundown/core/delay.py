"""
Delay cascade engine.

Applying a delay shifts every event after it by the delay's duration until
the next block (or the end of the rundown), then removes the consumed delay
and that block. Later delays inside the cascaded span are left in place.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..domain.entities import Delay, Entry, Event
from ..infra.logging import get_logger
from ..shared.types import EntryKind
from .exceptions import DelayNotFoundError
from .notifier import ChangeNotifier
from .store import EntryStore

logger = get_logger(__name__)


@dataclass(frozen=True)
class CascadeResult:
    """Outcome of one cascade computed over a rundown snapshot."""

    entries: list[Entry]
    delay_index: int
    duration: int
    shifted_ids: list[str]
    block_index: int | None = None


def cascade_delay(entries: Sequence[Entry], delay_id: str) -> CascadeResult:
    """Compute the rundown after applying the delay ``delay_id``.

    ``entries`` is not modified. Raises DelayNotFoundError when no delay
    entry has that id.
    """
    working = list(entries)

    delay_index: int | None = None
    for index, entry in enumerate(working):
        if entry.id == delay_id and isinstance(entry, Delay):
            delay_index = index
            break
    if delay_index is None:
        raise DelayNotFoundError(delay_id)

    duration = working[delay_index].duration  # type: ignore[union-attr]
    shifted_ids: list[str] = []
    block_index: int | None = None

    for index in range(delay_index + 1, len(working)):
        entry = working[index]
        if isinstance(entry, Event):
            working[index] = entry.shifted(duration)
            shifted_ids.append(entry.id)
        elif entry.kind is EntryKind.BLOCK:
            block_index = index
            break

    del working[delay_index]
    # The block sits after the delay, so it moved down by one.
    if block_index is not None:
        del working[block_index - 1]

    return CascadeResult(
        entries=working,
        delay_index=delay_index,
        duration=duration,
        shifted_ids=shifted_ids,
        block_index=block_index,
    )


class DelayCascadeEngine:
    """Apply delays to the rundown held by ``store``."""

    def __init__(self, store: EntryStore, notifier: ChangeNotifier) -> None:
        self._store = store
        self._notifier = notifier

    def apply_delay(self, delay_id: str) -> list[Entry]:
        try:
            result = cascade_delay(self._store.get_all(), delay_id)
        except DelayNotFoundError as exc:
            logger.warning("rundown_delay_rejected", code=exc.code, delay_id=delay_id)
            raise

        committed = self._store.commit(result.entries)
        self._notifier.full_list_changed(committed)
        logger.info(
            "rundown_delay_applied",
            delay_id=delay_id,
            duration=result.duration,
            shifted=len(result.shifted_ids),
            block_removed=result.block_index is not None,
        )
        return committed


__all__ = ["CascadeResult", "DelayCascadeEngine", "cascade_delay"]
