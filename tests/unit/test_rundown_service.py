"""
Unit tests for RundownService over the in-memory backend.
"""

from __future__ import annotations

import threading

import pytest

from rundown.core.exceptions import (
    DelayNotFoundError,
    EntryNotFoundError,
    InvalidFieldError,
    InvalidPositionError,
    MissingFieldError,
    StaleIndexError,
    UnrecognizedTypeError,
)
from rundown.core.factory import EntryFactory
from rundown.core.service import RundownService
from rundown.domain.entities import Block, Delay, Event
from rundown.infra.persistence import InMemoryRundownBackend


def _ids(entries):
    return [e.id for e in entries]


class TestCreateEntry:
    def test_default_order_inserts_first(self, make_service):
        service, backend = make_service([Event(id="A"), Block(id="B")])

        entry = service.create_entry("delay", {"duration": 60000})

        assert entry.id == "id0001"
        assert _ids(backend.get_entries()) == ["id0001", "A", "B"]

    def test_order_past_end_appends(self, make_service):
        service, backend = make_service([Event(id="A"), Block(id="B")])

        service.create_entry("block", {"order": 50})

        assert _ids(backend.get_entries()) == ["A", "B", "id0001"]

    def test_order_in_middle(self, make_service):
        service, backend = make_service([Event(id="A"), Block(id="B")])

        service.create_entry("event", {"order": "1", "title": "Mid"})

        assert _ids(backend.get_entries()) == ["A", "id0001", "B"]

    def test_event_round_trip(self, make_service):
        service, _ = make_service()

        created = service.create_entry("event", {"title": "Opening", "time_start": 100, "time_end": 200})
        stored = service.get_entry(created.id)

        assert stored == created
        assert (stored.time_start, stored.time_end, stored.revision) == (100, 200, 0)
        assert stored.to_dict()["type"] == "event"

    def test_notifies_full_event_list(self, make_service, timer):
        service, _ = make_service([Event(id="A")])

        service.create_entry("event", {"order": 1})

        assert [_ids(u) for u in timer.full_updates] == [["A", "id0001"]]

    @pytest.mark.parametrize("order", [-1, "-3"])
    def test_negative_order_is_rejected(self, make_service, order):
        service, backend = make_service([Event(id="A")])

        with pytest.raises(InvalidPositionError):
            service.create_entry("block", {"order": order})

        assert _ids(backend.get_entries()) == ["A"]

    @pytest.mark.parametrize("order", ["top", "1.5", 1.7, True, False, [1]])
    def test_non_integer_order_is_rejected(self, make_service, order):
        service, _ = make_service([Event(id="A"), Event(id="B")])

        with pytest.raises(InvalidPositionError) as exc_info:
            service.create_entry("block", {"order": order})

        assert "integer" in exc_info.value.message

    def test_integral_float_order_is_accepted(self, make_service):
        service, backend = make_service([Event(id="A"), Event(id="B")])

        service.create_entry("block", {"order": 1.0})

        assert _ids(backend.get_entries()) == ["A", "id0001", "B"]

    def test_unknown_kind_changes_nothing(self, make_service, timer):
        service, backend = make_service([Event(id="A")])

        with pytest.raises(UnrecognizedTypeError):
            service.create_entry("song", {})

        assert _ids(backend.get_entries()) == ["A"]
        assert timer.calls == 0

    def test_existing_ids_are_never_reissued(self, timer):
        values = iter(["A", "B", "C"])
        service = RundownService(
            backend=InMemoryRundownBackend([Event(id="A"), Event(id="B")]),
            timer=timer,
            factory=EntryFactory(id_generator=lambda _n: next(values)),
        )

        assert service.create_entry("block").id == "C"


class TestInsertEntry:
    def test_inserted_id_is_reserved(self, timer):
        values = iter(["X", "Y"])
        service = RundownService(
            backend=InMemoryRundownBackend(),
            timer=timer,
            factory=EntryFactory(id_generator=lambda _n: next(values)),
        )

        service.insert_entry(Delay(id="X", duration=5), 0)

        assert service.create_entry("block").id == "Y"
        assert _ids(service.list_entries()) == ["Y", "X"]


class TestUpdateEntry:
    def test_update_bumps_revision(self, make_service, sample_entries, timer):
        service, _ = make_service(sample_entries)

        updated = service.update_entry({"id": "e2", "title": "Welcome"})

        assert updated.revision == 1
        assert timer.single_updates == [("e2", {"title": "Welcome", "revision": 1})]

    @pytest.mark.parametrize("fields", [{}, {"title": "x"}, {"id": "", "title": "x"}])
    def test_missing_id(self, make_service, sample_entries, fields):
        service, backend = make_service(sample_entries)

        with pytest.raises(MissingFieldError) as exc_info:
            service.update_entry(fields)

        assert exc_info.value.code == "MISSING_FIELD"
        assert backend.get_entries() == sample_entries

    def test_unknown_id(self, make_service, sample_entries):
        service, _ = make_service(sample_entries)

        with pytest.raises(EntryNotFoundError):
            service.update_entry({"id": "zzz", "title": "x"})


class TestFieldTypes:
    def test_bad_duration_never_reaches_the_rundown(self, make_service, sample_entries):
        service, backend = make_service(sample_entries)

        with pytest.raises(InvalidFieldError):
            service.create_entry("delay", {"duration": "abc"})

        assert backend.get_entries() == sample_entries
        assert _ids(service.apply_delay("d1")) == ["e1", "e2", "e3"]

    def test_bad_time_update_keeps_cascade_working(self, make_service, sample_entries):
        service, _ = make_service(sample_entries)

        with pytest.raises(InvalidFieldError):
            service.update_entry({"id": "e1", "time_start": "noon"})

        result = service.apply_delay("d1")
        assert result[0].time_start == 500


class TestOtherOperations:
    def test_list_events(self, make_service, sample_entries):
        service, _ = make_service(sample_entries)

        assert _ids(service.list_events()) == ["e1", "e2", "e3"]

    def test_delete_entry(self, make_service, sample_entries):
        service, backend = make_service(sample_entries)

        service.delete_entry("b1")

        assert _ids(backend.get_entries()) == ["d1", "e1", "e2", "e3"]

    def test_delete_unknown(self, make_service, sample_entries):
        service, backend = make_service(sample_entries)

        with pytest.raises(EntryNotFoundError):
            service.delete_entry("zzz")

        assert backend.get_entries() == sample_entries

    def test_reorder_entry(self, make_service, sample_entries):
        service, _ = make_service(sample_entries)

        result = service.reorder_entry("e3", 4, 0)

        assert _ids(result) == ["e3", "d1", "e1", "e2", "b1"]

    def test_reorder_stale(self, make_service, sample_entries):
        service, _ = make_service(sample_entries)

        with pytest.raises(StaleIndexError):
            service.reorder_entry("e3", 3, 0)

    def test_apply_delay(self, make_service, sample_entries, timer):
        service, _ = make_service(sample_entries)

        result = service.apply_delay("d1")

        assert _ids(result) == ["e1", "e2", "e3"]
        assert [e.time_start for e in timer.full_updates[-1]] == [500, 1500, 3000]

    def test_apply_delay_twice(self, make_service, sample_entries):
        service, _ = make_service(sample_entries)
        service.apply_delay("d1")

        with pytest.raises(DelayNotFoundError):
            service.apply_delay("d1")

    def test_concurrent_creates_are_all_kept(self, timer):
        service = RundownService(backend=InMemoryRundownBackend(), timer=timer)

        def worker():
            for _ in range(25):
                service.create_entry("block")

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        entries = service.list_entries()
        assert len(entries) == 100
        assert len({e.id for e in entries}) == 100
