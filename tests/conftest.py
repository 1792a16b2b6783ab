"""
Global test configuration for Rundown.

This module provides global pytest configuration and fixtures.
"""

import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Ensure the project src directory is importable without relying on external environment.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from rundown.core.factory import EntryFactory
from rundown.core.service import RundownService
from rundown.domain.entities import Block, Delay, Event
from rundown.infra.db import init_db
from rundown.infra.persistence import InMemoryRundownBackend


class RecordingTimer:
    """Timer double that records every notification it receives."""

    def __init__(self):
        self.full_updates = []
        self.single_updates = []

    def on_full_event_list_changed(self, events):
        self.full_updates.append(list(events))

    def on_single_event_changed(self, entry_id, fields):
        self.single_updates.append((entry_id, dict(fields)))

    @property
    def calls(self):
        return len(self.full_updates) + len(self.single_updates)


def sequential_ids(prefix="id"):
    """Id generator producing id0001, id0002, ... regardless of length."""
    counter = iter(range(1, 100_000))
    return lambda _length: f"{prefix}{next(counter):04d}"


@pytest.fixture
def timer():
    return RecordingTimer()


@pytest.fixture
def sample_entries():
    """[Delay(D), Event, Event, Block, Event] with D = 500 ms."""
    return [
        Delay(id="d1", duration=500),
        Event(id="e1", title="Doors", time_start=0, time_end=1000, revision=2),
        Event(id="e2", title="Opening", time_start=1000, time_end=2000),
        Block(id="b1"),
        Event(id="e3", title="Keynote", time_start=3000, time_end=4000),
    ]


@pytest.fixture
def make_service(timer):
    """Build a service over an in-memory backend seeded with ``entries``."""

    def _make(entries=None):
        backend = InMemoryRundownBackend(entries)
        service = RundownService(
            backend=backend,
            timer=timer,
            factory=EntryFactory(id_generator=sequential_ids()),
        )
        return service, backend

    return _make


@pytest.fixture
def sqlite_session_factory(tmp_path):
    """Session factory bound to a fresh sqlite file with tables created."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'rundown.db'}",
        future=True,
        connect_args={"check_same_thread": False},
    )
    init_db(engine)
    yield sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    engine.dispose()
