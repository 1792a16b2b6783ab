"""
Rundown core: entry factory, entry store, ordering and delay cascade engines,
and the change notifier that keeps the timer subsystem in sync.

Import engines from their modules (``rundown.core.service`` etc.); only the
error taxonomy is re-exported here.
"""

from .exceptions import (
    ConfigurationError,
    DelayNotFoundError,
    DuplicateEntryError,
    EntryNotFoundError,
    InvalidFieldError,
    InvalidPositionError,
    MissingFieldError,
    RundownError,
    StaleIndexError,
    UnrecognizedTypeError,
)

__all__ = [
    "RundownError",
    "UnrecognizedTypeError",
    "MissingFieldError",
    "InvalidFieldError",
    "EntryNotFoundError",
    "DelayNotFoundError",
    "StaleIndexError",
    "InvalidPositionError",
    "DuplicateEntryError",
    "ConfigurationError",
]
