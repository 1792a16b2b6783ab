"""
Domain layer - rundown entry variants.

These entities are independent of persistence and transport concerns.
"""

from .entities import (
    Block,
    Delay,
    Entry,
    Event,
    build_entry,
    entry_class,
    entry_from_dict,
    field_names,
    is_event,
)

__all__ = [
    "Block",
    "Delay",
    "Entry",
    "Event",
    "build_entry",
    "entry_class",
    "entry_from_dict",
    "field_names",
    "is_event",
]
