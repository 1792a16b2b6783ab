"""
Shared types and enums for Rundown.

This module contains common types and enums that are used across
the domain, core, CLI, and other layers.
"""

from __future__ import annotations

from enum import Enum


class EntryKind(str, Enum):
    """Kinds of entries that can appear in a rundown."""

    EVENT = "event"
    DELAY = "delay"
    BLOCK = "block"

    @classmethod
    def parse(cls, value: object) -> EntryKind | None:
        """Return the matching kind, or None for a missing or unknown tag."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None
