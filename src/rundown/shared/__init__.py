"""Shared types used across Rundown layers."""

from .types import EntryKind

__all__ = ["EntryKind"]
