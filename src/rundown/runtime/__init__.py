"""Runtime collaborators that consume rundown change notifications."""

from .event_timer import EventTimer

__all__ = ["EventTimer"]
