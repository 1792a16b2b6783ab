"""Rundown: ordered event management for live show control."""

__version__ = "0.1.0"
