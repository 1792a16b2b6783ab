"""Shared helpers for CLI command groups."""
