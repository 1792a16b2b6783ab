"""
Main CLI application using Typer with router-based command dispatch.

This module provides the command-line interface for Rundown,
calling use cases and outputting JSON when requested.
"""

from __future__ import annotations

import typer

from ..infra.logging import configure_logging
from .commands import delay, entry
from .router import get_router

app = typer.Typer(help="Rundown operator CLI")

router = get_router(app)

router.register(
    "entry",
    entry.app,
    help_text="Rundown entry operations",
)

router.register(
    "delay",
    delay.app,
    help_text="Delay cascade operations",
)


@app.callback()
def main(
    log_level: str | None = typer.Option(None, "--log-level", help="Override LOG_LEVEL"),
):
    """Rundown - ordered event management for live show control."""
    configure_logging(log_level)


def cli():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
