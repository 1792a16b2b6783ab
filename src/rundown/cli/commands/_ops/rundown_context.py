"""Wiring of a RundownService for CLI commands."""

from __future__ import annotations

import json
from typing import Any, NoReturn

import typer

from ....core.exceptions import RundownError
from ....core.factory import EntryFactory
from ....core.service import RundownService
from ....infra.db import get_sessionmaker, init_db
from ....infra.persistence import SqlRundownBackend
from ....infra.settings import settings
from ....runtime.event_timer import EventTimer


def get_service(test_db: bool = False) -> RundownService:
    """Build a service over the configured (or test) database."""
    session_factory = get_sessionmaker(for_test=test_db)
    init_db(session_factory.kw["bind"])
    return RundownService(
        backend=SqlRundownBackend(session_factory),
        timer=EventTimer(),
        factory=EntryFactory(id_length=settings.entry_id_length),
    )


def parse_field_options(pairs: list[str] | None) -> dict[str, Any]:
    """Turn repeated ``key=value`` options into a fields mapping.

    Values are decoded as JSON when possible (``100``, ``true``, ``"x"``)
    and kept as raw strings otherwise.
    """
    fields: dict[str, Any] = {}
    for pair in pairs or []:
        key, sep, raw = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got '{pair}'", param_hint="--field")
        try:
            fields[key] = json.loads(raw)
        except json.JSONDecodeError:
            fields[key] = raw
    return fields


def fail(code: str, message: str, json_output: bool) -> NoReturn:
    """Report an error in the requested format and exit with status 1."""
    if json_output:
        typer.echo(json.dumps({"status": "error", "code": code, "message": message}, indent=2))
    else:
        typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)


def fail_rundown(error: RundownError, json_output: bool) -> NoReturn:
    fail(error.code, error.message, json_output)
