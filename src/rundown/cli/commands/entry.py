from __future__ import annotations

import json

import typer

from ...core.exceptions import RundownError
from ...usecases import entry_add as _uc_entry_add
from ...usecases import entry_delete as _uc_entry_delete
from ...usecases import entry_list as _uc_entry_list
from ...usecases import entry_reorder as _uc_entry_reorder
from ...usecases import entry_update as _uc_entry_update
from ._ops.rundown_context import fail, fail_rundown, get_service, parse_field_options

app = typer.Typer(name="entry", help="Rundown entry operations")


def _describe(entry: dict) -> str:
    kind = entry["type"]
    if kind == "event":
        return f"{entry['title'] or '(untitled)'} [{entry['time_start']} - {entry['time_end']}] rev {entry['revision']}"
    if kind == "delay":
        return f"delay {entry['duration']} ms"
    return "block"


@app.command("list")
def list_entries(
    events_only: bool = typer.Option(False, "--events-only", help="Show only event entries"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
    test_db: bool = typer.Option(False, "--test-db", help="Use the database at TEST_DATABASE_URL (must be set)"),
):
    """List rundown entries in show order.

    Examples:
        rundown entry list
        rundown entry list --events-only --json
    """
    try:
        result = _uc_entry_list.list_entries(get_service(test_db), events_only=events_only)
    except RundownError as e:
        fail_rundown(e, json_output)
    except Exception as e:
        fail("UNKNOWN_ERROR", f"Error listing entries: {e}", json_output)

    if json_output:
        payload = {"status": "ok", "total": result["count"], "entries": result["entries"]}
        typer.echo(json.dumps(payload, indent=2))
        return

    if not result["entries"]:
        typer.echo("No entries found")
        return

    from rich.console import Console
    from rich.table import Table

    table = Table(title="Rundown")
    table.add_column("#", style="yellow")
    table.add_column("ID", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Details", style="green")
    for entry in result["entries"]:
        table.add_row(str(entry["index"]), entry["id"], entry["type"], _describe(entry))
    Console().print(table)
    typer.echo(f"\nTotal: {result['count']} entries")


@app.command("show")
def show_entry(
    entry_id: str = typer.Argument(..., help="Entry id"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
    test_db: bool = typer.Option(False, "--test-db", help="Use the database at TEST_DATABASE_URL (must be set)"),
):
    """Show a single entry."""
    try:
        result = _uc_entry_list.show_entry(get_service(test_db), entry_id=entry_id)
    except RundownError as e:
        fail_rundown(e, json_output)
    except Exception as e:
        fail("UNKNOWN_ERROR", f"Error showing entry: {e}", json_output)

    if json_output:
        typer.echo(json.dumps({"status": "ok", "entry": result}, indent=2))
        return

    typer.echo(f"Entry {result['id']} ({result['type']}):")
    for key, value in result.items():
        if key in ("id", "type"):
            continue
        typer.echo(f"  {key}: {value}")


@app.command("add")
def add_entry(
    kind: str = typer.Option(..., "--type", help="Entry type: event, delay or block"),
    order: int | None = typer.Option(None, "--order", help="Insert position (default: first)"),
    field: list[str] | None = typer.Option(None, "--field", help="Field as key=value (repeatable)"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
    test_db: bool = typer.Option(False, "--test-db", help="Use the database at TEST_DATABASE_URL (must be set)"),
):
    """Create an entry and insert it into the rundown.

    Examples:
        rundown entry add --type event --field title='"Opening"' --field time_start=0 --field time_end=300000
        rundown entry add --type delay --field duration=60000 --order 2
        rundown entry add --type block --order 99
    """
    fields = parse_field_options(field)
    if order is not None:
        fields["order"] = order

    try:
        result = _uc_entry_add.add_entry(get_service(test_db), kind=kind, fields=fields)
    except RundownError as e:
        fail_rundown(e, json_output)
    except Exception as e:
        fail("UNKNOWN_ERROR", f"Error creating entry: {e}", json_output)

    if json_output:
        typer.echo(json.dumps({"status": "ok", "entry": result}, indent=2))
    else:
        typer.echo("Entry created:")
        typer.echo(f"  ID: {result['id']}")
        typer.echo(f"  Type: {result['type']}")
        typer.echo(f"  {_describe(result)}")


@app.command("update")
def update_entry(
    entry_id: str = typer.Argument(..., help="Entry id"),
    field: list[str] | None = typer.Option(None, "--field", help="Field as key=value (repeatable)"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
    test_db: bool = typer.Option(False, "--test-db", help="Use the database at TEST_DATABASE_URL (must be set)"),
):
    """Update fields of an existing entry.

    Examples:
        rundown entry update a1b2c3 --field title='"Keynote"' --field time_end=5400000
    """
    fields = parse_field_options(field)
    if not fields:
        fail("VALIDATION_ERROR", "At least one --field is required", json_output)
    fields["id"] = entry_id

    try:
        result = _uc_entry_update.update_entry(get_service(test_db), fields=fields)
    except RundownError as e:
        fail_rundown(e, json_output)
    except Exception as e:
        fail("UNKNOWN_ERROR", f"Error updating entry: {e}", json_output)

    if json_output:
        typer.echo(json.dumps({"status": "ok", "entry": result}, indent=2))
    else:
        typer.echo(f"Entry updated: {result['id']}")
        typer.echo(f"  {_describe(result)}")


@app.command("delete")
def delete_entry(
    entry_id: str = typer.Argument(..., help="Entry id"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
    test_db: bool = typer.Option(False, "--test-db", help="Use the database at TEST_DATABASE_URL (must be set)"),
):
    """Delete an entry from the rundown."""
    try:
        result = _uc_entry_delete.delete_entry(get_service(test_db), entry_id=entry_id)
    except RundownError as e:
        fail_rundown(e, json_output)
    except Exception as e:
        fail("UNKNOWN_ERROR", f"Error deleting entry: {e}", json_output)

    if json_output:
        typer.echo(json.dumps(result, indent=2))
    else:
        typer.echo(f"Entry deleted: {result['id']}")


@app.command("reorder")
def reorder_entry(
    entry_id: str = typer.Argument(..., help="Id of the entry currently at --from"),
    from_index: int = typer.Option(..., "--from", help="Current index of the entry"),
    to_index: int = typer.Option(..., "--to", help="Target index"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
    test_db: bool = typer.Option(False, "--test-db", help="Use the database at TEST_DATABASE_URL (must be set)"),
):
    """Move an entry to a new position.

    The command is rejected with STALE_INDEX when the entry is no longer at
    --from; list the rundown again and retry.
    """
    try:
        result = _uc_entry_reorder.reorder_entry(
            get_service(test_db),
            entry_id=entry_id,
            from_index=from_index,
            to_index=to_index,
        )
    except RundownError as e:
        fail_rundown(e, json_output)
    except Exception as e:
        fail("UNKNOWN_ERROR", f"Error reordering entry: {e}", json_output)

    if json_output:
        typer.echo(json.dumps({"status": "ok", **result}, indent=2))
    else:
        typer.echo(f"Entry {result['id']} moved from {result['from']} to {result['to']}")
        typer.echo(f"  Order: {', '.join(result['order'])}")
