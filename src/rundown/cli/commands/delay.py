from __future__ import annotations

import json

import typer

from ...core.exceptions import RundownError
from ...usecases import delay_apply as _uc_delay_apply
from ._ops.rundown_context import fail, fail_rundown, get_service

app = typer.Typer(name="delay", help="Delay cascade operations")


@app.command("apply")
def apply_delay(
    delay_id: str = typer.Argument(..., help="Id of the delay entry to apply"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
    test_db: bool = typer.Option(False, "--test-db", help="Use the database at TEST_DATABASE_URL (must be set)"),
):
    """Apply a delay to the following events and remove it.

    Every event after the delay is shifted by its duration until the next
    block, which is removed together with the delay.

    Examples:
        rundown delay apply d4e5f6
        rundown delay apply d4e5f6 --json
    """
    try:
        result = _uc_delay_apply.apply_delay(get_service(test_db), delay_id=delay_id)
    except RundownError as e:
        fail_rundown(e, json_output)
    except Exception as e:
        fail("UNKNOWN_ERROR", f"Error applying delay: {e}", json_output)

    if json_output:
        typer.echo(json.dumps({"status": "ok", **result}, indent=2))
    else:
        typer.echo(f"Delay applied: {result['id']}")
        typer.echo(f"  Entries remaining: {result['count']}")
