"""List command implementation.

Shows the ssh-keys entries of the agent config and whether each one
is enabled.
"""

import json
from typing import Annotated

import typer

from agentkeys.cli.types import OutputFormat, require_store
from agentkeys.utils.formatting import (
    console,
    create_records_table,
    format_record_row,
    print_info,
)

app = typer.Typer(
    help="List SSH keys in the agent config.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def list_keys(
    ctx: typer.Context,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show every ssh-keys entry with its position and state."""
    store, path = require_store(ctx)

    if output_format == OutputFormat.JSON:
        data = [
            {"position": position + 1, **record.to_dict(), "active": active}
            for position, (record, active) in enumerate(store.entries())
        ]
        console.print_json(json.dumps(data))
        return

    if not store.count():
        print_info(f"No ssh-keys entries found in {path}")
        return

    table = create_records_table()
    for position, (record, active) in enumerate(store.entries()):
        table.add_row(*format_record_row(position, record, active))
    console.print(table)

    console.print(f"\n[dim]{len(store.selected)} of {len(store)} SSH key(s) enabled[/dim]")
