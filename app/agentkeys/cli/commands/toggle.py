"""Toggle command implementation.

Opens the interactive picker on the agent config and writes the result
back when the user quits.
"""

from typing import Annotated

import typer

from agentkeys.cli.picker import run_picker
from agentkeys.cli.types import is_quiet, resolve_agent_config, save_or_exit
from agentkeys.core.errors import AgentConfigError
from agentkeys.core.reader import load_agent_config
from agentkeys.core.store import SelectionStore
from agentkeys.core.writer import serialize_agent_config
from agentkeys.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    help="Interactively enable or disable SSH keys.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def toggle_keys(
    ctx: typer.Context,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Print the resulting agent config instead of writing it.",
        ),
    ] = False,
) -> None:
    """Choose which SSH keys the 1Password agent offers."""
    path, policy = resolve_agent_config(ctx)

    readable = True
    try:
        store = load_agent_config(path, policy)
    except AgentConfigError as e:
        print_error(str(e))
        print_warning("Starting with an empty list; nothing will be saved.")
        store = SelectionStore()
        readable = False

    run_picker(store)

    if not readable:
        raise typer.Exit(code=1)

    if dry_run:
        console.print(serialize_agent_config(store), markup=False, highlight=False, end="")
        return

    save_or_exit(store, path)

    if not is_quiet(ctx):
        print_success(f"Saved {len(store.selected)} of {len(store)} SSH key(s) as active.")
