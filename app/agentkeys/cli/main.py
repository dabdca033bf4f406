"""agentkeys command line interface.

The root command opens the picker; subcommands cover listing,
non-interactive edits and settings.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from agentkeys import __version__
from agentkeys.cli.commands import config, disable, enable, listing, toggle
from agentkeys.utils.formatting import err_console

app = typer.Typer(
    name="agentkeys",
    help="Toggle SSH keys in the 1Password SSH agent configuration.",
    invoke_without_command=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"agentkeys version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False, show_time=False)],
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log reader and writer details to stderr.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print errors and requested data.",
        ),
    ] = False,
    agent_config: Annotated[
        Path | None,
        typer.Option(
            "--agent-config",
            "-c",
            help="Path to agent.toml (overrides settings and platform default).",
        ),
    ] = None,
) -> None:
    """agentkeys - Toggle SSH keys in the 1Password SSH agent configuration.

    Without a command, opens the interactive picker.
    """
    _configure_logging(verbose)

    # Global options are read back through cli.types helpers
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["agent_config"] = agent_config

    if ctx.invoked_subcommand is None:
        toggle.toggle_keys(ctx, dry_run=False)


# Subcommands
app.add_typer(toggle.app, name="toggle")
app.add_typer(listing.app, name="list")
app.command(name="enable")(enable.enable_keys)
app.command(name="disable")(disable.disable_keys)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
