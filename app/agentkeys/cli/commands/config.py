"""Settings commands.

Provides commands to inspect and change the agentkeys settings file,
such as where the agent config lives and how malformed ssh-keys blocks
are handled.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from agentkeys.cli.types import resolve_agent_config
from agentkeys.core.paths import get_settings_path
from agentkeys.core.reader import MalformedBlockPolicy
from agentkeys.core.settings import SettingsError, get_settings, save_settings
from agentkeys.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and change agentkeys settings.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the current settings."""
    settings = get_settings()
    settings_path = get_settings_path()

    table = Table(
        title="Settings",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", style="bold")
    table.add_column("Value")

    configured = str(settings.agent_config_path) if settings.agent_config_path else "-"
    table.add_row("agent_config_path", configured)
    table.add_row("effective agent config", str(settings.effective_agent_config_path))
    table.add_row("malformed_blocks", settings.malformed_blocks.value)
    console.print(table)

    if not settings_path.exists():
        console.print(f"\n[dim]No settings file at {settings_path}, using defaults[/dim]")


@app.command(name="set")
def set_value(
    agent_config: Annotated[
        Path | None,
        typer.Option(
            "--agent-config",
            help="Use this agent.toml instead of the platform default.",
        ),
    ] = None,
    default_agent_config: Annotated[
        bool,
        typer.Option(
            "--default-agent-config",
            help="Go back to the platform default agent.toml.",
        ),
    ] = False,
    malformed_blocks: Annotated[
        MalformedBlockPolicy | None,
        typer.Option(
            "--malformed-blocks",
            help="What to do with ssh-keys blocks of unexpected shape.",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """Change one or more settings."""
    if agent_config is not None and default_agent_config:
        print_error("--agent-config and --default-agent-config are mutually exclusive.")
        raise typer.Exit(code=1)

    if agent_config is None and not default_agent_config and malformed_blocks is None:
        print_info("Nothing to change. See 'agentkeys config set --help'.")
        return

    settings = get_settings()
    updates: dict[str, object] = {}
    if agent_config is not None:
        updates["agent_config_path"] = agent_config.expanduser().resolve()
    if default_agent_config:
        updates["agent_config_path"] = None
    if malformed_blocks is not None:
        updates["malformed_blocks"] = malformed_blocks

    try:
        saved_path = save_settings(settings.model_copy(update=updates))
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings saved to {saved_path}")


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the agent config path that will be edited."""
    agent_config_path, _ = resolve_agent_config(ctx)
    console.print(str(agent_config_path), markup=False, highlight=False, soft_wrap=True)
