"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum
from pathlib import Path

import typer

from agentkeys.core.errors import AgentConfigError, AgentConfigWriteError
from agentkeys.core.reader import MalformedBlockPolicy, load_agent_config
from agentkeys.core.settings import get_settings
from agentkeys.core.store import SelectionStore
from agentkeys.core.writer import save_agent_config
from agentkeys.utils.formatting import print_error, print_info, print_success


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def is_quiet(ctx: typer.Context) -> bool:
    """Check whether --quiet was given on the main command."""
    return bool((ctx.obj or {}).get("quiet", False))


def resolve_agent_config(ctx: typer.Context) -> tuple[Path, MalformedBlockPolicy]:
    """Resolve the agent config path and malformed block policy.

    Path priority: --agent-config option, then the settings file, then
    the platform default.

    Args:
        ctx: Typer context carrying the global options.

    Returns:
        Tuple of (agent config path, malformed block policy).
    """
    settings = get_settings()
    override: Path | None = (ctx.obj or {}).get("agent_config")
    path = override.expanduser() if override is not None else settings.effective_agent_config_path
    return path, settings.malformed_blocks


def require_store(ctx: typer.Context) -> tuple[SelectionStore, Path]:
    """Load the agent config or exit with a helpful error message.

    Args:
        ctx: Typer context carrying the global options.

    Returns:
        Tuple of (loaded store, agent config path).

    Raises:
        typer.Exit: If the agent config cannot be loaded.
    """
    path, policy = resolve_agent_config(ctx)
    try:
        return load_agent_config(path, policy), path
    except AgentConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def save_or_exit(store: SelectionStore, path: Path) -> None:
    """Save the store or exit loudly, since unsaved edits are lost.

    Raises:
        typer.Exit: If the agent config cannot be written.
    """
    try:
        save_agent_config(store, path)
    except AgentConfigWriteError as e:
        print_error(str(e))
        print_error("Your changes were NOT saved.")
        raise typer.Exit(code=1) from e


def set_positions(ctx: typer.Context, positions: list[int], active: bool) -> None:
    """Enable or disable records by their 1-based positions and save.

    All positions are validated before anything is changed.

    Args:
        ctx: Typer context carrying the global options.
        positions: 1-based positions as shown by the list command.
        active: True to enable, False to disable.

    Raises:
        typer.Exit: If a position is invalid or saving fails.
    """
    store, path = require_store(ctx)

    invalid = [p for p in positions if not 1 <= p <= len(store)]
    if invalid:
        print_error(
            f"No SSH key at position(s) {', '.join(map(str, invalid))} "
            f"({len(store)} entries in {path})"
        )
        raise typer.Exit(code=1)

    changed = {p for p in positions if store.is_selected(p - 1) != active}
    for p in changed:
        store.set_selected(p - 1, active)

    verb = "enabled" if active else "disabled"
    if not changed:
        print_info(f"Nothing to change, already {verb}.")
        return

    save_or_exit(store, path)
    if not is_quiet(ctx):
        print_success(f"{verb.capitalize()} {len(changed)} SSH key(s).")
