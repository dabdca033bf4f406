"""Disable command implementation.

Comments ssh-keys entries out without opening the picker.
"""

from typing import Annotated

import typer

from agentkeys.cli.types import set_positions


def disable_keys(
    ctx: typer.Context,
    positions: Annotated[
        list[int],
        typer.Argument(help="Positions as shown by 'agentkeys list'."),
    ],
) -> None:
    """Disable the SSH keys at the given positions."""
    set_positions(ctx, positions, active=False)
