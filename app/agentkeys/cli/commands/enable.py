"""Enable command implementation.

Turns ssh-keys entries on without opening the picker.
"""

from typing import Annotated

import typer

from agentkeys.cli.types import set_positions


def enable_keys(
    ctx: typer.Context,
    positions: Annotated[
        list[int],
        typer.Argument(help="Positions as shown by 'agentkeys list'."),
    ],
) -> None:
    """Enable the SSH keys at the given positions."""
    set_positions(ctx, positions, active=True)
