"""Console output helpers.

stdout carries results, stderr carries warnings and errors, both styled
with the agentkeys theme.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from agentkeys.core.theme import get_theme

if TYPE_CHECKING:
    from agentkeys.models.record import Record


def _make_console(stderr: bool = False) -> Console:
    # Hex theme colors need truecolor; piped output stays uncolored
    stream = sys.stderr if stderr else sys.stdout
    color_system = "truecolor" if stream.isatty() else None
    return Console(theme=get_theme(), stderr=stderr, color_system=color_system)


console = _make_console()
err_console = _make_console(stderr=True)


def create_records_table(title: str = "SSH Keys") -> Table:
    """Create a pre-configured table for displaying ssh-keys records.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for record display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],  # Zebra striping for readability
    )
    table.add_column("#", style="muted", justify="right")
    table.add_column("", width=2, justify="center")
    table.add_column("Kind", width=6)
    table.add_column("Item", no_wrap=True)
    table.add_column("Vault", no_wrap=True)
    return table


def format_record_row(position: int, record: Record, active: bool) -> tuple[str, str, str, str, str]:
    """Format a record as a table row with proper styling.

    Active records are shown with a filled circle, inactive ones with an
    empty circle and muted styling.

    Args:
        position: 0-based position of the record; shown 1-based.
        record: The record to format.
        active: Whether the record is enabled.

    Returns:
        Tuple of (position, icon, kind, item, vault) with Rich markup.
    """
    style = "enabled" if active else "disabled"
    icon = f"[{style}]●[/]" if active else f"[{style}]○[/]"
    data = record.to_dict()
    item = escape(data.get("item", "-"))
    vault = escape(data["vault"])

    return (
        str(position + 1),
        icon,
        f"[{style}]{data['kind']}[/]",
        f"[{style}]{item}[/]",
        f"[{style}]{vault}[/]",
    )


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
