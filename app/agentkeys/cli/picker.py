"""Interactive toggle list for ssh-keys records.

Renders a Rich Live screen with one checkbox per record and reads
single key presses with readchar. Every key press is turned into an
intent (move, toggle, help, quit) that is applied to the selection
store; the store itself is never touched by the rendering code.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

import readchar
from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.text import Text

from agentkeys.core.store import SelectionStore
from agentkeys.utils.formatting import console

logger = logging.getLogger(__name__)

TITLE = "Toggle which SSH keys you would like"

# Rows used by the title and the blank line below it
_HEADER_ROWS = 2


class Intent(Enum):
    """Discrete actions produced by key presses."""

    UP = "up"
    DOWN = "down"
    TOGGLE = "toggle"
    SELECT_ALL = "select_all"
    SELECT_NONE = "select_none"
    HELP = "help"
    QUIT = "quit"
    NONE = "none"


KEY_BINDINGS: dict[Intent, tuple[str, ...]] = {
    Intent.UP: (readchar.key.UP, "k"),
    Intent.DOWN: (readchar.key.DOWN, "j"),
    Intent.TOGGLE: (readchar.key.ENTER, "\r", "\n", " "),
    Intent.SELECT_ALL: ("a",),
    Intent.SELECT_NONE: ("n",),
    Intent.HELP: ("?",),
    Intent.QUIT: ("q", "\x1b", "\x03"),
}

# (keys, description) pairs shown in the help footer
FULL_HELP: list[tuple[str, str]] = [
    ("↑/k", "move up"),
    ("↓/j", "move down"),
    ("enter/space", "toggle selection"),
    ("a", "select all"),
    ("n", "select none"),
    ("?", "toggle help"),
    ("q", "save and quit"),
]
SHORT_HELP: list[tuple[str, str]] = [("?", "toggle help"), ("q", "quit")]


@dataclass
class PickerState:
    """Cursor and view state of the picker.

    Attributes:
        cursor: Position of the highlighted record.
        show_help: Whether the full help is shown.
        scroll_offset: First record position currently visible.
    """

    cursor: int = 0
    show_help: bool = False
    scroll_offset: int = 0


def resolve_key(key: str) -> Intent:
    """Map a key press to an intent.

    Args:
        key: Key string as returned by readchar.readkey().

    Returns:
        Matching Intent, or Intent.NONE for unbound keys.
    """
    for intent, keys in KEY_BINDINGS.items():
        if key in keys:
            return intent
    return Intent.NONE


def move_cursor(cursor: int, total: int, direction: int) -> int:
    """Move the cursor one step, wrapping around at both ends.

    Args:
        cursor: Current cursor position.
        total: Number of records.
        direction: -1 for up, 1 for down.

    Returns:
        New cursor position (0 if the list is empty).
    """
    if total <= 0:
        return 0
    return (cursor + direction) % total


def visible_range(cursor: int, total: int, max_visible: int, scroll_offset: int) -> tuple[int, int, int]:
    """Calculate the visible window of a scrolling list.

    Args:
        cursor: Current cursor position.
        total: Number of records.
        max_visible: Maximum number of rows that fit on screen.
        scroll_offset: Previous first visible position.

    Returns:
        Tuple of (start, end, scroll_offset) where end is exclusive.
    """
    if total == 0:
        return 0, 0, 0
    max_visible = max(1, max_visible)
    cursor = max(0, min(cursor, total - 1))
    if cursor < scroll_offset:
        scroll_offset = cursor
    elif cursor >= scroll_offset + max_visible:
        scroll_offset = cursor - max_visible + 1
    scroll_offset = max(0, min(scroll_offset, max(0, total - max_visible)))
    end = min(total, scroll_offset + max_visible)
    return scroll_offset, end, scroll_offset


def apply_intent(store: SelectionStore, state: PickerState, intent: Intent) -> bool:
    """Apply an intent to the store and picker state.

    Args:
        store: Selection store being edited.
        state: Picker state to update.
        intent: Intent to apply.

    Returns:
        False if the picker should exit, True otherwise.
    """
    total = store.count()

    if intent == Intent.QUIT:
        return False
    if intent == Intent.UP:
        state.cursor = move_cursor(state.cursor, total, -1)
    elif intent == Intent.DOWN:
        state.cursor = move_cursor(state.cursor, total, 1)
    elif intent == Intent.TOGGLE and total:
        store.toggle(state.cursor)
    elif intent == Intent.SELECT_ALL:
        store.select_all()
    elif intent == Intent.SELECT_NONE:
        store.select_none()
    elif intent == Intent.HELP:
        state.show_help = not state.show_help

    return True


def _help_lines(show_help: bool) -> list[str]:
    bindings = FULL_HELP if show_help else SHORT_HELP
    if not show_help:
        return [" • ".join(f"{escape(keys)} [muted]{desc}[/]" for keys, desc in bindings)]
    width = max(len(keys) for keys, _ in bindings)
    return [f"{escape(keys.ljust(width))}  [muted]{desc}[/]" for keys, desc in bindings]


def render_picker(
    store: SelectionStore,
    state: PickerState,
    max_visible: int | None = None,
) -> str:
    """Render the picker as Rich markup.

    Args:
        store: Selection store to display.
        state: Current picker state. scroll_offset is updated to keep the
            cursor visible.
        max_visible: Maximum number of record rows. If None, shows all.

    Returns:
        Markup string for the whole screen.
    """
    lines: list[str] = [f"[bold_header]{TITLE}[/]", ""]
    total = store.count()

    if total == 0:
        lines.append("[muted]No ssh-keys entries found.[/]")
    else:
        start, end, state.scroll_offset = visible_range(
            state.cursor,
            total,
            max_visible if max_visible is not None else total,
            state.scroll_offset,
        )
        if start > 0:
            lines.append(f"[muted]  ↑ {start} more[/]")
        for position in range(start, end):
            record = store.records[position]
            pointer = "[cursor]>[/]" if position == state.cursor else " "
            if store.is_selected(position):
                checkbox = "[enabled]\\[x][/]"
                label = f"[text]{escape(record.label)}[/]"
            else:
                checkbox = "[disabled]\\[ ][/]"
                label = f"[muted]{escape(record.label)}[/]"
            lines.append(f"{pointer} {checkbox} {label}")
        if end < total:
            lines.append(f"[muted]  ↓ {total - end} more[/]")

    lines.append("")
    lines.extend(_help_lines(state.show_help))
    return "\n".join(lines)


def _max_visible_rows(live_console: Console, show_help: bool) -> int:
    """Number of record rows that fit between the title and the help footer."""
    footer_rows = 1 + len(_help_lines(show_help))
    # Reserve two rows for the scroll indicators
    return max(1, live_console.size.height - _HEADER_ROWS - footer_rows - 2)


def run_picker(
    store: SelectionStore,
    read_key: Callable[[], str] = readchar.readkey,
    live_console: Console | None = None,
) -> None:
    """Run the interactive picker until the user quits.

    The store is edited in place. Saving is left to the caller.

    Args:
        store: Selection store to edit.
        read_key: Function returning the next key press.
        live_console: Console to render on. If None, uses the shared console.
    """
    if live_console is None:
        live_console = console

    state = PickerState()

    with Live("", console=live_console, auto_refresh=False, screen=True) as live:
        while True:
            max_visible = _max_visible_rows(live_console, state.show_help)
            live.update(Text.from_markup(render_picker(store, state, max_visible)), refresh=True)

            try:
                key = read_key()
            except (KeyboardInterrupt, EOFError):
                logger.debug("Picker interrupted, quitting")
                break

            if not apply_intent(store, state, resolve_key(key)):
                break

    logger.debug("Picker closed with %d of %d record(s) active", len(store.selected), len(store))
