"""Agent configuration reader.

Scans the raw text of the 1Password SSH agent configuration into an
ordered list of records plus the set of records that are active.

The reader understands only the two ``[[ssh-keys]]`` block shapes::

    [[ssh-keys]]
    vault = "Personal"

    #[[ssh-keys]]
    #item = "GitHub"
    #vault = "Work"

A block whose header is not commented out marks its position as
selected. Lines outside of ssh-keys blocks are ignored, so any other
content of the file is not represented and is lost when the file is
written back.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from agentkeys.core.errors import AgentConfigReadError, MalformedBlockError
from agentkeys.core.store import SelectionStore
from agentkeys.models.record import (
    COMMENT_PREFIX,
    SSH_KEYS_HEADER,
    ItemRecord,
    Record,
    VaultRecord,
)

logger = logging.getLogger(__name__)

# Separator between a key and its quoted value
FIELD_SEPARATOR = " = "


class MalformedBlockPolicy(str, Enum):
    """What to do with an ssh-keys block that matches neither shape."""

    DROP = "drop"
    WARN = "warn"
    ERROR = "error"


@dataclass
class _OpenBlock:
    """An ssh-keys block whose body is still being collected."""

    line_number: int
    body: list[str] = field(default_factory=list)


def _uncomment(line: str) -> str:
    """Strip surrounding whitespace and a single leading comment marker."""
    return line.strip().removeprefix(COMMENT_PREFIX).strip()


def _line_key(line: str) -> str:
    """Return the key of a ``key = value`` line, or an empty string."""
    content = _uncomment(line)
    if "=" not in content:
        return ""
    return content.split("=", 1)[0].strip()


def _line_value(line: str) -> str:
    """Return the value after the first separator with its quotes removed.

    Raises:
        ValueError: If the line has no separator.
    """
    if FIELD_SEPARATOR not in line:
        msg = f"missing '{FIELD_SEPARATOR.strip()}' in {line.strip()!r}"
        raise ValueError(msg)
    value = line.split(FIELD_SEPARATOR, 1)[1].strip()
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        value = value[1:-1]
    return value


def _shape_complete(body: list[str]) -> bool:
    """Whether the body already has the lines its shape needs."""
    return len(body) == (1 if _line_key(body[0]) == "vault" else 2)


def _build_record(body: list[str], at_eof: bool) -> Record:
    """Turn the body lines of a finished block into a record.

    Fields are taken by position: a vault block reads its vault from
    body line 0, an item block reads the item from line 0 and the vault
    from line 1.

    Raises:
        ValueError: If the body matches neither record shape.
    """
    if not body:
        msg = "header without body lines"
        raise ValueError(msg)

    if len(body) == 2:
        return ItemRecord(item=_line_value(body[0]), vault=_line_value(body[1]))

    if _line_key(body[0]) == "vault":
        return VaultRecord(vault=_line_value(body[0]))

    if at_eof:
        # Trailing half-written block: keep whatever name it has
        logger.debug("Flushing incomplete trailing block as vault: %r", body[0].strip())
        return VaultRecord(vault=_line_value(body[0]))

    msg = "item block has 1 body line, expected 2"
    raise ValueError(msg)


class _BlockScanner:
    """Single forward pass over configuration lines."""

    def __init__(self, policy: MalformedBlockPolicy) -> None:
        self._policy = policy
        self._records: list[Record] = []
        self._selected: set[int] = set()
        self._block: _OpenBlock | None = None

    def feed(self, line_number: int, line: str) -> None:
        trimmed = line.strip()

        if not trimmed:
            return

        if SSH_KEYS_HEADER in trimmed:
            self._close()
            # Selection is recorded against the position the block will take
            if not trimmed.startswith(COMMENT_PREFIX):
                self._selected.add(len(self._records))
            self._block = _OpenBlock(line_number=line_number)
            return

        if self._block is None:
            return

        if _uncomment(trimmed).startswith("["):
            # Another table starts; it is not part of this block
            self._close()
            return

        self._block.body.append(line)
        if _shape_complete(self._block.body):
            self._close()

    def finish(self) -> SelectionStore:
        self._close(at_eof=True)

        dangling = {position for position in self._selected if position >= len(self._records)}
        if dangling:
            logger.debug("Discarding selection of dropped trailing block(s): %s", sorted(dangling))

        return SelectionStore(self._records, self._selected - dangling)

    def _close(self, at_eof: bool = False) -> None:
        block = self._block
        if block is None:
            return
        self._block = None

        try:
            record = _build_record(block.body, at_eof)
        except ValueError as e:
            self._handle_malformed(block.line_number, str(e))
            return

        self._records.append(record)

    def _handle_malformed(self, line_number: int, reason: str) -> None:
        if self._policy == MalformedBlockPolicy.ERROR:
            raise MalformedBlockError(line_number, reason)
        if self._policy == MalformedBlockPolicy.WARN:
            logger.warning("Dropping malformed ssh-keys block at line %d: %s", line_number, reason)
        else:
            logger.debug("Dropping malformed ssh-keys block at line %d: %s", line_number, reason)


def parse_agent_config(
    text: str,
    policy: MalformedBlockPolicy = MalformedBlockPolicy.DROP,
) -> SelectionStore:
    """Parse agent configuration text into a selection store.

    Args:
        text: Full content of the agent configuration file.
        policy: How to treat blocks that match neither record shape.

    Returns:
        SelectionStore with records in file order and the active ones selected.

    Raises:
        MalformedBlockError: If policy is ERROR and a malformed block is found.
    """
    scanner = _BlockScanner(policy)
    # Only \n ends a line; \r\n is tolerated
    for line_number, line in enumerate(text.split("\n"), start=1):
        scanner.feed(line_number, line.removesuffix("\r"))
    store = scanner.finish()

    logger.debug("Parsed %d ssh-keys record(s), %d active", len(store), len(store.selected))
    return store


def load_agent_config(
    path: Path,
    policy: MalformedBlockPolicy = MalformedBlockPolicy.DROP,
) -> SelectionStore:
    """Read and parse the agent configuration file.

    The file is read in full and closed before parsing starts.

    Args:
        path: Path to agent.toml.
        policy: How to treat blocks that match neither record shape.

    Returns:
        SelectionStore loaded from the file.

    Raises:
        AgentConfigReadError: If the file is missing, unreadable or not UTF-8.
        MalformedBlockError: If policy is ERROR and a malformed block is found.
    """
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError as e:
        raise AgentConfigReadError(f"Agent config not found: {path}") from e
    except UnicodeDecodeError as e:
        raise AgentConfigReadError(f"Agent config is not valid UTF-8: {path}") from e
    except OSError as e:
        raise AgentConfigReadError(f"Failed to read agent config: {e}") from e

    return parse_agent_config(text, policy)
