"""SSH key record models.

This module defines the two record shapes that can appear in an
``[[ssh-keys]]`` block of the 1Password SSH agent configuration and
their canonical textual encodings.
"""

from dataclasses import dataclass

# Header line that opens every ssh-keys block
SSH_KEYS_HEADER = "[[ssh-keys]]"

# Prefix marking a disabled (commented-out) line
COMMENT_PREFIX = "#"


def _check_name(kind: str, value: str) -> None:
    """Reject names that cannot be written as a single-line value."""
    if not value:
        msg = f"{kind} name cannot be empty"
        raise ValueError(msg)
    if "\n" in value or "\r" in value:
        msg = f"{kind} name cannot contain line breaks"
        raise ValueError(msg)


def _encode_lines(lines: list[str], active: bool) -> str:
    """Join block lines, commenting each one out for inactive records.

    A blank separator line always follows the block and is never prefixed.
    """
    if not active:
        lines = [f"{COMMENT_PREFIX}{line}" for line in lines]
    return "\n".join(lines) + "\n\n"


@dataclass(frozen=True, slots=True)
class VaultRecord:
    """Grants the agent access to every SSH key in a vault.

    Attributes:
        vault: Name of the vault (unquoted).
    """

    vault: str

    def __post_init__(self) -> None:
        """Validate record data after initialization."""
        _check_name("Vault", self.vault)

    @property
    def label(self) -> str:
        """Human-readable label for display."""
        return f"Vault {self.vault}"

    def encode(self, active: bool = True) -> str:
        """Encode the record as an ssh-keys block.

        Args:
            active: Emit the plain block if True, the commented-out block otherwise.

        Returns:
            Block text including the trailing blank line.
        """
        return _encode_lines([SSH_KEYS_HEADER, f'vault = "{self.vault}"'], active)

    def to_dict(self) -> dict[str, str]:
        """Return the structured fields as a dictionary."""
        return {"kind": "vault", "vault": self.vault}


@dataclass(frozen=True, slots=True)
class ItemRecord:
    """Grants the agent access to a single SSH key item inside a vault.

    Attributes:
        item: Name of the item holding the SSH key (unquoted).
        vault: Name of the vault containing the item (unquoted).
    """

    item: str
    vault: str

    def __post_init__(self) -> None:
        """Validate record data after initialization."""
        _check_name("Item", self.item)
        _check_name("Vault", self.vault)

    @property
    def label(self) -> str:
        """Human-readable label for display."""
        return f"Item {self.item} in Vault {self.vault}"

    def encode(self, active: bool = True) -> str:
        """Encode the record as an ssh-keys block.

        Args:
            active: Emit the plain block if True, the commented-out block otherwise.

        Returns:
            Block text including the trailing blank line.
        """
        return _encode_lines(
            [SSH_KEYS_HEADER, f'item = "{self.item}"', f'vault = "{self.vault}"'],
            active,
        )

    def to_dict(self) -> dict[str, str]:
        """Return the structured fields as a dictionary."""
        return {"kind": "item", "item": self.item, "vault": self.vault}


# Any record that can appear in the agent configuration
Record = VaultRecord | ItemRecord
