"""Data models for agentkeys.

This module exports the record types used throughout the application.
"""

from agentkeys.models.record import (
    COMMENT_PREFIX,
    SSH_KEYS_HEADER,
    ItemRecord,
    Record,
    VaultRecord,
)

__all__ = [
    "COMMENT_PREFIX",
    "ItemRecord",
    "Record",
    "SSH_KEYS_HEADER",
    "VaultRecord",
]
