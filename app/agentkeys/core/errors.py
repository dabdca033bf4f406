"""Exceptions raised while reading or writing the agent configuration."""


class AgentConfigError(Exception):
    """Base exception for agent configuration errors."""


class AgentConfigReadError(AgentConfigError):
    """Raised when the agent configuration cannot be read."""


class AgentConfigWriteError(AgentConfigError):
    """Raised when the agent configuration cannot be written."""


class MalformedBlockError(AgentConfigError):
    """Raised when an ssh-keys block has an unexpected shape.

    Only raised under the ``error`` malformed block policy.

    Attributes:
        line_number: 1-based line number of the block header.
        reason: Short description of what is wrong with the block.
    """

    def __init__(self, line_number: int, reason: str) -> None:
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Malformed ssh-keys block at line {line_number}: {reason}")
