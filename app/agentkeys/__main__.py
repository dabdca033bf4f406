"""Allow running agentkeys with ``python -m agentkeys``."""

from agentkeys.cli.main import app

app(prog_name="agentkeys")
