"""CLI package for agentkeys.

This package contains the Typer application, its subcommands and the
interactive picker.
"""

from agentkeys.cli.main import app

__all__ = ["app"]
