"""CLI subcommands for agentkeys.

Each module in this package implements one command or command group.
"""
