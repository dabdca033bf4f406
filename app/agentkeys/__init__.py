"""agentkeys - toggle SSH keys in the 1Password SSH agent configuration."""

__version__ = "0.1.0"
