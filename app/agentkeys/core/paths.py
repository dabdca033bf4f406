"""Path management for agentkeys.

Resolves where the 1Password SSH agent keeps its configuration on each
platform, and where agentkeys keeps its own settings.

Agent config defaults:
- Linux: ~/.config/1Password/ssh/agent.toml
- macOS: ~/Library/Group Containers/2BUA8C4S2C.com.1password/t/agent.toml
- Windows: %LOCALAPPDATA%\\1Password\\config\\ssh\\agent.toml
"""

import os
import sys
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "agentkeys"

# File name used by the 1Password SSH agent
AGENT_CONFIG_FILENAME = "agent.toml"

# Group container shared by the 1Password apps on macOS
_MACOS_GROUP_CONTAINER = "2BUA8C4S2C.com.1password"


def _get_xdg_config_home() -> Path:
    """Get XDG_CONFIG_HOME, falling back to ~/.config."""
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base)
    return Path.home() / ".config"


def get_agent_config_path(platform: str | None = None) -> Path:
    """Get the default 1Password SSH agent configuration path.

    Args:
        platform: Platform identifier as in sys.platform. If None, uses the
            current platform.

    Returns:
        Path to agent.toml for the platform.
    """
    platform = platform or sys.platform

    if platform.startswith("win"):
        local_app_data = os.environ.get("LOCALAPPDATA")
        base = Path(local_app_data) if local_app_data else Path.home() / "AppData" / "Local"
        return base / "1Password" / "config" / "ssh" / AGENT_CONFIG_FILENAME

    if platform == "darwin":
        return (
            Path.home()
            / "Library"
            / "Group Containers"
            / _MACOS_GROUP_CONTAINER
            / "t"
            / AGENT_CONFIG_FILENAME
        )

    return _get_xdg_config_home() / "1Password" / "ssh" / AGENT_CONFIG_FILENAME


def get_config_dir() -> Path:
    """Get the agentkeys configuration directory path.

    Returns:
        Path to ~/.config/agentkeys/ (or XDG_CONFIG_HOME/agentkeys/).
    """
    return _get_xdg_config_home() / APP_NAME


def get_settings_path() -> Path:
    """Get the agentkeys settings file path.

    Returns:
        Path to ~/.config/agentkeys/settings.toml.
    """
    return get_config_dir() / "settings.toml"


def get_theme_path() -> Path:
    """Get the user theme file path.

    Returns:
        Path to ~/.config/agentkeys/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def ensure_config_dir() -> Path:
    """Create the configuration directory if it doesn't exist.

    Returns:
        Path to the configuration directory.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    path = get_config_dir()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create config directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create config directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path
