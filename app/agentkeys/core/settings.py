"""Application settings.

This module provides the settings model and I/O functions for
agentkeys itself (not the agent configuration it edits).

Settings are stored in ~/.config/agentkeys/settings.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from agentkeys.core.paths import get_agent_config_path, get_settings_path
from agentkeys.core.reader import MalformedBlockPolicy

logger = logging.getLogger(__name__)


class AppSettings(BaseModel):
    """Settings for agentkeys.

    Attributes:
        agent_config_path: Agent config location. If None, uses the platform default.
        malformed_blocks: What to do with ssh-keys blocks of unexpected shape.
    """

    model_config = ConfigDict(extra="forbid")

    agent_config_path: Annotated[
        Path | None,
        Field(description="Agent config path (None = platform default)"),
    ] = None
    malformed_blocks: Annotated[
        MalformedBlockPolicy,
        Field(description="Policy for malformed ssh-keys blocks"),
    ] = MalformedBlockPolicy.DROP

    @property
    def effective_agent_config_path(self) -> Path:
        """Get the agent config path to use.

        Returns the configured path if set, otherwise the platform default.
        """
        if self.agent_config_path is not None:
            return self.agent_config_path.expanduser()
        return get_agent_config_path()


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsNotFoundError(SettingsError):
    """Raised when the settings file is not found."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> AppSettings:
    """Load settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default settings path.

    Returns:
        Validated AppSettings object.

    Raises:
        SettingsNotFoundError: If the settings file doesn't exist.
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        raise SettingsNotFoundError(f"Settings not found: {settings_path}")

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return AppSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings content: {e}") from e


def save_settings(settings: AppSettings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        settings: The AppSettings object to save.
        path: Path to save the settings. If None, uses the default settings path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()

    data = _settings_to_dict(settings)

    tmp_path: Path | None = None
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path


def get_settings(path: Path | None = None) -> AppSettings:
    """Load settings, falling back to defaults.

    A missing file silently yields defaults. An unreadable or invalid
    file is logged and also yields defaults.

    Args:
        path: Path to the settings file. If None, uses the default settings path.

    Returns:
        Loaded or default AppSettings.
    """
    try:
        return load_settings(path)
    except SettingsNotFoundError:
        return AppSettings()
    except SettingsError as e:
        logger.warning("Ignoring settings file, using defaults: %s", e)
        return AppSettings()


def _settings_to_dict(settings: AppSettings) -> dict[str, object]:
    """Convert AppSettings to a dictionary for TOML serialization.

    Only includes non-default values to keep the file clean.
    """
    result: dict[str, object] = {}

    if settings.agent_config_path is not None:
        result["agent_config_path"] = str(settings.agent_config_path)

    if settings.malformed_blocks != MalformedBlockPolicy.DROP:
        result["malformed_blocks"] = settings.malformed_blocks.value

    return result
