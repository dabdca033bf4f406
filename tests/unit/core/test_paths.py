"""Unit tests for path management."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from agentkeys.core.paths import (
    APP_NAME,
    ensure_config_dir,
    get_agent_config_path,
    get_config_dir,
    get_settings_path,
    get_theme_path,
)


class TestGetAgentConfigPath:
    """Tests for get_agent_config_path function."""

    def test_linux_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Linux uses ~/.config/1Password/ssh/agent.toml."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

        result = get_agent_config_path("linux")

        assert result == Path.home() / ".config" / "1Password" / "ssh" / "agent.toml"

    def test_linux_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """Linux honors XDG_CONFIG_HOME."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_agent_config_path("linux")

        assert result == tmp_path / "1Password" / "ssh" / "agent.toml"

    def test_macos(self) -> None:
        """macOS uses the 1Password group container."""
        result = get_agent_config_path("darwin")

        assert result.name == "agent.toml"
        assert "Group Containers" in result.parts
        assert "2BUA8C4S2C.com.1password" in result.parts

    def test_windows_local_app_data(self, tmp_path: Path) -> None:
        """Windows uses LOCALAPPDATA when set."""
        with patch.dict(os.environ, {"LOCALAPPDATA": str(tmp_path)}):
            result = get_agent_config_path("win32")

        assert result == tmp_path / "1Password" / "config" / "ssh" / "agent.toml"

    def test_windows_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Windows falls back to the home directory without LOCALAPPDATA."""
        monkeypatch.delenv("LOCALAPPDATA", raising=False)

        result = get_agent_config_path("win32")

        assert result == (
            Path.home() / "AppData" / "Local" / "1Password" / "config" / "ssh" / "agent.toml"
        )

    @pytest.mark.parametrize("platform", ["freebsd13", "openbsd7"])
    def test_other_platforms_use_xdg_layout(self, platform: str, tmp_path: Path) -> None:
        """Other Unix platforms follow the Linux layout."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_agent_config_path(platform)

        assert result == tmp_path / "1Password" / "ssh" / "agent.toml"


class TestAppPaths:
    """Tests for agentkeys' own configuration paths."""

    def test_config_dir(self, isolated_config_home: Path) -> None:
        """Config dir lives under XDG_CONFIG_HOME."""
        assert get_config_dir() == isolated_config_home / APP_NAME

    def test_settings_and_theme_paths(self, isolated_config_home: Path) -> None:
        """Settings and theme files live in the config dir."""
        assert get_settings_path() == isolated_config_home / APP_NAME / "settings.toml"
        assert get_theme_path() == isolated_config_home / APP_NAME / "theme.toml"

    def test_ensure_config_dir_creates(self, isolated_config_home: Path) -> None:
        """ensure_config_dir creates the directory."""
        result = ensure_config_dir()
        assert result.is_dir()

    def test_ensure_config_dir_permission_error(self) -> None:
        """Permission problems are reported as RuntimeError."""
        with (
            patch.object(Path, "mkdir", side_effect=PermissionError("denied")),
            pytest.raises(RuntimeError, match="Permission denied"),
        ):
            ensure_config_dir()
