"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest

SAMPLE_AGENT_CONFIG = """[[ssh-keys]]
vault = "Personal"

#[[ssh-keys]]
#item = "GitHub"
#vault = "Work"
"""


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory.

    Keeps tests away from the real settings file and agent config.
    """
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def sample_agent_config() -> str:
    """One active vault block followed by one disabled item block."""
    return SAMPLE_AGENT_CONFIG


@pytest.fixture
def mixed_agent_config() -> str:
    """Agent config with interleaved active and disabled blocks."""
    return """# 1Password SSH agent config file

[[ssh-keys]]
item = "Deploy Key"
vault = "Infrastructure"

#[[ssh-keys]]
#vault = "Private"

[[ssh-keys]]
vault = "Shared"

#[[ssh-keys]]
#item = "Old Laptop"
#vault = "Personal"
"""


@pytest.fixture
def agent_config_file(tmp_path: Path, sample_agent_config: str) -> Path:
    """Write the sample agent config to a temporary agent.toml."""
    path = tmp_path / "agent.toml"
    path.write_text(sample_agent_config, encoding="utf-8")
    return path
