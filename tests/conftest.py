"""
Pytest configuration and shared fixtures.

Provides fixtures for temp config files and files to stage.
"""

import json
from pathlib import Path
from typing import Callable

import pytest

from loading_dock.core.config.models import DockConfig

# ==============================================================================
# Directory Fixtures
# ==============================================================================


@pytest.fixture
def config_path(tmp_path) -> Path:
    """Path for a config file that does not exist yet."""
    return tmp_path / ".ld"


@pytest.fixture
def make_file(tmp_path) -> Callable[[str], str]:
    """
    Factory that creates a readable file and returns its path as a string.

    Files live under tmp_path/files so they never collide with config_path.
    """
    files_dir = tmp_path / "files"
    files_dir.mkdir()

    def _make(name: str, content: str = "content\n") -> str:
        path = files_dir / name
        path.write_text(content)
        return str(path)

    return _make


# ==============================================================================
# Sample Data Fixtures
# ==============================================================================


@pytest.fixture
def sample_config() -> DockConfig:
    """Config with two staged paths."""
    return DockConfig(staged=["x", "y"])


@pytest.fixture
def written_config(config_path, sample_config) -> Path:
    """Config file on disk holding the sample config."""
    config_path.write_text(json.dumps({"staged": sample_config.staged}))
    return config_path
