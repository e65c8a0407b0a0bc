"""
Configuration loading and persistence.

The config file location is always passed in explicitly. Resolution order
for the path is handled by the CLI:
    --config option > LDOCK_CONFIG env var > ~/.ld
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from .models import DockConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = ".ld"


class ConfigError(Exception):
    """Raised when the config file cannot be read or written."""

    pass


class ConfigPathError(ConfigError):
    """Raised when the default config location cannot be determined."""

    pass


def get_default_config_path() -> Path:
    """
    Get path to the default config file.

    Returns:
        Path to ~/.ld

    Raises:
        ConfigPathError: If the home directory cannot be determined
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise ConfigPathError(f"could not get home dir: {e}") from e
    return home / DEFAULT_CONFIG_FILENAME


def resolve_config_path(override: Path | None = None) -> Path:
    """
    Pick the config file to use for this invocation.

    Args:
        override: Explicit path from the command line or environment

    Returns:
        The override if given, otherwise the default path
    """
    if override is not None:
        return Path(override)
    return get_default_config_path()


def load_config(path: Path) -> DockConfig:
    """
    Load the staging config from ``path``.

    A missing file is not an error and yields an empty config. A file that
    exists but can't be parsed is discarded with a warning and also yields
    an empty config, so a corrupted file loses its entries on the next save.

    Args:
        path: Config file to read

    Returns:
        Validated DockConfig instance

    Raises:
        ConfigError: If the file exists but can't be read

    Example:
        >>> load_config(Path("/nonexistent/.ld")).staged
        []
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        logger.debug("No config at %s, starting empty", path)
        return DockConfig()
    except OSError as e:
        raise ConfigError(f"issue reading {path}: {e}") from e

    try:
        config = DockConfig.from_json(raw)
    except ValidationError as e:
        # Covers invalid JSON, invalid UTF-8 and the wrong document shape
        logger.warning("Failed to parse config at %s, using empty config: %s", path, e)
        return DockConfig()

    logger.debug("Loaded %d staged path(s) from %s", len(config.staged), path)
    return config


def save_config(path: Path, config: DockConfig) -> None:
    """
    Write ``config`` to ``path``, overwriting any existing file.

    Args:
        path: Config file to write
        config: Config to persist

    Raises:
        ConfigError: If the file cannot be created or written
    """
    path = Path(path)
    try:
        with path.open("w", encoding="utf-8") as f:
            f.write(config.to_json())
    except OSError as e:
        raise ConfigError(f"issue creating {path}: {e}") from e

    logger.debug("Saved %d staged path(s) to %s", len(config.staged), path)
