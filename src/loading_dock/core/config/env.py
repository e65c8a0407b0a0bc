"""Environment loading helpers.

ldock takes its settings from ``LDOCK_*`` environment variables (today only
``LDOCK_CONFIG``). Those can also live in dotenv files:
- user environment file (~/.config/loading-dock/.env)
- project environment files (.env, .env.local in the working directory)

Only ``LDOCK_`` keys are taken from a dotenv file; a project ``.env`` often
belongs to some other tool and its other keys are left alone. A dotenv file
never overrides a variable already exported in the shell.

Precedence implemented here:
  os.environ (pre-existing) > .env.local > .env > user .env
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

ENV_PREFIX = "LDOCK_"


def get_user_env_path() -> Path:
    """Return the per-user dotenv file, honoring XDG_CONFIG_HOME."""
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home) / "loading-dock" / ".env"
    return Path.home() / ".config" / "loading-dock" / ".env"


def _read_env(path: Path) -> dict[str, str]:
    """Return the ``LDOCK_`` settings in a dotenv file, or nothing if it's absent."""
    if not path.is_file():
        return {}
    return {
        key: value
        for key, value in dotenv_values(path).items()
        if key is not None and value is not None and key.startswith(ENV_PREFIX)
    }


def load_layered_env(
    *,
    project_dir: Path | None = None,
    user_env_paths: Iterable[Path] | None = None,
    project_env_paths: Iterable[Path] | None = None,
) -> None:
    """Export ``LDOCK_`` settings from user + project .env files.

    Later files win over earlier ones; the shell wins over all of them.

    Args:
        project_dir: base directory for project env paths (defaults to cwd)
        user_env_paths: explicit user env file paths
        project_env_paths: explicit project env file paths
    """
    if project_dir is None:
        project_dir = Path.cwd()

    if user_env_paths is None:
        try:
            user_env_paths = [get_user_env_path()]
        except (RuntimeError, KeyError):
            # No home directory; only project files apply
            user_env_paths = []

    if project_env_paths is None:
        project_env_paths = [project_dir / ".env", project_dir / ".env.local"]

    settings: dict[str, str] = {}
    for path in [*user_env_paths, *project_env_paths]:
        settings.update(_read_env(Path(path)))

    for key, value in settings.items():
        if key in os.environ:
            logger.debug("Keeping %s from the shell environment", key)
            continue
        os.environ[key] = value
