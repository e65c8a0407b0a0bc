"""
Stager for recording file paths in the staging config.

Staging a file:
1. Checks the file can be opened for reading
2. Skips it if the exact path string is already staged
3. Otherwise appends the path, verbatim, to the end of the list

Nothing on disk is touched here; the caller persists the config.

Example:
    >>> from loading_dock.core.config import DockConfig
    >>> from loading_dock.core.stage import stage_file
    >>> cfg = DockConfig()
    >>> stage_file(cfg, "README.md")
    True
    >>> cfg.staged
    ['README.md']
"""

from __future__ import annotations

import logging

from loading_dock.core.config.models import DockConfig

logger = logging.getLogger(__name__)


class StagerError(Exception):
    """Base exception for staging errors."""

    pass


class FileNotStageableError(StagerError):
    """Raised when the file to stage is missing or can't be opened."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot stage {path!r}: {reason}")


def stage_file(config: DockConfig, file_name: str) -> bool:
    """
    Add ``file_name`` to the staging area.

    Staging an already-staged path is a no-op, not an error. Paths are
    compared and stored exactly as given, so ``./a.txt`` and ``a.txt``
    are distinct entries.

    Args:
        config: Config to update in place
        file_name: Path of the file to stage

    Returns:
        True if the path was appended, False if it was already staged

    Raises:
        FileNotStageableError: If the file can't be opened for reading.
            The config is left unchanged.
    """
    try:
        with open(file_name, "rb"):
            pass
    except (OSError, ValueError) as e:
        # ValueError: paths with an embedded NUL byte can never be opened
        reason = getattr(e, "strerror", None) or str(e)
        raise FileNotStageableError(file_name, reason) from e

    if config.is_staged(file_name):
        logger.debug("%s is already staged", file_name)
        return False

    config.staged.append(file_name)
    logger.debug("Staged %s (%d total)", file_name, len(config.staged))
    return True
