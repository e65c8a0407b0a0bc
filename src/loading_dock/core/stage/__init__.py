"""
Stage module for loading-dock.

Provides the operation that validates a file and records its path
in the staging config.
"""

from loading_dock.core.stage.stager import (
    FileNotStageableError,
    StagerError,
    stage_file,
)

__all__ = [
    "FileNotStageableError",
    "StagerError",
    "stage_file",
]
