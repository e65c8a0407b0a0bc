"""
Loading Dock - a tiny staging area for file paths.

A CLI tool that records which files you intend to track in a JSON file.
"""

__version__ = "0.1.0"

# Re-export core models for convenience
from loading_dock.core.config.models import DockConfig

__all__ = ["DockConfig", "__version__"]
