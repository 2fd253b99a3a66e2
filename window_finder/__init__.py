"""Window Finder - decide which open window should handle a path, folder or workspace.

This package provides:
- Window selection for files opened from the desktop, CLI or dock
- Lookup of windows by workspace, folder, config URI or extension-development path
- "Most recently focused" tie-breaking
- A diagnostic CLI that runs queries against a JSON window snapshot
"""

__version__ = "0.1.0"
__author__ = "window-finder contributors"
__license__ = "MIT"

__all__ = ["__version__", "__author__", "__license__"]
