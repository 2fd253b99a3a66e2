"""Exceptions raised by window_finder.

Not finding a window is not an error: lookups return None for that.
"""


class WindowFinderError(Exception):
    """Base class for window_finder errors."""


class InvalidWorkspaceIdentifierError(WindowFinderError, TypeError):
    """An identifier is neither a workspace nor a single folder identifier."""


class SnapshotError(WindowFinderError):
    """A window snapshot file could not be read or validated."""
