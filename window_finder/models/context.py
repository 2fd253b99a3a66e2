"""Open context of a request to open a path or workspace."""

from enum import Enum


class OpenContext(str, Enum):
    """Where an open request came from."""

    CLI = "cli"  # Command line (`code <path>`)
    DOCK = "dock"  # Dropped on or opened from the dock/taskbar
    MENU = "menu"
    DIALOG = "dialog"  # Native open dialog
    DESKTOP = "desktop"  # Double click / file association
    API = "api"  # Extension or internal API


# Only these contexts may route a file into a window that already contains it
PATH_MATCH_CONTEXTS = frozenset({OpenContext.DESKTOP, OpenContext.CLI, OpenContext.DOCK})
