"""Platform identity and filesystem case rules."""

import sys
from typing import Optional


def _platform(platform: Optional[str]) -> str:
    return sys.platform if platform is None else platform


def is_windows(platform: Optional[str] = None) -> bool:
    return _platform(platform).startswith(("win32", "cygwin"))


def is_macintosh(platform: Optional[str] = None) -> bool:
    return _platform(platform) == "darwin"


def is_linux(platform: Optional[str] = None) -> bool:
    return _platform(platform).startswith("linux")


def ignores_case(platform: Optional[str] = None) -> bool:
    """Whether path comparisons ignore case on the given platform.

    Windows and macOS filesystems are case-insensitive by default; Linux
    and every other platform are treated as case-sensitive.

    Examples:
        >>> ignores_case("darwin")
        True
        >>> ignores_case("linux")
        False
    """
    return is_windows(platform) or is_macintosh(platform)
