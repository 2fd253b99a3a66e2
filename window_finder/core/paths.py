"""Filesystem path comparison helpers.

Paths are compared as strings; nothing here touches the disk.
"""

import os


def is_equal(path_a: str, path_b: str, ignore_case: bool = False) -> bool:
    """Compare two paths, optionally ignoring case.

    Examples:
        >>> is_equal("/Foo/Bar", "/foo/bar", ignore_case=True)
        True
        >>> is_equal("/Foo/Bar", "/foo/bar")
        False
    """
    if path_a == path_b:
        return True
    if not ignore_case or not path_a or not path_b:
        return False
    return path_a.lower() == path_b.lower()


def is_equal_or_parent(
    path: str,
    candidate: str,
    ignore_case: bool = False,
    separator: str = os.sep,
) -> bool:
    """Check whether ``path`` equals ``candidate`` or lies inside it.

    Args:
        path: Path being located (e.g. a file being opened)
        candidate: Possible ancestor folder
        ignore_case: Compare case-insensitively
        separator: Path separator

    Returns:
        True if path is candidate or a descendant of it

    Examples:
        >>> is_equal_or_parent("/a/b/c.txt", "/a/b")
        True
        >>> is_equal_or_parent("/a/bc", "/a/b")
        False
        >>> is_equal_or_parent("/A/b/c.txt", "/a/B/", ignore_case=True)
        True
    """
    if path == candidate:
        return True
    if not path or not candidate:
        return False
    if len(candidate) > len(path):
        return False

    if ignore_case:
        if path[:len(candidate)].lower() != candidate.lower():
            return False
        if len(candidate) == len(path):
            # Same path, different casing
            return True

        sep_offset = len(candidate)
        if candidate.endswith(separator):
            sep_offset -= 1
        return path[sep_offset] == separator

    if not candidate.endswith(separator):
        candidate += separator
    return path.startswith(candidate)
