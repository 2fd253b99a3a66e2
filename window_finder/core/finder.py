"""Window lookups: which open window should handle a file, folder or workspace.

All functions are pure. They take the full list of windows on every call,
never modify it, and return one of its elements or None. Lookups that can
match several windows return the first one in list order unless stated
otherwise.

The case rule for local paths is passed in as ``ignore_case`` (see
``FinderConfig.effective_ignore_case``) instead of being read from the
platform here.
"""

import logging
import os
from typing import Optional, Sequence, TypeVar

from ..models.context import OpenContext, PATH_MATCH_CONTEXTS
from ..models.uri import Schemas, Uri
from ..models.window import SimpleWindow
from ..models.workspace import (
    WorkspaceOrFolderIdentifier,
    is_single_folder_workspace_identifier,
    is_workspace_identifier,
)
from . import paths, resources
from .errors import InvalidWorkspaceIdentifierError
from .resolver import WorkspaceResolver

logger = logging.getLogger(__name__)

W = TypeVar("W", bound=SimpleWindow)


def find_best_window_or_folder_for_file(
    *,
    windows: Sequence[W],
    new_window: bool,
    reuse_window: bool,
    context: OpenContext,
    file_path: Optional[str] = None,
    workspace_resolver: WorkspaceResolver,
    ignore_case: bool,
) -> Optional[W]:
    """Pick the window that should open ``file_path``.

    Windows that already contain the file win: first a workspace window
    with a local folder containing the file, then the single-folder window
    with the deepest folder containing it. Path matching only happens for
    DESKTOP, CLI and DOCK requests. Without a path match the most recently
    focused window is used, unless a new window was requested.

    Args:
        windows: Open windows in caller order
        new_window: Caller forces a new window
        reuse_window: Caller forces reuse of an existing window (informational)
        context: Where the open request came from
        file_path: File being opened, if any
        workspace_resolver: Expands a workspace identifier into its folders
        ignore_case: Compare local paths case-insensitively

    Returns:
        Window to use, or None when a new window should be created

    Raises:
        Whatever ``workspace_resolver`` raises; resolver failures are not handled here
    """
    logger.debug(
        f"Finding window for file={file_path!r} context={OpenContext(context).value} "
        f"new_window={new_window} reuse_window={reuse_window} ({len(windows)} windows)"
    )

    if not new_window and file_path and context in PATH_MATCH_CONTEXTS:
        window_on_file_path = _find_window_on_file_path(
            windows, file_path, workspace_resolver, ignore_case
        )
        if window_on_file_path is not None:
            return window_on_file_path

    if new_window:
        logger.debug("New window requested, not reusing an existing window")
        return None

    window = get_last_active_window(windows)
    if window is not None:
        logger.debug("No window contains the file, using the last active window")
    return window


def _find_window_on_file_path(
    windows: Sequence[W],
    file_path: str,
    workspace_resolver: WorkspaceResolver,
    ignore_case: bool,
) -> Optional[W]:
    # Workspace windows that have a parent folder of the file opened, first in order wins
    for window in windows:
        if not window.opened_workspace:
            continue

        resolved = workspace_resolver(window.opened_workspace)
        if resolved is None:
            continue

        for folder in resolved.folders:
            if folder.uri.scheme == Schemas.FILE and paths.is_equal_or_parent(
                file_path, folder.uri.fs_path, ignore_case
            ):
                logger.debug(
                    f"File {file_path} is inside folder {folder.uri.fs_path} "
                    f"of workspace {window.opened_workspace.id}"
                )
                return window

    # Single folder windows that are parent of the file, deepest folder wins
    best: Optional[W] = None
    best_length = -1
    for window in windows:
        folder_uri = window.opened_folder_uri
        if not folder_uri or folder_uri.scheme != Schemas.FILE:
            continue
        if not paths.is_equal_or_parent(file_path, folder_uri.fs_path, ignore_case):
            continue

        # Strictly longer only, so the first of equally deep folders is kept
        if len(folder_uri.path) > best_length:
            best = window
            best_length = len(folder_uri.path)

    if best is not None:
        logger.debug(f"File {file_path} is inside folder {best.opened_folder_uri.fs_path}")
    return best


def get_last_active_window(windows: Sequence[W]) -> Optional[W]:
    """Return the most recently focused window.

    Ties go to the first window in list order.

    Examples:
        >>> from window_finder.models.window import WindowRecord
        >>> ws = [WindowRecord(last_focus_time=t) for t in (5, 9, 9, 2)]
        >>> get_last_active_window(ws) is ws[1]
        True
        >>> get_last_active_window([]) is None
        True
    """
    last_active: Optional[W] = None
    for window in windows:
        if last_active is None or window.last_focus_time > last_active.last_focus_time:
            last_active = window
    return last_active


def find_window_on_workspace(
    windows: Sequence[W],
    workspace: WorkspaceOrFolderIdentifier,
    *,
    ignore_case: bool,
) -> Optional[W]:
    """Find the window that has this folder or workspace open.

    A folder identifier only matches ``opened_folder_uri``; a workspace
    identifier only matches ``opened_workspace.id``.

    Raises:
        InvalidWorkspaceIdentifierError: If ``workspace`` is neither kind
    """
    if is_single_folder_workspace_identifier(workspace):
        return next(
            (
                window for window in windows
                if window.opened_folder_uri
                and resources.is_equal(
                    window.opened_folder_uri,
                    workspace.uri,
                    resources.has_to_ignore_case(window.opened_folder_uri, ignore_case),
                )
            ),
            None,
        )

    if is_workspace_identifier(workspace):
        return next(
            (
                window for window in windows
                if window.opened_workspace and window.opened_workspace.id == workspace.id
            ),
            None,
        )

    raise InvalidWorkspaceIdentifierError(
        f"Expected a workspace or single folder identifier, got {type(workspace).__name__}"
    )


def find_window_on_extension_development_path(
    windows: Sequence[W],
    extension_development_path: str,
    *,
    ignore_case: bool,
) -> Optional[W]:
    """Find the window hosting the extension at ``extension_development_path``."""
    return next(
        (
            window for window in windows
            if window.extension_development_path
            and paths.is_equal(window.extension_development_path, extension_development_path, ignore_case)
        ),
        None,
    )


def find_window_on_workspace_or_folder_uri(
    windows: Sequence[W],
    uri: Uri,
    *,
    ignore_case: bool,
    separator: str = os.sep,
) -> Optional[W]:
    """Find the window whose workspace config file or folder is ``uri``.

    Workspace config paths are local files and follow ``ignore_case``;
    folder URIs follow the case rule of ``uri``'s scheme.
    """
    folder_ignore_case = resources.has_to_ignore_case(uri, ignore_case)

    for window in windows:
        if window.opened_workspace and resources.is_equal(
            Uri.file(window.opened_workspace.config_path, separator=separator), uri, ignore_case
        ):
            return window

        if window.opened_folder_uri and resources.is_equal(
            window.opened_folder_uri, uri, folder_ignore_case
        ):
            return window

    return None
