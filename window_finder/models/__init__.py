# Data models for windows, workspaces and URIs

from .context import OpenContext, PATH_MATCH_CONTEXTS
from .uri import Schemas, Uri, parse_uri_or_path
from .workspace import (
    WorkspaceIdentifier,
    SingleFolderWorkspaceIdentifier,
    WorkspaceOrFolderIdentifier,
    WorkspaceFolder,
    ResolvedWorkspace,
    is_single_folder_workspace_identifier,
    is_workspace_identifier,
)
from .window import SimpleWindow, WindowRecord

__all__ = [
    "OpenContext",
    "PATH_MATCH_CONTEXTS",
    "Schemas",
    "Uri",
    "parse_uri_or_path",
    "WorkspaceIdentifier",
    "SingleFolderWorkspaceIdentifier",
    "WorkspaceOrFolderIdentifier",
    "WorkspaceFolder",
    "ResolvedWorkspace",
    "is_single_folder_workspace_identifier",
    "is_workspace_identifier",
    "SimpleWindow",
    "WindowRecord",
]
