"""Workspace and folder identifiers.

A window either has a multi-root workspace open (identified by a
``WorkspaceIdentifier``), a single folder (``SingleFolderWorkspaceIdentifier``),
or neither. The folder list of a workspace is not part of its identifier;
it is obtained on demand as a ``ResolvedWorkspace``.
"""

from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .uri import Uri


class WorkspaceIdentifier(BaseModel):
    """Identity of a multi-root workspace.

    Two identifiers denote the same workspace if and only if their ``id`` is equal.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["workspace"] = "workspace"
    id: str = Field(..., min_length=1)
    config_path: str = Field(..., min_length=1, description="Path to the .code-workspace file")


class SingleFolderWorkspaceIdentifier(BaseModel):
    """Identity of a single opened folder."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["folder"] = "folder"
    uri: Uri


WorkspaceOrFolderIdentifier = Union[SingleFolderWorkspaceIdentifier, WorkspaceIdentifier]


class WorkspaceFolder(BaseModel):
    """One root folder of a resolved workspace."""

    model_config = ConfigDict(frozen=True)

    uri: Uri
    name: Optional[str] = None
    index: int = Field(default=0, ge=0)


class ResolvedWorkspace(BaseModel):
    """A workspace identifier expanded into its ordered folder roots."""

    id: str = Field(..., min_length=1)
    config_path: str = Field(..., min_length=1)
    folders: List[WorkspaceFolder] = Field(default_factory=list)

    @property
    def identifier(self) -> WorkspaceIdentifier:
        """Identifier of this workspace."""
        return WorkspaceIdentifier(id=self.id, config_path=self.config_path)


def is_single_folder_workspace_identifier(obj: Any) -> bool:
    return isinstance(obj, SingleFolderWorkspaceIdentifier)


def is_workspace_identifier(obj: Any) -> bool:
    return isinstance(obj, WorkspaceIdentifier)


__all__ = [
    "WorkspaceIdentifier",
    "SingleFolderWorkspaceIdentifier",
    "WorkspaceOrFolderIdentifier",
    "WorkspaceFolder",
    "ResolvedWorkspace",
    "is_single_folder_workspace_identifier",
    "is_workspace_identifier",
]
