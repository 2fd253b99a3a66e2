"""Window records as seen by the window lookups.

The lookups only need five attributes of a window. Any object exposing
them satisfies ``SimpleWindow``; ``WindowRecord`` is the concrete model
used by snapshots, the CLI and tests.
"""

from typing import Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field

from .uri import Uri
from .workspace import WorkspaceIdentifier


class SimpleWindow(Protocol):
    """Read-only view of a top level window."""

    @property
    def opened_workspace(self) -> Optional[WorkspaceIdentifier]: ...

    @property
    def opened_folder_uri(self) -> Optional[Uri]: ...

    @property
    def opened_file_path(self) -> Optional[str]: ...

    @property
    def extension_development_path(self) -> Optional[str]: ...

    @property
    def last_focus_time(self) -> float: ...


class WindowRecord(BaseModel):
    """Concrete window record.

    Attributes:
        id: Caller-assigned window id (not used for matching)
        opened_workspace: Multi-root workspace open in the window
        opened_folder_uri: Single folder open in the window
        opened_file_path: File open without folder or workspace context
        extension_development_path: Path this window hosts as extension under development
        last_focus_time: Monotonic focus timestamp, larger is more recent

    Examples:
        >>> w = WindowRecord(opened_folder_uri=Uri.file("/src/app"), last_focus_time=3)
        >>> w.opened_folder_uri.path
        '/src/app'
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    opened_workspace: Optional[WorkspaceIdentifier] = None
    opened_folder_uri: Optional[Uri] = None
    opened_file_path: Optional[str] = None
    extension_development_path: Optional[str] = None
    last_focus_time: float = Field(..., description="Monotonic focus timestamp")

    def describe(self) -> str:
        """Short human readable description of what the window has open."""
        if self.opened_workspace:
            return f"workspace {self.opened_workspace.config_path}"
        if self.opened_folder_uri:
            return f"folder {self.opened_folder_uri.to_string()}"
        if self.opened_file_path:
            return f"file {self.opened_file_path}"
        if self.extension_development_path:
            return f"extension host {self.extension_development_path}"
        return "empty window"


__all__ = ["SimpleWindow", "WindowRecord"]
