"""Serialisable snapshot of the open windows and their workspaces.

Used by the diagnostic CLI to replay lookups outside a running
application. Format (JSON):

    {
      "windows": [{"id": 1, "opened_folder_uri": {"scheme": "file", "path": "/a"},
                   "last_focus_time": 1}],
      "workspaces": [{"id": "ws1", "config_path": "/w/ws1.code-workspace",
                      "folders": [{"uri": {"scheme": "file", "path": "/w/a"}}]}]
    }
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from ..core.errors import SnapshotError
from ..core.resolver import StaticWorkspaceResolver
from .window import WindowRecord
from .workspace import ResolvedWorkspace

logger = logging.getLogger(__name__)


class WindowSnapshot(BaseModel):
    """Windows in input order plus the resolved workspaces they reference."""

    windows: List[WindowRecord] = Field(default_factory=list)
    workspaces: List[ResolvedWorkspace] = Field(default_factory=list)

    def resolver(self) -> StaticWorkspaceResolver:
        """Workspace resolver backed by this snapshot's workspaces."""
        return StaticWorkspaceResolver(self.workspaces)

    def index_of(self, window: Optional[WindowRecord]) -> Optional[int]:
        """Position of a window in the snapshot (identity, not equality)."""
        if window is None:
            return None
        for i, candidate in enumerate(self.windows):
            if candidate is window:
                return i
        return None


def load_snapshot(path: Union[str, Path]) -> WindowSnapshot:
    """Load a window snapshot from a JSON file.

    Args:
        path: Snapshot file path

    Returns:
        Validated WindowSnapshot

    Raises:
        SnapshotError: If the file is missing, unreadable, not JSON, or fails validation
    """
    path = Path(path).expanduser()

    try:
        with path.open("r") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise SnapshotError(f"Snapshot file not found: {path}") from e
    except OSError as e:
        raise SnapshotError(f"Cannot read snapshot {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Invalid JSON in {path}: {e}") from e

    try:
        snapshot = WindowSnapshot.model_validate(data)
    except ValidationError as e:
        raise SnapshotError(f"Invalid snapshot {path}: {e}") from e

    logger.debug(
        f"Loaded snapshot {path}: {len(snapshot.windows)} windows, "
        f"{len(snapshot.workspaces)} workspaces"
    )
    return snapshot


__all__ = ["WindowSnapshot", "load_snapshot"]
