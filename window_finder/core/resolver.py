"""Workspace resolvers: expand a workspace identifier into its folders."""

import logging
from typing import Callable, Dict, Iterable, Optional

from ..models.workspace import ResolvedWorkspace, WorkspaceIdentifier

logger = logging.getLogger(__name__)


# A resolver returns None when the workspace cannot be resolved
WorkspaceResolver = Callable[[WorkspaceIdentifier], Optional[ResolvedWorkspace]]


class StaticWorkspaceResolver:
    """Resolver backed by an in-memory set of resolved workspaces.

    Examples:
        >>> resolver = StaticWorkspaceResolver([ResolvedWorkspace(id="ws", config_path="/w.code-workspace")])
        >>> resolver(WorkspaceIdentifier(id="ws", config_path="/w.code-workspace")).id
        'ws'
        >>> resolver(WorkspaceIdentifier(id="other", config_path="/o.code-workspace")) is None
        True
    """

    def __init__(self, workspaces: Iterable[ResolvedWorkspace] = ()):
        self._workspaces: Dict[str, ResolvedWorkspace] = {}
        for workspace in workspaces:
            self.add(workspace)

    def add(self, workspace: ResolvedWorkspace) -> None:
        """Register (or replace) a resolved workspace."""
        self._workspaces[workspace.id] = workspace

    def __call__(self, workspace: WorkspaceIdentifier) -> Optional[ResolvedWorkspace]:
        resolved = self._workspaces.get(workspace.id)
        if resolved is None:
            logger.debug(f"Workspace {workspace.id} ({workspace.config_path}) could not be resolved")
        return resolved
