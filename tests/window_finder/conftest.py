"""Pytest configuration and shared fixtures for window_finder tests."""

import json
from pathlib import Path
from typing import Callable, List, Optional

import pytest

from window_finder.core.resolver import StaticWorkspaceResolver
from window_finder.models.uri import Uri
from window_finder.models.window import WindowRecord
from window_finder.models.workspace import ResolvedWorkspace, WorkspaceFolder, WorkspaceIdentifier


def folder_window(path: str, focus: float, **kwargs) -> WindowRecord:
    """Window with a single local folder open."""
    return WindowRecord(opened_folder_uri=Uri.file(path, separator="/"), last_focus_time=focus, **kwargs)


def workspace_window(workspace_id: str, focus: float, **kwargs) -> WindowRecord:
    """Window with a multi-root workspace open."""
    identifier = WorkspaceIdentifier(id=workspace_id, config_path=f"/workspaces/{workspace_id}.code-workspace")
    return WindowRecord(opened_workspace=identifier, last_focus_time=focus, **kwargs)


def resolved_workspace(workspace_id: str, *folders: Uri) -> ResolvedWorkspace:
    """Resolved workspace with the given folder roots."""
    return ResolvedWorkspace(
        id=workspace_id,
        config_path=f"/workspaces/{workspace_id}.code-workspace",
        folders=[WorkspaceFolder(uri=uri, index=i) for i, uri in enumerate(folders)],
    )


@pytest.fixture
def make_folder_window() -> Callable[..., WindowRecord]:
    return folder_window


@pytest.fixture
def make_workspace_window() -> Callable[..., WindowRecord]:
    return workspace_window


@pytest.fixture
def workspace_resolver() -> StaticWorkspaceResolver:
    """Resolver knowing two workspaces: 'web' (/src/web, /src/shared) and 'remote'."""
    return StaticWorkspaceResolver([
        resolved_workspace("web", Uri.file("/src/web", separator="/"), Uri.file("/src/shared", separator="/")),
        resolved_workspace("remote", Uri.parse("vscode-remote://ssh-box/src/web")),
    ])


@pytest.fixture
def write_snapshot(tmp_path: Path) -> Callable[[dict], Path]:
    """Write a snapshot dict to a JSON file and return its path."""

    def _write(data: dict, name: str = "snapshot.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=2))
        return path

    return _write


@pytest.fixture
def sample_snapshot() -> dict:
    """Snapshot with a workspace window, two nested folder windows and an extension host."""
    return {
        "windows": [
            {"id": 1, "opened_folder_uri": {"scheme": "file", "path": "/a"}, "last_focus_time": 1},
            {"id": 2, "opened_folder_uri": {"scheme": "file", "path": "/a/b"}, "last_focus_time": 2},
            {
                "id": 3,
                "opened_workspace": {"id": "ws1", "config_path": "/w/ws1.code-workspace"},
                "last_focus_time": 3,
            },
            {"id": 4, "extension_development_path": "/ext/my-ext", "last_focus_time": 7},
        ],
        "workspaces": [
            {
                "id": "ws1",
                "config_path": "/w/ws1.code-workspace",
                "folders": [{"uri": {"scheme": "file", "path": "/w/one"}}],
            }
        ],
    }
