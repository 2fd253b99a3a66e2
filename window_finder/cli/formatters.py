"""Rich and JSON formatters for window-finder CLI output."""

from typing import Any, Dict, Optional

from rich.console import Console
from rich.table import Table

from ..models.window import WindowRecord


# Global console instance
console = Console()


def format_window_table(window: WindowRecord, index: Optional[int], title: str) -> Table:
    """Format a matched window as a two column Rich table.

    Args:
        window: Matched window
        index: Position of the window in the snapshot
        title: Table title (usually the query that was run)

    Returns:
        Rich Table object ready for display
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")

    table.add_column("Field", style="bold green")
    table.add_column("Value", style="blue")

    table.add_row("Index", str(index) if index is not None else "-")
    table.add_row("Id", str(window.id) if window.id is not None else "-")
    table.add_row("Open", window.describe())
    if window.opened_workspace:
        table.add_row("Workspace", f"{window.opened_workspace.id} ({window.opened_workspace.config_path})")
    if window.opened_folder_uri:
        table.add_row("Folder", window.opened_folder_uri.to_string())
    if window.opened_file_path:
        table.add_row("File", window.opened_file_path)
    if window.extension_development_path:
        table.add_row("Extension Dev Path", window.extension_development_path)
    table.add_row("Last Focus", f"{window.last_focus_time:g}")

    return table


def format_match_json(window: Optional[WindowRecord], index: Optional[int], query: str) -> Dict[str, Any]:
    """Format a lookup result as a JSON-compatible dict."""
    if window is None:
        return {"status": "no-match", "query": query, "index": None, "window": None}
    return {
        "status": "match",
        "query": query,
        "index": index,
        "window": window.model_dump(mode="json", exclude_none=True),
    }
