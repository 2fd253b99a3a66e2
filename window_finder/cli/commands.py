"""CLI command handlers for window-finder.

Each command loads a window snapshot, runs one lookup against it and
prints the matched window.

Exit codes: 0 = a window matched, 2 = no window matched, 1 = error.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from ..core.config import FinderConfig
from ..core.errors import WindowFinderError
from ..core.finder import (
    find_best_window_or_folder_for_file,
    find_window_on_extension_development_path,
    find_window_on_workspace,
    find_window_on_workspace_or_folder_uri,
    get_last_active_window,
)
from ..models.context import OpenContext
from ..models.snapshot import WindowSnapshot, load_snapshot
from ..models.uri import parse_uri_or_path
from ..models.window import WindowRecord
from ..models.workspace import SingleFolderWorkspaceIdentifier, WorkspaceIdentifier
from .formatters import console, format_match_json, format_window_table
from .logging_config import log_timing, setup_logging

EXIT_MATCH = 0
EXIT_ERROR = 1
EXIT_NO_MATCH = 2


# ANSI color codes for output
class Colors:
    RESET = "\033[0m"
    GREEN = "\033[32m"
    RED = "\033[31m"
    BLUE = "\033[34m"


def print_error(message: str) -> None:
    """Print error message in red."""
    print(f"{Colors.RED}✗{Colors.RESET} {message}", file=sys.stderr)


def print_info(message: str) -> None:
    """Print info message in blue."""
    print(f"{Colors.BLUE}ℹ{Colors.RESET} {message}")


def print_error_with_remediation(error: str, remediation: str) -> None:
    """Print error with remediation steps.

    Format: "Error: <issue>. Remediation: <steps>"
    """
    print(f"{Colors.RED}✗ Error:{Colors.RESET} {error}", file=sys.stderr)
    print(f"{Colors.BLUE}  Remediation:{Colors.RESET} {remediation}", file=sys.stderr)


def resolve_ignore_case(args: argparse.Namespace) -> bool:
    """Case rule for this run: command line flag, then env/config, then platform."""
    if args.ignore_case is not None:
        return args.ignore_case
    config = FinderConfig.load(Path(args.config) if args.config else None)
    return config.effective_ignore_case()


def report(args: argparse.Namespace, snapshot: WindowSnapshot, window: Optional[WindowRecord], query: str) -> int:
    """Print the lookup result and return the exit code."""
    index = snapshot.index_of(window)

    if args.json:
        print(json.dumps(format_match_json(window, index, query), indent=2))
    elif window is None:
        print_info(f"No matching window for {query}")
    else:
        console.print(format_window_table(window, index, title=query))

    return EXIT_MATCH if window is not None else EXIT_NO_MATCH


def _workspace_identifier(snapshot: WindowSnapshot, workspace_id: str) -> WorkspaceIdentifier:
    # Lookups only compare ids; reuse the known config path when the snapshot has one
    for workspace in snapshot.workspaces:
        if workspace.id == workspace_id:
            return workspace.identifier
    for window in snapshot.windows:
        if window.opened_workspace and window.opened_workspace.id == workspace_id:
            return window.opened_workspace
    return WorkspaceIdentifier(id=workspace_id, config_path=workspace_id)


# ============================================================================
# Commands
# ============================================================================


def cmd_resolve_file(args: argparse.Namespace, snapshot: WindowSnapshot, ignore_case: bool) -> int:
    """Pick the window that should open a file."""
    window = find_best_window_or_folder_for_file(
        windows=snapshot.windows,
        new_window=args.new_window,
        reuse_window=args.reuse_window,
        context=OpenContext(args.context),
        file_path=args.path,
        workspace_resolver=snapshot.resolver(),
        ignore_case=ignore_case,
    )
    return report(args, snapshot, window, f"resolve-file {args.path or '(no path)'}")


def cmd_last_active(args: argparse.Namespace, snapshot: WindowSnapshot, ignore_case: bool) -> int:
    """Show the most recently focused window."""
    window = get_last_active_window(snapshot.windows)
    return report(args, snapshot, window, "last-active")


def cmd_find_workspace(args: argparse.Namespace, snapshot: WindowSnapshot, ignore_case: bool) -> int:
    """Find the window with a workspace or folder open."""
    if args.workspace_id:
        identifier = _workspace_identifier(snapshot, args.workspace_id)
        query = f"find-workspace {args.workspace_id}"
    else:
        identifier = SingleFolderWorkspaceIdentifier(uri=parse_uri_or_path(args.folder))
        query = f"find-workspace {identifier.uri.to_string()}"

    window = find_window_on_workspace(snapshot.windows, identifier, ignore_case=ignore_case)
    return report(args, snapshot, window, query)


def cmd_find_extension_dev(args: argparse.Namespace, snapshot: WindowSnapshot, ignore_case: bool) -> int:
    """Find the window hosting an extension under development."""
    window = find_window_on_extension_development_path(
        snapshot.windows, args.path, ignore_case=ignore_case
    )
    return report(args, snapshot, window, f"find-extension-dev {args.path}")


def cmd_find_uri(args: argparse.Namespace, snapshot: WindowSnapshot, ignore_case: bool) -> int:
    """Find the window whose workspace config or folder is a URI."""
    uri = parse_uri_or_path(args.uri)
    window = find_window_on_workspace_or_folder_uri(snapshot.windows, uri, ignore_case=ignore_case)
    return report(args, snapshot, window, f"find-uri {uri.to_string()}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="window-finder",
        description="Replay window lookups against a JSON window snapshot",
    )

    parser.add_argument("--version", action="version", version="window-finder 0.1.0")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging (INFO level)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging (DEBUG level, includes verbose)")
    parser.add_argument("--json", action="store_true", help="Output JSON instead of a table")
    parser.add_argument("--config", help="Config file (default: ~/.config/window-finder/config.json)")

    case_group = parser.add_mutually_exclusive_group()
    case_group.add_argument(
        "--ignore-case", dest="ignore_case", action="store_const", const=True, default=None,
        help="Compare local paths case-insensitively",
    )
    case_group.add_argument(
        "--case-sensitive", dest="ignore_case", action="store_const", const=False,
        help="Compare local paths case-sensitively",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_command(name: str, help_text: str, handler) -> argparse.ArgumentParser:
        sub = subparsers.add_parser(name, help=help_text, description=help_text)
        sub.add_argument("--snapshot", required=True, help="Window snapshot JSON file")
        sub.set_defaults(func=handler)
        return sub

    # window-finder resolve-file --path <file>
    parser_resolve = add_command("resolve-file", "Pick the window that should open a file", cmd_resolve_file)
    parser_resolve.add_argument("--path", help="File being opened")
    parser_resolve.add_argument("--new-window", action="store_true", help="Force a new window")
    parser_resolve.add_argument("--reuse-window", action="store_true", help="Force reusing a window")
    parser_resolve.add_argument(
        "--context",
        choices=[context.value for context in OpenContext],
        default=OpenContext.CLI.value,
        help="Where the open request came from (default: cli)",
    )

    # window-finder last-active
    add_command("last-active", "Show the most recently focused window", cmd_last_active)

    # window-finder find-workspace (--workspace-id <id> | --folder <uri>)
    parser_workspace = add_command("find-workspace", "Find the window with a workspace or folder open", cmd_find_workspace)
    target = parser_workspace.add_mutually_exclusive_group(required=True)
    target.add_argument("--workspace-id", help="Multi-root workspace id")
    target.add_argument("--folder", help="Folder URI or path")

    # window-finder find-extension-dev --path <path>
    parser_ext = add_command("find-extension-dev", "Find the window hosting an extension under development", cmd_find_extension_dev)
    parser_ext.add_argument("--path", required=True, help="Extension development path")

    # window-finder find-uri --uri <uri>
    parser_uri = add_command("find-uri", "Find the window whose workspace config or folder is a URI", cmd_find_uri)
    parser_uri.add_argument("--uri", required=True, help="Workspace config or folder URI (or path)")

    return parser


def cli_main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = setup_logging(verbose=args.verbose, debug=args.debug)

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    try:
        ignore_case = resolve_ignore_case(args)
        snapshot = load_snapshot(args.snapshot)
        logger.debug(f"Running {args.command} with ignore_case={ignore_case}")
        with log_timing(args.command, logger):
            return args.func(args, snapshot, ignore_case)
    except (WindowFinderError, ValueError) as e:
        print_error_with_remediation(
            str(e),
            "Check the snapshot file and config, or run with --debug for details",
        )
        return EXIT_ERROR
