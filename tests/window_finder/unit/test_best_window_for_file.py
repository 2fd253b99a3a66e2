"""Unit tests for choosing the window that opens a file."""

import pytest

from window_finder.core.finder import find_best_window_or_folder_for_file
from window_finder.core.resolver import StaticWorkspaceResolver
from window_finder.models.context import OpenContext
from window_finder.models.uri import Uri
from window_finder.models.window import WindowRecord


def find(windows, file_path, resolver=None, context=OpenContext.CLI, new_window=False, ignore_case=False):
    return find_best_window_or_folder_for_file(
        windows=windows,
        new_window=new_window,
        reuse_window=False,
        context=context,
        file_path=file_path,
        workspace_resolver=resolver or StaticWorkspaceResolver(),
        ignore_case=ignore_case,
    )


class TestFolderMatching:
    """Single folder windows containing the file."""

    def test_deepest_folder_wins(self, make_folder_window):
        """A file under /a/b goes to the /a/b window, not /a or the most recent window."""
        windows = [make_folder_window("/a", 1), make_folder_window("/a/b", 2)]
        assert find(windows, "/a/b/c.txt") is windows[1]

    def test_deepest_folder_wins_regardless_of_order_and_focus(self, make_folder_window):
        windows = [make_folder_window("/a/b", 1), make_folder_window("/a", 9)]
        assert find(windows, "/a/b/c.txt") is windows[0]

    def test_first_of_equally_deep_folders_wins(self, make_folder_window):
        windows = [make_folder_window("/a/b", 1), make_folder_window("/a/b", 5)]
        assert find(windows, "/a/b/c.txt") is windows[0]

    def test_folder_itself_matches(self, make_folder_window):
        windows = [make_folder_window("/x", 9), make_folder_window("/a/b", 1)]
        assert find(windows, "/a/b") is windows[1]

    def test_sibling_prefix_does_not_match(self, make_folder_window):
        windows = [make_folder_window("/a/b", 1), make_folder_window("/z", 3)]
        # /a/bc is not inside /a/b, falls back to the last active window
        assert find(windows, "/a/bc/file.txt") is windows[1]

    def test_non_file_scheme_folders_are_ignored(self):
        remote = WindowRecord(opened_folder_uri=Uri.parse("vscode-remote://box/a"), last_focus_time=1)
        local = WindowRecord(opened_folder_uri=Uri.file("/elsewhere", separator="/"), last_focus_time=2)
        assert find([remote, local], "/a/file.txt") is local

    def test_case_rule(self, make_folder_window):
        windows = [make_folder_window("/Work/App", 1), make_folder_window("/other", 2)]
        assert find(windows, "/work/app/main.py", ignore_case=True) is windows[0]
        assert find(windows, "/work/app/main.py", ignore_case=False) is windows[1]


class TestWorkspaceMatching:
    """Workspace windows containing the file."""

    def test_workspace_folder_match(self, make_workspace_window, make_folder_window, workspace_resolver):
        windows = [make_folder_window("/x", 5), make_workspace_window("web", 1)]
        assert find(windows, "/src/shared/util.py", workspace_resolver) is windows[1]

    def test_workspace_beats_deeper_single_folder(self, make_workspace_window, make_folder_window, workspace_resolver):
        """Workspace matches take precedence over single folder matches and recency."""
        windows = [make_folder_window("/src/web/app", 10), make_workspace_window("web", 1)]
        assert find(windows, "/src/web/app/index.ts", workspace_resolver) is windows[1]

    def test_first_matching_workspace_wins(self, make_workspace_window, workspace_resolver):
        """Workspace matches are not ranked by depth; list order decides."""
        first = make_workspace_window("web", 1)
        second = make_workspace_window("web", 2)
        assert find([first, second], "/src/web/a.ts", workspace_resolver) is first

    def test_remote_workspace_folders_are_ignored(self, make_workspace_window, make_folder_window, workspace_resolver):
        windows = [make_workspace_window("remote", 9), make_folder_window("/src", 1)]
        assert find(windows, "/src/web/a.ts", workspace_resolver) is windows[1]

    def test_unresolvable_workspace_is_skipped(self, make_workspace_window, make_folder_window, workspace_resolver):
        windows = [make_workspace_window("unknown", 9), make_folder_window("/src/web", 1)]
        assert find(windows, "/src/web/a.ts", workspace_resolver) is windows[1]

    def test_resolver_errors_propagate(self, make_workspace_window):
        def failing_resolver(workspace):
            raise RuntimeError(f"cannot read {workspace.config_path}")

        with pytest.raises(RuntimeError, match="cannot read"):
            find([make_workspace_window("web", 1)], "/src/web/a.ts", failing_resolver)


class TestFallback:
    """Behaviour when no window contains the file."""

    def test_falls_back_to_last_active_window(self, make_folder_window):
        windows = [make_folder_window("/x", 5)]
        assert find(windows, "/y/z.txt") is windows[0]

    def test_fallback_picks_most_recent(self, make_folder_window):
        windows = [make_folder_window("/x", 5), make_folder_window("/y", 8), make_folder_window("/z", 2)]
        assert find(windows, "/nowhere/file.txt") is windows[1]

    def test_no_file_path_uses_last_active(self, make_folder_window):
        windows = [make_folder_window("/a", 1), make_folder_window("/a/b", 2)]
        assert find(windows, None) is windows[1]

    @pytest.mark.parametrize("context", [OpenContext.API, OpenContext.MENU, OpenContext.DIALOG])
    def test_other_contexts_skip_path_matching(self, make_folder_window, context):
        windows = [make_folder_window("/a/b", 1), make_folder_window("/x", 2)]
        assert find(windows, "/a/b/c.txt", context=context) is windows[1]

    @pytest.mark.parametrize("context", [OpenContext.DESKTOP, OpenContext.CLI, OpenContext.DOCK])
    def test_path_matching_contexts(self, make_folder_window, context):
        windows = [make_folder_window("/a/b", 1), make_folder_window("/x", 2)]
        assert find(windows, "/a/b/c.txt", context=context) is windows[0]

    def test_new_window_never_matches(self, make_folder_window):
        windows = [make_folder_window("/a/b", 1)]
        assert find(windows, "/a/b/c.txt", new_window=True) is None
        assert find(windows, None, new_window=True) is None

    def test_no_windows(self):
        assert find([], "/a/b/c.txt") is None

    def test_input_is_not_modified(self, make_folder_window):
        windows = [make_folder_window("/a", 1), make_folder_window("/a/b", 2)]
        before = list(windows)
        find(windows, "/a/b/c.txt")
        assert windows == before
