"""Tests for the TUI app.

These tests drive the app with Textual's Pilot using the mock commit
source and a fake clipboard.
"""

import pytest
from textual.widgets import Input, ListView

from gitlog_tui.clients import GitClientError, MockGitClient
from gitlog_tui.config import DisplayConfig
from gitlog_tui.tui.app import CommitListItem, GitLogApp
from gitlog_tui.tui.screens import HelpScreen


class FailingGitClient(MockGitClient):
    """Commit source that cannot read history."""

    def get_commits(self):
        raise GitClientError("fatal: not a git repository")


@pytest.fixture
def tui_app(mock_source, fake_clipboard):
    """Create TUI app instance for testing."""
    return GitLogApp(source=mock_source, clipboard=fake_clipboard, is_mock=True)


async def settle(app, pilot) -> None:
    """Wait for load/render workers and pending messages."""
    await app.workers.wait_for_complete()
    await pilot.pause()


async def search(app, pilot, query: str) -> None:
    await pilot.press(*query)
    await pilot.press("enter")
    await settle(app, pilot)


class TestStartup:
    """Tests for loading and rendering the commit list."""

    async def test_loads_all_commits(self, tui_app, history):
        async with tui_app.run_test() as pilot:
            await settle(tui_app, pilot)
            assert tui_app.state.visible_records == tuple(history)
            assert tui_app.state.cursor_index == 0
            items = tui_app.query(CommitListItem)
            assert [item.commit for item in items] == history

    async def test_search_input_has_focus(self, tui_app):
        async with tui_app.run_test() as pilot:
            await settle(tui_app, pilot)
            assert isinstance(tui_app.focused, Input)

    async def test_header_uses_display_config(self, mock_source, fake_clipboard):
        display = DisplayConfig(title="My History")
        app = GitLogApp(source=mock_source, display=display, clipboard=fake_clipboard)
        async with app.run_test() as pilot:
            await settle(app, pilot)
            assert "My History" in app._build_header_text()

    async def test_source_error_shown_instead_of_list(self, fake_clipboard):
        app = GitLogApp(source=FailingGitClient(), clipboard=fake_clipboard)
        async with app.run_test() as pilot:
            await settle(app, pilot)
            assert app.state.error == "fatal: not a git repository"
            assert len(app.query("#error-message")) == 1
            assert len(app.query(ListView)) == 0
            # Session still quits cleanly
            await pilot.press("ctrl+q")
            await pilot.pause()
            assert app.state.quitting is True

    async def test_empty_history(self, fake_clipboard):
        app = GitLogApp(source=MockGitClient(commits=[]), clipboard=fake_clipboard)
        async with app.run_test() as pilot:
            await settle(app, pilot)
            assert app.state.visible_records == ()
            assert len(app.query("#empty-message")) == 1

    async def test_small_terminal_does_not_crash(self, tui_app):
        async with tui_app.run_test(size=(20, 8)) as pilot:
            await settle(tui_app, pilot)
            await pilot.press("down")
            await pilot.pause()
            assert tui_app.is_running

    async def test_resize_does_not_crash(self, tui_app):
        async with tui_app.run_test(size=(120, 30)) as pilot:
            await settle(tui_app, pilot)
            await pilot.resize_terminal(30, 10)
            await pilot.pause()
            await pilot.resize_terminal(100, 40)
            await pilot.pause()
            assert tui_app.is_running


class TestSearch:
    """Tests for typing and submitting a search."""

    async def test_typing_updates_query(self, tui_app):
        async with tui_app.run_test() as pilot:
            await settle(tui_app, pilot)
            await pilot.press("f", "i")
            await pilot.pause()
            assert tui_app.state.query == "fi"

    async def test_submit_filters_and_clears_input(self, tui_app, history):
        async with tui_app.run_test() as pilot:
            await settle(tui_app, pilot)
            await search(tui_app, pilot, "fix")
            assert tui_app.state.visible_records == (history[0],)
            assert tui_app.query_one("#search-input", Input).value == ""
            assert [item.commit for item in tui_app.query(CommitListItem)] == [history[0]]

    async def test_search_without_matches(self, tui_app):
        async with tui_app.run_test() as pilot:
            await settle(tui_app, pilot)
            await search(tui_app, pilot, "xyz")
            assert tui_app.state.visible_records == ()
            assert len(tui_app.query("#empty-message")) == 1

    async def test_escape_clears_filter(self, tui_app, history):
        async with tui_app.run_test() as pilot:
            await settle(tui_app, pilot)
            await search(tui_app, pilot, "fix")
            await pilot.press("escape")
            await settle(tui_app, pilot)
            assert tui_app.state.visible_records == tuple(history)
            assert tui_app.state.quitting is False

    async def test_enter_with_empty_query_selects(self, tui_app, history):
        async with tui_app.run_test() as pilot:
            await settle(tui_app, pilot)
            await pilot.press("down")
            await pilot.press("enter")
            await pilot.pause()
            assert tui_app.state.status_message == f"Selected commit: {history[1].hash}"


class TestNavigation:
    """Tests for cursor movement keys."""

    async def test_down_up(self, tui_app):
        async with tui_app.run_test() as pilot:
            await settle(tui_app, pilot)
            await pilot.press("down", "down")
            await pilot.pause()
            assert tui_app.state.cursor_index == 2
            assert tui_app.query_one("#commit-list", ListView).index == 2
            await pilot.press("up")
            await pilot.pause()
            assert tui_app.state.cursor_index == 1

    async def test_cursor_clamped(self, tui_app, history):
        async with tui_app.run_test() as pilot:
            await settle(tui_app, pilot)
            await pilot.press("up")
            await pilot.pause()
            assert tui_app.state.cursor_index == 0
            for _ in range(len(history) + 3):
                await pilot.press("down")
            await pilot.pause()
            assert tui_app.state.cursor_index == len(history) - 1

    async def test_page_and_jump_keys(self, tui_app, history):
        async with tui_app.run_test() as pilot:
            await settle(tui_app, pilot)
            await pilot.press("pagedown")
            await pilot.pause()
            assert tui_app.state.cursor_index > 0
            await pilot.press("ctrl+home")
            await pilot.pause()
            assert tui_app.state.cursor_index == 0
            await pilot.press("ctrl+end")
            await pilot.pause()
            assert tui_app.state.cursor_index == len(history) - 1
            await pilot.press("pageup")
            await pilot.pause()
            assert tui_app.state.cursor_index < len(history) - 1

    async def test_page_size_excludes_border(self, tui_app):
        async with tui_app.run_test() as pilot:
            await settle(tui_app, pilot)
            list_view = tui_app.query_one("#commit-list", ListView)
            assert tui_app._page_size() == list_view.content_size.height
            assert tui_app._page_size() < list_view.size.height

    async def test_navigation_on_empty_list(self, tui_app):
        async with tui_app.run_test() as pilot:
            await settle(tui_app, pilot)
            await search(tui_app, pilot, "xyz")
            await pilot.press("down", "pagedown", "ctrl+end")
            await pilot.pause()
            assert tui_app.state.cursor_index is None


class TestClipboard:
    """Tests for the copy-hash action."""

    async def test_copy_selected_hash(self, tui_app, fake_clipboard, history):
        async with tui_app.run_test() as pilot:
            await settle(tui_app, pilot)
            await pilot.press("down")
            await pilot.press("ctrl+y")
            await pilot.pause()
            assert fake_clipboard.copied == [history[1].hash]
            assert "Copied" in tui_app.state.status_message

    async def test_copy_failure_is_reported(self, mock_source, failing_clipboard):
        app = GitLogApp(source=mock_source, clipboard=failing_clipboard)
        async with app.run_test() as pilot:
            await settle(app, pilot)
            await pilot.press("ctrl+y")
            await pilot.pause()
            assert app.state.status_message.startswith("Error copying to clipboard")
            assert app.is_running

    async def test_copy_with_nothing_selected(self, tui_app, fake_clipboard):
        async with tui_app.run_test() as pilot:
            await settle(tui_app, pilot)
            await search(tui_app, pilot, "xyz")
            await pilot.press("ctrl+y")
            await pilot.pause()
            assert fake_clipboard.copied == []


class TestQuitAndScreens:
    """Tests for quitting, refresh and the help screen."""

    async def test_quit_key(self, tui_app, mock_source, fake_clipboard):
        async with tui_app.run_test() as pilot:
            await settle(tui_app, pilot)
            await pilot.press("f", "i")
            await pilot.press("ctrl+q")
            await pilot.pause()
            assert tui_app.state.quitting is True
            # Quitting neither filtered nor touched the clipboard
            assert tui_app.state.visible_count == len(mock_source.get_commits())
            assert fake_clipboard.copied == []

    async def test_escape_empties_search_box_first(self, tui_app):
        async with tui_app.run_test() as pilot:
            await settle(tui_app, pilot)
            await pilot.press("f", "i", "escape")
            await pilot.pause()
            assert tui_app.state.quitting is False
            assert tui_app.state.query == ""
            assert tui_app.query_one("#search-input", Input).value == ""

    async def test_escape_without_filter_quits(self, tui_app):
        async with tui_app.run_test() as pilot:
            await settle(tui_app, pilot)
            await pilot.press("escape")
            await pilot.pause()
            assert tui_app.state.quitting is True

    async def test_refresh_reloads(self, tui_app, mock_source):
        async with tui_app.run_test() as pilot:
            await settle(tui_app, pilot)
            await search(tui_app, pilot, "fix")
            await pilot.press("f5")
            await settle(tui_app, pilot)
            assert mock_source.call_count == 2
            assert tui_app.state.is_filtered is False
            assert tui_app.is_running

    async def test_help_screen(self, tui_app):
        async with tui_app.run_test() as pilot:
            await settle(tui_app, pilot)
            await pilot.press("f1")
            await pilot.pause()
            assert isinstance(tui_app.screen, HelpScreen)
            await pilot.press("escape")
            await pilot.pause()
            assert not isinstance(tui_app.screen, HelpScreen)
            assert tui_app.state.quitting is False
