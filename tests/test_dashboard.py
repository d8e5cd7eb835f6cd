"""Tests for dashboard key dispatch and column rendering."""

import asyncio
import inspect

from terranav.dashboard.app import TerraNavApp
from terranav.dashboard.screens import HelpScreen, _HELP_BINDINGS
from terranav.dashboard.widgets import column_width, item_text_width, page_dots, render_column
from terranav.models import ColumnView, NavigationColumn, Selection
from terranav.session import NavigationSession
from tests.helpers import make_session, make_tree

ENV_TREE = {"env": {"dev": {}, "prod": {}}, "modules": {}}


class _DummyKey:
    def __init__(self, key: str, character: str | None = None) -> None:
        self.key = key
        self.character = character
        self.prevented = False
        self.stopped = False

    def prevent_default(self) -> None:
        self.prevented = True

    def stop(self) -> None:
        self.stopped = True


class _DummyWidget:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def update(self, content) -> None:
        self.calls.append(("update", content))

    def show(self, view, width) -> None:
        self.calls.append(("show", view, width))

    def hide(self) -> None:
        self.calls.append(("hide",))

    def set_visible(self, visible) -> None:
        self.calls.append(("visible", visible))


def _app(monkeypatch, **kwargs):
    app = TerraNavApp(make_session(ENV_TREE, **kwargs))
    exits: list = []
    screens: list = []
    monkeypatch.setattr(app, "exit", lambda result=None, *a, **k: exits.append(result))
    monkeypatch.setattr(app, "push_screen", lambda screen, *a, **k: screens.append(screen))
    monkeypatch.setattr(app, "_refresh_view", lambda: None)
    return app, exits, screens


# ── Key dispatch ─────────────────────────────────────────────────────


def test_ctrl_c_and_ctrl_q_are_priority_quit_bindings() -> None:
    bindings = {binding.key: binding for binding in TerraNavApp.BINDINGS}
    for key in ("ctrl+c", "ctrl+q"):
        assert bindings[key].action == "quit"
        assert bindings[key].priority is True


def test_arrow_and_vim_keys_move(monkeypatch) -> None:
    app, _, _ = _app(monkeypatch)
    session = app.session

    assert app._dispatch_key("down", None)
    assert session.selected_action == "apply"
    assert app._dispatch_key("k", "k")
    assert session.selected_action == "plan"
    assert app._dispatch_key("l", "l")
    assert session.focus == NavigationColumn(0)
    assert app._dispatch_key("right", None)
    assert session.focus == NavigationColumn(1)
    assert app._dispatch_key("h", "h")
    assert session.focus == NavigationColumn(0)
    assert app._dispatch_key("j", "j")
    assert session.state.current_nodes[0].name == "modules"


def test_enter_exits_with_selection(monkeypatch) -> None:
    app, exits, _ = _app(monkeypatch)
    app._dispatch_key("down", None)
    app._dispatch_key("right", None)

    assert app._dispatch_key("enter", None)

    assert exits == [Selection("apply", "/infra/env")]


def test_confirm_without_target_keeps_running(monkeypatch) -> None:
    app, exits, _ = _app(monkeypatch)
    monkeypatch.setattr(app.session, "confirm", lambda: None)

    app.action_confirm()

    assert exits == []


def test_quit_keys_exit_without_selection(monkeypatch) -> None:
    app, exits, _ = _app(monkeypatch)
    assert app._dispatch_key("q", "q")
    assert app._dispatch_key("escape", None)
    assert exits == [None, None]


def test_question_mark_opens_help(monkeypatch) -> None:
    app, _, screens = _app(monkeypatch)
    assert app._dispatch_key("question_mark", "?")
    assert len(screens) == 1
    assert isinstance(screens[0], HelpScreen)


def test_unknown_key_is_not_consumed(monkeypatch) -> None:
    app, exits, _ = _app(monkeypatch)
    assert not app._dispatch_key("x", "x")
    assert exits == []


def test_filter_mode_captures_typing(monkeypatch) -> None:
    app, exits, _ = _app(monkeypatch)
    session = app.session

    assert app._dispatch_key("slash", "/")
    assert session.filter_editing

    for char in "qpx":
        app._dispatch_key(char, char)
    assert session.filter_text(0) == "qpx"
    assert exits == []

    app._dispatch_key("backspace", None)
    app._dispatch_key("backspace", None)
    assert session.filter_text(0) == "q"

    assert not app._dispatch_key("ctrl+x", None)


def test_filter_mode_escape_clears_and_enter_confirms(monkeypatch) -> None:
    app, exits, _ = _app(monkeypatch)
    session = app.session
    app._dispatch_key("slash", "/")
    for char in "des":
        app._dispatch_key(char, char)
    assert session.selected_action == "destroy"

    app._dispatch_key("escape", None)
    assert session.filter_text(0) is None
    assert not session.filter_editing
    assert exits == []

    app._dispatch_key("slash", "/")
    app._dispatch_key("enter", None)
    assert exits == [Selection("destroy", "/infra")]


def test_on_key_stops_consumed_events(monkeypatch) -> None:
    app, _, _ = _app(monkeypatch)
    refreshes: list[bool] = []
    monkeypatch.setattr(app, "_refresh_view", lambda: refreshes.append(True))
    monkeypatch.setattr(TerraNavApp, "screen_stack", property(lambda self: [object()]))

    handled = _DummyKey("down")
    app.on_key(handled)
    ignored = _DummyKey("x", "x")
    app.on_key(ignored)

    assert handled.prevented and handled.stopped
    assert not ignored.prevented and not ignored.stopped
    assert refreshes == [True]


def test_refresh_view_fills_window_slots(monkeypatch) -> None:
    app = TerraNavApp(make_session(ENV_TREE, visible_columns=3))
    widgets: dict[str, _DummyWidget] = {}

    def _query_one(selector, cls=None):
        return widgets.setdefault(selector, _DummyWidget())

    monkeypatch.setattr(app, "query_one", _query_one)

    app._refresh_view()

    assert widgets["#breadcrumb"].calls == [("update", "📁 /infra")]
    assert widgets["#action-column"].calls[0][0] == "show"
    assert widgets["#arrow-left"].calls == [("visible", False)]
    assert widgets["#arrow-right"].calls == [("visible", False)]
    assert widgets["#nav-slot-0"].calls[0][1].items == ["env", "modules"]
    assert widgets["#nav-slot-1"].calls[0][1].items == ["dev", "prod"]
    assert widgets["#nav-slot-2"].calls == [("hide",)]


def test_refresh_view_waits_for_first_resize(monkeypatch) -> None:
    root, depth = make_tree(ENV_TREE)
    app = TerraNavApp(NavigationSession(root, depth, ["plan"]))
    queried: list = []
    monkeypatch.setattr(app, "query_one", lambda *a, **k: queried.append(a))

    app._refresh_view()

    assert queried == []


# ── Rendering ────────────────────────────────────────────────────────


def test_column_width():
    assert column_width(120, 3) == 22
    assert column_width(40, 3) == 20
    assert item_text_width(22) == 12
    assert item_text_width(5) == 10


def test_page_dots():
    assert page_dots(1, 1).plain == ""
    assert page_dots(2, 3).plain == "•••"


def test_render_column_items_and_cursor():
    view = ColumnView(
        column_id=0, title="Commands", items=["plan", "apply"],
        selected=1, page_size=3,
    )

    lines = render_column(view, 30).plain.split("\n")

    assert lines[0] == "⚡ Commands"
    assert lines[1] == ""
    assert lines[2] == "   plan "
    assert lines[3] == "►  apply "
    # padded to the page size
    assert len(lines) == 2 + 3 + 1


def test_render_column_filter_line():
    editing = ColumnView(
        column_id=1, title="Level 1", items=[], filter_text="", filter_editing=True,
    )
    applied = ColumnView(column_id=1, title="Level 1", items=[], filter_text="dev")

    assert render_column(editing, 30).plain.startswith("/ Filter...▏\n")
    assert render_column(applied, 30).plain.startswith("/ dev\n")


def test_render_column_truncates_and_shows_pages():
    view = ColumnView(
        column_id=2, title="Level 2", items=["abcdefghijklmnop"],
        selected=0, page=2, total_pages=2, page_size=1,
    )

    plain = render_column(view, 20).plain

    assert plain.startswith("📦 Level 2\n\n")
    assert "abcdefg..." in plain
    assert plain.endswith("••")


# ── Help screen ──────────────────────────────────────────────────────


def test_help_lists_navigation_and_filter_keys():
    entries = {key: desc for key, desc in _HELP_BINDINGS if key}
    headers = [desc for key, desc in _HELP_BINDINGS if not key]

    assert headers[0] == "─── Navigation ───"
    assert "/" in entries
    assert "Enter" in entries


def test_help_compose_uses_two_column_rows():
    source = inspect.getsource(HelpScreen.compose)
    assert 'with Horizontal(classes="help-row")' in source


def test_help_screen_keeps_keys_from_the_session():
    session = make_session(ENV_TREE)
    app = TerraNavApp(session)

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.press("question_mark")
            await pilot.pause()
            assert isinstance(app.screen, HelpScreen)

            await pilot.press("down")
            assert session.selected_action == "plan"

            await pilot.press("escape")
            await pilot.pause()
            assert not isinstance(app.screen, HelpScreen)
            assert app.is_running

            await pilot.press("down")
            assert session.selected_action == "apply"

    asyncio.run(scenario())


def test_on_key_ignored_while_modal_open(monkeypatch) -> None:
    app, _, _ = _app(monkeypatch)
    monkeypatch.setattr(TerraNavApp, "screen_stack", property(lambda self: [object(), object()]))

    event = _DummyKey("down")
    app.on_key(event)

    assert app.session.selected_action == "plan"
    assert not event.stopped
