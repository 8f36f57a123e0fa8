"""Tests for the TextWidget component and its prompt sessions."""

from __future__ import annotations

import pytest

from xui.components.text import TextWidget
from xui.errors import PromptActiveError, SurfaceError, UnknownActionError
from xui.keybindings import PromptKeybindingsManager
from xui.keys import parse_key

from .virtual_surface import VirtualHost, VirtualSurface


def _setup(text: str = "") -> tuple[TextWidget, VirtualSurface, VirtualHost, VirtualSurface]:
    main = VirtualSurface(name="main")
    status = VirtualSurface(name="status", rows=1, columns=40)
    host = VirtualHost(focused=main)
    widget = TextWidget(text)
    widget.set_surface(status)
    return widget, status, host, main


class TestTextWidget:
    def test_renders_text_on_bind(self) -> None:
        widget, status, _, _ = _setup("ready")
        assert status.content == "ready"
        assert widget.text == "ready"

    def test_set_text_rerenders(self) -> None:
        widget, status, _, _ = _setup("ready")
        widget.set_text("busy")
        assert status.content == "busy"

    def test_set_text_without_surface(self) -> None:
        widget = TextWidget()
        widget.set_text("hello")
        assert widget.text == "hello"

    def test_binding_applies_colors_and_disables_wrap(self) -> None:
        surface = VirtualSurface()
        TextWidget(fg_color="white", bg_color="blue").set_surface(surface)
        assert surface.fg_color == "white"
        assert surface.bg_color == "blue"
        assert surface.wrap is False

    def test_handles_no_actions(self) -> None:
        widget, _, _, _ = _setup()
        with pytest.raises(UnknownActionError):
            widget.handle_action("next_line")


class TestTextWidgetPrompt:
    def test_open_prompt(self) -> None:
        widget, status, host, _ = _setup("ready")
        widget.set_prompt(host, "Name: ", "x", lambda ok, text: None)
        assert host.current_surface() is status
        assert host.cursor_visible is True
        assert status.editable is True
        assert status.content == "Name: x"
        assert status.cursor() == (7, 0)
        assert widget.editor is not None

    def test_commit_restores_focus(self) -> None:
        widget, status, host, main = _setup()
        calls: list[tuple[bool, str]] = []
        widget.set_prompt(host, "Name: ", "x", lambda ok, text: calls.append((ok, text)))

        for data in ("\x1b[C", "y", "\r"):
            event = parse_key(data)
            assert event is not None
            assert widget.handle_key(event)

        assert calls == [(True, "xy")]
        assert host.current_surface() is main
        assert host.focus_history == ["status", "main"]
        assert host.cursor_visible is False
        assert status.editable is False
        assert widget.editor is None

    def test_backspace_into_prefix_cancels(self) -> None:
        widget, _, host, main = _setup()
        calls: list[tuple[bool, str]] = []
        widget.set_prompt(host, "Search: ", "", lambda ok, text: calls.append((ok, text)))
        assert widget.handle_input("\x7f")
        assert calls == [(False, "")]
        assert host.current_surface() is main

    def test_editable_flag_is_restored(self) -> None:
        widget, status, host, _ = _setup()
        status.editable = True
        widget.set_prompt(host, "> ", "", lambda ok, text: None)
        widget.handle_input("\r")
        assert status.editable is True

    def test_without_previous_focus(self) -> None:
        widget, status, _, _ = _setup()
        host = VirtualHost()
        widget.set_prompt(host, "> ", "", lambda ok, text: None)
        widget.handle_input("\x1b")
        assert host.focus_history == ["status"]
        assert host.current_surface() is status
        assert host.cursor_visible is False

    def test_typed_input_is_forwarded(self) -> None:
        widget, status, host, _ = _setup()
        calls: list[tuple[bool, str]] = []
        widget.set_prompt(host, "Find: ", "", lambda ok, text: calls.append((ok, text)))
        widget.handle_input("foo bar")
        assert status.content == "Find: foo bar"
        widget.handle_input("\r")
        assert calls == [(True, "foo bar")]

    def test_second_prompt_is_rejected(self) -> None:
        widget, _, host, _ = _setup()
        widget.set_prompt(host, "> ", "", lambda ok, text: None)
        with pytest.raises(PromptActiveError):
            widget.set_prompt(host, "? ", "", lambda ok, text: None)

    def test_new_prompt_can_open_from_callback(self) -> None:
        widget, status, host, _ = _setup()

        def first_done(ok: bool, text: str) -> None:
            widget.set_prompt(host, "Again: ", text, lambda ok, text: None)

        widget.set_prompt(host, "> ", "a", first_done)
        widget.handle_input("\r")
        assert widget.editor is not None
        assert status.content == "Again: a"

    def test_cancel_prompt(self) -> None:
        widget, _, host, main = _setup()
        calls: list[tuple[bool, str]] = []
        widget.set_prompt(host, "> ", "draft", lambda ok, text: calls.append((ok, text)))
        widget.cancel_prompt()
        widget.cancel_prompt()
        assert calls == [(False, "draft")]
        assert host.current_surface() is main
        assert widget.editor is None

    def test_without_surface_is_noop(self) -> None:
        widget = TextWidget()
        host = VirtualHost()
        calls: list[tuple[bool, str]] = []
        widget.set_prompt(host, "> ", "", lambda ok, text: calls.append((ok, text)))
        assert widget.editor is None
        assert host.cursor_visible is False
        assert host.focus_history == []
        assert not widget.handle_input("\r")
        assert calls == []

    def test_keys_ignored_without_prompt(self) -> None:
        widget, _, _, _ = _setup()
        event = parse_key("a")
        assert event is not None
        assert not widget.handle_key(event)
        assert not widget.handle_input("a")

    def test_widget_keybindings(self) -> None:
        main = VirtualSurface(name="main")
        status = VirtualSurface(name="status")
        host = VirtualHost(focused=main)
        widget = TextWidget(keybindings=PromptKeybindingsManager({"submit": "tab"}))
        widget.set_surface(status)
        calls: list[tuple[bool, str]] = []
        widget.set_prompt(host, "> ", "ok", lambda ok, text: calls.append((ok, text)))
        assert not widget.handle_input("\r")
        assert widget.handle_input("\t")
        assert calls == [(True, "ok")]


class TestTextWidgetPromptSurfaceFailures:
    """Surface errors never leave a session half open."""

    def test_failing_cursor_on_commit_still_completes(self) -> None:
        widget, status, host, main = _setup()
        calls: list[tuple[bool, str]] = []
        widget.set_prompt(host, "Name: ", "x", lambda ok, text: calls.append((ok, text)))
        status.fail_set_cursor = True

        with pytest.raises(SurfaceError):
            widget.handle_input("\r")

        assert calls == [(True, "x")]
        assert widget.editor is None
        assert host.current_surface() is main
        assert host.cursor_visible is False
        assert status.editable is False

    def test_prompt_can_reopen_after_failed_cancel(self) -> None:
        widget, status, host, _ = _setup()
        calls: list[tuple[bool, str]] = []
        widget.set_prompt(host, "> ", "a", lambda ok, text: calls.append((ok, text)))
        status.fail_set_cursor = True
        with pytest.raises(SurfaceError):
            widget.cancel_prompt()
        status.fail_set_cursor = False

        widget.set_prompt(host, "> ", "b", lambda ok, text: calls.append((ok, text)))
        widget.handle_input("\r")
        assert calls == [(False, "a"), (True, "b")]

    def test_failing_cursor_on_open_leaves_no_session(self) -> None:
        widget, status, host, main = _setup()
        status.fail_set_cursor = True

        with pytest.raises(SurfaceError):
            widget.set_prompt(host, "> ", "", lambda ok, text: None)

        assert widget.editor is None
        assert host.current_surface() is main
        assert host.focus_history == []
        assert host.cursor_visible is False
        assert status.editable is False
