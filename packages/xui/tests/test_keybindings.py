"""Tests for xui.keybindings -- prompt keybindings manager."""

from __future__ import annotations

from types import MappingProxyType

import pytest

from xui.keybindings import (
    DEFAULT_PROMPT_KEYBINDINGS,
    PromptKeybindingsManager,
    get_prompt_keybindings,
    set_prompt_keybindings,
)
from xui.keys import parse_key


@pytest.fixture(autouse=True)
def _reset_global():
    set_prompt_keybindings(None)
    yield
    set_prompt_keybindings(None)


class TestDefaultPromptKeybindings:
    """DEFAULT_PROMPT_KEYBINDINGS covers every prompt action."""

    def test_actions(self):
        assert set(DEFAULT_PROMPT_KEYBINDINGS) == {
            "insertSpace",
            "deleteCharBackward",
            "deleteCharForward",
            "submit",
            "cancel",
            "cursorLeft",
            "cursorRight",
        }

    def test_cancel_has_escape_and_ctrl_g(self):
        assert DEFAULT_PROMPT_KEYBINDINGS["cancel"] == ["escape", "ctrl+g"]


class TestPromptKeybindingsManager:
    def test_defaults(self):
        kb = PromptKeybindingsManager()
        assert kb.matches("\r", "submit")
        assert kb.matches("\x1b", "cancel")
        assert kb.matches("\x07", "cancel")
        assert kb.matches("\x7f", "deleteCharBackward")
        assert kb.matches("\x1b[3~", "deleteCharForward")
        assert kb.matches("\x1b[D", "cursorLeft")
        assert kb.matches("\x1bOC", "cursorRight")
        assert kb.matches(" ", "insertSpace")

    def test_matches_events(self):
        kb = PromptKeybindingsManager()
        assert kb.matches(parse_key("\r"), "submit")
        assert not kb.matches(parse_key("\r"), "cancel")

    def test_get_keys_normalizes_to_list(self):
        kb = PromptKeybindingsManager()
        assert kb.get_keys("submit") == ["enter"]
        assert kb.get_keys("cancel") == ["escape", "ctrl+g"]

    def test_override_single_key(self):
        kb = PromptKeybindingsManager({"submit": "ctrl+s"})
        assert kb.get_keys("submit") == ["ctrl+s"]
        assert not kb.matches("\r", "submit")
        assert kb.matches("\x13", "submit")
        # Other actions keep their defaults.
        assert kb.matches("\x1b", "cancel")

    def test_override_with_list(self):
        kb = PromptKeybindingsManager({"cancel": ["ctrl+c", "ctrl+q"]})
        assert kb.matches("\x03", "cancel")
        assert kb.matches("\x11", "cancel")
        assert not kb.matches("\x1b", "cancel")

    def test_unbinding_with_empty_list(self):
        kb = PromptKeybindingsManager({"cursorRight": []})
        assert not kb.matches("\x1b[C", "cursorRight")

    def test_accepts_read_only_mapping(self):
        kb = PromptKeybindingsManager(MappingProxyType({"submit": "tab"}))
        assert kb.matches("\t", "submit")

    def test_unknown_action(self):
        with pytest.raises(ValueError, match="unknown prompt action"):
            PromptKeybindingsManager({"scrollDown": "down"})  # type: ignore[dict-item]

    def test_set_config_replaces_previous_overrides(self):
        kb = PromptKeybindingsManager({"submit": "ctrl+s"})
        kb.set_config({"cancel": "ctrl+c"})
        assert kb.matches("\r", "submit")
        assert kb.matches("\x03", "cancel")

    def test_does_not_mutate_defaults(self):
        kb = PromptKeybindingsManager()
        kb.get_keys("cancel").append("tab")
        assert DEFAULT_PROMPT_KEYBINDINGS["cancel"] == ["escape", "ctrl+g"]


class TestGlobalPromptKeybindings:
    def test_get_returns_singleton(self):
        assert get_prompt_keybindings() is get_prompt_keybindings()

    def test_set_replaces_global(self):
        custom = PromptKeybindingsManager({"submit": "tab"})
        set_prompt_keybindings(custom)
        assert get_prompt_keybindings() is custom

    def test_set_none_restores_defaults(self):
        set_prompt_keybindings(PromptKeybindingsManager({"submit": "tab"}))
        set_prompt_keybindings(None)
        assert get_prompt_keybindings().matches("\r", "submit")
