"""Prompt editor keybindings manager."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal

from xui.keys import KeyEvent, KeyId, matches_key

PromptAction = Literal[
    "insertSpace",
    "deleteCharBackward",
    "deleteCharForward",
    "submit",
    "cancel",
    "cursorLeft",
    "cursorRight",
]

PromptKeybindingsConfig = Mapping[PromptAction, KeyId | list[KeyId]]

DEFAULT_PROMPT_KEYBINDINGS: dict[PromptAction, KeyId | list[KeyId]] = {
    "insertSpace": "space",
    "deleteCharBackward": "backspace",
    "deleteCharForward": "delete",
    "submit": "enter",
    "cancel": ["escape", "ctrl+g"],
    "cursorLeft": "left",
    "cursorRight": "right",
}


class PromptKeybindingsManager:
    """Manages keybindings for the prompt editor."""

    def __init__(self, config: PromptKeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[PromptAction, list[KeyId]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: PromptKeybindingsConfig) -> None:
        self._action_to_keys.clear()

        # Start with defaults
        for action, keys in DEFAULT_PROMPT_KEYBINDINGS.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

        # Override with user config
        for action, keys in config.items():
            if action not in DEFAULT_PROMPT_KEYBINDINGS:
                raise ValueError(f"unknown prompt action: {action!r}")
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

    def matches(self, data: KeyEvent | str, action: PromptAction) -> bool:
        """Check if input matches a specific action."""
        keys = self._action_to_keys.get(action)
        if not keys:
            return False
        for key in keys:
            if matches_key(data, key):
                return True
        return False

    def get_keys(self, action: PromptAction) -> list[KeyId]:
        """Get keys bound to an action."""
        return self._action_to_keys.get(action, [])

    def set_config(self, config: PromptKeybindingsConfig) -> None:
        """Update configuration."""
        self._build_maps(config)


_global_prompt_keybindings: PromptKeybindingsManager | None = None


def get_prompt_keybindings() -> PromptKeybindingsManager:
    global _global_prompt_keybindings
    if _global_prompt_keybindings is None:
        _global_prompt_keybindings = PromptKeybindingsManager()
    return _global_prompt_keybindings


def set_prompt_keybindings(manager: PromptKeybindingsManager | None) -> None:
    """Install *manager* process-wide; ``None`` restores the defaults."""
    global _global_prompt_keybindings
    _global_prompt_keybindings = manager
