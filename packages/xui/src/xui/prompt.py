"""Single-line prompt editor.

A prompt is a line of text that starts with a fixed, non-editable prefix
(``"Search: "``) followed by what the user types. Editing is a small state
machine over key events:

* :func:`prompt_transition` is the pure transition function
  ``(PromptState, KeyEvent) -> Transition``.
* :class:`PromptEditor` holds the state of one session, mirrors it onto a
  surface after every consumed key and fires the completion callback once,
  when the session is committed (Enter) or cancelled (Escape, ctrl+g, or
  backspacing into the prefix).

The callback receives ``(committed, text)`` where ``text`` is the first line
of the buffer, stripped of surrounding whitespace, minus the prefix.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Literal

from xui.keybindings import PromptKeybindingsManager, get_prompt_keybindings
from xui.keys import KeyEvent, iter_keys
from xui.surface import Surface
from xui.utils import first_line

logger = logging.getLogger(__name__)

PromptStatus = Literal["editing", "committed", "cancelled"]

PromptCallback = Callable[[bool, str], None]


@dataclass(frozen=True)
class PromptState:
    """Buffer and cursor of a prompt session.

    ``offset`` is the length of the prefix; the cursor never moves left of it.
    """

    buffer: str = ""
    cursor: int = 0
    offset: int = 0
    status: PromptStatus = "editing"

    @classmethod
    def open(cls, prefix: str, content: str = "") -> PromptState:
        buffer = prefix + content
        return cls(buffer=buffer, cursor=len(buffer), offset=len(prefix))

    @property
    def done(self) -> bool:
        return self.status != "editing"

    @property
    def text(self) -> str:
        """The editable part of the buffer."""
        return self.buffer[self.offset:]


@dataclass(frozen=True)
class Completion:
    committed: bool
    text: str


@dataclass(frozen=True)
class Transition:
    state: PromptState
    consumed: bool
    completion: Completion | None = None


def complete(state: PromptState) -> Completion:
    """Build the completion result of a finished session."""
    content = first_line(state.buffer).strip()
    offset = min(state.offset, len(content))
    return Completion(committed=state.status == "committed", text=content[offset:])


def _insert(state: PromptState, text: str) -> PromptState:
    buf = state.buffer
    return replace(
        state,
        buffer=buf[:state.cursor] + text + buf[state.cursor:],
        cursor=state.cursor + len(text),
    )


def _finish(state: PromptState, status: PromptStatus) -> Transition:
    state = replace(state, status=status)
    return Transition(state, True, complete(state))


def prompt_transition(
    state: PromptState,
    event: KeyEvent,
    keybindings: PromptKeybindingsManager | None = None,
) -> Transition:
    """Apply one key *event* to *state*.

    Rules are checked in order: printable character, space, backspace,
    delete, submit, cancel, left, right. Keys matching none of them are not
    consumed. A finished session consumes nothing.
    """
    if state.done:
        return Transition(state, False)

    kb = keybindings or get_prompt_keybindings()

    if event.is_char:
        return Transition(_insert(state, event.char), True)

    if kb.matches(event, "insertSpace"):
        return Transition(_insert(state, " "), True)

    if kb.matches(event, "deleteCharBackward"):
        if state.cursor > state.offset:
            buf = state.buffer
            state = replace(
                state,
                buffer=buf[:state.cursor - 1] + buf[state.cursor:],
                cursor=state.cursor - 1,
            )
            return Transition(state, True)
        return _finish(state, "cancelled")

    if kb.matches(event, "deleteCharForward"):
        buf = state.buffer
        if state.cursor < len(buf):
            state = replace(state, buffer=buf[:state.cursor] + buf[state.cursor + 1:])
        return Transition(state, True)

    if kb.matches(event, "submit"):
        return _finish(state, "committed")

    if kb.matches(event, "cancel"):
        return _finish(state, "cancelled")

    if kb.matches(event, "cursorLeft"):
        if state.cursor > state.offset:
            state = replace(state, cursor=state.cursor - 1)
        return Transition(state, True)

    if kb.matches(event, "cursorRight"):
        if state.cursor < len(state.buffer):
            state = replace(state, cursor=state.cursor + 1)
        return Transition(state, True)

    return Transition(state, False)


class PromptEditor:
    """Lets the user enter a line of text after a fixed *prefix*.

    *callback* is invoked exactly once, synchronously from the key handler
    that ends the session.
    """

    def __init__(
        self,
        prefix: str,
        callback: PromptCallback,
        content: str = "",
        keybindings: PromptKeybindingsManager | None = None,
    ) -> None:
        self._state = PromptState.open(prefix, content)
        self._callback = callback
        self._keybindings = keybindings

    @property
    def state(self) -> PromptState:
        return self._state

    @property
    def offset(self) -> int:
        return self._state.offset

    @property
    def done(self) -> bool:
        return self._state.done

    def handle_key(self, surface: Surface | None, event: KeyEvent) -> bool:
        """Feed one key event. Returns ``True`` if the key was consumed."""
        transition = prompt_transition(self._state, event, self._keybindings)
        self._apply(surface, transition)
        return transition.consumed

    def handle_input(self, surface: Surface | None, data: str) -> bool:
        """Feed raw terminal input. Returns ``True`` if any key was consumed."""
        consumed = False
        for event in iter_keys(data):
            if self._state.done:
                break
            consumed = self.handle_key(surface, event) or consumed
        return consumed

    def cancel(self, surface: Surface | None = None) -> None:
        """End the session as cancelled, as if Escape had been pressed."""
        if not self._state.done:
            self._apply(surface, _finish(self._state, "cancelled"))

    def _apply(self, surface: Surface | None, transition: Transition) -> None:
        self._state = transition.state

        # A finished session reports its completion even if the surface fails.
        try:
            if transition.consumed and surface is not None:
                surface.clear()
                surface.write(self._state.buffer)
                surface.set_cursor(self._state.cursor, 0)
        finally:
            if transition.completion is not None:
                logger.debug("Prompt %s with %r", self._state.status, transition.completion.text)
                self._callback(transition.completion.committed, transition.completion.text)
