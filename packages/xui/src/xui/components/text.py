"""TextWidget component - displays a string and hosts prompt sessions."""

from __future__ import annotations

import logging
from typing import Any

from xui.errors import PromptActiveError, UnknownActionError
from xui.keybindings import PromptKeybindingsManager
from xui.keys import KeyEvent
from xui.prompt import PromptCallback, PromptEditor
from xui.surface import Surface
from xui.widget import Host

logger = logging.getLogger(__name__)


class TextWidget:
    """Displays a string. Can temporarily turn into a one-line prompt."""

    def __init__(
        self,
        text: str = "",
        fg_color: Any = None,
        bg_color: Any = None,
        keybindings: PromptKeybindingsManager | None = None,
    ) -> None:
        self.fg_color = fg_color
        self.bg_color = bg_color

        self._text = text
        self._surface: Surface | None = None
        self._keybindings = keybindings
        self._editor: PromptEditor | None = None

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        """Update the string to display."""
        self._text = text
        self._render()

    def surface(self) -> Surface | None:
        return self._surface

    def set_surface(self, surface: Surface | None) -> None:
        if surface is not None:
            surface.wrap = False
            surface.fg_color = self.fg_color
            surface.bg_color = self.bg_color
        self._surface = surface
        self._render()

    def handle_action(self, action: str) -> None:
        raise UnknownActionError()

    # -- Prompt ---------------------------------------------------------------

    @property
    def editor(self) -> PromptEditor | None:
        """The active prompt session, if any."""
        return self._editor

    def set_prompt(
        self,
        host: Host,
        prefix: str,
        content: str,
        callback: PromptCallback,
    ) -> None:
        """Focus this widget and let the user edit *content* after *prefix*.

        When the user commits or cancels, the previously focused surface gets
        focus back and *callback* is called with ``(committed, text)``.
        """
        surface = self._surface
        if surface is None:
            return
        if self._editor is not None:
            raise PromptActiveError(f"surface {surface.name!r} already has an open prompt")

        self.set_text(prefix)
        surface.write(content)
        surface.set_cursor(len(prefix) + len(content), 0)

        old_focus = host.current_surface()
        old_editable = surface.editable
        host.cursor_visible = True
        host.focus(surface)

        def done(committed: bool, response: str) -> None:
            self._editor = None
            surface.editable = old_editable
            if old_focus is not None:
                host.focus(old_focus)
            host.cursor_visible = False
            callback(committed, response)

        self._editor = PromptEditor(prefix, done, content, self._keybindings)
        surface.editable = True
        logger.debug("Prompt opened on %r with prefix %r", surface.name, prefix)

    def cancel_prompt(self) -> None:
        """Detach the active prompt session, reporting it as cancelled."""
        if self._editor is not None:
            self._editor.cancel(self._surface)

    def handle_key(self, event: KeyEvent) -> bool:
        """Forward *event* to the active prompt. Returns ``True`` if consumed."""
        if self._editor is None:
            return False
        return self._editor.handle_key(self._surface, event)

    def handle_input(self, data: str) -> bool:
        """Forward raw terminal input to the active prompt."""
        if self._editor is None:
            return False
        return self._editor.handle_input(self._surface, data)

    def _render(self) -> None:
        if self._surface is not None:
            self._surface.clear()
            self._surface.write(self._text)
