"""ListWidget component - a scrollable list of lines with a selected line."""

from __future__ import annotations

from collections.abc import Sequence

from xui.scroll import ScrollWidget
from xui.surface import Surface
from xui.utils import pad


class ListWidget:
    """Displays a list of lines and lets the user move a selection through them.

    Each line is padded to the surface width so that a highlighted selection
    spans the whole row.
    """

    def __init__(self, highlight: bool = False) -> None:
        self.highlight = highlight

        self._base = ScrollWidget(highlight=highlight)
        self._model: Sequence[str] = []

    def surface(self) -> Surface | None:
        return self._base.surface()

    def set_surface(self, surface: Surface | None) -> None:
        self._base.highlight = self.highlight
        self._base.set_surface(surface)
        self.render()

    def set_model(self, model: Sequence[str]) -> None:
        """Update the list of lines to display."""
        self._model = model
        try:
            self._base.set_max(len(model))
        finally:
            self.render()

    @property
    def model(self) -> Sequence[str]:
        return self._model

    def current(self) -> int:
        """Return the selected line."""
        return self._base.current()

    def set_current(self, index: int) -> None:
        """Select line *index*."""
        self._base.set_current(index)

    def selected_line(self) -> str | None:
        if not self._model:
            return None
        return self._model[self._base.current()]

    def handle_action(self, action: str) -> None:
        self._base.handle_action(action)

    def render(self) -> None:
        surface = self._base.surface()
        if surface is None:
            return
        surface.clear()
        width, _ = surface.size()
        for i, line in enumerate(self._model):
            if i > 0:
                surface.write("\n")
            surface.write(pad(line, width))
