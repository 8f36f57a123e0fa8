"""Vertical scrolling over a bounded number of lines.

The selected line is ``origin + cursor row`` of the bound surface. A movement
request is a signed line delta. It is first clamped against the top and bottom
of the content, then split between scrolling the origin and moving the cursor
so that the cursor row stays inside the visible window:

* :func:`plan_move` computes that split without touching anything.
* :func:`move_lines` plans and applies it to a surface.
* :class:`ScrollWidget` keeps the selection index and drives both.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from xui.errors import AtBottomError, AtTopError, UnknownActionError
from xui.surface import Surface, Viewport
from xui.widget import (
    ACTION_NEXT_LINE,
    ACTION_NEXT_PAGE,
    ACTION_PREVIOUS_LINE,
    ACTION_PREVIOUS_PAGE,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Movement:
    """Result of :func:`plan_move`.

    ``delta`` is the clamped line delta, split into ``origin_delta`` and
    ``cursor_delta``. A zero ``delta`` means there is nothing to do.
    """

    delta: int = 0
    origin_delta: int = 0
    cursor_delta: int = 0

    @property
    def is_noop(self) -> bool:
        return self.origin_delta == 0 and self.cursor_delta == 0


def clamp_delta(current: int, max_lines: int, delta: int) -> int:
    """Clamp *delta* so that ``current + delta`` stays inside ``[0, max_lines)``.

    Raises :class:`AtTopError` when moving up from line 0 and
    :class:`AtBottomError` when moving down from the last line (or when there
    are no lines at all).
    """
    if delta < 0:
        if current <= 0:
            raise AtTopError()
        if current + delta < 0:
            delta = -current
    elif delta > 0:
        from_bottom = max_lines - current
        if from_bottom > 0 and delta > from_bottom:
            delta = from_bottom
        if current + 1 >= max_lines:
            raise AtBottomError()
        if current + delta >= max_lines:
            delta = max_lines - current - 1
    return delta


def plan_move(current: int, max_lines: int, delta: int, viewport: Viewport) -> Movement:
    """Compute how to move the selection by *delta* lines within *viewport*."""
    delta = clamp_delta(current, max_lines, delta)
    if delta == 0 or viewport.size <= 0:
        return Movement()

    total = delta
    odelta = 0
    if delta < 0:
        if viewport.cursor + delta < 0:
            odelta = max(delta, -viewport.origin)
            delta -= odelta
    else:
        if viewport.cursor + delta >= viewport.size:
            max_origin = max_lines - viewport.size
            if viewport.origin < max_origin:
                odelta = min(delta, max_origin - viewport.origin)
                delta -= odelta

    return Movement(delta=total, origin_delta=odelta, cursor_delta=delta)


def apply_move(surface: Surface, movement: Movement) -> None:
    """Apply *movement* to *surface*: origin first, then cursor.

    A :class:`~xui.errors.SurfaceError` from either call propagates; an origin
    change that was already applied is not rolled back.
    """
    if movement.origin_delta:
        ox, oy = surface.origin()
        surface.set_origin(ox, oy + movement.origin_delta)
    if movement.cursor_delta:
        cx, cy = surface.cursor()
        surface.set_cursor(cx, cy + movement.cursor_delta)


def get_line(surface: Surface | None) -> int:
    """Return the absolute line under the cursor of *surface* (0 without one)."""
    return Viewport.of(surface).line


def move_lines(surface: Surface | None, current: int, max_lines: int, delta: int) -> None:
    """Move the selected line of *surface* by *delta* lines."""
    if surface is None:
        return
    movement = plan_move(current, max_lines, delta, Viewport.of(surface))
    if not movement.is_noop:
        apply_move(surface, movement)


class ScrollWidget:
    """Provides vertical scrolling to other widgets.

    The widget caches the last viewport it saw on its surface and refreshes
    it explicitly around each movement, so the surface stays the source of
    truth for where the cursor ended up.
    """

    def __init__(self, highlight: bool = False) -> None:
        self.highlight = highlight

        self._surface: Surface | None = None
        self._viewport = Viewport()
        self._max = 0
        self._current = 0

    # -- Widget protocol ------------------------------------------------------

    def surface(self) -> Surface | None:
        return self._surface

    def set_surface(self, surface: Surface | None) -> None:
        if surface is not None:
            surface.wrap = False
            surface.highlight = self.highlight
        self._surface = surface
        self._refresh()
        if surface is not None:
            self._current = self._viewport.line
            logger.debug("Bound %r at line %d", surface.name, self._current)
            self._clamp_current()

    def handle_action(self, action: str) -> None:
        if action == ACTION_NEXT_LINE:
            self.next_line()
        elif action == ACTION_NEXT_PAGE:
            self.next_page()
        elif action == ACTION_PREVIOUS_LINE:
            self.previous_line()
        elif action == ACTION_PREVIOUS_PAGE:
            self.previous_page()
        else:
            raise UnknownActionError()

    # -- Bound and selection -------------------------------------------------

    @property
    def max(self) -> int:
        return self._max

    @property
    def viewport(self) -> Viewport:
        """The last viewport read from the surface."""
        return self._viewport

    def set_max(self, max_lines: int) -> None:
        """Update the number of lines and clamp the selection to it."""
        self._max = max(0, max_lines)
        self._clamp_current()

    def current(self) -> int:
        """Return the selected line."""
        return self._current

    def set_current(self, index: int) -> None:
        """Select line *index*, scrolling as little as possible."""
        self._move(index - self._current)

    def previous_line(self) -> None:
        self._move(-1)

    def next_line(self) -> None:
        self._move(1)

    def previous_page(self) -> None:
        self._move(-self._page_size())

    def next_page(self) -> None:
        self._move(self._page_size())

    # -- Internals -----------------------------------------------------------

    def _page_size(self) -> int:
        if self._surface is None:
            return 0
        _, rows = self._surface.size()
        return rows

    def _refresh(self) -> None:
        self._viewport = Viewport.of(self._surface)

    def _move(self, delta: int) -> None:
        if self._surface is None:
            # No window to scroll: track the selection on its own.
            self._current += clamp_delta(self._current, self._max, delta)
            return

        self._refresh()
        movement = plan_move(self._current, self._max, delta, self._viewport)
        if movement.is_noop:
            return
        logger.debug(
            "Moving %r from line %d by %+d (origin %+d, cursor %+d)",
            self._surface.name,
            self._current,
            movement.delta,
            movement.origin_delta,
            movement.cursor_delta,
        )
        try:
            apply_move(self._surface, movement)
        finally:
            self._refresh()
            self._current = self._viewport.line

    def _clamp_current(self) -> None:
        if self._current < 0:
            self._current = 0
        elif self._current > 0 and self._current >= self._max:
            try:
                self.set_current(self._max - 1)
            finally:
                # Zero-row or failing surface: keep the index valid anyway.
                if self._current >= self._max:
                    self._current = max(self._max - 1, 0)
