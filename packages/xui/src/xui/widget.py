"""Widget and host protocols, action names, and action dispatch.

Any widget can be driven uniformly by a keybinding layer: bind it to a
surface, then send it symbolic action names with :func:`run_action`.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from xui.errors import ActionError
from xui.surface import Surface

__all__ = [
    "ACTION_NEXT_LINE",
    "ACTION_NEXT_PAGE",
    "ACTION_PREVIOUS_LINE",
    "ACTION_PREVIOUS_PAGE",
    "ACTIONS",
    "Host",
    "Widget",
    "run_action",
]

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Action names
# ---------------------------------------------------------------------------

ACTION_NEXT_LINE = "next_line"
ACTION_NEXT_PAGE = "next_page"
ACTION_PREVIOUS_LINE = "prev_line"
ACTION_PREVIOUS_PAGE = "prev_page"

ACTIONS: frozenset[str] = frozenset({
    ACTION_NEXT_LINE,
    ACTION_NEXT_PAGE,
    ACTION_PREVIOUS_LINE,
    ACTION_PREVIOUS_PAGE,
})

# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


@runtime_checkable
class Widget(Protocol):
    """A component that can be bound to a surface and handle action commands."""

    def surface(self) -> Surface | None:
        """Return the surface currently bound to this widget."""
        ...

    def set_surface(self, surface: Surface | None) -> None:
        """Bind *surface* to this widget and render into it."""
        ...

    def handle_action(self, action: str) -> None:
        """Execute *action*. Raises :class:`ActionError` on failure."""
        ...


class Host(Protocol):
    """The parts of the host windowing layer a prompt needs for focus handover."""

    cursor_visible: bool

    def current_surface(self) -> Surface | None:
        """Return the surface that currently has focus."""
        ...

    def focus(self, surface: Surface) -> None:
        """Raise *surface* to the top and give it focus."""
        ...


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def run_action(widget: Widget, action: str) -> None:
    """Send *action* to *widget*.

    An :class:`ActionError` raised by the widget is re-raised tagged with the
    name of the widget's surface and the action, so the message reads
    ``widget "list" failed to handle action "next_line": at bottom``.
    """
    try:
        widget.handle_action(action)
    except ActionError as err:
        surface = widget.surface()
        name = surface.name if surface is not None else ""
        logger.debug("Action %r on %r failed: %s", action, name, err)
        raise err.in_context(name, action) from err
