"""Exception hierarchy for widget actions, movement and surfaces.

``ActionError`` is what a widget raises from ``handle_action``. It can be
decorated with the name of the surface the widget is bound to and the action
that was requested, so a dispatcher can tell "widget X does not handle action
Y" (``UnknownActionError``) apart from "widget X failed to handle action Y".
"""

from __future__ import annotations


class XuiError(Exception):
    """Base class for all xui errors."""


class ActionError(XuiError):
    """A widget action could not be carried out."""

    def __init__(
        self,
        cause: str | None = None,
        *,
        widget: str = "",
        action: str = "",
    ) -> None:
        self.cause = cause
        self.widget = widget
        self.action = action
        super().__init__(str(self))

    def in_context(self, widget: str, action: str) -> ActionError:
        """Return a copy of this error tagged with *widget* and *action*."""
        return type(self)(self.cause, widget=widget, action=action)

    def __str__(self) -> str:
        if self.action:
            if self.cause is not None:
                return (
                    f'widget "{self.widget}" failed to handle action '
                    f'"{self.action}": {self.cause}'
                )
            return f'widget "{self.widget}" does not handle action "{self.action}"'
        return self.cause or ""


class UnknownActionError(ActionError):
    """The widget does not implement the requested action. Carries no cause."""

    def __init__(self, cause: str | None = None, *, widget: str = "", action: str = "") -> None:
        super().__init__(None, widget=widget, action=action)

    def __str__(self) -> str:
        if self.action:
            return super().__str__()
        return "unknown action"


class MovementError(ActionError):
    """A movement request hit a hard boundary."""

    message = ""

    def __init__(self, cause: str | None = None, *, widget: str = "", action: str = "") -> None:
        super().__init__(cause or self.message, widget=widget, action=action)


class AtTopError(MovementError):
    message = "at top"


class AtBottomError(MovementError):
    message = "at bottom"


class SurfaceError(XuiError):
    """A surface rejected a cursor or origin coordinate."""


class PromptActiveError(XuiError):
    """A prompt session is already attached to the surface."""
