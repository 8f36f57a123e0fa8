"""The rendering surface consumed from the host windowing layer.

A surface is a named, scrollable rectangle of text. xui never owns one: the
host creates it, lays it out, and hands it to a widget with ``set_surface``.
Surfaces raise :class:`~xui.errors.SurfaceError` when asked to move the cursor
or origin to a coordinate they cannot represent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Surface(Protocol):
    """Interface of a host surface."""

    name: str
    wrap: bool
    editable: bool
    highlight: bool
    fg_color: Any
    bg_color: Any

    def size(self) -> tuple[int, int]:
        """Return the visible ``(columns, rows)``."""
        ...

    def cursor(self) -> tuple[int, int]:
        """Return the cursor position ``(x, y)`` relative to the origin."""
        ...

    def set_cursor(self, x: int, y: int) -> None: ...

    def origin(self) -> tuple[int, int]:
        """Return the scroll origin ``(x, y)``."""
        ...

    def set_origin(self, x: int, y: int) -> None: ...

    def clear(self) -> None: ...

    def write(self, text: str) -> None:
        """Append *text* to the surface content."""
        ...


@dataclass(frozen=True)
class Viewport:
    """Visible window of a surface: row count, first visible line, cursor row."""

    size: int = 0
    origin: int = 0
    cursor: int = 0

    @property
    def line(self) -> int:
        """Absolute line index under the cursor."""
        return self.origin + self.cursor

    @classmethod
    def of(cls, surface: Surface | None) -> Viewport:
        if surface is None:
            return cls()
        _, rows = surface.size()
        _, oy = surface.origin()
        _, cy = surface.cursor()
        return cls(size=rows, origin=oy, cursor=cy)
