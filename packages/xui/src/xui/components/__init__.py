"""xui widgets."""

from xui.components.list import ListWidget
from xui.components.text import TextWidget

__all__ = [
    "ListWidget",
    "TextWidget",
]
