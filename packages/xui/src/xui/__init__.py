"""xui: scrolling and prompt editing core of a character-grid console toolkit."""

# Widgets
from xui.components import ListWidget, TextWidget

# Errors
from xui.errors import (
    ActionError,
    AtBottomError,
    AtTopError,
    MovementError,
    PromptActiveError,
    SurfaceError,
    UnknownActionError,
    XuiError,
)

# Keybindings
from xui.keybindings import (
    DEFAULT_PROMPT_KEYBINDINGS,
    PromptAction,
    PromptKeybindingsManager,
    get_prompt_keybindings,
    set_prompt_keybindings,
)

# Keyboard input handling
from xui.keys import Key, KeyEvent, KeyId, matches_key, normalize_key_id, parse_key

# Prompt editing
from xui.prompt import (
    Completion,
    PromptEditor,
    PromptState,
    Transition,
    prompt_transition,
)

# Scrolling
from xui.scroll import Movement, ScrollWidget, get_line, move_lines, plan_move

# Surface interface
from xui.surface import Surface, Viewport

# Utilities
from xui.utils import pad, strip_escape_sequences, string_width

# Widget interface
from xui.widget import (
    ACTION_NEXT_LINE,
    ACTION_NEXT_PAGE,
    ACTION_PREVIOUS_LINE,
    ACTION_PREVIOUS_PAGE,
    Host,
    Widget,
    run_action,
)

__all__ = [
    # Widgets
    "ListWidget",
    "TextWidget",
    # Errors
    "ActionError",
    "AtBottomError",
    "AtTopError",
    "MovementError",
    "PromptActiveError",
    "SurfaceError",
    "UnknownActionError",
    "XuiError",
    # Keybindings
    "DEFAULT_PROMPT_KEYBINDINGS",
    "PromptAction",
    "PromptKeybindingsManager",
    "get_prompt_keybindings",
    "set_prompt_keybindings",
    # Keys
    "Key",
    "KeyEvent",
    "KeyId",
    "matches_key",
    "normalize_key_id",
    "parse_key",
    # Prompt
    "Completion",
    "PromptEditor",
    "PromptState",
    "Transition",
    "prompt_transition",
    # Scrolling
    "Movement",
    "ScrollWidget",
    "get_line",
    "move_lines",
    "plan_move",
    # Surface
    "Surface",
    "Viewport",
    # Utilities
    "pad",
    "strip_escape_sequences",
    "string_width",
    # Widget interface
    "ACTION_NEXT_LINE",
    "ACTION_NEXT_PAGE",
    "ACTION_PREVIOUS_LINE",
    "ACTION_PREVIOUS_PAGE",
    "Host",
    "Widget",
    "run_action",
]
