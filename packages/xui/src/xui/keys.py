"""Keyboard input parsing and matching for terminal applications.

Raw terminal input (legacy CSI/SS3 escape sequences, control bytes and
printable characters) is turned into :class:`KeyEvent` values by
:func:`parse_key`. Events are matched against key identifiers such as
``"enter"``, ``"ctrl+g"`` or ``"alt+left"`` with :func:`matches_key`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------

KeyId = str

# ---------------------------------------------------------------------------
# Key helper object
# ---------------------------------------------------------------------------


class Key:
    """Named key constants and modifier combinators."""

    escape = "escape"
    enter = "enter"
    tab = "tab"
    space = "space"
    backspace = "backspace"
    delete = "delete"
    insert = "insert"
    home = "home"
    end = "end"
    page_up = "pageUp"
    page_down = "pageDown"
    up = "up"
    down = "down"
    left = "left"
    right = "right"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"

    @staticmethod
    def shift(key: str) -> str:
        return f"shift+{key}"

    @staticmethod
    def alt(key: str) -> str:
        return f"alt+{key}"


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Modifier bits as encoded in "CSI 1 ; <1 + bits> X" sequences.
MODIFIERS: dict[str, int] = {
    "shift": 1,
    "alt": 2,
    "ctrl": 4,
}

# Canonical spelling of modifier prefixes in key ids.
_MODIFIER_ORDER = ("ctrl", "shift", "alt")

KEY_ALIASES: dict[str, str] = {
    "esc": "escape",
    "return": "enter",
    "del": "delete",
    "ins": "insert",
    "pageup": "pageUp",
    "pagedown": "pageDown",
    "pgup": "pageUp",
    "pgdn": "pageDown",
}

# Legacy escape sequences -> key names
LEGACY_KEY_SEQUENCES: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1b[1~": "home",
    "\x1b[2~": "insert",
    "\x1b[3~": "delete",
    "\x1b[4~": "end",
    "\x1b[5~": "pageUp",
    "\x1b[6~": "pageDown",
    "\x1b[7~": "home",
    "\x1b[8~": "end",
    "\x1bOP": "f1",
    "\x1bOQ": "f2",
    "\x1bOR": "f3",
    "\x1bOS": "f4",
    "\x1b[15~": "f5",
    "\x1b[17~": "f6",
    "\x1b[18~": "f7",
    "\x1b[19~": "f8",
    "\x1b[20~": "f9",
    "\x1b[21~": "f10",
    "\x1b[23~": "f11",
    "\x1b[24~": "f12",
    "\x1b[Z": "shift+tab",
}

# Final byte of "CSI 1 ; m X" -> key name
_CSI_LETTER_KEYS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
    "P": "f1",
    "Q": "f2",
    "R": "f3",
    "S": "f4",
}

# Number of "CSI n ; m ~" -> key name
_CSI_TILDE_KEYS: dict[int, str] = {
    1: "home",
    2: "insert",
    3: "delete",
    4: "end",
    5: "pageUp",
    6: "pageDown",
    15: "f5",
    17: "f6",
    18: "f7",
    19: "f8",
    20: "f9",
    21: "f10",
    23: "f11",
    24: "f12",
}

_MODIFIED_CSI_RE = re.compile(r"^\x1b\[(\d+);(\d+)([A-Z~])$")

SIMPLE_KEYS: dict[str, str] = {
    "\x1b": "escape",
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    " ": "space",
    "\x7f": "backspace",
    "\x08": "backspace",
}

# ---------------------------------------------------------------------------
# KeyEvent
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeyEvent:
    """A single key press.

    Plain character input sets ``char``. Named keys (``"enter"``,
    ``"left"``, ...) and modified characters (``ctrl+g`` has ``key="g"`` and
    ``ctrl=True``) set ``key`` instead.
    """

    key: str | None = None
    char: str = ""
    ctrl: bool = False
    alt: bool = False
    shift: bool = False
    raw: str = ""

    @property
    def has_modifier(self) -> bool:
        return self.ctrl or self.alt or self.shift

    @property
    def is_char(self) -> bool:
        """``True`` for a printable character typed without modifiers."""
        return bool(self.char) and not (self.ctrl or self.alt)

    @property
    def key_id(self) -> KeyId:
        """Identifier of this event in the form accepted by ``matches_key``."""
        base = self.key if self.key is not None else self.char
        prefix = ""
        if self.ctrl:
            prefix += "ctrl+"
        if self.shift and self.key is not None:
            prefix += "shift+"
        if self.alt:
            prefix += "alt+"
        return prefix + base

    @classmethod
    def char_event(cls, ch: str) -> KeyEvent:
        return cls(char=ch, raw=ch)


# ---------------------------------------------------------------------------
# Key id normalization
# ---------------------------------------------------------------------------


def normalize_key_id(key_id: KeyId) -> KeyId:
    """Return the canonical spelling of *key_id*.

    Modifiers are lower-cased and ordered ``ctrl+shift+alt``; aliases such as
    ``esc`` are replaced by their canonical name. A lone ``+`` is a valid key.
    """
    if not key_id:
        return ""
    parts = key_id.split("+")
    mods: set[str] = set()
    base_parts: list[str] = []
    for part in parts[:-1]:
        lower = part.lower()
        if lower in MODIFIERS:
            mods.add(lower)
        else:
            base_parts.append(part)
    base_parts.append(parts[-1])
    base = "+".join(base_parts) or "+"

    if len(base) > 1:
        base = KEY_ALIASES.get(base.lower(), base)
        if base.lower() in ("enter", "escape", "tab", "space", "backspace", "delete",
                            "insert", "home", "end", "up", "down", "left", "right"):
            base = base.lower()
        elif re.fullmatch(r"[fF]\d{1,2}", base):
            base = base.lower()
    elif mods & {"ctrl", "alt"}:
        base = base.lower()

    prefix = "".join(f"{m}+" for m in _MODIFIER_ORDER if m in mods)
    return prefix + base


# ---------------------------------------------------------------------------
# parse_key
# ---------------------------------------------------------------------------


def _modified(key: str, modifier: int, raw: str) -> KeyEvent:
    bits = modifier - 1
    return KeyEvent(
        key=key,
        ctrl=bool(bits & MODIFIERS["ctrl"]),
        alt=bool(bits & MODIFIERS["alt"]),
        shift=bool(bits & MODIFIERS["shift"]),
        raw=raw,
    )


def parse_key(data: str) -> KeyEvent | None:  # noqa: C901
    """Parse raw terminal input into a :class:`KeyEvent`, or ``None``."""
    if not data:
        return None

    # --- Legacy escape sequences ---
    named = LEGACY_KEY_SEQUENCES.get(data)
    if named is not None:
        if named == "shift+tab":
            return KeyEvent(key="tab", shift=True, raw=data)
        return KeyEvent(key=named, raw=data)

    # --- Modified sequences: CSI 1;m X  and  CSI n;m ~ ---
    match = _MODIFIED_CSI_RE.match(data)
    if match:
        number, modifier, final = int(match.group(1)), int(match.group(2)), match.group(3)
        if final == "~":
            key = _CSI_TILDE_KEYS.get(number)
        else:
            key = _CSI_LETTER_KEYS.get(final) if number == 1 else None
        if key is None or modifier < 1:
            return None
        return _modified(key, modifier, data)

    # --- Simple single-byte keys ---
    simple = SIMPLE_KEYS.get(data)
    if simple is not None:
        return KeyEvent(key=simple, raw=data)

    if data == "\x00":
        return KeyEvent(key="space", ctrl=True, raw=data)

    # --- Ctrl + letter (0x01 - 0x1a) ---
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return KeyEvent(key=chr(ord(data) + ord("a") - 1), ctrl=True, raw=data)

    # --- Alt + key (ESC prefix) ---
    if len(data) == 2 and data[0] == "\x1b":
        ch = data[1]
        simple = SIMPLE_KEYS.get(ch)
        if simple is not None:
            return KeyEvent(key=simple, alt=True, raw=data)
        if 1 <= ord(ch) <= 26:
            return KeyEvent(key=chr(ord(ch) + ord("a") - 1), ctrl=True, alt=True, raw=data)
        if ch.isprintable():
            return KeyEvent(key=ch.lower(), alt=True, shift=ch.isupper(), raw=data)
        return None

    # --- Plain printable character ---
    if len(data) == 1 and data.isprintable():
        return KeyEvent.char_event(data)

    return None


def iter_keys(data: str) -> list[KeyEvent]:
    """Split *data* into key events.

    Escape sequences must arrive whole; runs of printable characters (a paste
    or a fast typist) are split into one event per character.
    """
    event = parse_key(data)
    if event is not None:
        return [event]
    if "\x1b" in data:
        return []
    events: list[KeyEvent] = []
    for ch in data:
        parsed = parse_key(ch)
        if parsed is not None:
            events.append(parsed)
    return events


# ---------------------------------------------------------------------------
# matches_key
# ---------------------------------------------------------------------------


def matches_key(data: KeyEvent | str, key_id: KeyId) -> bool:
    """Return ``True`` if *data* (an event or raw input) is the key *key_id*."""
    event = parse_key(data) if isinstance(data, str) else data
    if event is None:
        return False
    return normalize_key_id(event.key_id) == normalize_key_id(key_id)
