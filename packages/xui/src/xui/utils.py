"""Column width measurement and padding for monospaced layout.

``string_width`` counts every character as at least one column, so combining
marks and other zero-width characters still advance the layout. Only wide,
non-ambiguous characters count as two columns.
"""

from __future__ import annotations

import re
import unicodedata

import wcwidth as _wcwidth

# CSI sequences: ESC [ <parameter bytes> <intermediate bytes> <final byte>
_ESCAPE_SEQ_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")


def is_ambiguous_width(ch: str) -> bool:
    """Return ``True`` if *ch* is in the East Asian Ambiguous category."""
    return unicodedata.east_asian_width(ch) == "A"


def char_width(ch: str) -> int:
    """Return the column width of a single character (1 or 2)."""
    w = _wcwidth.wcwidth(ch)
    if w == 2 and not is_ambiguous_width(ch):
        return 2
    return 1


def string_width(s: str) -> int:
    """Return the width of *s* in single-width character units."""
    return sum(char_width(ch) for ch in s)


def strip_escape_sequences(s: str) -> str:
    """Remove ANSI CSI escape sequences (colors, cursor movement, ...) from *s*."""
    return _ESCAPE_SEQ_RE.sub("", s)


def pad(s: str, n: int) -> str:
    """Append spaces to *s* so that its visible width reaches *n* columns.

    Escape sequences are ignored when measuring but kept in the result.
    Lines that are already *n* columns or wider are returned unchanged.
    """
    w = string_width(strip_escape_sequences(s))
    if w < n:
        return s + " " * (n - w)
    return s


def first_line(s: str) -> str:
    """Return *s* up to (not including) the first newline."""
    idx = s.find("\n")
    if idx >= 0:
        return s[:idx]
    return s
