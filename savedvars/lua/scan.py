# -*- coding: utf-8 -*-
"""Low-level scanning helpers for the SavedVariables dialect.

All helpers work on (text, index) pairs and never copy the input; the
parser owns the cursor and the line counter.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

__all__ = [
    "_is_space",
    "_is_ident_start",
    "_is_ident_char",
    "_match_identifier",
    "_match_assignment",
    "_match_number",
    "_match_keyword",
    "_skip_line_comment",
    "_NUM_RE",
]

_SPACE = frozenset(" \t\n\r\f\v")

_NUM_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")
_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_ASSIGN_RE = re.compile(r"([A-Za-z_][A-Za-z0-9_]*)(\s*)=(?!=)")

_KEYWORDS = ("true", "false", "nil")


def _is_space(ch: str) -> bool:
    return ch in _SPACE


def _is_ident_start(ch: str) -> bool:
    return ch == "_" or ("A" <= ch <= "Z") or ("a" <= ch <= "z")


def _is_ident_char(ch: str) -> bool:
    return _is_ident_start(ch) or ("0" <= ch <= "9")


def _ends_word(text: str, i: int) -> bool:
    return i >= len(text) or not _is_ident_char(text[i])


def _match_identifier(text: str, i: int) -> Optional[int]:
    """Return the end index of the identifier starting at i, or None."""
    m = _IDENT_RE.match(text, i)
    return m.end() if m else None


def _match_assignment(text: str, i: int) -> Optional[Tuple[str, int, int]]:
    """
    Match `Identifier \\s* =` at i (but not `==`).
    Returns (name, index after '=', newlines consumed) or None.
    """
    m = _ASSIGN_RE.match(text, i)
    if not m:
        return None
    return m.group(1), m.end(), m.group(2).count("\n")


def _match_number(text: str, i: int) -> Optional[int]:
    """
    Return the end index of a number literal at i, or None.
    A literal glued to identifier characters (`12abc`, `0x1F`) is not a number.
    """
    m = _NUM_RE.match(text, i)
    if not m or not _ends_word(text, m.end()):
        return None
    return m.end()


def _match_keyword(text: str, i: int) -> Optional[str]:
    """Return 'true' / 'false' / 'nil' when one stands as a whole word at i."""
    for word in _KEYWORDS:
        if text.startswith(word, i) and _ends_word(text, i + len(word)):
            return word
    return None


def _skip_line_comment(text: str, i: int) -> int:
    """
    i points at '--'. Return the index of the terminating newline (left for
    the caller to count) or len(text). `--[[` is a line comment here too.
    """
    nl = text.find("\n", i + 2)
    return len(text) if nl == -1 else nl
