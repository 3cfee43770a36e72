# -*- coding: utf-8 -*-
"""Recursive-descent parser for SavedVariables files.

Grammar (data literals only)::

    Program      := { Assignment | SkippedByte }
    Assignment   := Identifier '=' Value
    Value        := Table | QuotedString | Number | true | false | nil | BareIdentifier
    Table        := '{' { Entry [','] } '}'
    Entry        := '[' Value ']' '=' Value | Identifier '=' Value | Value
    Comment      := '--' ... end of line

Anything at the top level that is not an assignment is skipped one
character at a time, so files carrying other Lua statements still load.
Inside a value every error is fatal.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Union

from savedvars.config.loader import DEFAULT_MAX_DEPTH, MAX_DEPTH_CEILING, ParserSettings
from savedvars.errors import (
    ConfigError,
    InputTooLarge,
    MalformedBracketKey,
    NestingTooDeep,
    ReadFailure,
    SourceNotFound,
    UnexpectedCharacter,
    UnterminatedString,
    UnterminatedTable,
)
from savedvars.lua.document import SavedVariables
from savedvars.lua.scan import (
    _is_space,
    _match_assignment,
    _match_identifier,
    _match_keyword,
    _match_number,
    _skip_line_comment,
)
from savedvars.lua.values import NIL, LuaBool, LuaNumber, LuaString, LuaTable, LuaValue, table_key

__all__ = [
    "SavedVariablesParser",
    "parse_string",
    "parse_file",
]

logger = logging.getLogger(__name__)

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "\\": "\\"}


class SavedVariablesParser:
    """
    Single-use parser over one in-memory buffer.

    The cursor (`pos`, `line`) lives on the instance; create a new parser for
    every input. Nesting is bounded by `max_depth`, counted in nested
    tables (bracket keys included).
    """

    def __init__(self, content: str, *, max_depth: int = DEFAULT_MAX_DEPTH):
        if not 1 <= max_depth <= MAX_DEPTH_CEILING:
            raise ConfigError(f"max_depth must be between 1 and {MAX_DEPTH_CEILING}, got {max_depth}")
        self.content = content or ""
        self.max_depth = max_depth
        self.pos = 0
        self.line = 1
        self._n = len(self.content)

    # ---------------------------------------------------------------- driver

    def parse(self) -> SavedVariables:
        self.pos = 0
        self.line = 1
        data: Dict[str, LuaValue] = {}
        skipped = 0

        while True:
            self._skip_ws()
            if self.pos >= self._n:
                break

            hit = _match_assignment(self.content, self.pos)
            if hit is None:
                self.pos += 1
                skipped += 1
                continue

            name, self.pos, newlines = hit
            self.line += newlines
            # later assignments to the same name win
            data[name] = self._parse_value(0)

        logger.debug("Parsed %d top-level identifiers (%d bytes skipped)", len(data), skipped)
        return SavedVariables(data)

    # --------------------------------------------------------------- scanner

    def _skip_ws(self) -> None:
        text = self.content
        while self.pos < self._n:
            ch = text[self.pos]
            if _is_space(ch):
                if ch == "\n":
                    self.line += 1
                self.pos += 1
                continue
            if ch == "-" and text.startswith("--", self.pos):
                self.pos = _skip_line_comment(text, self.pos)
                continue
            break

    def _peek(self) -> Optional[str]:
        return self.content[self.pos] if self.pos < self._n else None

    # ------------------------------------------------------------ dispatcher

    def _parse_value(self, depth: int) -> LuaValue:
        self._skip_ws()
        ch = self._peek()
        if ch is None:
            raise UnexpectedCharacter(self.line)
        if ch == "{":
            return self._parse_table(depth)
        if ch in ("'", '"'):
            return self._parse_string()
        return self._parse_literal()

    # ----------------------------------------------------------------- table

    def _parse_table(self, depth: int) -> LuaTable:
        depth += 1
        if depth > self.max_depth:
            raise NestingTooDeep(self.line, self.max_depth)

        open_line = self.line
        self.pos += 1  # '{'
        table = LuaTable()
        auto_index = 1

        while True:
            self._skip_ws()
            ch = self._peek()
            if ch is None:
                raise UnterminatedTable(open_line)
            if ch == "}":
                self.pos += 1
                return table

            if ch == "[":
                key, value = self._parse_bracket_entry(depth)
            else:
                hit = _match_assignment(self.content, self.pos)
                if hit is not None:
                    key, self.pos, newlines = hit
                    self.line += newlines
                    value = self._parse_value(depth)
                else:
                    # explicit keys never advance the auto-index
                    value = self._parse_value(depth)
                    key = auto_index
                    auto_index += 1

            table.set(key, value)

            self._skip_ws()
            if self._peek() == ",":
                self.pos += 1

    def _parse_bracket_entry(self, depth: int):
        self.pos += 1  # '['
        key = table_key(self._parse_value(depth))

        self._skip_ws()
        if self._peek() != "]":
            raise MalformedBracketKey(self.line, "]")
        self.pos += 1

        self._skip_ws()
        if self._peek() != "=":
            raise MalformedBracketKey(self.line, "=")
        self.pos += 1

        return key, self._parse_value(depth)

    # ---------------------------------------------------------------- string

    def _parse_string(self) -> LuaString:
        text = self.content
        quote = text[self.pos]
        start_line = self.line
        self.pos += 1
        out = []

        while self.pos < self._n:
            ch = text[self.pos]
            self.pos += 1
            if ch == quote:
                return LuaString("".join(out))
            if ch == "\\":
                if self.pos >= self._n:
                    break
                esc = text[self.pos]
                self.pos += 1
                if esc == "\n":
                    self.line += 1
                # unknown escapes keep the payload character
                out.append(_ESCAPES.get(esc, esc))
                continue
            if ch == "\n":
                self.line += 1
            out.append(ch)

        raise UnterminatedString(start_line)

    # --------------------------------------------------------------- literal

    def _parse_literal(self) -> LuaValue:
        text = self.content
        start = self.pos

        end = _match_number(text, start)
        if end is not None:
            self.pos = end
            return LuaNumber.from_text(text[start:end])

        word = _match_keyword(text, start)
        if word is not None:
            self.pos += len(word)
            if word == "nil":
                return NIL
            return LuaBool(word == "true")

        end = _match_identifier(text, start)
        if end is not None:
            self.pos = end
            return LuaString(text[start:end])

        raise UnexpectedCharacter(self.line, text[start])


def parse_string(
    text: str,
    *,
    settings: Optional[ParserSettings] = None,
    max_depth: Optional[int] = None,
) -> SavedVariables:
    """Parse SavedVariables text held in memory."""
    settings = settings or ParserSettings()
    depth = max_depth if max_depth is not None else settings.max_depth
    return SavedVariablesParser(text, max_depth=depth).parse()


def parse_file(
    path: Union[str, Path],
    *,
    settings: Optional[ParserSettings] = None,
    max_depth: Optional[int] = None,
    encoding: Optional[str] = None,
) -> SavedVariables:
    """
    Read a whole SavedVariables file and parse it.

    Raises SourceNotFound / ReadFailure / InputTooLarge for I/O problems and
    a LuaSyntaxError subclass for malformed content.
    """
    settings = settings or ParserSettings()
    encoding = encoding or settings.encoding
    p = Path(path)
    if not p.exists():
        raise SourceNotFound(f"File not found: {p}", p)

    try:
        size = p.stat().st_size
        if settings.max_bytes and size > settings.max_bytes:
            raise InputTooLarge(p, size, settings.max_bytes)
        text = p.read_text(encoding=encoding)
    except LookupError as exc:
        raise ConfigError(f"Unknown encoding: {encoding}") from exc
    except UnicodeDecodeError as exc:
        raise ReadFailure(f"Failed to decode {p} as {encoding}: {exc}", p) from exc
    except OSError as exc:
        raise ReadFailure(f"Failed to read file: {p} ({exc})", p) from exc

    doc = parse_string(text, settings=settings, max_depth=max_depth)
    logger.info("Parsed %s: %d identifiers", p, len(doc))
    return doc
