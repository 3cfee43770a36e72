# -*- coding: utf-8 -*-
"""Exception hierarchy for savedvars.

Two families are kept apart so callers can tell "missing input" from
"malformed input":

- SourceError: the file could not be found or read (I/O level).
- LuaSyntaxError: the text was read but is not valid SavedVariables data.

Every syntax error is fatal for the whole parse call; there is no
partial-result mode.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

__all__ = [
    "SavedVariablesError",
    "ConfigError",
    "SourceError",
    "SourceNotFound",
    "ReadFailure",
    "InputTooLarge",
    "LuaSyntaxError",
    "UnexpectedCharacter",
    "UnterminatedTable",
    "UnterminatedString",
    "MalformedBracketKey",
    "NestingTooDeep",
]


class SavedVariablesError(Exception):
    """Base class for every error raised by savedvars."""


class ConfigError(SavedVariablesError):
    """Invalid parser settings (ini file, environment or arguments)."""


class SourceError(SavedVariablesError):
    def __init__(self, message: str, path: Optional[Union[str, Path]] = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class SourceNotFound(SourceError, FileNotFoundError):
    pass


class ReadFailure(SourceError):
    pass


class InputTooLarge(SourceError):
    def __init__(self, path: Union[str, Path], size: int, limit: int) -> None:
        super().__init__(f"File too large: {path} ({size} bytes, limit {limit})", path)
        self.size = size
        self.limit = limit


class LuaSyntaxError(SavedVariablesError):
    def __init__(self, message: str, line: int) -> None:
        super().__init__(f"{message} at line {line}")
        self.line = line


class UnexpectedCharacter(LuaSyntaxError):
    def __init__(self, line: int, char: Optional[str] = None) -> None:
        if char is None:
            message = "Unexpected end of input"
        else:
            message = f"Unexpected character {char!r}"
        super().__init__(message, line)
        self.char = char


class UnterminatedTable(LuaSyntaxError):
    """Raised with the line of the opening brace."""

    def __init__(self, line: int) -> None:
        super().__init__("Unterminated table opened", line)


class UnterminatedString(LuaSyntaxError):
    """Raised with the line of the opening quote."""

    def __init__(self, line: int) -> None:
        super().__init__("Unterminated string opened", line)


class MalformedBracketKey(LuaSyntaxError):
    def __init__(self, line: int, expected: str) -> None:
        super().__init__(f"Expected '{expected}' after bracket key", line)
        self.expected = expected


class NestingTooDeep(LuaSyntaxError):
    def __init__(self, line: int, limit: int) -> None:
        super().__init__(f"Nesting deeper than {limit} levels", line)
        self.limit = limit
