# -*- coding: utf-8 -*-
"""savedvars: parse game-addon SavedVariables files into a typed value tree."""

from savedvars.errors import (
    ConfigError,
    InputTooLarge,
    LuaSyntaxError,
    MalformedBracketKey,
    NestingTooDeep,
    ReadFailure,
    SavedVariablesError,
    SourceError,
    SourceNotFound,
    UnexpectedCharacter,
    UnterminatedString,
    UnterminatedTable,
)
from savedvars.config import ParserSettings, resolve_settings
from savedvars.lua import (
    NIL,
    LuaBool,
    LuaNil,
    LuaNumber,
    LuaString,
    LuaTable,
    LuaValue,
    SavedVariables,
    SavedVariablesParser,
    lua_to_python,
    parse_file,
    parse_string,
)

__all__ = [
    "ConfigError",
    "InputTooLarge",
    "LuaSyntaxError",
    "MalformedBracketKey",
    "NestingTooDeep",
    "ReadFailure",
    "SavedVariablesError",
    "SourceError",
    "SourceNotFound",
    "UnexpectedCharacter",
    "UnterminatedString",
    "UnterminatedTable",
    "NIL",
    "LuaBool",
    "LuaNil",
    "LuaNumber",
    "LuaString",
    "LuaTable",
    "LuaValue",
    "ParserSettings",
    "SavedVariables",
    "SavedVariablesParser",
    "lua_to_python",
    "parse_file",
    "parse_string",
    "resolve_settings",
]
