# -*- coding: utf-8 -*-
"""SavedVariables (Lua data literal) parsing."""

from savedvars.lua.document import SavedVariables
from savedvars.lua.parser import SavedVariablesParser, parse_file, parse_string
from savedvars.lua.values import (
    NIL,
    LuaBool,
    LuaKey,
    LuaNil,
    LuaNumber,
    LuaString,
    LuaTable,
    LuaValue,
    lua_repr,
    lua_to_python,
    table_key,
)

__all__ = [
    "NIL",
    "LuaBool",
    "LuaKey",
    "LuaNil",
    "LuaNumber",
    "LuaString",
    "LuaTable",
    "LuaValue",
    "SavedVariables",
    "SavedVariablesParser",
    "lua_repr",
    "lua_to_python",
    "parse_file",
    "parse_string",
    "table_key",
]
