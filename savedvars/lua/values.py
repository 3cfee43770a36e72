# -*- coding: utf-8 -*-
"""Value tree produced by the SavedVariables parser.

`LuaValue` is a closed union of five cases. Tables keep their entries in
source order; a duplicate key overwrites the value in place and keeps the
position of its first occurrence.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, ItemsView, Iterator, KeysView, Optional, Union, ValuesView

from savedvars.lua.scan import _match_identifier

__all__ = [
    "LuaNil",
    "LuaBool",
    "LuaNumber",
    "LuaString",
    "LuaTable",
    "LuaValue",
    "LuaKey",
    "NIL",
    "table_key",
    "lua_repr",
    "lua_to_python",
]


@dataclass(frozen=True)
class LuaNil:
    kind = "nil"

    def to_python(self) -> None:
        return None


NIL = LuaNil()


@dataclass(frozen=True)
class LuaBool:
    value: bool
    kind = "boolean"

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class LuaNumber:
    """
    Numeric literal. `value` holds the float64 magnitude; `text` keeps the
    source spelling so integral literals convert back to exact ints.
    """

    value: float
    text: str
    kind = "number"

    @classmethod
    def from_text(cls, text: str) -> "LuaNumber":
        return cls(float(text), text)

    @property
    def is_integer(self) -> bool:
        return not any(c in self.text for c in ".eE")

    def to_python(self) -> Union[int, float]:
        return int(self.text) if self.is_integer else self.value


@dataclass(frozen=True)
class LuaString:
    value: str
    kind = "string"

    def to_python(self) -> str:
        return self.value


LuaKey = Union[int, float, str]


@dataclass
class LuaTable:
    entries: Dict[LuaKey, "LuaValue"] = field(default_factory=dict)
    kind = "table"

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[LuaKey]:
        return iter(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __getitem__(self, key: LuaKey) -> "LuaValue":
        return self.entries[key]

    def get(self, key: LuaKey, default: Optional["LuaValue"] = None) -> Optional["LuaValue"]:
        return self.entries.get(key, default)

    def set(self, key: LuaKey, value: "LuaValue") -> None:
        self.entries[key] = value

    def keys(self) -> KeysView[LuaKey]:
        return self.entries.keys()

    def values(self) -> ValuesView["LuaValue"]:
        return self.entries.values()

    def items(self) -> ItemsView[LuaKey, "LuaValue"]:
        return self.entries.items()

    def is_array(self) -> bool:
        """True when the keys are exactly 1..n in order (an empty table counts)."""
        for expected, key in enumerate(self.entries, start=1):
            if type(key) is not int or key != expected:
                return False
        return True

    def to_python(self) -> Union[list, dict]:
        if self.is_array():
            return [v.to_python() for v in self.entries.values()]
        return {k: v.to_python() for k, v in self.entries.items()}


LuaValue = Union[LuaNil, LuaBool, LuaNumber, LuaString, LuaTable]


def _is_name(key: str) -> bool:
    return _match_identifier(key, 0) == len(key)


def table_key(value: LuaValue) -> LuaKey:
    """
    Normalise a parsed key expression to a dict key.

    Strings and numbers map to themselves (integral floats collapse to int,
    as Lua does). Booleans, nil and tables never appear as keys in real
    files; they are stringified to their Lua spelling instead of rejected.
    """
    if isinstance(value, LuaString):
        return value.value
    if isinstance(value, LuaNumber):
        if value.is_integer:
            return int(value.text)
        if value.value.is_integer():
            return int(value.value)
        return value.value
    return lua_repr(value)


def lua_repr(value: LuaValue) -> str:
    """Compact Lua-like spelling of a value, e.g. `{1,a=true}`."""
    if isinstance(value, LuaNil):
        return "nil"
    if isinstance(value, LuaBool):
        return "true" if value.value else "false"
    if isinstance(value, LuaNumber):
        return value.text
    if isinstance(value, LuaString):
        return '"' + value.value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n") + '"'
    parts = []
    for expected, (key, item) in enumerate(value.items(), start=1):
        if type(key) is int and key == expected:
            parts.append(lua_repr(item))
        elif isinstance(key, str) and _is_name(key):
            parts.append(f"{key}={lua_repr(item)}")
        elif isinstance(key, str):
            parts.append(f"[{lua_repr(LuaString(key))}]={lua_repr(item)}")
        else:
            parts.append(f"[{key}]={lua_repr(item)}")
    return "{" + ",".join(parts) + "}"


def lua_to_python(v: Any) -> Any:
    """Recursively convert a value tree into plain Python types."""
    if isinstance(v, (LuaNil, LuaBool, LuaNumber, LuaString, LuaTable)):
        return v.to_python()
    if isinstance(v, dict):
        return {k: lua_to_python(val) for k, val in v.items()}
    if isinstance(v, list):
        return [lua_to_python(x) for x in v]
    return v
