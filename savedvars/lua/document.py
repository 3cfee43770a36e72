# -*- coding: utf-8 -*-
"""Root of a parsed SavedVariables file plus dot-path lookup."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

from savedvars.lua.values import LuaNil, LuaTable, LuaValue

__all__ = ["SavedVariables"]


def _lookup(table: LuaTable, segment: str) -> Optional[LuaValue]:
    value = table.get(segment)
    if value is None and segment.isdigit() and segment.isascii():
        # "1" also addresses the integer key 1, but "01" does not
        if str(int(segment)) == segment:
            value = table.get(int(segment))
    return value


class SavedVariables(Mapping):
    """
    Read-only mapping of top-level identifier -> value tree.

    `get()` / `has()` walk dot paths such as "WhoDatDB.characters". A key
    bound to nil and a missing key look the same through them: `has()` is
    False for both. Use `doc["X"]` to see the raw `LuaNil`.
    """

    def __init__(self, data: Dict[str, LuaValue]):
        self._data = dict(data)

    def __getitem__(self, name: str) -> LuaValue:
        return self._data[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"SavedVariables({list(self._data)!r})"

    def get(self, path: str, default: Any = None) -> Any:  # type: ignore[override]
        segments = path.split(".")
        current = self._data.get(segments[0])
        for segment in segments[1:]:
            if not isinstance(current, LuaTable):
                return default
            current = _lookup(current, segment)
        if current is None or isinstance(current, LuaNil):
            return default
        return current

    def has(self, path: str) -> bool:
        return self.get(path) is not None

    def get_value(self, path: str, default: Any = None) -> Any:
        """Like get(), converted to plain Python types."""
        value = self.get(path)
        return default if value is None else value.to_python()

    def to_python(self) -> Dict[str, Any]:
        return {name: value.to_python() for name, value in self._data.items()}
