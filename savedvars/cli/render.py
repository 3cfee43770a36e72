# -*- coding: utf-8 -*-
"""Rich renderables for value trees."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

from rich import filesize
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from savedvars.lua import LuaNil, LuaNumber, LuaString, LuaTable, LuaValue, SavedVariables, lua_repr

_PREVIEW = 60


def shape(value: LuaValue) -> str:
    if not isinstance(value, LuaTable):
        return "-"
    if not len(value):
        return "empty"
    return "array" if value.is_array() else "object"


def preview(value: LuaValue) -> str:
    """One-line markup preview of a value."""
    if isinstance(value, LuaTable):
        return f"[dim]table ({len(value)} entries, {shape(value)})[/dim]"
    if isinstance(value, LuaString):
        text = lua_repr(value)
        if len(text) > _PREVIEW:
            text = text[: _PREVIEW - 4] + '..."'
        return f"[green]{escape(text)}[/green]"
    if isinstance(value, LuaNumber):
        return f"[cyan]{value.text}[/cyan]"
    if isinstance(value, LuaNil):
        return "[dim]nil[/dim]"
    return f"[magenta]{lua_repr(value)}[/magenta]"


def _label(key: object) -> str:
    if isinstance(key, str):
        return f"[bold]{escape(key)}[/bold]"
    return f"[yellow]\\[{key}][/yellow]"


def _grow(node: Tree, value: LuaValue, depth: int, max_depth: Optional[int]) -> None:
    if not isinstance(value, LuaTable):
        return
    if max_depth is not None and depth >= max_depth:
        if len(value):
            node.add("[dim]...[/dim]")
        return
    for key, item in value.items():
        child = node.add(f"{_label(key)} = {preview(item)}")
        _grow(child, item, depth + 1, max_depth)


def build_tree(label: str, value: LuaValue, max_depth: Optional[int] = None) -> Tree:
    root = Tree(f"{_label(label)} = {preview(value)}", guide_style="blue")
    _grow(root, value, 0, max_depth)
    return root


def build_summary(doc: SavedVariables, title: str) -> Table:
    table = Table(title=escape(title), border_style="blue")
    table.add_column("Identifier", style="cyan")
    table.add_column("Kind")
    table.add_column("Entries", justify="right")
    table.add_column("Shape", style="dim")
    for name, value in doc.items():
        entries = str(len(value)) if isinstance(value, LuaTable) else "-"
        table.add_row(escape(name), value.kind, entries, shape(value))
    return table


def build_caption(path: Path, count: int) -> str:
    st = path.stat()
    modified = datetime.fromtimestamp(st.st_mtime).strftime("%Y-%m-%d %H:%M")
    return f"[dim]{filesize.decimal(st.st_size)} | modified {modified} | {count} identifiers[/dim]"
