#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""savedvars command-line entrypoint.

Exit codes: 0 ok, 1 path not found (`get`), 2 unreadable input, syntax
error or bad settings.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from rich.markup import escape

from savedvars.cli.cli_common import console, err_console, setup_logging
from savedvars.cli.render import build_caption, build_summary, build_tree
from savedvars.config import DEFAULT_CONFIG_PATH, ParserSettings, resolve_settings
from savedvars.errors import ConfigError, LuaSyntaxError, SourceError, SourceNotFound
from savedvars.lua import SavedVariables, parse_file
from savedvars.version import project_version

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISSING_PATH = 1
EXIT_FAILURE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="savedvars", description="Inspect Lua SavedVariables files")
    parser.add_argument("--version", action="version", version=f"%(prog)s {project_version()}")
    parser.add_argument("--config", default=str(DEFAULT_CONFIG_PATH), help="Path to conf/settings.ini")
    parser.add_argument("--max-depth", type=int, default=None, help="Deepest table nesting accepted")
    parser.add_argument("--encoding", default=None, help="Input file encoding")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug logs")
    sub = parser.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="Dump the whole file as JSON")
    p_parse.add_argument("path", help="SavedVariables .lua file")
    p_parse.add_argument("--indent", type=int, default=2)
    p_parse.add_argument("--compact", action="store_true", help="Single-line JSON")

    p_get = sub.add_parser("get", help="Print the value at a dot path")
    p_get.add_argument("path", help="SavedVariables .lua file")
    p_get.add_argument("key", help="Dot path, e.g. WhoDatDB.identity.name")
    p_get.add_argument("--json", action="store_true", help="Always print JSON")

    p_tree = sub.add_parser("tree", help="Render the value tree")
    p_tree.add_argument("path", help="SavedVariables .lua file")
    p_tree.add_argument("--key", default=None, help="Start at this dot path")
    p_tree.add_argument("--max-levels", type=int, default=None, help="Stop expanding after N levels")

    p_summary = sub.add_parser("summary", help="List top-level identifiers")
    p_summary.add_argument("path", help="SavedVariables .lua file")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    setup_logging(args.verbose)

    try:
        settings = resolve_settings(config_path=Path(args.config), max_depth=args.max_depth, encoding=args.encoding)
        doc = _load(args.path, settings)
    except SourceNotFound:
        err_console.print(f"[red]File not found: {escape(args.path)}[/red]")
        return EXIT_FAILURE
    except (SourceError, ConfigError) as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        return EXIT_FAILURE
    except LuaSyntaxError as exc:
        err_console.print(f"[red]Syntax error: {escape(str(exc))}[/red]")
        return EXIT_FAILURE

    if args.command == "parse":
        return _handle_parse(args, doc)
    if args.command == "get":
        return _handle_get(args, doc)
    if args.command == "tree":
        return _handle_tree(args, doc)
    return _handle_summary(args, doc)


def _load(path: str, settings: ParserSettings) -> SavedVariables:
    logger.debug("Settings: %s", settings)
    return parse_file(path, settings=settings)


def _json_key(key: object) -> str:
    return key if isinstance(key, str) else json.dumps(key)


def _find_key_collision(payload: object, where: str) -> Optional[str]:
    """Return the path of the first object whose keys clash once stringified (`[1]` vs `["1"]`)."""
    if isinstance(payload, dict):
        seen = set()
        for key, item in payload.items():
            name = _json_key(key)
            if name in seen:
                return f"{where}.{name}" if where else name
            seen.add(name)
            hit = _find_key_collision(item, f"{where}.{name}" if where else name)
            if hit:
                return hit
    elif isinstance(payload, list):
        for index, item in enumerate(payload, start=1):
            hit = _find_key_collision(item, f"{where}.{index}")
            if hit:
                return hit
    return None


def _dump_json(payload: object, indent: Optional[int], where: str = "") -> int:
    clash = _find_key_collision(payload, where)
    if clash:
        err_console.print(f"[red]Cannot encode as JSON: duplicate key after stringifying at {escape(clash)}[/red]")
        return EXIT_FAILURE
    try:
        text = json.dumps(payload, indent=indent, ensure_ascii=False, allow_nan=False)
    except ValueError as exc:
        err_console.print(f"[red]Cannot encode as JSON: {escape(str(exc))}[/red]")
        return EXIT_FAILURE
    print(text)
    return EXIT_OK


def _handle_parse(args: argparse.Namespace, doc: SavedVariables) -> int:
    return _dump_json(doc.to_python(), None if args.compact else args.indent)


def _handle_get(args: argparse.Namespace, doc: SavedVariables) -> int:
    if not doc.has(args.key):
        err_console.print(f"[yellow]Not found: {escape(args.key)}[/yellow]")
        return EXIT_MISSING_PATH
    value = doc.get_value(args.key)
    if args.json or isinstance(value, (list, dict)):
        return _dump_json(value, 2, args.key)
    if isinstance(value, bool):
        print("true" if value else "false")
    else:
        print(value)
    return EXIT_OK


def _handle_tree(args: argparse.Namespace, doc: SavedVariables) -> int:
    if args.key:
        value = doc.get(args.key)
        if value is None:
            err_console.print(f"[yellow]Not found: {escape(args.key)}[/yellow]")
            return EXIT_MISSING_PATH
        console.print(build_tree(args.key, value, args.max_levels))
        return EXIT_OK
    for name, value in doc.items():
        console.print(build_tree(name, value, args.max_levels))
    return EXIT_OK


def _handle_summary(args: argparse.Namespace, doc: SavedVariables) -> int:
    path = Path(args.path)
    console.print(build_summary(doc, path.name))
    console.print(build_caption(path, len(doc)))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
