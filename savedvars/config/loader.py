# -*- coding: utf-8 -*-
"""Parser settings loader.

Precedence: explicit arguments > environment > conf/settings.ini > defaults.
The ini file is optional; a missing file simply means "use defaults".
"""

from __future__ import annotations

import codecs
import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from savedvars.errors import ConfigError

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_MAX_BYTES",
    "DEFAULT_ENCODING",
    "MAX_DEPTH_CEILING",
    "ParserSettings",
    "load_ini",
    "resolve_settings",
]

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "conf" / "settings.ini"

DEFAULT_MAX_DEPTH = 128
# each table level costs up to three Python frames
MAX_DEPTH_CEILING = 250
DEFAULT_MAX_BYTES = 64 * 1024 * 1024
DEFAULT_ENCODING = "utf-8"

_SECTION = "PARSER"


@dataclass(frozen=True)
class ParserSettings:
    max_depth: int = DEFAULT_MAX_DEPTH
    max_bytes: int = DEFAULT_MAX_BYTES
    encoding: str = DEFAULT_ENCODING


def load_ini(path: Path) -> configparser.ConfigParser:
    cfg = configparser.ConfigParser()
    if not path.exists():
        return cfg
    try:
        cfg.read(path, encoding="utf-8")
    except configparser.Error as exc:
        raise ConfigError(f"Invalid config file {path}: {exc}") from exc
    return cfg


def _cfg_get(cfg: configparser.ConfigParser, key: str) -> Optional[str]:
    val = cfg.get(_SECTION, key, fallback="").strip()
    return val or None


def _env_get(environ: Mapping[str, str], key: str) -> Optional[str]:
    val = (environ.get(f"SAVEDVARS_{key}") or "").strip()
    return val or None


def _as_int(name: str, val: Union[str, int], minimum: int, maximum: Optional[int] = None) -> int:
    try:
        num = int(val)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer, got {val!r}") from None
    if num < minimum or (maximum is not None and num > maximum):
        bounds = f"between {minimum} and {maximum}" if maximum is not None else f">= {minimum}"
        raise ConfigError(f"{name} must be {bounds}, got {num}")
    return num


def _as_encoding(val: str) -> str:
    try:
        codecs.lookup(val)
    except LookupError:
        raise ConfigError(f"Unknown encoding: {val!r}") from None
    return val


def resolve_settings(
    *,
    config_path: Path = DEFAULT_CONFIG_PATH,
    max_depth: Optional[int] = None,
    max_bytes: Optional[int] = None,
    encoding: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ParserSettings:
    cfg = load_ini(Path(config_path))
    env = os.environ if environ is None else environ

    depth_raw = max_depth if max_depth is not None else (_env_get(env, "MAX_DEPTH") or _cfg_get(cfg, "MAX_DEPTH"))
    bytes_raw = max_bytes if max_bytes is not None else (_env_get(env, "MAX_BYTES") or _cfg_get(cfg, "MAX_BYTES"))
    encoding = encoding or _env_get(env, "ENCODING") or _cfg_get(cfg, "ENCODING")

    return ParserSettings(
        max_depth=_as_int("MAX_DEPTH", depth_raw, 1, MAX_DEPTH_CEILING) if depth_raw is not None else DEFAULT_MAX_DEPTH,
        max_bytes=_as_int("MAX_BYTES", bytes_raw, 0) if bytes_raw is not None else DEFAULT_MAX_BYTES,
        encoding=_as_encoding(encoding) if encoding else DEFAULT_ENCODING,
    )
