# -*- coding: utf-8 -*-
"""Parser settings (conf/settings.ini + environment)."""

from savedvars.config.loader import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_ENCODING,
    DEFAULT_MAX_BYTES,
    DEFAULT_MAX_DEPTH,
    MAX_DEPTH_CEILING,
    ParserSettings,
    load_ini,
    resolve_settings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_ENCODING",
    "DEFAULT_MAX_BYTES",
    "DEFAULT_MAX_DEPTH",
    "MAX_DEPTH_CEILING",
    "ParserSettings",
    "load_ini",
    "resolve_settings",
]
