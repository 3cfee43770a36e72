# -*- coding: utf-8 -*-
"""Command-line front-end."""

from savedvars.cli.main import main

__all__ = ["main"]
