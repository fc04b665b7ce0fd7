# -*- coding: utf-8 -*-
"""
cli

Backward-compatible entry point for the newmodule CLI.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .utils.cli import NewModuleCLI, cli

__all__ = ["NewModuleCLI", "cli"]


# The End
