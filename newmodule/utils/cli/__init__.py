# -*- coding: utf-8 -*-
"""
cli

CLI utilities for the newmodule sample scaffolder.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from .commands import CreateCommand, RepositoryOptions, ResetCommand
from .entrypoint import NewModuleCLI, cli

__all__ = [
    "CreateCommand",
    "RepositoryOptions",
    "ResetCommand",
    "NewModuleCLI",
    "cli",
]


# The End
