# -*- coding: utf-8 -*-
"""
exceptions

Errors raised while scaffolding a sample.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(RuntimeError):
    """Base error for scaffolding failures."""


class SampleExistsError(ScaffoldError):
    """Raised when the destination package directory is already present."""

    def __init__(self, path: Path) -> None:
        """Remember the conflicting package directory."""
        self.path = path
        super().__init__(f"Sample folder already exists!: {path}")


class TemplateMissingError(ScaffoldError):
    """Raised when a Kotlin template cannot be found in the tool directory."""

    def __init__(self, path: Path) -> None:
        """Remember the template path that could not be located."""
        self.path = path
        super().__init__(f"Template file not found: {path}")


__all__ = ["ScaffoldError", "SampleExistsError", "TemplateMissingError"]


# The End
