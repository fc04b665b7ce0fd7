# -*- coding: utf-8 -*-
"""
reporting

Result values describing the outcome of a scaffolding run.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class ScaffoldFailure:
    """Structured detail about the step that stopped a run."""

    step: str
    message: str
    trace: str

    @classmethod
    def from_exception(cls, step: str, error: BaseException) -> "ScaffoldFailure":
        """Capture ``error`` together with its formatted traceback."""
        trace = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        return cls(step=step, message=str(error), trace=trace)


class ScaffoldReport:
    """Track filesystem changes and the failure, if any, of a scaffolding run."""

    def __init__(self, root: Path) -> None:
        """Initialize report for a specific destination root."""
        self.root = root
        self._created: List[Path] = []
        self._removed: List[Path] = []
        self._updated: List[Path] = []
        self._skipped: List[Path] = []
        self._failure: Optional[ScaffoldFailure] = None

    @property
    def created(self) -> List[Path]:
        """Return the list of created filesystem paths."""
        return list(self._created)

    @property
    def removed(self) -> List[Path]:
        """Return the list of deleted filesystem paths."""
        return list(self._removed)

    @property
    def updated(self) -> List[Path]:
        """Return the list of files whose content was rewritten."""
        return list(self._updated)

    @property
    def skipped(self) -> List[Path]:
        """Return the list of paths that were left alone."""
        return list(self._skipped)

    @property
    def failure(self) -> Optional[ScaffoldFailure]:
        """Return the failure that stopped the run, if any."""
        return self._failure

    @property
    def succeeded(self) -> bool:
        """Return True when no step recorded a failure."""
        return self._failure is None

    def add_created(self, path: Path) -> None:
        """Record a path that has been newly created."""
        self._created.append(path)

    def add_removed(self, path: Path) -> None:
        """Record a path that has been deleted."""
        self._removed.append(path)

    def add_updated(self, path: Path) -> None:
        """Record a file whose content has been rewritten."""
        self._updated.append(path)

    def add_skipped(self, path: Path) -> None:
        """Record a path that was left untouched."""
        self._skipped.append(path)

    def fail(self, step: str, error: BaseException) -> None:
        """Record the error that stopped ``step``."""
        self._failure = ScaffoldFailure.from_exception(step, error)


__all__ = ["ScaffoldFailure", "ScaffoldReport"]


# The End
