# -*- coding: utf-8 -*-
"""
request

Immutable description of a single scaffolding run.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Tuple

from ..conf import DEFAULT_SETTINGS


def derive_identifiers(sample_name: str) -> Tuple[str, str]:
    """Return the hyphenated directory name and the package name for ``sample_name``."""
    lowered = sample_name.lower()
    return lowered.replace(" ", "-"), lowered.replace(" ", "")


def resolve_repository_root(
    working_directory: Path | str,
    segments: Iterable[str] = DEFAULT_SETTINGS.tool_segments,
) -> Path:
    """Strip the tool's own path segments from ``working_directory``.

    The tool lives in ``<repository>/tools/NewModuleScript``; running it from
    there, or from the repository root itself, yields the repository root.
    Directories without those segments are returned unchanged.
    """
    stripped = set(segments)
    parts = [part for part in Path(working_directory).absolute().parts if part not in stripped]
    return Path(*parts)


@dataclass(frozen=True)
class ScaffoldRequest:
    """Names derived once from the user supplied sample name."""

    sample_name: str
    hyphenated_name: str
    package_name: str
    repository_root: Path

    @classmethod
    def build(cls, sample_name: str, repository_root: Path | str) -> "ScaffoldRequest":
        """Create a request, deriving every identifier from ``sample_name``."""
        name = sample_name.strip()
        hyphenated, package = derive_identifiers(name)
        return cls(
            sample_name=name,
            hyphenated_name=hyphenated,
            package_name=package,
            repository_root=Path(repository_root),
        )


__all__ = ["ScaffoldRequest", "derive_identifiers", "resolve_repository_root"]


# The End
