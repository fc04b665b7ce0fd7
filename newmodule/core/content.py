# -*- coding: utf-8 -*-
"""
content

Literal text rewrites applied to the files of a freshly copied sample.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Iterable, Optional, Tuple

from ..conf import DEFAULT_SETTINGS, ScaffoldSettings
from .layout import SampleLayout
from .reporting import ScaffoldReport
from .request import ScaffoldRequest

logger = logging.getLogger(__name__)

Replacement = Tuple[str, str]


class ContentRewriter:
    """Load a whole file, substitute literals and write it back."""

    def __init__(self, report: ScaffoldReport, *, encoding: str = "utf-8") -> None:
        """Store the report receiving rewritten paths."""
        self._report = report
        self._encoding = encoding

    def overwrite(self, path: Path, content: str) -> None:
        """Replace the entire content of ``path``, writing line endings as given."""
        path.write_text(content, encoding=self._encoding, newline="")
        self._report.add_updated(path)

    def replace(self, path: Path, replacements: Iterable[Replacement]) -> None:
        """Apply each ``(old, new)`` pair to ``path`` in order.

        Tokens absent from the file are left as they are.
        """
        with path.open(encoding=self._encoding, newline="") as handle:
            content = handle.read()
        for old, new in replacements:
            if old not in content:
                logger.debug("Token %r not found in %s", old, path)
            content = content.replace(old, new)
        self.overwrite(path, content)


def update_sample_content(
    request: ScaffoldRequest,
    settings: ScaffoldSettings = DEFAULT_SETTINGS,
    report: Optional[ScaffoldReport] = None,
    *,
    year: Optional[int] = None,
) -> ScaffoldReport:
    """Rewrite README, metadata, Gradle, strings and Kotlin files for the new sample."""
    layout = SampleLayout(request, settings)
    report = report if report is not None else ScaffoldReport(layout.destination)
    rewriter = ContentRewriter(report)

    package_replacement = (
        settings.reference_package_token,
        settings.package_token(request.package_name),
    )
    if year is None:
        year = date.today().year
    copyright_replacement = (
        settings.copyright_token,
        settings.copyright_template.format(year=year),
    )

    rewriter.overwrite(
        layout.readme,
        settings.readme_template.format(sample_name=request.sample_name),
    )
    rewriter.overwrite(layout.metadata, settings.metadata_placeholder)
    rewriter.replace(layout.gradle, [package_replacement])
    rewriter.replace(
        layout.strings,
        [
            (
                settings.app_name_element,
                settings.app_name_template.format(sample_name=request.sample_name),
            )
        ],
    )
    for source in layout.kotlin_sources():
        rewriter.replace(source, [copyright_replacement, package_replacement])
    return report


__all__ = ["ContentRewriter", "update_sample_content"]


# The End
