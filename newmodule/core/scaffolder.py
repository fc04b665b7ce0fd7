# -*- coding: utf-8 -*-
"""
scaffolder

Sequential orchestration of the steps that produce a new sample.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
import shutil
from typing import Callable, Optional, Tuple

from ..conf import DEFAULT_SETTINGS, ScaffoldSettings
from .content import update_sample_content
from .exceptions import ScaffoldError
from .files import create_files_and_folders, delete_unwanted_files
from .layout import SampleLayout
from .reporting import ScaffoldReport
from .request import ScaffoldRequest

logger = logging.getLogger(__name__)

Step = Callable[[ScaffoldRequest, ScaffoldSettings, ScaffoldReport], ScaffoldReport]

FAILURES = (OSError, ValueError, ScaffoldError)


class SampleScaffolder:
    """Run every scaffolding step and collect the outcome in a report."""

    def __init__(
        self,
        settings: Optional[ScaffoldSettings] = None,
        *,
        year: Optional[int] = None,
    ) -> None:
        """Prepare the scaffolder with settings and an optional copyright year."""
        self._settings = settings or DEFAULT_SETTINGS
        self._year = year

    @property
    def settings(self) -> ScaffoldSettings:
        return self._settings

    def steps(self) -> Tuple[Tuple[str, Step], ...]:
        """Return the named steps in execution order."""
        return (
            ("create_files_and_folders", create_files_and_folders),
            ("delete_unwanted_files", delete_unwanted_files),
            ("update_sample_content", self._update_content),
        )

    def scaffold(self, request: ScaffoldRequest) -> ScaffoldReport:
        """Produce the new sample; the first failing step stops the run.

        Completed steps are not undone, so a failed run may leave a partially
        populated destination behind.
        """
        report = ScaffoldReport(SampleLayout(request, self._settings).destination)
        for name, step in self.steps():
            logger.info("Running %s for %r", name, request.sample_name)
            try:
                step(request, self._settings, report)
            except FAILURES as error:
                logger.debug("Step %s failed: %s", name, error)
                report.fail(name, error)
                break
        return report

    def _update_content(
        self,
        request: ScaffoldRequest,
        settings: ScaffoldSettings,
        report: ScaffoldReport,
    ) -> ScaffoldReport:
        return update_sample_content(request, settings, report, year=self._year)


class SampleResetter:
    """Delete a scaffolded sample directory, typically after a failed run."""

    def __init__(self, settings: Optional[ScaffoldSettings] = None) -> None:
        """Prepare the resetter with the layout settings."""
        self._settings = settings or DEFAULT_SETTINGS

    @property
    def settings(self) -> ScaffoldSettings:
        """Return the settings that locate sample directories."""
        return self._settings

    def reset(self, request: ScaffoldRequest) -> ScaffoldReport:
        """Remove the destination of ``request`` if it exists."""
        destination = SampleLayout(request, self._settings).destination
        report = ScaffoldReport(destination)
        if not destination.is_dir():
            report.add_skipped(destination)
            return report
        try:
            shutil.rmtree(destination)
        except OSError as error:
            report.fail("reset", error)
            return report
        report.add_removed(destination)
        logger.info("Removed sample directory %s", destination)
        return report


__all__ = ["SampleResetter", "SampleScaffolder"]


# The End
