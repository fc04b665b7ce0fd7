# -*- coding: utf-8 -*-
"""
files

Directory copies, template installation and clean-up for new samples.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Optional

from ..conf import DEFAULT_SETTINGS, ScaffoldSettings, TemplateSpec
from .exceptions import SampleExistsError, TemplateMissingError
from .layout import SampleLayout
from .reporting import ScaffoldReport
from .request import ScaffoldRequest

logger = logging.getLogger(__name__)


def create_files_and_folders(
    request: ScaffoldRequest,
    settings: ScaffoldSettings = DEFAULT_SETTINGS,
    report: Optional[ScaffoldReport] = None,
) -> ScaffoldReport:
    """Copy the reference sample and install the Kotlin templates.

    Raises :class:`SampleExistsError` before anything is written when the
    new package directory is already present. Nothing is rolled back if a
    later copy fails.
    """
    layout = SampleLayout(request, settings)
    report = report if report is not None else ScaffoldReport(layout.destination)

    package_directory = layout.package_directory
    if package_directory.exists():
        raise SampleExistsError(package_directory)

    destination = layout.destination
    if destination.exists():
        report.add_skipped(destination)
    else:
        destination.mkdir(parents=True, exist_ok=True)
        report.add_created(destination)

    logger.info("Copying %s into %s", layout.reference_directory, destination)
    shutil.copytree(layout.reference_directory, destination, dirs_exist_ok=True)

    # The copy brings the reference package along; reusing its name collides here.
    try:
        package_directory.mkdir(parents=True)
    except FileExistsError as error:
        raise SampleExistsError(package_directory) from error
    report.add_created(package_directory)

    for template in settings.templates:
        _install_template(layout, template, report)
    return report


def _install_template(layout: SampleLayout, template: TemplateSpec, report: ScaffoldReport) -> None:
    source = layout.template_source(template)
    if not source.is_file():
        raise TemplateMissingError(source)
    target = layout.template_target(template)
    if not target.parent.exists():
        target.parent.mkdir(parents=True)
        report.add_created(target.parent)
    shutil.copy2(source, target)
    report.add_created(target)
    logger.debug("Installed template %s as %s", source.name, target)


def delete_unwanted_files(
    request: ScaffoldRequest,
    settings: ScaffoldSettings = DEFAULT_SETTINGS,
    report: Optional[ScaffoldReport] = None,
) -> ScaffoldReport:
    """Remove build output and reference-only artifacts from the new sample."""
    layout = SampleLayout(request, settings)
    report = report if report is not None else ScaffoldReport(layout.destination)

    for directory in layout.unwanted_directories():
        if not directory.is_dir():
            report.add_skipped(directory)
            continue
        shutil.rmtree(directory)
        report.add_removed(directory)
        logger.debug("Removed directory %s", directory)

    for path in layout.unwanted_files():
        if delete_file(path):
            report.add_removed(path)
        else:
            logger.debug("Nothing to delete at %s", path)
            report.add_skipped(path)
    return report


def delete_file(path: Path) -> bool:
    """Delete ``path`` and return False when there was no file to delete."""
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    return True


__all__ = ["create_files_and_folders", "delete_file", "delete_unwanted_files"]


# The End
