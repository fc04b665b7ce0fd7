# -*- coding: utf-8 -*-
"""
layout

Filesystem locations touched while a sample is scaffolded.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from ..conf import ScaffoldSettings, TemplateSpec
from .request import ScaffoldRequest


@dataclass(frozen=True)
class SampleLayout:
    """Resolve the paths of a scaffolding run from a request and its settings."""

    request: ScaffoldRequest
    settings: ScaffoldSettings

    @property
    def reference_directory(self) -> Path:
        """Return the sample that is copied as the structural template."""
        return self.request.repository_root / self.settings.reference_sample

    @property
    def destination(self) -> Path:
        """Return the root directory of the new sample."""
        return self.request.repository_root / self.request.hyphenated_name

    @property
    def source_root(self) -> Path:
        """Return the Java source root that holds sample packages."""
        return self.destination / self.settings.source_root

    @property
    def package_directory(self) -> Path:
        """Return the Kotlin package directory of the new sample."""
        return self.source_root / self.request.package_name

    @property
    def reference_package_directory(self) -> Path:
        """Return the copied package folder that belongs to the reference sample."""
        return self.source_root / self.settings.reference_package

    def template_source(self, template: TemplateSpec) -> Path:
        """Return the tool-local path of ``template``."""
        return self.settings.template_directory / template.source_name

    def template_target(self, template: TemplateSpec) -> Path:
        """Return where ``template`` is installed inside the new package."""
        directory = self.package_directory
        if template.subdirectory:
            directory = directory / template.subdirectory
        return directory / template.target_name

    def unwanted_directories(self) -> Tuple[Path, ...]:
        """Return directories pulled in by the copy that a new sample must not keep."""
        extra = tuple(self.destination / name for name in self.settings.unwanted_directories)
        return extra + (self.reference_package_directory,)

    def unwanted_files(self) -> Tuple[Path, ...]:
        """Return reference-only files a new sample must not keep."""
        return tuple(self.destination / name for name in self.settings.unwanted_files)

    @property
    def readme(self) -> Path:
        """Return the README of the new sample."""
        return self.destination / self.settings.readme_file

    @property
    def metadata(self) -> Path:
        """Return the README metadata file of the new sample."""
        return self.destination / self.settings.metadata_file

    @property
    def gradle(self) -> Path:
        """Return the Gradle build file of the new sample."""
        return self.destination / self.settings.gradle_file

    @property
    def strings(self) -> Path:
        """Return the string resources file of the new sample."""
        return self.destination / self.settings.strings_file

    def kotlin_sources(self) -> Tuple[Path, ...]:
        """Return the generated Kotlin files in template order."""
        return tuple(self.template_target(template) for template in self.settings.templates)


__all__ = ["SampleLayout"]


# The End
