# -*- coding: utf-8 -*-
"""
conf

Configuration values that drive sample scaffolding.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Tuple


TEMPLATE_DIRECTORY = Path(__file__).resolve().parent / "templates"


@dataclass(frozen=True)
class TemplateSpec:
    """Describe where a Kotlin template lands inside the new package."""

    source_name: str
    subdirectory: str
    target_name: str


DEFAULT_TEMPLATES: Tuple[TemplateSpec, ...] = (
    TemplateSpec("MainActivityTemplate.kt", "", "MainActivity.kt"),
    TemplateSpec("MapViewModelTemplate.kt", "components", "MapViewModel.kt"),
    TemplateSpec("MainScreenTemplate.kt", "screens", "MainScreen.kt"),
)


@dataclass(frozen=True)
class ScaffoldSettings:
    """Literal tokens and layout rules used when a sample is scaffolded."""

    reference_sample: str = "display-composable-mapview"
    reference_package: str = "displaycomposablemapview"
    package_prefix: str = "sample."
    source_root: str = "src/main/java/com/esri/arcgismaps/sample"
    copyright_token: str = "Copyright 2023"
    copyright_template: str = "Copyright {year}"
    app_name_element: str = '<string name="app_name">Display composable mapView</string>'
    app_name_template: str = '<string name="app_name">{sample_name}</string>'
    readme_template: str = "# {sample_name}"
    metadata_placeholder: str = "{\n}"
    readme_file: str = "README.md"
    metadata_file: str = "README.metadata.json"
    gradle_file: str = "build.gradle"
    strings_file: str = "src/main/res/values/strings.xml"
    template_directory: Path = field(default_factory=lambda: TEMPLATE_DIRECTORY)
    templates: Tuple[TemplateSpec, ...] = DEFAULT_TEMPLATES
    unwanted_directories: Tuple[str, ...] = ("build",)
    unwanted_files: Tuple[str, ...] = ("display-composable-mapview.png",)
    tool_segments: Tuple[str, ...] = ("NewModuleScript", "tools")

    @property
    def reference_package_token(self) -> str:
        """Return the package identifier the reference sample is written with."""
        return f"{self.package_prefix}{self.reference_package}"

    def package_token(self, package_name: str) -> str:
        """Return the package identifier for a freshly scaffolded sample."""
        return f"{self.package_prefix}{package_name}"

    def derive(self, **overrides: Any) -> "ScaffoldSettings":
        """Return a copy of the settings with ``overrides`` applied."""
        if "template_directory" in overrides:
            overrides["template_directory"] = Path(overrides["template_directory"])
        return replace(self, **overrides)


DEFAULT_SETTINGS = ScaffoldSettings()


__all__ = [
    "DEFAULT_SETTINGS",
    "DEFAULT_TEMPLATES",
    "ScaffoldSettings",
    "TEMPLATE_DIRECTORY",
    "TemplateSpec",
]


# The End
