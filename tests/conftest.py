# -*- coding: utf-8 -*-
"""conftest

Shared fixtures building a throwaway samples repository.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from pathlib import Path

import pytest

from newmodule.conf import DEFAULT_SETTINGS
from tests.sample_repository import ReferenceRepository


@pytest.fixture
def repository(tmp_path: Path) -> ReferenceRepository:
    """Provide a freshly built samples repository."""

    return ReferenceRepository(tmp_path / "arcgis-maps-sdk-kotlin-samples").build()


@pytest.fixture
def template_copy(tmp_path: Path) -> Path:
    """Copy the packaged Kotlin templates into an editable directory."""

    target = tmp_path / "templates"
    target.mkdir()
    for template in DEFAULT_SETTINGS.templates:
        source = DEFAULT_SETTINGS.template_directory / template.source_name
        (target / template.source_name).write_bytes(source.read_bytes())
    return target


# The End
