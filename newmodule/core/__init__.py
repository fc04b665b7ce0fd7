# -*- coding: utf-8 -*-
"""
core

Scaffolding primitives for new Android samples.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from .content import ContentRewriter, update_sample_content
from .exceptions import SampleExistsError, ScaffoldError, TemplateMissingError
from .files import create_files_and_folders, delete_file, delete_unwanted_files
from .layout import SampleLayout
from .reporting import ScaffoldFailure, ScaffoldReport
from .request import ScaffoldRequest, derive_identifiers, resolve_repository_root
from .scaffolder import SampleResetter, SampleScaffolder

__all__ = [
    "ContentRewriter",
    "SampleExistsError",
    "SampleLayout",
    "SampleResetter",
    "SampleScaffolder",
    "ScaffoldError",
    "ScaffoldFailure",
    "ScaffoldReport",
    "ScaffoldRequest",
    "TemplateMissingError",
    "create_files_and_folders",
    "delete_file",
    "delete_unwanted_files",
    "derive_identifiers",
    "resolve_repository_root",
    "update_sample_content",
]


# The End
