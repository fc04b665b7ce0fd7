# -*- coding: utf-8 -*-
"""
newmodule

Scaffold new Android samples from a reference sample.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from .conf import DEFAULT_SETTINGS, ScaffoldSettings, TemplateSpec
from .core import SampleResetter, SampleScaffolder, ScaffoldReport, ScaffoldRequest

__all__ = [
    "DEFAULT_SETTINGS",
    "SampleResetter",
    "SampleScaffolder",
    "ScaffoldReport",
    "ScaffoldRequest",
    "ScaffoldSettings",
    "TemplateSpec",
]

__version__ = "0.1.0"


# The End
