# -*- coding: utf-8 -*-
"""
cli

Click entry point for the newmodule sample scaffolder.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Optional

import click

from ...conf import DEFAULT_SETTINGS, ScaffoldSettings
from ...core.scaffolder import SampleResetter, SampleScaffolder
from .commands import CreateCommand, ResetCommand

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class NewModuleCLI:
    """Aggregate all CLI commands exposed by the package."""

    def __init__(self, settings: Optional[ScaffoldSettings] = None) -> None:
        """Create command instances required to build the CLI group."""
        settings = settings or DEFAULT_SETTINGS
        self._create_command = CreateCommand(SampleScaffolder(settings))
        self._reset_command = ResetCommand(
            SampleResetter(settings),
            tool_segments=settings.tool_segments,
        )

    def create_cli(self) -> click.Group:
        """Build the Click group with all registered commands."""
        group = click.Group(
            name="newmodule",
            callback=self._run,
            invoke_without_command=True,
            params=[
                click.Option(["--verbose", "-v"], is_flag=True, help="Log every file operation."),
            ],
            help="Create new samples from the reference sample. Runs `create` when no command is given.",
        )
        group.add_command(self._create_command.to_click_command())
        group.add_command(self._reset_command.to_click_command())
        return group

    def _run(self, verbose: bool) -> None:
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format=LOG_FORMAT,
        )
        context = click.get_current_context()
        if context.invoked_subcommand is None:
            self._create_command.execute()


cli = NewModuleCLI().create_cli()


# The End
