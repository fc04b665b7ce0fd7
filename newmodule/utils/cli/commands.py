# -*- coding: utf-8 -*-
"""
commands

Click command factories for the newmodule CLI.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

import click

from ...core.layout import SampleLayout
from ...core.reporting import ScaffoldReport
from ...core.request import ScaffoldRequest, resolve_repository_root
from ...core.scaffolder import SampleResetter, SampleScaffolder

NAME_PROMPT = 'Enter Name of the sample with spaces (Eg. "Display New Map")'


class RepositoryOptions:
    """Shared handling of the sample name and repository root parameters."""

    def __init__(self, tool_segments: Tuple[str, ...]) -> None:
        """Remember the path segments that locate the tool inside the repository."""
        self._tool_segments = tool_segments

    def params(self) -> List[click.Parameter]:
        return [
            click.Option(["--name", "-n"], help="Sample name with spaces, e.g. 'Display New Map'."),
            click.Option(
                ["--repository-root"],
                type=click.Path(file_okay=False, path_type=Path),
                help="Repository root; derived from the working directory when omitted.",
            ),
        ]

    def build_request(self, name: Optional[str], repository_root: Optional[Path]) -> ScaffoldRequest:
        """Prompt for missing input and return the request for this run."""
        sample_name = (name if name is not None else click.prompt(NAME_PROMPT)).strip()
        if not sample_name:
            click.secho("Sample name cannot be empty.", fg="red")
            raise click.exceptions.Exit(1)
        root = repository_root or resolve_repository_root(Path.cwd(), self._tool_segments)
        click.echo(f"Using repository... {root}")
        return ScaffoldRequest.build(sample_name, root)


def echo_failure(report: ScaffoldReport, headline: str) -> None:
    """Print the failure recorded on ``report`` with its diagnostic trace."""
    failure = report.failure
    if failure is None:
        return
    click.secho(f"{headline}: {failure.message}", fg="red")
    click.echo("StackTrace:", err=True)
    click.echo(failure.trace, err=True)


class CreateCommand:
    """Produce the `create` command that scaffolds a new sample."""

    def __init__(self, scaffolder: SampleScaffolder) -> None:
        """Store the scaffolder used to build sample directories."""
        self._scaffolder = scaffolder
        self._options = RepositoryOptions(scaffolder.settings.tool_segments)

    def execute(self, name: Optional[str] = None, repository_root: Optional[Path] = None) -> None:
        """Handle the creation of a new sample and exit non-zero on failure."""
        request = self._options.build_request(name, repository_root)
        report = self._scaffolder.scaffold(request)
        if not report.succeeded:
            echo_failure(report, "Error creating the sample")
            raise click.exceptions.Exit(1)
        click.secho("Sample Successfully Created! ", fg="green")

    def to_click_command(self) -> click.Command:
        """Return a Click command configured for sample creation."""
        return click.Command(
            name="create",
            callback=self.execute,
            params=self._options.params(),
            help="Create a new sample from the reference sample.",
        )


class ResetCommand:
    """Produce the `reset` command that deletes a scaffolded sample."""

    def __init__(self, resetter: SampleResetter, *, tool_segments: Tuple[str, ...]) -> None:
        """Store the resetter used to remove sample directories."""
        self._resetter = resetter
        self._options = RepositoryOptions(tool_segments)

    def execute(
        self,
        name: Optional[str] = None,
        repository_root: Optional[Path] = None,
        yes: bool = False,
    ) -> None:
        """Delete the sample directory after confirmation."""
        request = self._options.build_request(name, repository_root)
        destination = SampleLayout(request, self._resetter.settings).destination
        if not yes:
            click.confirm(f"Delete {destination}?", abort=True)
        report = self._resetter.reset(request)
        if not report.succeeded:
            echo_failure(report, "Error resetting the sample")
            raise click.exceptions.Exit(1)
        if report.removed:
            click.secho(f"Removed {destination}", fg="green")
        else:
            click.secho(f"Nothing to remove at {destination}", fg="yellow")

    def to_click_command(self) -> click.Command:
        """Return a Click command configured for sample removal."""
        return click.Command(
            name="reset",
            callback=self.execute,
            params=self._options.params()
            + [click.Option(["--yes", "-y"], is_flag=True, help="Do not ask for confirmation.")],
            help="Delete a previously scaffolded sample directory.",
        )


# The End
