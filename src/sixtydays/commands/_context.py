"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Owns the lazily created Workspace and the single
place where results become output and exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sixtydays.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from sixtydays.config.settings import SixtySettings
    from sixtydays.infrastructure.workspace import Workspace
    from sixtydays.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: SixtySettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None

        from sixtydays.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from sixtydays.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def workspace(self) -> Workspace:
        """The workspace (created lazily on first access)."""
        if self._workspace is None:
            from sixtydays.infrastructure.workspace import Workspace

            self._workspace = Workspace(self.settings)
            click.get_current_context().call_on_close(self._workspace.close)
        return self._workspace

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout. Warnings go to stderr so piped output stays clean.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
