"""AppContext — per-invocation state handed to every command.

The root group builds one from the resolved settings; commands receive it
through ``@click.pass_obj``, call a service, and hand the result to
:meth:`AppContext.emit`, which owns stream routing and the exit code.
"""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

import click

from digitlist.config.logging import configure_logging
from digitlist.output.formatters import OutputSettings, format_result
from digitlist.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from digitlist.config.settings import DigitSettings
    from digitlist.services.arithmetic import ArithmeticService
    from digitlist.services.result import ServiceResult


class AppContext:
    """Settings, output mode, and the arithmetic service for one CLI run."""

    def __init__(self, settings: DigitSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
            max_digits_shown=settings.output.max_digits_shown,
        )
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    @cached_property
    def arithmetic(self) -> ArithmeticService:
        """Built on first use so ``--help`` never touches the service layer."""
        from digitlist.services.arithmetic import ArithmeticService

        return ArithmeticService(self.settings)

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; a failure goes to stderr and exits with status 1.

        Warnings on a successful result are echoed to stderr so piped
        values stay clean, except in JSON mode where the payload carries them.
        """
        rendered = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(rendered, err=True)
            raise SystemExit(1)

        click.echo(rendered)
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
