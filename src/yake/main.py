"""CLI entry point for yake.

This module defines the Click-based command-line interface::

    yake [OPTIONS] TARGET
"""

from __future__ import annotations

from pathlib import Path

import click

from yake import __version__
from yake.cli.console import console, err_console
from yake.cli.context import CLIContext, ExitCode
from yake.cli.helpers import load_project, resolve_log_level
from yake.cli.output import format_error, format_unknown_target
from yake.config import load_config
from yake.exceptions import ConfigError, UnknownTargetError, YakeError
from yake.logging import bind_context, clear_context, configure_logging
from yake.runners import ShellRunner
from yake.targets import TargetExecutor, has_target, target_names


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="yake")
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to a yake settings file (overrides ~/.config/yake/config.yaml).",
)
@click.option(
    "-f",
    "--file",
    "yakefile",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to the root Yakefile (default: ./Yakefile).",
)
@click.option(
    "-l",
    "--list",
    "list_targets",
    is_flag=True,
    default=False,
    help="List callable targets and exit.",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Suppress non-essential output (ERROR level only).",
)
@click.argument("target", required=False)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: Path | None,
    yakefile: Path | None,
    list_targets: bool,
    verbose: int,
    quiet: bool,
    target: str | None,
) -> None:
    """Yake - make with YAML files.

    Runs TARGET, a dot-qualified callable target of the Yakefile, after
    running the targets it directly depends on.
    """
    # Load settings first (before logging setup)
    try:
        config = load_config(config_file)
    except ConfigError as e:
        details = []
        if e.field:
            details.append(f"Field: {e.field}")
        if e.value is not None:
            details.append(f"Value: {e.value}")
        click.echo(format_error(e.message, details=details), err=True)
        ctx.exit(ExitCode.FAILURE)

    configure_logging(level=resolve_log_level(config, verbose, quiet))

    cli_ctx = CLIContext(
        config=config,
        yakefile=yakefile if yakefile is not None else Path(config.yakefile),
        verbosity=verbose,
        quiet=quiet,
    )
    ctx.obj = cli_ctx

    try:
        document = load_project(cli_ctx)
    except YakeError as e:
        click.echo(
            format_error(
                f"Failed to load Yakefile: {e.message}",
                suggestion="Run yake next to a Yakefile or pass --file",
            ),
            err=True,
        )
        ctx.exit(ExitCode.FAILURE)

    if list_targets:
        for name in target_names(document):
            click.echo(name)
        return

    if target is None:
        raise click.UsageError("Missing argument 'TARGET'.", ctx=ctx)

    try:
        has_target(document, target)
    except UnknownTargetError as e:
        click.echo(format_unknown_target(target, e.available), err=True)
        ctx.exit(ExitCode.FAILURE)

    executor = TargetExecutor(
        document,
        runner=ShellRunner(shell=config.shell),
        console=console,
        err_console=err_console,
        stop_on_failure=config.stop_on_failure,
    )

    bind_context(target_name=target)
    try:
        executor.execute(target)
    except KeyboardInterrupt:
        click.echo("\n\nInterrupted by user.", err=True)
        ctx.exit(ExitCode.INTERRUPTED)
    except YakeError as e:
        click.echo(
            format_error(
                f"Execution of target: {target} failed.", details=[e.message]
            ),
            err=True,
        )
        ctx.exit(ExitCode.FAILURE)
    finally:
        clear_context()


if __name__ == "__main__":
    cli()
