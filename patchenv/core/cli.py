"""
Command line interface for patchenv
Uses click for subcommands
"""
import os
import subprocess
import sys

import click
from tabulate import tabulate

from patchenv.core.errors import PatchCommandError
from patchenv.core.logging import LoggingManager
from patchenv.core.settings import LOG_LEVEL_VAR, PatchSettings
from patchenv.modules.environment import EnvironmentTable
from patchenv.modules.patcher import EnvironmentPatcher

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option('--log-level', envvar=LOG_LEVEL_VAR, default='WARNING', show_default=True,
              type=click.Choice(LOG_LEVELS, case_sensitive=False), help='Log level for diagnostics')
def cli(log_level):
    """Patch the environment from the output of $PATCH_ENV_COMMAND."""
    LoggingManager(log_level).setup()


@cli.command('exec', context_settings={'ignore_unknown_options': True})
@click.argument('command', nargs=-1, required=True, type=click.UNPROCESSED)
def exec_command(command):
    """Patch the environment, then run COMMAND with it."""
    try:
        EnvironmentPatcher().patch()
    except PatchCommandError as e:
        click.echo(f"patchenv: {e}", err=True)
        sys.exit(1)
    try:
        result = subprocess.run(list(command))
    except OSError as e:
        click.echo(f"patchenv: cannot run {command[0]!r}: {e}", err=True)
        sys.exit(127)
    sys.exit(result.returncode if result.returncode >= 0 else 128 - result.returncode)


@cli.command()
@click.option('--table-format', default='simple', show_default=True, help='tabulate table format')
def show(table_format):
    """Show the variables the patch command would set."""
    settings = PatchSettings()
    patcher = EnvironmentPatcher(EnvironmentTable(dict(os.environ)), settings)
    if not patcher.command():
        click.echo(f"{settings.command_var} is not set, nothing to patch")
        return
    try:
        pairs = patcher.patch()
    except PatchCommandError as e:
        click.echo(f"patchenv: {e}", err=True)
        sys.exit(1)
    if not pairs:
        click.echo("The patch command set no variables")
        return
    click.echo(tabulate(pairs, headers=['Variable', 'Value'], tablefmt=table_format))


if __name__ == '__main__':
    cli()
