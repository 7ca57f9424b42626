import sys
from pathlib import Path

import click
from rich.text import Text

from loadenv.core.config import load_settings
from loadenv.core.runner import load
from loadenv.core.runner import stop
from loadenv.errors import LoadenvError
from loadenv.output.console import ERR_CONSOLE
from loadenv.version import get_version


def fail(error: LoadenvError):
    ERR_CONSOLE.print(Text(str(error)))
    sys.exit(1)


@click.group(invoke_without_command=True,
             help='Loadenv loads environment for a project using Docker')
@click.option('--config', 'config_file', type=click.Path(dir_okay=False, path_type=Path), default=None,
              help='config file (default is $HOME/.loadenv.yaml)')
@click.option('--dotenv', type=click.Path(dir_okay=False, path_type=Path), default=None,
              help='dotenv file with environment variables')
@click.option('-t', '--toggle', is_flag=True, default=False, help='Help message for toggle')
@click.version_option(get_version(), prog_name='loadenv')
@click.pass_context
def main(ctx: click.Context, config_file: Path | None, dotenv: Path | None, toggle: bool):
    try:
        settings = load_settings(config_file)
    except LoadenvError as e:
        fail(e)
    ctx.obj = settings

    if ctx.invoked_subcommand is not None:
        return

    try:
        load(dotenv, Path.cwd(), settings)
    except LoadenvError as e:
        fail(e)


@main.command(help='Stop docker environment for the project in the current directory')
@click.pass_obj
def down(settings):
    try:
        stop(Path.cwd(), settings)
    except LoadenvError as e:
        fail(e)
