from pathlib import Path
from typing import MutableMapping

from rich.text import Text

from loadenv.core.compose_interface import ComposeShellInterface
from loadenv.core.config import Settings
from loadenv.core.env_loader import load_env_vars
from loadenv.core.file_resolver import resolve
from loadenv.output.console import CONSOLE
from loadenv.output.styles import Style


def start_docker(compose: ComposeShellInterface) -> None:
    compose.dc_build()
    compose.dc_up()


def cleanup(root: Path | str) -> None:
    """
    Place for removing files and directories the run left in the project folder.

    Nothing is created there yet, so there is nothing to remove.
    """


def stop_docker(compose: ComposeShellInterface) -> None:
    compose.dc_down()
    cleanup(compose.root)


def load(dotenv: str | Path | None = None,
         root: Path | str = '.',
         settings: Settings | None = None,
         environ: MutableMapping[str, str] | None = None) -> dict[str, str]:
    if settings is None:
        settings = Settings()

    fname = resolve(dotenv or settings.dotenv, root)
    loaded = load_env_vars(fname, environ)

    compose = ComposeShellInterface(settings.docker_compose, root, execution_envs=loaded)
    start_docker(compose)
    CONSOLE.print(Text(' ✔ Environment is up', style=Style.good))
    return loaded


def stop(root: Path | str = '.', settings: Settings | None = None) -> None:
    if settings is None:
        settings = Settings()

    compose = ComposeShellInterface(settings.docker_compose, root)
    stop_docker(compose)
    CONSOLE.print(Text(' ✔ Environment is down', style=Style.good))
