import os
import subprocess
import sys
from pathlib import Path
from typing import Mapping

from rich.text import Text

from loadenv.core.config import DEFAULT_DOCKER_COMPOSE
from loadenv.errors import BuildFailed
from loadenv.errors import ComposeCommandFailed
from loadenv.errors import DownFailed
from loadenv.errors import UpFailed
from loadenv.output.console import CONSOLE
from loadenv.output.styles import Style


class ComposeShellInterface:
    def __init__(self, binary: str = DEFAULT_DOCKER_COMPOSE, root: Path | str = '.',
                 execution_envs: Mapping[str, str] | None = None):
        self.binary = binary
        self.root = Path(root)
        self.execution_envs = dict(execution_envs) if execution_envs is not None else {}

    def _run(self, args: list[str], error: type[ComposeCommandFailed]) -> None:
        cmd = [self.binary, *args]
        CONSOLE.print(Text(' '.join(cmd), style=Style.context))
        sys.stdout.flush()
        sys.stderr.flush()

        # children inherit our stdio and see the loaded vars on top of os.environ
        try:
            returncode = subprocess.call(
                cmd,
                env=os.environ | self.execution_envs,
                cwd=self.root,
            )
        except OSError as e:
            raise error(cmd, None, f"can't be started: {e.strerror or e}") from e
        if returncode != 0:
            raise error(cmd, returncode)

    def dc_build(self) -> None:
        self._run(['build', '.'], BuildFailed)

    def dc_up(self) -> None:
        self._run(['up'], UpFailed)

    def dc_down(self) -> None:
        self._run(['down'], DownFailed)
