from pathlib import Path


class LoadenvError(Exception):
    ...


class NotFound(LoadenvError):
    def __init__(self, path: str | Path, given: str | Path | None = None):
        self.path = Path(path)
        self.given = str(given if given is not None else path)
        super().__init__(f'can not find {self.given} file in the local directory')


class MalformedLine(LoadenvError):
    def __init__(self, line: str, lineno: int, path: str | Path, reason: str = 'expected NAME=VALUE'):
        self.line = line
        self.lineno = lineno
        self.path = Path(path)
        self.reason = reason
        super().__init__(
            f'malformed line {lineno} in {self.path.name}: {line!r} ({reason})'
        )


class ConfigError(LoadenvError):
    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        super().__init__(f"can't read config file {self.path}: {reason}")


class ComposeCommandFailed(LoadenvError):
    action = 'run'

    def __init__(self, command: list[str], returncode: int | None, reason: str | None = None):
        self.command = command
        self.returncode = returncode
        self.reason = reason
        if reason is None:
            reason = f'exited with code {returncode}'
        super().__init__(
            f"Can't {self.action} environment: `{' '.join(command)}` {reason}"
        )


class BuildFailed(ComposeCommandFailed):
    action = 'build'


class UpFailed(ComposeCommandFailed):
    action = 'up'


class DownFailed(ComposeCommandFailed):
    action = 'down'
