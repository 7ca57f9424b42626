import os
from pathlib import Path
from typing import Iterator
from typing import MutableMapping
from typing import NamedTuple

from rich.text import Text

from loadenv.errors import MalformedLine
from loadenv.output.console import CONSOLE
from loadenv.output.styles import Style

COMMENT_PREFIX = '#'
SEPARATOR = '='
NUL = '\0'
ENCODING = 'utf-8'


class EnvVar(NamedTuple):
    name: str
    value: str


def read_lines(filename: str | Path, encoding: str = ENCODING) -> Iterator[str]:
    # binary mode splits on '\n' only, a lone '\r' stays part of the value
    with open(filename, 'rb') as f:
        for lineno, raw_line in enumerate(f, start=1):
            raw_line = raw_line.removesuffix(b'\n').removesuffix(b'\r')
            try:
                line = raw_line.decode(encoding)
            except UnicodeDecodeError as e:
                raise MalformedLine(
                    raw_line.decode(encoding, errors='replace'), lineno, filename,
                    reason=f'not valid {encoding}: {e.reason}',
                ) from e
            yield line


def parse_line(line: str, lineno: int, filename: str | Path) -> EnvVar | None:
    """
    Returns None for comments and blank lines.

    Only the first '=' separates the name from the value, the rest of the
    line is kept as is. Quotes, escapes and whitespace get no special treatment.
    """
    if line.startswith(COMMENT_PREFIX) or not line.strip():
        return None
    name, sep, value = line.partition(SEPARATOR)
    if not sep or not name:
        raise MalformedLine(line, lineno, filename)
    if NUL in line:
        raise MalformedLine(line, lineno, filename, reason='NUL character is not allowed')
    return EnvVar(name, value)


def parse_env_file(filename: str | Path) -> Iterator[EnvVar]:
    for lineno, line in enumerate(read_lines(filename), start=1):
        env_var = parse_line(line, lineno, filename)
        if env_var is not None:
            yield env_var


def load_env_vars(filename: str | Path,
                  environ: MutableMapping[str, str] | None = None) -> dict[str, str]:
    # vars are applied one by one: on a malformed line the previous ones stay set
    if environ is None:
        environ = os.environ

    loaded = {}
    for env_var in parse_env_file(filename):
        environ[env_var.name] = env_var.value
        loaded[env_var.name] = env_var.value

    CONSOLE.print(
        Text('Loaded ', style=Style.info)
        .append(Text(str(len(loaded)), style=Style.mark))
        .append(Text(f' env vars from {filename}', style=Style.info))
    )
    return loaded
