import os
from pathlib import Path
from typing import Any
from typing import Mapping
from typing import NamedTuple

import yaml
from rich.text import Text

from loadenv.errors import ConfigError
from loadenv.errors import NotFound
from loadenv.output.console import CONSOLE
from loadenv.output.styles import Style

CONFIG_NAME = '.loadenv'
CONFIG_EXTENSIONS = ('.yaml', '.yml', '.json')
ENV_PREFIX = 'LOADENV_'

DEFAULT_DOTENV = '.env'
DEFAULT_DOCKER_COMPOSE = 'docker-compose'


class Settings(NamedTuple):
    dotenv: str = DEFAULT_DOTENV
    docker_compose: str = DEFAULT_DOCKER_COMPOSE
    config_file: Path | None = None
    extra: dict[str, Any] | None = None


def find_config_file(home: Path | None = None) -> Path | None:
    if home is None:
        home = Path.home()
    for extension in CONFIG_EXTENSIONS:
        candidate = home / f'{CONFIG_NAME}{extension}'
        if candidate.is_file():
            return candidate
    return None


def read_config_file(filename: str | Path) -> dict:
    try:
        with open(filename) as f:
            cfg = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(filename, str(e)) from e

    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ConfigError(filename, f'expected a mapping, got {type(cfg).__name__}')
    return cfg


def load_settings(config_file: str | Path | None = None,
                  home: Path | None = None,
                  environ: Mapping[str, str] | None = None) -> Settings:
    """
    Merge settings from the config file and LOADENV_* environment variables.

    An explicit config file must exist; the one in the home directory is optional.
    Environment variables win over file values.
    """
    if environ is None:
        environ = os.environ

    if config_file:
        config_file = Path(config_file)
        if not config_file.is_file():
            raise NotFound(config_file)
    else:
        config_file = find_config_file(home)

    cfg = {}
    if config_file is not None:
        cfg = read_config_file(config_file)
        CONSOLE.print(Text('Using config file: ', style=Style.info)
                      .append(Text(str(config_file), style=Style.mark)))

    for field in ('dotenv', 'docker_compose'):
        env_name = ENV_PREFIX + field.upper()
        if environ.get(env_name):
            cfg[field] = environ[env_name]

    return Settings(
        dotenv=str(cfg.pop('dotenv', None) or DEFAULT_DOTENV),
        docker_compose=str(cfg.pop('docker_compose', None) or DEFAULT_DOCKER_COMPOSE),
        config_file=config_file,
        extra=cfg,
    )
