from loadenv.core.compose_interface import ComposeShellInterface
from loadenv.core.config import Settings
from loadenv.core.config import load_settings
from loadenv.core.env_loader import EnvVar
from loadenv.core.env_loader import load_env_vars
from loadenv.core.env_loader import parse_env_file
from loadenv.core.file_resolver import resolve
from loadenv.core.runner import load
from loadenv.core.runner import stop
from loadenv.errors import BuildFailed
from loadenv.errors import ConfigError
from loadenv.errors import DownFailed
from loadenv.errors import LoadenvError
from loadenv.errors import MalformedLine
from loadenv.errors import NotFound
from loadenv.errors import UpFailed
from loadenv.version import get_version

__version__ = get_version()
__all__ = (
    'load', 'stop', 'resolve', 'load_env_vars', 'parse_env_file', 'EnvVar',
    'ComposeShellInterface', 'Settings', 'load_settings',
    'LoadenvError', 'NotFound', 'MalformedLine', 'ConfigError',
    'BuildFailed', 'UpFailed', 'DownFailed',
)
