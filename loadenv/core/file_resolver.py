from pathlib import Path

from loadenv.core.config import DEFAULT_DOTENV
from loadenv.errors import NotFound

DOCKERFILE = 'Dockerfile'


def resolve_dotenv(dotenv: str | Path | None = None, root: str | Path = '.') -> Path:
    given = dotenv or DEFAULT_DOTENV
    fname = Path(root) / given
    if not fname.is_file():
        raise NotFound(fname, given)
    return fname


def check_dockerfile(root: str | Path = '.') -> Path:
    dockerfile = Path(root) / DOCKERFILE
    if not dockerfile.is_file():
        raise NotFound(dockerfile, DOCKERFILE)
    return dockerfile


def resolve(dotenv: str | Path | None = None, root: str | Path = '.') -> Path:
    # both prerequisites are checked before anything touches the environment
    fname = resolve_dotenv(dotenv, root)
    check_dockerfile(root)
    return fname
