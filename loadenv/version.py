from pathlib import Path


def get_version(filename: str | Path = Path(__file__).parent / 'version') -> str:
    return open(filename, 'r').read().strip()
