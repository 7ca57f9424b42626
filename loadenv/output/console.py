from rich.console import Console

CONSOLE = Console(highlight=False)
ERR_CONSOLE = Console(stderr=True, highlight=False, soft_wrap=True)
