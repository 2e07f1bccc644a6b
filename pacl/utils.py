import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console()


def setup_logging(verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger("pacl")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    logger.handlers.clear()

    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        show_level=True,
        markup=True,
        rich_tracebacks=True,
        omit_repeated_times=False,
    )

    logger.addHandler(handler)
    return logger


def echo_command(command: str) -> None:
    console.print(f"$ {command}", style="bold", markup=False, highlight=False, soft_wrap=True)
