import logging

from rich.console import Console
from rich.logging import RichHandler

# Shared console so every handler writes through the same output
console = Console()


def setup_logging(level: str = "INFO"):
    """
    Configure root logging with RichHandler for timestamps and readable tracebacks.
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                show_time=True,
                show_path=False
            )
        ],
        force=True
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
