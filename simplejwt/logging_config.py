"""
Colourful logging for applications and tests using simplejwt.
The library modules only call logging.getLogger(__name__); handlers are set up here.
"""
import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_colorful_logging(level: int = logging.INFO, name: Optional[str] = None) -> logging.Logger:
    """
    Attach a RichHandler to the named logger.

    Args:
        level: log level for the logger and its handler
        name: logger name, None for the root logger

    Returns:
        the configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # one handler per logger
    if logger.handlers:
        return logger

    console = Console()
    handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=False,
        enable_link_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_width=console.width,
        tracebacks_show_locals=False,
    )
    handler.setLevel(level)

    # RichHandler renders time and level itself
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="%Y-%m-%d %H:%M:%S"))

    logger.addHandler(handler)
    return logger


def get_colorful_logger(name: Optional[str] = None) -> logging.Logger:
    return setup_colorful_logging(name=name)
