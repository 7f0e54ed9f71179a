from __future__ import annotations

from rich.console import Console
from rich.logging import RichHandler
import logging

_console = Console()

def get_logger(name: str = "xml_sitemap") -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = RichHandler(console=_console, show_time=True, show_level=True, show_path=False)
        formatter = logging.Formatter("%(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger

def set_verbose(verbose: bool = True) -> None:
    """Raise (or restore) the level of every logger under the package."""
    level = logging.DEBUG if verbose else logging.INFO
    root = logging.getLogger("xml_sitemap")
    root.setLevel(level)
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith("xml_sitemap.") and isinstance(logger, logging.Logger):
            logger.setLevel(level)

def console() -> Console:
    return _console
