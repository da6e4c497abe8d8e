"""Logging setup for the boilersync CLI."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from .console import err_console


def setup_logging(verbose: bool = False) -> None:
    """Route the ``boilersync`` logger hierarchy through rich on stderr."""
    logger = logging.getLogger("boilersync")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    # Repeated CLI invocations in one process (tests, `all`-style loops) must not stack handlers
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(console=err_console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
