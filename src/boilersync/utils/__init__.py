"""Utility modules for boilersync."""

from .console import console, err_console
from .filesystem import atomic_write_bytes, ensure_dir, resolve_under_root
from .logging import setup_logging

__all__ = [
    "console",
    "err_console",
    "atomic_write_bytes",
    "ensure_dir",
    "resolve_under_root",
    "setup_logging",
]
