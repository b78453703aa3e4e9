"""CLI command implementations for diffgate.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .check import check
from .diff import branch, file, staged
from .init import init

__all__ = [
    "branch",
    "check",
    "file",
    "init",
    "staged",
]
