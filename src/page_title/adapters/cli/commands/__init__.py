"""CLI command implementations.

Contents:
    * Info command from :mod:`.info`
    * Title command from :mod:`.title`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .title import cli_title

__all__ = [
    "cli_config",
    "cli_info",
    "cli_title",
]
