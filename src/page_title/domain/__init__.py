"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Title composition (PageTitle, compose_title)
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    DEFAULT_POSTFIX_KEY,
    TITLE_DELIMITER,
    PageTitle,
    compose_title,
)
from .enums import OutputFormat
from .errors import ConfigurationError

__all__ = [
    # Behaviors
    "DEFAULT_POSTFIX_KEY",
    "TITLE_DELIMITER",
    "PageTitle",
    "compose_title",
    # Enums
    "OutputFormat",
    # Errors
    "ConfigurationError",
]
