"""Public package surface for page title composition.

Routes imports through the architectural layers:
- Domain exports: PageTitle and the composition rule
- Composition exports: configuration and ready-wired PageTitle instances
- Metadata: Package information

Example:
    >>> from page_title import PageTitle
    >>> page = PageTitle(resolve={"Super Application": "Google"}.get)
    >>> page.set_title("News")
    >>> page.get_title()
    'News - Google'
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import build_page_title, get_config

# Domain exports
from .domain.behaviors import (
    DEFAULT_POSTFIX_KEY,
    TITLE_DELIMITER,
    PageTitle,
    compose_title,
)

__all__ = [
    "DEFAULT_POSTFIX_KEY",
    "TITLE_DELIMITER",
    "PageTitle",
    "build_page_title",
    "compose_title",
    "get_config",
    "print_info",
]
