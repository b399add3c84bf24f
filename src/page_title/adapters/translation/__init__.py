"""Translation adapter - catalog-backed text resolution.

Structure:
    * :mod:`.config` - TitleConfig model and loader
    * :mod:`.catalog` - CatalogResolver and its builder

Contents:
    * :class:`.config.TitleConfig` - Page title configuration container
    * :func:`.config.load_title_config_from_dict` - Config dict loader
    * :class:`.catalog.CatalogResolver` - Locale-aware resolver
    * :func:`.catalog.build_text_resolver` - Resolver factory
"""

from __future__ import annotations

from .catalog import CatalogResolver, build_text_resolver
from .config import TitleConfig, load_title_config_from_dict

__all__ = [
    "CatalogResolver",
    "TitleConfig",
    "build_text_resolver",
    "load_title_config_from_dict",
]
