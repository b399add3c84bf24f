"""Catalog-backed text resolver.

Resolves lookup keys against per-locale translation tables loaded from the
``[page_title.translations]`` configuration section.

Contents:
    * :class:`CatalogResolver` - Locale-aware key lookup.
    * :func:`build_text_resolver` - Build a resolver from TitleConfig.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from page_title.domain.errors import ConfigurationError

from .config import Catalog, TitleConfig

logger = logging.getLogger(__name__)


def _empty_catalog() -> Catalog:
    return {}


@dataclass(frozen=True, slots=True)
class CatalogResolver:
    """Resolve keys from the active locale, then the fallback locale.

    A key missing from both catalogs resolves to itself, so the resolver
    never fails for a string key.

    Attributes:
        catalog: Translations of the active locale.
        fallback: Translations of the fallback locale.
        locale: Name of the active locale, used in log records.

    Example:
        >>> resolve = CatalogResolver(catalog={"Super Application": "Super Anwendung"}, locale="de")
        >>> resolve("Super Application")
        'Super Anwendung'
        >>> resolve("Unknown")
        'Unknown'
    """

    catalog: Catalog = field(default_factory=_empty_catalog)
    fallback: Catalog = field(default_factory=_empty_catalog)
    locale: str = "en"

    def __call__(self, key: str) -> str:
        if key in self.catalog:
            return self.catalog[key]
        if key in self.fallback:
            return self.fallback[key]
        logger.debug("No translation found", extra={"key": key, "locale": self.locale})
        return key


def build_text_resolver(config: TitleConfig, *, locale: str | None = None) -> CatalogResolver:
    """Build a CatalogResolver for ``locale`` (or the configured locale).

    Args:
        config: Validated title settings.
        locale: Optional locale override, e.g. the locale negotiated for
            the current request.

    Returns:
        Resolver bound to the active and fallback catalogs.

    Raises:
        ConfigurationError: When ``locale`` is given but blank.

    Example:
        >>> config = TitleConfig(
        ...     fallback_locale="en",
        ...     translations={"en": {"Super Application": "Super App"}, "de": {}},
        ... )
        >>> build_text_resolver(config, locale="de")("Super Application")
        'Super App'
    """
    if locale is not None and not locale.strip():
        raise ConfigurationError("locale override must not be blank")
    active = locale if locale is not None else config.locale
    return CatalogResolver(
        catalog=config.catalog_for(active),
        fallback=config.catalog_for(config.fallback_locale),
        locale=active,
    )


__all__ = [
    "CatalogResolver",
    "build_text_resolver",
]
