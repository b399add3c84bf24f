"""In-memory text resolution adapters for testing.

Contents:
    * :class:`ResolverSpy` - Records lookups and returns canned translations.
    * :func:`build_text_resolver_in_memory` - Spy-backed resolver factory.
    * :func:`reuse_resolver_spy` - Factory that always returns one spy.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from ...domain.errors import ConfigurationError
from ..translation.config import Catalog, TitleConfig


def _empty_key_list() -> list[str]:
    """Create an empty typed list for recorded keys."""
    return []


def _empty_catalog() -> Catalog:
    return {}


@dataclass
class ResolverSpy:
    """Deterministic stand-in for a text resolver.

    Each test should create its own spy to avoid cross-test pollution.

    Attributes:
        translations: Canned key -> display string mapping. Missing keys
            resolve to themselves.
        resolved_keys: Every key passed to the spy, in call order.
        raise_exception: When set, lookups record the key and raise this.

    Example:
        >>> spy = ResolverSpy(translations={"Super Application": "Google"})
        >>> spy("Super Application")
        'Google'
        >>> spy.resolved_keys
        ['Super Application']
    """

    translations: Catalog = field(default_factory=_empty_catalog)
    resolved_keys: list[str] = field(default_factory=_empty_key_list)
    raise_exception: Exception | None = None

    def __call__(self, key: str) -> str:
        self.resolved_keys.append(key)
        if self.raise_exception is not None:
            raise self.raise_exception
        return self.translations.get(key, key)

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.resolved_keys.clear()
        self.raise_exception = None


def build_text_resolver_in_memory(config: TitleConfig, *, locale: str | None = None) -> ResolverSpy:
    """Return a spy seeded like the catalog resolver.

    The active catalog is layered over the fallback catalog, so lookups
    agree with :func:`page_title.adapters.translation.build_text_resolver`.

    Raises:
        ConfigurationError: When ``locale`` is given but blank.

    Example:
        >>> config = TitleConfig(locale="de", translations={"en": {"Super Application": "Super App"}})
        >>> build_text_resolver_in_memory(config)("Super Application")
        'Super App'
    """
    if locale is not None and not locale.strip():
        raise ConfigurationError("locale override must not be blank")
    active = locale if locale is not None else config.locale
    translations = {**config.catalog_for(config.fallback_locale), **config.catalog_for(active)}
    return ResolverSpy(translations=translations)


def reuse_resolver_spy(spy: ResolverSpy) -> Callable[..., ResolverSpy]:
    """Return a resolver factory that always hands out ``spy``.

    Example:
        >>> spy = ResolverSpy()
        >>> reuse_resolver_spy(spy)(TitleConfig(), locale="de") is spy
        True
    """

    def _build(config: TitleConfig, *, locale: str | None = None) -> ResolverSpy:
        return spy

    return _build


__all__ = [
    "ResolverSpy",
    "build_text_resolver_in_memory",
    "reuse_resolver_spy",
]
