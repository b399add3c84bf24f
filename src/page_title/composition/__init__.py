"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from lib_layered_config import Config

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path

# Logging services
from ..adapters.logging.setup import init_logging

# Translation services
from ..adapters.translation import build_text_resolver, load_title_config_from_dict
from ..domain.behaviors import PageTitle

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.translation import ResolverSpy
    from ..application.ports import (
        BuildTextResolver,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadTitleConfigFromDict,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_load_title_config_from_dict: LoadTitleConfigFromDict = load_title_config_from_dict
    _assert_build_text_resolver: BuildTextResolver = build_text_resolver
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    load_title_config_from_dict: LoadTitleConfigFromDict
    build_text_resolver: BuildTextResolver
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        load_title_config_from_dict=load_title_config_from_dict,
        build_text_resolver=build_text_resolver,
        init_logging=init_logging,
    )


def build_testing(*, spy: ResolverSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional ResolverSpy returned by every resolver the container
            builds. When None, each build yields a fresh spy seeded from
            the active locale's catalog.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        build_text_resolver_in_memory,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
        load_title_config_from_dict_in_memory,
        reuse_resolver_spy,
    )

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        load_title_config_from_dict=load_title_config_from_dict_in_memory,
        build_text_resolver=build_text_resolver_in_memory if spy is None else reuse_resolver_spy(spy),
        init_logging=init_logging_in_memory,
    )


def build_page_title(
    config: Config | None = None,
    *,
    locale: str | None = None,
    services: AppServices | None = None,
) -> PageTitle:
    """Create a fresh PageTitle wired to the configured text resolver.

    Call this once per request (or view) and keep the instance with the
    request; never share one across concurrent requests.

    Args:
        config: Loaded configuration. Defaults to ``services.get_config()``.
        locale: Optional locale override, e.g. negotiated from the request.
        services: Service container. Defaults to :func:`build_production`.

    Returns:
        PageTitle with an empty title.

    Raises:
        pydantic.ValidationError: When the ``[page_title]`` section is invalid.

    Example:
        >>> page = build_page_title(Config({}, {}))
        >>> page.get_title()
        'Super Application'
        >>> page.set_title("News")
        >>> page.get_title()
        'News - Super Application'
    """
    active_services = services if services is not None else build_production()
    loaded = config if config is not None else active_services.get_config()
    title_config = active_services.load_title_config_from_dict(loaded.as_dict())
    resolver = active_services.build_text_resolver(title_config, locale=locale)
    return PageTitle(resolve=resolver, postfix_key=title_config.postfix_key)


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "display_config",
    # Translation
    "load_title_config_from_dict",
    "build_text_resolver",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_page_title",
    "build_production",
    "build_testing",
]
