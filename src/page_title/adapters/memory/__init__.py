"""In-memory adapter implementations for testing.

Lightweight implementations of all application ports that operate entirely
in memory -- no filesystem, no translation files, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.translation` - In-memory text resolution (ResolverSpy)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
    load_title_config_from_dict_in_memory,
)
from .logging import init_logging_in_memory
from .translation import ResolverSpy, build_text_resolver_in_memory, reuse_resolver_spy

# Static conformance assertions
if TYPE_CHECKING:
    from page_title.application.ports import (
        BuildTextResolver,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadTitleConfigFromDict,
        ResolveText,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_load_title_config: LoadTitleConfigFromDict = load_title_config_from_dict_in_memory
    _assert_build_text_resolver: BuildTextResolver = build_text_resolver_in_memory
    _assert_resolve_text: ResolveText = ResolverSpy()
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "ResolverSpy",
    "build_text_resolver_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
    "load_title_config_from_dict_in_memory",
    "reuse_resolver_spy",
]
