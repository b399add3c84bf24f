"""Application layer - port definitions.

Contains port protocols that define the interfaces for adapter
implementations.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    BuildTextResolver,
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadTitleConfigFromDict,
    ResolveText,
)

__all__ = [
    "BuildTextResolver",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadTitleConfigFromDict",
    "ResolveText",
]
