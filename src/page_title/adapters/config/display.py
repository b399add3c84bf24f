"""Configuration display backed by lib_layered_config's Rich renderer."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from page_title.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Render the merged configuration, e.g. to check ``[page_title]`` translations.

    Pending log records are flushed first so they do not interleave with
    the rendered configuration.

    Args:
        config: Already-loaded layered configuration object to display.
        output_format: HUMAN for TOML-like display or JSON.
        section: Optional section name (e.g. ``page_title``) to restrict output.
        console: Optional Rich Console, mainly for tests.
        profile: Optional profile name to include in provenance comments.

    Raises:
        ValueError: If the requested section doesn't exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    _lib_display(
        config,
        output_format=LibOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
