"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml``; ``LAYEREDCONF_*`` feed
lib_layered_config's platform-specific configuration paths.
"""

from __future__ import annotations

name = "page_title"
title = "Compose page titles from a caller-set title and a translated application name"
version = "1.0.0"
shell_command = "page-title"

#: Vendor, application and slug used for configuration paths.
LAYEREDCONF_VENDOR: str = "bitranox"
LAYEREDCONF_APP: str = "Page Title"
LAYEREDCONF_SLUG: str = "page-title"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for page_title:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
