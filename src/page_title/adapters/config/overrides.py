"""Parse and apply ``--set SECTION.KEY=VALUE`` overrides to Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` override."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a ConfigOverride.

    The first ``=`` ends the dotted path; the first dot ends the section.

    Raises:
        ValueError: If ``=`` or the dot is missing, or a path component is empty.

    Examples:
        >>> override = parse_override("page_title.locale=de")
        >>> override.section, override.key_path, override.value
        ('page_title', ('locale',), 'de')

        >>> parse_override("page_title.translations.de.Home=Startseite").key_path
        ('translations', 'de', 'Home')
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    path_part, value_str = raw.split("=", maxsplit=1)

    if "." not in path_part:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *key_parts = path_part.split(".")

    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(key_parts):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=tuple(key_parts), value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Parse ``raw`` as JSON, keeping the plain string when that fails.

    Examples:
        >>> coerce_value("true")
        True
        >>> coerce_value("42")
        42
        >>> coerce_value('{"Home": "Startseite"}')
        {'Home': 'Startseite'}
        >>> coerce_value("Super Application")
        'Super Application'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Write ``override`` into the nested ``target`` dict, creating tables as needed.

    Raises:
        TypeError: If an intermediate key already holds a non-dict value.

    Examples:
        >>> d: dict[str, dict[str, object]] = {}
        >>> _nest_override(d, ConfigOverride(section="page_title", key_path=("translations", "de", "Home"), value="Start"))
        >>> d["page_title"]["translations"]["de"]["Home"]
        'Start'
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        existing = node.setdefault(part, {})
        if not isinstance(existing, dict):
            msg = f"Expected dict at key {part!r}, got {type(existing).__name__}"
            raise TypeError(msg)
        node = cast("dict[str, object]", existing)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Deep-merge ``--set`` overrides into a new Config.

    Returns ``config`` itself when there is nothing to apply.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> cfg = Config({"page_title": {"locale": "en"}}, {})
        >>> apply_overrides(cfg, ("page_title.locale=de",))["page_title"]["locale"]
        'de'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    overrides: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(overrides, parse_override(raw))

    return config.with_overrides(overrides)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "parse_override",
    "coerce_value",
    "apply_overrides",
]
