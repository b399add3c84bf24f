"""Title configuration model and loader.

Provides the TitleConfig Pydantic model for validated, immutable settings
of the ``[page_title]`` section and the loader function that builds it
from configuration dictionaries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

from page_title.domain.behaviors import DEFAULT_POSTFIX_KEY

Catalog = dict[str, str]
"""Translations for one locale: lookup key -> display string."""


class TitleConfig(BaseModel):
    """Validated, immutable page title configuration.

    Example:
        >>> config = TitleConfig(translations={"de": {"Super Application": "Super Anwendung"}})
        >>> config.postfix_key
        'Super Application'
        >>> config.locale
        'en'
        >>> config.translations["de"]["Super Application"]
        'Super Anwendung'
    """

    model_config = ConfigDict(frozen=True)

    postfix_key: str = DEFAULT_POSTFIX_KEY
    locale: str = "en"
    fallback_locale: str = "en"
    translations: dict[str, Catalog] = Field(default_factory=dict)

    @field_validator("postfix_key", "locale", "fallback_locale")
    @classmethod
    def _reject_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only strings.

        Examples:
            >>> TitleConfig._reject_blank("en")
            'en'
            >>> TitleConfig._reject_blank("  ")  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            ValueError: must not be blank
        """
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    def catalog_for(self, locale: str) -> Catalog:
        """Return the catalog of ``locale``, or an empty one.

        Example:
            >>> TitleConfig().catalog_for("fr")
            {}
        """
        return self.translations.get(locale, {})


def load_title_config_from_dict(config_dict: Mapping[str, Any]) -> TitleConfig:
    """Load TitleConfig from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed
    TitleConfig Pydantic model. Single-parse validation at the boundary
    with no intermediate conversions.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Expected to have a 'page_title' section.

    Returns:
        Validated TitleConfig.

    Raises:
        pydantic.ValidationError: When the section holds invalid values.

    Example:
        >>> config = load_title_config_from_dict({"page_title": {"locale": "de"}})
        >>> config.locale
        'de'
        >>> load_title_config_from_dict({}).postfix_key
        'Super Application'
    """
    section: Any = config_dict.get("page_title", {})

    # Non-mapping sections (e.g. "page_title": "oops") fail validation here
    if not isinstance(section, Mapping):
        return TitleConfig.model_validate(section)

    raw: dict[str, Any] = dict(cast(Mapping[str, Any], section))
    return TitleConfig.model_validate(raw if raw else {})


__all__ = [
    "Catalog",
    "TitleConfig",
    "load_title_config_from_dict",
]
