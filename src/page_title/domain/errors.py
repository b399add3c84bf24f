"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """A setting supplied at runtime that cannot be used.

    Raised by resolver builders for a blank locale override. Invalid
    ``[page_title]`` file settings surface as pydantic ``ValidationError``
    instead. The CLI maps both to exit code 78.

    Example:
        >>> from page_title.domain.errors import ConfigurationError
        >>> err = ConfigurationError("locale override must not be blank")
        >>> str(err)
        'locale override must not be blank'
    """


__all__ = [
    "ConfigurationError",
]
