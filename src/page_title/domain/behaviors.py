"""Pure domain functions and state for page title composition.

No I/O and no framework dependencies: the text resolver is injected as a
plain callable so the domain never reaches for a translation backend.

Contents:
    * :data:`TITLE_DELIMITER` - Separator placed between title and postfix.
    * :data:`DEFAULT_POSTFIX_KEY` - Lookup key for the application name.
    * :func:`compose_title` - Stateless composition rule.
    * :class:`PageTitle` - Caller-owned title holder.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

TITLE_DELIMITER = " - "
DEFAULT_POSTFIX_KEY = "Super Application"


def compose_title(title: str, postfix: str) -> str:
    """Join a page title and its postfix.

    An empty title yields the postfix unchanged; anything else is joined
    with exactly one :data:`TITLE_DELIMITER`.

    Example:
        >>> compose_title("News", "Google")
        'News - Google'
        >>> compose_title("", "Google")
        'Google'
    """
    if not title:
        return postfix
    return f"{title}{TITLE_DELIMITER}{postfix}"


@dataclass(slots=True)
class PageTitle:
    """Title of the page currently being rendered.

    Create one instance per request (or per view) and hand it to the
    rendering layer. The instance is not synchronised: when several threads
    share it the last ``set_title`` wins.

    Attributes:
        resolve: Text resolver mapping a lookup key to a display string.
        postfix_key: Key passed to ``resolve`` to obtain the postfix.
        title: Current title; ``""`` means unset.

    Example:
        >>> page = PageTitle(resolve=lambda key: key)
        >>> page.get_title()
        'Super Application'
        >>> page.set_title("News")
        >>> page.get_title()
        'News - Super Application'
    """

    resolve: Callable[[str], str]
    postfix_key: str = DEFAULT_POSTFIX_KEY
    title: str = ""

    def set_title(self, title: str) -> None:
        """Replace the current title."""
        self.title = title

    def _get_postfix(self) -> str:
        return self.resolve(self.postfix_key)

    def get_title(self) -> str:
        """Return the title joined to the resolved postfix.

        Resolver exceptions are not caught.
        """
        return compose_title(self.title, self._get_postfix())


__all__ = [
    "DEFAULT_POSTFIX_KEY",
    "TITLE_DELIMITER",
    "PageTitle",
    "compose_title",
]
