"""Resolution of the ``as`` attribute for ``rel="preload"`` hints.

The ``as`` option takes one of three shapes, each mapped to a resolver:

* a string: used verbatim for every hint (``FixedAs``)
* a callable: called with the hint URL (``MappedAs``)
* unset: derived from the URL's file extension (``ExtensionAs``)
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import Any, Callable, Dict, Union
from urllib.parse import urljoin, urlparse

from preloadhints.errors import InvalidConfigurationError

# Relative hrefs are resolved against this origin before reading the path.
_URL_BASE = "https://example.com"

EXTENSION_RESOURCE_TYPES: Dict[str, str] = {
    ".css": "style",
    ".woff2": "font",
}
DEFAULT_RESOURCE_TYPE = "script"


@dataclass(frozen=True)
class FixedAs:
    value: str

    def resolve(self, href: str) -> str:
        return self.value


@dataclass(frozen=True)
class MappedAs:
    func: Callable[[str], str]

    def resolve(self, href: str) -> str:
        return self.func(href)


@dataclass(frozen=True)
class ExtensionAs:
    def resolve(self, href: str) -> str:
        path = urlparse(urljoin(_URL_BASE, href)).path
        extension = posixpath.splitext(path)[1]
        return EXTENSION_RESOURCE_TYPES.get(extension, DEFAULT_RESOURCE_TYPE)


AsResolver = Union[FixedAs, MappedAs, ExtensionAs]


def as_resolver(configured_as: Any) -> AsResolver:
    """Turn the raw ``as`` option into a resolver.

    Args:
        configured_as: A string, a callable taking the href, or None.

    Returns:
        AsResolver: The matching resolver variant.

    Raises:
        InvalidConfigurationError: If the value has any other shape.
    """
    if configured_as is None:
        return ExtensionAs()
    if isinstance(configured_as, str):
        return FixedAs(configured_as)
    if callable(configured_as):
        return MappedAs(configured_as)
    raise InvalidConfigurationError("as", configured_as)


def determine_as(href: str, configured_as: Any = None) -> str:
    """Return the ``as`` attribute value for ``href``.

    Examples:
        >>> determine_as("https://x/y/app.css")
        'style'
        >>> determine_as("/assets/inter.woff2")
        'font'
        >>> determine_as("/assets/app.js", "fetch")
        'fetch'
    """
    return as_resolver(configured_as).resolve(href)


__all__ = [
    "AsResolver",
    "DEFAULT_RESOURCE_TYPE",
    "EXTENSION_RESOURCE_TYPES",
    "ExtensionAs",
    "FixedAs",
    "MappedAs",
    "as_resolver",
    "determine_as",
]
