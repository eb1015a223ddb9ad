"""Scan a document for resources it already references."""

from __future__ import annotations

import logging
from html.parser import HTMLParser
from typing import List, Optional, Sequence, Tuple

logger = logging.getLogger("preloadhints.document.references")


class _ReferenceCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.urls: List[str] = []

    def handle_starttag(
        self, tag: str, attrs: Sequence[Tuple[str, Optional[str]]]
    ) -> None:  # type: ignore[override]
        wanted = {"link": "href", "script": "src"}.get(tag)
        if wanted is None:
            return
        for name, value in attrs:
            if name == wanted and value is not None:
                self.urls.append(value)
                return

    handle_startendtag = handle_starttag


def collect_declared_urls(html: str) -> List[str]:
    """Return URLs referenced by ``<link href>`` and ``<script src>``.

    Values are returned as written in the markup, in document order;
    ``<link>`` and ``<script>`` elements without the attribute are ignored.
    """
    parser = _ReferenceCollector()
    parser.feed(html or "")
    parser.close()
    logger.debug("Found %d declared reference(s)", len(parser.urls))
    return parser.urls


__all__ = ["collect_declared_urls"]
