"""Render tag descriptors and insert them into a document."""

from __future__ import annotations

import logging
import re
from html import escape
from typing import Iterable, List

from preloadhints.hints.builder import HtmlTag

logger = logging.getLogger("preloadhints.document.inject")

_HEAD_CLOSE_RE = re.compile(r"</head>", re.IGNORECASE)


def render_tag(tag: HtmlTag) -> str:
    """Render a void tag such as ``<link rel="modulepreload" href="...">``."""
    attrs = "".join(
        f' {name}="{escape(str(value), quote=True)}"' for name, value in tag.attrs.items()
    )
    return f"<{tag.tag}{attrs}>"


def inject_tags(html: str, tags: Iterable[HtmlTag]) -> str:
    """Insert ``head`` tags right before ``</head>``.

    When the document has no ``</head>`` the tags are prepended. Tags
    targeting anything other than ``head`` are rejected.

    Args:
        html: Document markup.
        tags: Tag descriptors to insert, in order.

    Returns:
        str: The rewritten document; unchanged when there are no tags.
    """
    rendered: List[str] = []
    for tag in tags:
        if tag.inject_to != "head":
            raise ValueError(f"Unsupported injection point: {tag.inject_to}")
        rendered.append(render_tag(tag))
    if not rendered:
        return html

    match = _HEAD_CLOSE_RE.search(html)
    if match is None:
        logger.debug("No </head> found; prepending %d tag(s)", len(rendered))
        return "\n".join(rendered) + "\n" + html

    line_start = html.rfind("\n", 0, match.start()) + 1
    indent = html[line_start : match.start()]
    if indent.strip(" \t"):
        # </head> shares its line with other markup
        at, indent, lead = match.start(), "", "\n"
    else:
        at, lead = line_start, ""
    block = lead + "".join(f"{indent}  {line}\n" for line in rendered)
    logger.debug("Injecting %d tag(s) before </head>", len(rendered))
    return html[:at] + block + html[at:]


__all__ = ["inject_tags", "render_tag"]
