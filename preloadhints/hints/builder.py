"""Hint descriptor builder.

Turns the walker's candidate keys into resource hint descriptors for one
document:

    walk -> drop absent keys -> build URLs -> drop already-declared URLs
         -> apply file blacklist -> describe

The builder keeps no state between documents; the base path is passed in
explicitly so concurrent documents of one build can share an instance.
"""

import logging
from dataclasses import dataclass, field
from typing import Collection, Dict, List, Optional

from preloadhints.errors import EntryNotFoundError
from preloadhints.graph.artifact_graph import ArtifactGraph
from preloadhints.graph.walker import resolve
from preloadhints.hints.config import HintConfig
from preloadhints.hints.resource_type import as_resolver

logger = logging.getLogger("preloadhints.hints.builder")

PRELOAD = "preload"
FONT = "font"
ANONYMOUS = "anonymous"


@dataclass(frozen=True)
class HintDescriptor:
    """One resource hint to be rendered as a ``<link>`` tag."""

    relation: str
    href: str
    resource_type: Optional[str] = None
    media: Optional[str] = None
    cross_origin: Optional[str] = None

    def to_attrs(self) -> Dict[str, str]:
        """Return the tag attributes, omitting unset ones."""
        attrs = {"rel": self.relation, "href": self.href}
        # an empty media query is left off like an unset one
        if self.media:
            attrs["media"] = self.media
        if self.resource_type is not None:
            attrs["as"] = self.resource_type
        if self.cross_origin is not None:
            attrs["crossorigin"] = self.cross_origin
        return attrs


@dataclass(frozen=True)
class HtmlTag:
    """Tag descriptor handed to the document injector."""

    attrs: Dict[str, str] = field(default_factory=dict)
    tag: str = "link"
    inject_to: str = "head"

    @classmethod
    def from_hint(cls, hint: HintDescriptor) -> "HtmlTag":
        return cls(attrs=hint.to_attrs())


def public_url(base: str, key: str) -> str:
    """Join the base path and an artifact key.

    Exactly one trailing slash is stripped from ``base``.
    """
    if base.endswith("/"):
        base = base[:-1]
    return f"{base}/{key}"


class HintBuilder:
    """Build hint descriptors for the documents of one build.

    Args:
        config: Hint options.
        base: Public base path of the build output.
    """

    def __init__(self, config: Optional[HintConfig] = None, base: str = "/") -> None:
        self.config = config or HintConfig()
        self.base = base

    def candidates(self, graph: ArtifactGraph, entry_key: str) -> List[str]:
        """Return emitted artifact keys selected by the inclusion policy."""
        keys = []
        for key in resolve(graph, entry_key, self.config.policy):
            if key not in graph:
                logger.debug("Dropping %s: not emitted in this bundle", key)
                continue
            keys.append(key)
        return keys

    def build(
        self,
        graph: Optional[ArtifactGraph],
        entry_key: str,
        declared_urls: Collection[str] = (),
    ) -> List[HintDescriptor]:
        """Build the hints for one document.

        Args:
            graph: Artifact graph of the build, or None when the document
                is not part of a tracked build.
            entry_key: File name of the document's entry chunk.
            declared_urls: URLs the document already references.

        Returns:
            List[HintDescriptor]: Hints in walker order.

        Raises:
            EntryNotFoundError: If the graph is non-empty but lacks the entry.
            InvalidConfigurationError: If the ``as`` option is malformed.
        """
        if not graph:
            logger.debug("No bundle available for %s; skipping", entry_key)
            return []
        if entry_key not in graph:
            raise EntryNotFoundError(entry_key)

        config = self.config
        resolver = as_resolver(config.as_) if config.rel == PRELOAD else None
        seen = set(declared_urls)

        hints: List[HintDescriptor] = []
        for key in self.candidates(graph, entry_key):
            href = public_url(self.base, key)
            if href in seen:
                logger.debug("Dropping %s: already declared in document", href)
                continue
            if not config.keeps(key):
                logger.debug("Dropping %s: matched file blacklist", key)
                continue

            resource_type = resolver.resolve(href) if resolver is not None else None
            hints.append(
                HintDescriptor(
                    relation=config.rel,
                    href=href,
                    resource_type=resource_type,
                    media=config.media,
                    cross_origin=ANONYMOUS if resource_type == FONT else None,
                )
            )

        logger.info("Built %d hint(s) for entry %s", len(hints), entry_key)
        return hints


def build_hints(
    graph: Optional[ArtifactGraph],
    entry_key: str,
    config: Optional[HintConfig] = None,
    declared_urls: Collection[str] = (),
    base: str = "/",
) -> List[HintDescriptor]:
    """Convenience wrapper around ``HintBuilder(config, base).build``."""
    return HintBuilder(config, base).build(graph, entry_key, declared_urls)


__all__ = [
    "HintBuilder",
    "HintDescriptor",
    "HtmlTag",
    "build_hints",
    "public_url",
]
