"""Build hook that adds resource hints to a bundle's HTML documents.

``PreloadPlugin`` follows the bundler's plugin lifecycle: the resolved
build configuration arrives once through ``config_resolved`` and each
entry document is then passed to ``transform_index_html`` after the
bundle has been written. The hook runs last (``enforce = "post"``) so the
document already contains every tag other plugins injected.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from preloadhints.document.inject import inject_tags
from preloadhints.document.references import collect_declared_urls
from preloadhints.graph.artifact_graph import ArtifactGraph
from preloadhints.hints.builder import HintBuilder, HtmlTag
from preloadhints.hints.config import HintConfig
from preloadhints.runtime.config_loader import load_hint_config

logger = logging.getLogger("preloadhints.runtime.plugin")

PluginOptions = Union[HintConfig, Dict[str, Any], None]


class PreloadPlugin:
    """Inject preload hints for bundle artifacts into entry documents.

    Args:
        options: Hint options as a ``HintConfig`` or a plain mapping.
    """

    name = "preload-hints"
    apply = "build"
    enforce = "post"

    def __init__(self, options: PluginOptions = None) -> None:
        if isinstance(options, HintConfig):
            self.config = options
        else:
            self.config = load_hint_config(options)
        self.base: Optional[str] = None

    def config_resolved(self, base: str) -> None:
        """Capture the public base path of the resolved build configuration."""
        self.base = base
        logger.debug("Using base path %s", base)

    def transform_index_html(
        self,
        html: str,
        bundle: Optional[ArtifactGraph],
        entry_key: str,
    ) -> Optional[List[HtmlTag]]:
        """Compute the tags to add to one document.

        Args:
            html: Current document markup.
            bundle: Artifact graph of the build, or None outside a build.
            entry_key: File name of the document's entry chunk.

        Returns:
            Optional[List[HtmlTag]]: None when there is no bundle,
            otherwise the tags to inject into ``<head>``.
        """
        if not bundle:
            return None

        builder = HintBuilder(self.config, self.base if self.base is not None else "/")
        hints = builder.build(bundle, entry_key, collect_declared_urls(html))
        return [HtmlTag.from_hint(hint) for hint in hints]

    def apply_to_document(
        self,
        html: str,
        bundle: Optional[ArtifactGraph],
        entry_key: str,
    ) -> str:
        """Return ``html`` with the computed hints injected."""
        tags = self.transform_index_html(html, bundle, entry_key)
        if not tags:
            return html
        return inject_tags(html, tags)


__all__ = ["PreloadPlugin"]
