"""Document-side collaborators: reference scanning and tag injection."""

from preloadhints.document.inject import inject_tags, render_tag
from preloadhints.document.references import collect_declared_urls

__all__ = ["collect_declared_urls", "inject_tags", "render_tag"]
