"""Shared helpers for CLI commands that read a bundle description."""

import logging

from preloadhints.graph.artifact_graph import ArtifactGraph
from preloadhints.graph.io import load_bundle, load_vite_manifest, manifest_entries

logger = logging.getLogger("preloadhints.cli.bundle")


def load_graph(args) -> ArtifactGraph:
    """Load the artifact graph named by ``--bundle`` / ``--manifest``."""
    if getattr(args, "manifest", False):
        return load_vite_manifest(args.bundle)
    return load_bundle(args.bundle)


def entry_key(args) -> str:
    """Return ``--entry``, or the single manifest entry when it is omitted."""
    entry = getattr(args, "entry", None)
    if entry:
        return entry
    if getattr(args, "manifest", False):
        entries = manifest_entries(args.bundle)
        if len(entries) == 1:
            logger.info("Using manifest entry: %s", entries[0])
            return entries[0]
        raise ValueError(
            f"--entry is required: manifest declares {len(entries)} entries"
        )
    raise ValueError("--entry is required for bundle dumps")


def include_option(args):
    """Return the ``include`` value from ``--names`` or ``--include``."""
    names = getattr(args, "names", None)
    if names:
        return [name.strip() for name in names.split(",") if name.strip()]
    return getattr(args, "include", None)
