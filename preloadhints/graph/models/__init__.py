"""Data models used by the graph package."""

from .schema import ArtifactKind, ArtifactSpec, ImportKind

__all__ = ["ArtifactKind", "ArtifactSpec", "ImportKind"]
