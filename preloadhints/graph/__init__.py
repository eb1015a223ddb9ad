"""Public graph API surface."""

from preloadhints.graph.artifact_graph import ArtifactGraph
from preloadhints.graph.io import load_bundle, load_vite_manifest, manifest_entries
from preloadhints.graph.models import ArtifactKind, ArtifactSpec, ImportKind
from preloadhints.graph.walker import (
    AllArtifacts,
    AsyncClosure,
    ExplicitNames,
    InclusionPolicy,
    InitialClosure,
    resolve,
)

__all__ = [
    "AllArtifacts",
    "ArtifactGraph",
    "ArtifactKind",
    "ArtifactSpec",
    "AsyncClosure",
    "ExplicitNames",
    "ImportKind",
    "InclusionPolicy",
    "InitialClosure",
    "load_bundle",
    "load_vite_manifest",
    "manifest_entries",
    "resolve",
]
