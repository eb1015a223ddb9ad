"""Chunk graph walker.

Computes which artifacts an entry chunk reaches under an inclusion
policy. The walker is pure: it reads the artifact graph and returns a
list of keys, each at most once. Keys that are referenced but absent from
the graph are placed in the result like any other key but never expanded;
filtering them out is the caller's job.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, Iterator, List, Optional, Set, Union

from preloadhints.graph.artifact_graph import ArtifactGraph

logger = logging.getLogger("preloadhints.graph.walker")


@dataclass(frozen=True)
class ExplicitNames:
    """Select artifacts by logical chunk name, ignoring the entry."""

    names: FrozenSet[str]

    def __init__(self, names: Iterable[str]) -> None:
        object.__setattr__(self, "names", frozenset(names))


@dataclass(frozen=True)
class InitialClosure:
    """Everything the entry loads unconditionally, entry included."""


@dataclass(frozen=True)
class AsyncClosure:
    """Everything reachable through the entry's dynamic imports.

    Artifacts already covered by ``InitialClosure`` are excluded.
    """


@dataclass(frozen=True)
class AllArtifacts:
    """Every artifact in the bundle."""


InclusionPolicy = Union[ExplicitNames, InitialClosure, AsyncClosure, AllArtifacts]

Expander = Callable[[str], List[str]]


def _flatten(roots: Iterable[str], expand: Expander) -> List[str]:
    """Collect ``roots`` and everything ``expand`` reaches from them.

    All fresh children of a key are appended before any of them is
    expanded; children are then expanded depth-first in order. A key that
    is already in the result is neither appended nor expanded again.
    """
    result: List[str] = []
    seen: Set[str] = set()

    def admit(keys: Iterable[str]) -> List[str]:
        fresh = []
        for key in keys:
            if key in seen:
                continue
            seen.add(key)
            result.append(key)
            fresh.append(key)
        return fresh

    stack: List[Iterator[str]] = [iter(admit(roots))]
    while stack:
        key = next(stack[-1], None)
        if key is None:
            stack.pop()
            continue
        stack.append(iter(admit(expand(key))))
    return result


def _static_expander(graph: ArtifactGraph) -> Expander:
    def expand(key: str) -> List[str]:
        artifact = graph.get(key)
        if artifact is None:
            logger.debug("Skipping expansion of absent artifact %s", key)
            return []
        return artifact.static_imports if artifact.is_chunk else []

    return expand


def _async_expander(graph: ArtifactGraph) -> Expander:
    def expand(key: str) -> List[str]:
        # import('./style.css') leaves a key that was never emitted
        artifact = graph.get(key)
        if artifact is None:
            logger.debug("Skipping expansion of absent artifact %s", key)
            return []
        return artifact.all_imports() if artifact.is_chunk else []

    return expand


def initial_closure(graph: ArtifactGraph, entry_key: str) -> List[str]:
    """Return the static-import closure of ``entry_key`` followed by the entry."""
    entry = graph.get(entry_key)
    roots = entry.static_imports if entry is not None else []
    closure = _flatten(roots, _static_expander(graph))
    if entry_key not in closure:
        closure.append(entry_key)
    return closure


def async_closure(graph: ArtifactGraph, entry_key: str) -> List[str]:
    """Return the dynamic-import closure of ``entry_key`` minus its initial closure."""
    entry = graph.get(entry_key)
    if entry is None:
        return []
    initial = set(initial_closure(graph, entry_key))
    reached = _flatten(entry.dynamic_imports, _async_expander(graph))
    return [key for key in reached if key not in initial]


def resolve(
    graph: ArtifactGraph,
    entry_key: str,
    policy: Optional[InclusionPolicy] = None,
) -> List[str]:
    """Resolve the artifact keys to advertise for an entry chunk.

    Args:
        graph: Artifact graph of the current build.
        entry_key: File name of the entry chunk.
        policy: Inclusion policy; defaults to ``AsyncClosure``.

    Returns:
        List[str]: Artifact keys in traversal order, without duplicates.
    """
    if policy is None:
        policy = AsyncClosure()

    if entry_key not in graph and not isinstance(policy, (ExplicitNames, AllArtifacts)):
        logger.debug("Entry %s is not in the graph; nothing to expand", entry_key)

    if isinstance(policy, AsyncClosure):
        keys = async_closure(graph, entry_key)
    elif isinstance(policy, InitialClosure):
        keys = initial_closure(graph, entry_key)
    elif isinstance(policy, AllArtifacts):
        keys = graph.keys()
    elif isinstance(policy, ExplicitNames):
        keys = [
            artifact.file_name
            for artifact in graph.artifacts()
            if artifact.name and artifact.name in policy.names
        ]
    else:
        raise TypeError(f"Unsupported inclusion policy: {policy!r}")

    logger.debug(
        "Resolved %d artifact(s) for %s under %s",
        len(keys),
        entry_key,
        type(policy).__name__,
    )
    return keys


__all__ = [
    "AllArtifacts",
    "AsyncClosure",
    "ExplicitNames",
    "InclusionPolicy",
    "InitialClosure",
    "async_closure",
    "initial_closure",
    "resolve",
]
