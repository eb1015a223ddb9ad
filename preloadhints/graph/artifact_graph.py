"""Artifact graph for one build pass.

The graph is an insertion-ordered mapping from output file name to
``ArtifactSpec``. Import edges are stored on the artifacts themselves, so
a key referenced by an import list but never emitted (for example a
stylesheet pulled in by ``import('./x.css')``) simply is not a member of
the graph. Iteration order is the order artifacts were added, which
matches the bundler's output order.

A NetworkX view is available for structural analysis and export.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional

import networkx as nx

from preloadhints.errors import ConfigurationError
from preloadhints.graph.models.schema import ArtifactKind, ArtifactSpec, ImportKind

logger = logging.getLogger("preloadhints.graph.artifact_graph")


class ArtifactGraph:
    """Read-mostly mapping of artifact key to artifact.

    Loaders populate the graph with ``add``; resolution only ever reads
    it, so a single instance can be shared by every document of a build.
    """

    def __init__(self, artifacts: Optional[Iterable[ArtifactSpec]] = None) -> None:
        """Initialize the graph.

        Args:
            artifacts: Optional artifacts to add in order.
        """
        self._artifacts: Dict[str, ArtifactSpec] = {}
        for artifact in artifacts or ():
            self.add(artifact)

    def add(self, artifact: ArtifactSpec) -> None:
        """Add an artifact.

        Args:
            artifact: Artifact to add.

        Raises:
            ConfigurationError: If an artifact with the same key exists.
        """
        if artifact.file_name in self._artifacts:
            raise ConfigurationError(
                f"Duplicate artifact in bundle: {artifact.file_name}"
            )
        self._artifacts[artifact.file_name] = artifact
        logger.debug(
            "Added artifact: %s (kind=%s)", artifact.file_name, artifact.kind.value
        )

    def __contains__(self, key: object) -> bool:
        return key in self._artifacts

    def __iter__(self) -> Iterator[str]:
        return iter(self._artifacts)

    def __len__(self) -> int:
        return len(self._artifacts)

    def get(self, key: str) -> Optional[ArtifactSpec]:
        """Return the artifact for ``key`` or None when it was not emitted."""
        return self._artifacts.get(key)

    def keys(self) -> List[str]:
        return list(self._artifacts)

    def artifacts(self) -> List[ArtifactSpec]:
        return list(self._artifacts.values())

    def chunks(self) -> List[ArtifactSpec]:
        return [a for a in self._artifacts.values() if a.is_chunk]

    def to_networkx(self) -> nx.MultiDiGraph:
        """Build a NetworkX view of the graph.

        Nodes carry ``kind`` and ``name``; edges carry ``kind`` set to
        ``static_import`` or ``dynamic_import``. Import targets that are
        not part of the bundle are added as ``provisional`` nodes.

        Returns:
            nx.MultiDiGraph: A fresh graph; mutating it does not affect self.
        """
        graph = nx.MultiDiGraph()
        for artifact in self._artifacts.values():
            graph.add_node(
                artifact.file_name,
                kind=artifact.kind.value,
                name=artifact.name,
                provisional=False,
            )

        for artifact in self._artifacts.values():
            for kind, targets in (
                (ImportKind.STATIC_IMPORT, artifact.static_imports),
                (ImportKind.DYNAMIC_IMPORT, artifact.dynamic_imports),
            ):
                for target in targets:
                    if not graph.has_node(target):
                        graph.add_node(
                            target,
                            kind=ArtifactKind.ASSET.value,
                            name=None,
                            provisional=True,
                        )
                    graph.add_edge(artifact.file_name, target, kind=kind.value)
        return graph

    def to_node_link(self) -> Dict[str, object]:
        """Return the networkx view as node-link data with an ``edges`` key."""
        return nx.node_link_data(self.to_networkx(), edges="edges")

    def import_cycles(self, limit: Optional[int] = None) -> List[List[str]]:
        """Enumerate static-import cycles.

        Cycles are legal in a bundle and resolution terminates on them;
        this is a diagnostic for the CLI.

        Args:
            limit: Maximum number of cycles to return (None or <= 0 for all).

        Returns:
            List[List[str]]: Each cycle as a list of artifact keys.
        """
        static_view = nx.DiGraph()
        for artifact in self._artifacts.values():
            static_view.add_node(artifact.file_name)
            for target in artifact.static_imports:
                if target in self._artifacts:
                    static_view.add_edge(artifact.file_name, target)

        max_cycles = limit if limit and limit > 0 else None
        cycles: List[List[str]] = []
        for cycle in nx.simple_cycles(static_view):
            cycles.append([str(node) for node in cycle])
            if max_cycles and len(cycles) >= max_cycles:
                break
        return cycles


__all__ = ["ArtifactGraph"]
