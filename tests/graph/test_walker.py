"""Tests for the chunk graph walker."""

from __future__ import annotations

from preloadhints.graph.artifact_graph import ArtifactGraph
from preloadhints.graph.models.schema import ArtifactKind, ArtifactSpec
from preloadhints.graph.walker import (
    AllArtifacts,
    AsyncClosure,
    ExplicitNames,
    InitialClosure,
    async_closure,
    initial_closure,
    resolve,
)


def _chunk(file_name: str, imports=(), dynamic=(), name=None) -> ArtifactSpec:
    return ArtifactSpec(
        file_name=file_name,
        kind=ArtifactKind.CHUNK,
        name=name,
        static_imports=list(imports),
        dynamic_imports=list(dynamic),
    )


def _asset(file_name: str, name=None) -> ArtifactSpec:
    return ArtifactSpec(file_name=file_name, kind=ArtifactKind.ASSET, name=name)


def _simple_graph() -> ArtifactGraph:
    """E -> A -> B statically, E dynamically imports C, C -> D statically."""
    return ArtifactGraph(
        [
            _chunk("E", imports=["A"], dynamic=["C"]),
            _chunk("A", imports=["B"]),
            _chunk("B"),
            _chunk("C", imports=["D"]),
            _chunk("D"),
        ]
    )


def _shared_graph() -> ArtifactGraph:
    """Dynamic chunk sharing static deps with the entry plus a css-only import."""
    return ArtifactGraph(
        [
            _chunk("E", imports=["A"], dynamic=["C", "style.css"]),
            _chunk("A", imports=["B"]),
            _chunk("B"),
            _chunk("C", imports=["A", "D"], dynamic=["F"]),
            _chunk("D", imports=["G"]),
            _chunk("F"),
            _chunk("G"),
        ]
    )


def test_initial_closure_walks_static_imports_then_appends_entry() -> None:
    """Static imports come first in walk order and the entry closes the list."""
    assert initial_closure(_simple_graph(), "E") == ["A", "B", "E"]


def test_async_closure_excludes_initial_closure() -> None:
    """Dynamic imports and their dependencies, minus what the entry already loads."""
    assert async_closure(_simple_graph(), "E") == ["C", "D"]


def test_async_closure_is_default_policy() -> None:
    """resolve() without a policy behaves like AsyncClosure."""
    graph = _simple_graph()
    assert resolve(graph, "E") == resolve(graph, "E", AsyncClosure())


def test_async_closure_follows_static_and_dynamic_edges_of_lazy_chunks() -> None:
    """Children of a key are listed before any of them is expanded."""
    graph = _shared_graph()

    # Walk order is C, style.css, A, D, F, B, G before subtracting A, B, E.
    assert resolve(graph, "E", AsyncClosure()) == ["C", "style.css", "D", "F", "G"]


def test_absent_keys_are_reported_but_not_expanded() -> None:
    """A dynamic import of a never-emitted file does not break the walk."""
    graph = ArtifactGraph([_chunk("E", dynamic=["missing.css", "C"]), _chunk("C")])

    assert resolve(graph, "E", AsyncClosure()) == ["missing.css", "C"]


def test_async_and_initial_closures_are_disjoint() -> None:
    """No artifact appears in both closures of the same entry."""
    for graph in (_simple_graph(), _shared_graph()):
        initial = set(resolve(graph, "E", InitialClosure()))
        lazy = set(resolve(graph, "E", AsyncClosure()))
        assert initial.isdisjoint(lazy)
        assert "E" in initial


def test_assets_terminate_static_walk() -> None:
    """Assets are included but never expanded."""
    graph = ArtifactGraph(
        [_chunk("E", imports=["font.woff2", "A"]), _asset("font.woff2"), _chunk("A")]
    )

    assert resolve(graph, "E", InitialClosure()) == ["font.woff2", "A", "E"]


def test_cycles_and_diamonds_produce_each_key_once() -> None:
    """Shared chunks and import cycles terminate without duplicates."""
    graph = ArtifactGraph(
        [
            _chunk("E", imports=["A", "B"], dynamic=["L"]),
            _chunk("A", imports=["S"]),
            _chunk("B", imports=["S"]),
            _chunk("S", imports=["A", "E"]),
            _chunk("L", imports=["M"], dynamic=["L"]),
            _chunk("M", dynamic=["L", "S"]),
        ]
    )

    for policy in (InitialClosure(), AsyncClosure(), AllArtifacts(), ExplicitNames([])):
        keys = resolve(graph, "E", policy)
        assert len(keys) == len(set(keys))

    assert resolve(graph, "E", InitialClosure()) == ["A", "B", "S", "E"]
    assert resolve(graph, "E", AsyncClosure()) == ["L", "M"]


def test_all_artifacts_returns_graph_order() -> None:
    """AllArtifacts ignores reachability and keeps insertion order."""
    graph = ArtifactGraph([_chunk("z.js"), _asset("a.css"), _chunk("m.js")])

    assert resolve(graph, "z.js", AllArtifacts()) == ["z.js", "a.css", "m.js"]


def test_explicit_names_selects_by_logical_name_only() -> None:
    """Only artifacts whose logical name is listed are returned."""
    graph = ArtifactGraph(
        [
            _chunk("assets/main.js", name="main"),
            _chunk("assets/vendor.js", name="vendor"),
            _chunk("assets/anon.js"),
            _asset("assets/vendor.css", name="vendor"),
        ]
    )

    assert resolve(graph, "assets/main.js", ExplicitNames(["vendor"])) == [
        "assets/vendor.js",
        "assets/vendor.css",
    ]
    assert resolve(graph, "not-an-entry", ExplicitNames({"main"})) == ["assets/main.js"]


def test_missing_entry_is_not_fatal() -> None:
    """An unknown entry has nothing to expand."""
    graph = _simple_graph()

    assert resolve(graph, "nope", InitialClosure()) == ["nope"]
    assert resolve(graph, "nope", AsyncClosure()) == []


def test_explicit_names_policies_compare_by_value() -> None:
    """Policies are plain values."""
    assert ExplicitNames(["a", "b"]) == ExplicitNames({"b", "a"})
    assert AsyncClosure() == AsyncClosure()
