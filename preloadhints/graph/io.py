"""Loaders that build an ``ArtifactGraph`` from bundler output descriptions.

Two formats are accepted:

* A bundle dump: the bundler's output bundle serialized as JSON, keyed by
  output file name::

      {"assets/index-4f2a.js": {"type": "chunk", "name": "index",
                                "imports": [...], "dynamicImports": [...]},
       "assets/index-9c1e.css": {"type": "asset"}}

* A Vite ``manifest.json``, keyed by source path. Import lists refer to
  other manifest keys and are translated to output file names here.

Each loader accepts a dict, a path to a JSON file, or an inline JSON
string.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from preloadhints.errors import BundleFormatError, ConfigurationError
from preloadhints.graph.artifact_graph import ArtifactGraph
from preloadhints.graph.models.schema import ArtifactKind, ArtifactSpec

logger = logging.getLogger("preloadhints.graph.io")

BundleSource = Union[str, Path, Dict[str, Any]]


def _read_mapping(source: BundleSource) -> Dict[str, Any]:
    """Return the top-level JSON object of ``source``."""
    if isinstance(source, dict):
        return source

    if isinstance(source, (str, Path)):
        path = Path(source)
        text = str(source)
        is_inline = isinstance(source, str) and text.lstrip().startswith("{")
        if not is_inline:
            try:
                text = path.read_text(encoding="utf-8")
            except OSError as exc:
                raise BundleFormatError(f"Cannot read bundle file {path}: {exc}") from exc
            logger.info("Loading bundle description from file: %s", path)

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise BundleFormatError(f"Invalid bundle JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise BundleFormatError("Top-level bundle description must be an object")
        return data

    raise TypeError(f"Unsupported bundle source type: {type(source)!r}")


def _string_list(entry: Dict[str, Any], field: str, owner: str) -> List[str]:
    value = entry.get(field) or []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise BundleFormatError(f"'{field}' of {owner} must be a list of strings")
    return value


def _add(graph: ArtifactGraph, **fields: Any) -> None:
    try:
        graph.add(ArtifactSpec(**fields))
    except ValidationError as exc:
        raise BundleFormatError(
            f"Invalid artifact {fields.get('file_name')!r}: {exc}"
        ) from exc
    except ConfigurationError as exc:
        raise BundleFormatError(str(exc)) from exc


def load_bundle(source: BundleSource) -> ArtifactGraph:
    """Load an artifact graph from a bundle dump.

    Args:
        source: Parsed mapping, path to a JSON file, or inline JSON.

    Returns:
        ArtifactGraph: Artifacts in the dump's key order.

    Raises:
        BundleFormatError: If the dump is malformed.
    """
    data = _read_mapping(source)
    graph = ArtifactGraph()

    for key, entry in data.items():
        if not isinstance(entry, dict):
            raise BundleFormatError(f"Bundle entry {key!r} must be an object")

        raw_type = entry.get("type", ArtifactKind.CHUNK.value)
        try:
            kind = ArtifactKind(raw_type)
        except ValueError:
            raise BundleFormatError(
                f"Bundle entry {key!r} has unknown type {raw_type!r}"
            ) from None

        file_name = entry.get("fileName") or key
        if file_name != key:
            logger.debug("Bundle key %s differs from fileName %s", key, file_name)

        if kind is ArtifactKind.CHUNK:
            _add(
                graph,
                file_name=file_name,
                kind=kind,
                name=entry.get("name"),
                static_imports=_string_list(entry, "imports", key),
                dynamic_imports=_string_list(entry, "dynamicImports", key),
            )
        else:
            _add(graph, file_name=file_name, kind=kind, name=entry.get("name"))

    logger.info("Loaded bundle with %d artifact(s)", len(graph))
    return graph


def load_vite_manifest(source: BundleSource) -> ArtifactGraph:
    """Load an artifact graph from a Vite ``manifest.json``.

    JavaScript entries become chunks; ``css`` and ``assets`` files become
    asset artifacts. Imports pointing at keys missing from the manifest
    are kept as-is and therefore resolve to absent artifacts.

    Raises:
        BundleFormatError: If the manifest is malformed.
    """
    data = _read_mapping(source)
    graph = ArtifactGraph()

    files: Dict[str, str] = {}
    for key, entry in data.items():
        if not isinstance(entry, dict) or not isinstance(entry.get("file"), str):
            raise BundleFormatError(f"Manifest entry {key!r} has no 'file'")
        files[key] = entry["file"]

    def to_files(keys: List[str]) -> List[str]:
        return [files.get(k, k) for k in keys]

    side_files: List[str] = []
    for key, entry in data.items():
        file_name = files[key]
        if file_name in graph:
            continue
        if file_name.endswith((".js", ".mjs", ".cjs")):
            _add(
                graph,
                file_name=file_name,
                kind=ArtifactKind.CHUNK,
                name=entry.get("name"),
                static_imports=to_files(_string_list(entry, "imports", key)),
                dynamic_imports=to_files(_string_list(entry, "dynamicImports", key)),
            )
        else:
            _add(graph, file_name=file_name, kind=ArtifactKind.ASSET, name=entry.get("name"))
        side_files.extend(_string_list(entry, "css", key))
        side_files.extend(_string_list(entry, "assets", key))

    for file_name in side_files:
        if file_name not in graph:
            _add(graph, file_name=file_name, kind=ArtifactKind.ASSET)

    logger.info("Loaded Vite manifest with %d artifact(s)", len(graph))
    return graph


def manifest_entries(source: BundleSource) -> List[str]:
    """Return the output file names of manifest entries marked ``isEntry``."""
    data = _read_mapping(source)
    return [
        entry["file"]
        for entry in data.values()
        if isinstance(entry, dict) and entry.get("isEntry") and "file" in entry
    ]


__all__ = ["BundleSource", "load_bundle", "load_vite_manifest", "manifest_entries"]
