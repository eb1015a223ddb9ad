"""Resolve command implementation.

Prints the artifacts an inclusion policy selects for an entry chunk,
before any document-level filtering, together with their kind and
whether they were emitted.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.table import Table

from preloadhints.cli._bundle import entry_key, include_option, load_graph
from preloadhints.errors import PreloadHintsError
from preloadhints.graph.walker import resolve
from preloadhints.hints.config import policy_from_include

logger = logging.getLogger("preloadhints.cli.resolve")


def resolve_command(args, console: Console | None = None) -> int:
    """Execute resolve command.

    Args:
        args: Parsed command-line arguments containing:
            - bundle: Bundle dump or manifest path
            - manifest: Whether ``bundle`` is a Vite manifest
            - entry: Entry chunk file name
            - include: Inclusion policy name
            - names: Comma-separated chunk names (overrides include)
        console: Rich console to print to (defaults to stdout).

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    console = console or Console()
    try:
        graph = load_graph(args)
        entry = entry_key(args)

        policy = policy_from_include(include_option(args))

        keys = resolve(graph, entry, policy)

        cycles = graph.import_cycles(limit=20)
        for idx, cycle in enumerate(cycles, start=1):
            logger.warning("Import cycle %d: %s", idx, " -> ".join(cycle + [cycle[0]]))

        table = Table(title=f"{type(policy).__name__} for {entry}")
        table.add_column("#", justify="right")
        table.add_column("artifact")
        table.add_column("kind")
        for idx, key in enumerate(keys, start=1):
            artifact = graph.get(key)
            kind = artifact.kind.value if artifact is not None else "absent"
            table.add_row(str(idx), key, kind)
        console.print(table)
        return 0

    except (PreloadHintsError, OSError, ValueError) as err:
        logger.error("Resolve failed: %s", err)
        return 1
