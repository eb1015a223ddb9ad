"""Export command implementation."""

import json
import logging
from pathlib import Path

from preloadhints.cli._bundle import load_graph
from preloadhints.errors import PreloadHintsError

logger = logging.getLogger("preloadhints.cli.export")


def export_command(args) -> int:
    """Write the artifact graph of a bundle as node-link JSON.

    Args:
        args: Parsed command-line arguments containing:
            - bundle: Bundle dump or manifest path
            - manifest: Whether ``bundle`` is a Vite manifest
            - output: Output file path

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    try:
        graph = load_graph(args)
        data = graph.to_node_link()

        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8"
        )
        logger.info(
            "Wrote %s: %d artifacts, %d import edges",
            output_path, len(data["nodes"]), len(data["edges"]),
        )
        return 0

    except (PreloadHintsError, OSError, ValueError) as err:
        logger.error("Export failed: %s", err, exc_info=True)
        return 1
