"""Inject command implementation."""

import logging
import sys
from pathlib import Path

from preloadhints.cli._bundle import entry_key, include_option, load_graph
from preloadhints.errors import PreloadHintsError
from preloadhints.runtime.config_loader import load_hint_config
from preloadhints.runtime.plugin import PreloadPlugin

logger = logging.getLogger("preloadhints.cli.inject")


def inject_command(args) -> int:
    """Execute inject command.

    Args:
        args: Parsed command-line arguments containing:
            - html: Path of the document to rewrite
            - bundle / manifest / entry: Bundle description and entry chunk
            - config: Optional TOML/JSON configuration (path or inline)
            - include / names / rel / media: Option overrides
            - base: Public base path (default "/")
            - output: Output path; stdout when omitted

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    try:
        html_path = Path(args.html)
        html = html_path.read_text(encoding="utf-8")

        config = load_hint_config(getattr(args, "config", None))
        overrides = {}
        include = include_option(args)
        if include:
            overrides["include"] = include
        for option in ("rel", "media"):
            value = getattr(args, option, None)
            if value:
                overrides[option] = value
        if overrides:
            logger.debug("Applying option overrides: %s", overrides)
            config = config.model_validate({**config.model_dump(), **overrides})

        graph = load_graph(args)
        entry = entry_key(args)

        plugin = PreloadPlugin(config)
        plugin.config_resolved(getattr(args, "base", None) or "/")
        result = plugin.apply_to_document(html, graph, entry)

        output = getattr(args, "output", None)
        if output:
            output_path = Path(output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(result, encoding="utf-8")
            logger.info("Wrote %s", output_path)
        else:
            sys.stdout.write(result)
        return 0

    except (PreloadHintsError, OSError, ValueError) as err:
        logger.error("Inject failed: %s", err)
        return 1
