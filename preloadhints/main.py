"""Main CLI entry point for preloadhints.

Provides commands: resolve, inject, export
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from preloadhints.cli.export import export_command
from preloadhints.cli.inject import inject_command
from preloadhints.cli.resolve import resolve_command
from preloadhints.hints.config import (
    INCLUDE_ALL_CHUNKS,
    INCLUDE_ASYNC_CHUNKS,
    INCLUDE_INITIAL,
)

logger = logging.getLogger("preloadhints.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def _add_bundle_arguments(parser: argparse.ArgumentParser, with_entry: bool = True) -> None:
    parser.add_argument(
        "-b",
        "--bundle",
        required=True,
        help="Bundle dump (JSON keyed by output file name) or Vite manifest.json",
    )
    parser.add_argument(
        "--manifest",
        action="store_true",
        help="Treat --bundle as a Vite manifest.json",
    )
    if with_entry:
        parser.add_argument(
            "-e",
            "--entry",
            help=(
                "Output file name of the entry chunk. Optional with --manifest "
                "when the manifest declares a single entry."
            ),
        )


def _add_include_arguments(parser: argparse.ArgumentParser, default: Optional[str]) -> None:
    parser.add_argument(
        "--include",
        choices=[INCLUDE_ASYNC_CHUNKS, INCLUDE_INITIAL, INCLUDE_ALL_CHUNKS],
        default=default,
        help="Inclusion policy (default: asyncChunks)",
    )
    parser.add_argument(
        "--names",
        help="Comma-separated chunk names to include (overrides --include)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="preloadhints",
        description="Preloadhints - resource hints for bundle entry documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Resolve command
    resolve_parser = subparsers.add_parser(
        "resolve",
        help="List the artifacts an inclusion policy selects for an entry",
    )
    _add_bundle_arguments(resolve_parser)
    _add_include_arguments(resolve_parser, default=INCLUDE_ASYNC_CHUNKS)

    # Inject command
    inject_parser = subparsers.add_parser(
        "inject",
        help="Add resource hints to an HTML document",
    )
    inject_parser.add_argument(
        "html",
        help="HTML document to rewrite",
    )
    _add_bundle_arguments(inject_parser)
    _add_include_arguments(inject_parser, default=None)
    inject_parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional hint configuration. Can be a path to a TOML/JSON "
            "file or an inline TOML/JSON string. Command-line options "
            "override values from this configuration."
        ),
    )
    inject_parser.add_argument(
        "--rel",
        help="Relation for generated links (default: modulepreload)",
    )
    inject_parser.add_argument(
        "--media",
        help="Media query for generated links",
    )
    inject_parser.add_argument(
        "--base",
        default="/",
        help="Public base path of the build output (default: /)",
    )
    inject_parser.add_argument(
        "-o",
        "--output",
        help="Output file (default: stdout)",
    )

    # Export command
    export_parser = subparsers.add_parser(
        "export",
        help="Export the artifact graph as node-link JSON",
    )
    _add_bundle_arguments(export_parser, with_entry=False)
    export_parser.add_argument(
        "-o",
        "--output",
        required=True,
        help="Output file",
    )

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command == "resolve":
        return resolve_command(args)
    elif args.command == "inject":
        return inject_command(args)
    elif args.command == "export":
        return export_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
