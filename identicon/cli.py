"""Command-line entry point.

Generates one identicon per positional input and writes each as
``<output-dir>/<input>.png``::

    identicon elixir python --output-dir avatars

Inputs are processed one after another; a failing input is logged and the
remaining ones still run. The exit status is 1 if any input failed.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from identicon.pipeline import main as generate_and_save

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="identicon",
        description="Generate 5x5 mirrored identicons (250x250 PNG) from strings.",
    )
    parser.add_argument("inputs", nargs="+", help="Strings to turn into identicons")
    parser.add_argument(
        "--output-dir", default=".", help="Existing directory to write images into"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )


def _display_path(path: Path) -> str:
    """Printable form of ``path``; undecodable bytes are shown escaped."""
    return os.fsencode(path).decode("utf-8", "backslashreplace")


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    failures = 0
    for data in args.inputs:
        try:
            path = generate_and_save(data, directory=args.output_dir)
        except (OSError, ValueError) as exc:
            logger.error("Failed to generate identicon for %r: %s", data, exc)
            failures += 1
            continue
        print(_display_path(path))

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
