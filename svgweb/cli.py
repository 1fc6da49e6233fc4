"""Command line entry point.

    svg-weboptimizer                 # every *.svg in the current directory
    svg-weboptimizer a.svg b/c.svg   # exactly these paths, any extension

Results go to ./optimized/<basename>. Exit status is 0 even when individual
files fail; those failures are reported on stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from svgweb import __version__
from svgweb.config import DEFAULT_CONFIG
from svgweb.errors import OutputDirError
from svgweb.orchestrator import run

logger = logging.getLogger(__name__)


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int) -> None:
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self.max_level


def configure_logging(level: str = DEFAULT_CONFIG.log_level) -> None:
    """Informational lines to stdout, warnings and errors to stderr."""
    formatter = logging.Formatter("%(message)s")

    out = logging.StreamHandler(sys.stdout)
    out.setFormatter(formatter)
    out.addFilter(_MaxLevelFilter(logging.INFO))

    err = logging.StreamHandler(sys.stderr)
    err.setFormatter(formatter)
    err.setLevel(logging.WARNING)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.addHandler(out)
    root.addHandler(err)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svg-weboptimizer",
        description=(
            "Optimize SVGs for web embedding: fill -> currentColor, strip "
            "Inkscape/Sodipodi data, minify. Output goes to ./optimized/."
        ),
        epilog=f"svg-weboptimizer {__version__}",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="SVG files to process (default: all *.svg in the current directory)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()
    try:
        run(args.paths)
    except OutputDirError as e:
        logger.error("%s: %s", e.path, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
