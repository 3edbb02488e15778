"""Entry point: python -m genfields (or gen-fields)

Reads ipinfo.go in the current directory, generates <package>-fields.go
next to it. Meant to run from a go:generate directive.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path
from typing import Optional, Sequence

from .codegen import generate
from .context_builder import build_context
from .errors import GenerationError
from .loader import SOURCE_NAME, scan_directory

logger = logging.getLogger("genfields")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gen-fields",
        description="Generate Get<Field> accessors for tagged string fields.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        type=Path,
        help="Package directory to scan and write into (default: current directory)",
    )
    parser.add_argument(
        "--source",
        default=SOURCE_NAME,
        help=f"Name of the file to scan (default: {SOURCE_NAME})",
    )
    parser.add_argument(
        "--gofmt",
        metavar="PATH",
        help="gofmt executable to format output with (default: gofmt on PATH, else the built-in pass)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def run(directory: Path, source_name: str = SOURCE_NAME, gofmt: str | None = None) -> list[Path]:
    """Generate one file per package found in directory. Returns written paths."""
    written: list[Path] = []
    for package, files in scan_directory(directory, source_name).items():
        context = build_context(package, files)
        path = generate(context, output_dir=directory, gofmt=gofmt)
        if path is not None:
            written.append(path)
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(message)s",
    )
    try:
        run(args.directory, args.source, args.gofmt or shutil.which("gofmt"))
    except GenerationError as e:
        logger.critical("%s", e)
        return 1
    logger.info("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
