"""
Command-line driver.

Reads a file, runs the selected pass over it and writes the result next to
it as FILE.out: the dumped value tree or the error log in json mode, the
cleaned text in clean mode.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from . import __version__
from . import clean_all
from . import dumps
from . import parse
from ._config import DEFAULT_TAB_WIDTH
from ._config import ParseConfig

logger = logging.getLogger("nparser.cli")

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%H:%M:%S"


def _configure_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        env_level = os.environ.get("NPARSER_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, env_level, logging.WARNING)

    package_logger = logging.getLogger("nparser")
    package_logger.setLevel(level)

    # Only configure once per process
    if not any(
        isinstance(handler, logging.StreamHandler)
        for handler in package_logger.handlers
    ):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
        )
        package_logger.addHandler(handler)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="nparser",
        description="Parse a JSON-subset file or strip its comments",
    )
    ap.add_argument("file", type=Path, help="input file")
    ap.add_argument(
        "--mode",
        choices=("json", "clean"),
        default="json",
        help="json parses and dumps the tree, clean strips comments",
    )
    ap.add_argument("--tab-width", type=int, default=DEFAULT_TAB_WIDTH)
    ap.add_argument(
        "--strict-scalars",
        action="store_true",
        help="reject bare tokens that are neither keywords nor numbers",
    )
    ap.add_argument(
        "--no-trailing-commas",
        dest="allow_trailing_commas",
        action="store_false",
        help="reject a comma before a closing bracket or an empty value",
    )
    ap.add_argument("--indent", type=int, default=None)
    ap.add_argument(
        "-o", "--output", type=Path, default=None, help="default: FILE.out"
    )
    ap.add_argument("-v", "--verbose", action="store_true")
    ap.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    output = args.output or args.file.with_name(args.file.name + ".out")

    try:
        with args.file.open(encoding="utf-8") as fp:
            if args.mode == "clean":
                cleaned = clean_all(fp, tab_width=args.tab_width)
                output.write_text(cleaned.text, encoding="utf-8")
                errors = cleaned.errors
            else:
                config = ParseConfig(
                    tab_width=args.tab_width,
                    strict_scalars=args.strict_scalars,
                    allow_trailing_commas=args.allow_trailing_commas,
                )
                result = parse(fp, config)
                if result.value is not None:
                    text = dumps(result.value, indent=args.indent)
                else:
                    text = "\n".join(result.errors)
                output.write_text(text, encoding="utf-8")
                errors = result.errors
    except OSError as exc:
        logger.error("Cannot process %s: %s", args.file, exc)
        return 1

    logger.info("Wrote %s", output)
    for error in errors:
        print(error, file=sys.stderr)
    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main())
