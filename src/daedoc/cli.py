"""Command-line entry point.

Reads Daedalus sources, extracts /// doc comments and writes Markdown:

    daedoc Content/Story/Externals.d -o docs/externals.md
    cat Externals.d | daedoc > externals.md
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from pydantic import ValidationError

from .config import ENV_PREFIX, RenderOptions
from .errors import ParseError
from .extractors import parse
from .generators import render
from .models import DocumentationUnit
from .validators import compute_coverage, validate_units

log = logging.getLogger(__name__)

# Daedalus scripts are usually saved as Windows-1252
_FALLBACK_ENCODING = "cp1252"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="daedoc",
        description="Generate Markdown reference docs from Daedalus /// comments.",
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="INPUT",
        help="source files to read ('-' or nothing reads stdin)",
    )
    parser.add_argument(
        "-o", "--output", type=Path, help="write Markdown here instead of stdout"
    )
    parser.add_argument(
        "--indent",
        help="indentation inside the admonition: 'tab' or a number of spaces",
    )
    parser.add_argument(
        "--return-lead-in", help="phrase put in front of every return description"
    )
    parser.add_argument(
        "--param-style",
        choices=["name", "signature"],
        help="show @param names or the declared parameter text",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="fail on documentation warnings (missing description, @param count)",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true")
    verbosity.add_argument("-q", "--quiet", action="store_true")
    return parser


def _log_level(args: argparse.Namespace) -> str:
    if args.verbose:
        return "DEBUG"
    if args.quiet:
        return "ERROR"
    return os.environ.get(ENV_PREFIX + "LOG_LEVEL", "INFO").upper()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _read_source(source: str) -> str:
    if source == "-":
        data = sys.stdin.buffer.read()
    else:
        data = Path(source).read_bytes()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        log.debug("%s is not UTF-8, decoding as %s", source, _FALLBACK_ENCODING)
        return data.decode(_FALLBACK_ENCODING, errors="replace")


def main(argv: list[str] | None = None) -> int:
    """Generate documentation. Returns the process exit status."""
    args = _build_parser().parse_args(argv)

    level = _log_level(args)
    if not isinstance(logging.getLevelName(level), int):
        print(
            f"daedoc: unknown log level {level!r} in {ENV_PREFIX}LOG_LEVEL",
            file=sys.stderr,
        )
        return 2
    _configure_logging(level)

    try:
        options = RenderOptions.from_env(
            indent=args.indent,
            return_lead_in=args.return_lead_in,
            param_style=args.param_style,
        )
    except ValidationError as e:
        log.error("Invalid options: %s", e)
        return 2

    units: list[DocumentationUnit] = []
    for source in args.inputs or ["-"]:
        name = "<stdin>" if source == "-" else source
        try:
            text = _read_source(source)
        except OSError as e:
            log.error("Cannot read %s: %s", name, e)
            return 2

        try:
            parsed = parse(text)
        except ParseError as e:
            log.error("%s: %s", name, e)
            return 1

        log.info("%s: %d documented functions", name, len(parsed))
        units.extend(parsed)

    validation = validate_units(units, strict=args.strict)
    for warning in validation.warnings:
        log.warning(warning)
    if validation.errors:
        for err in validation.errors:
            log.error(err)
        return 1

    log.info("Coverage: %.0f%% of functions described", compute_coverage(units) * 100)

    markdown = render(units, options)
    if args.output:
        try:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(markdown, encoding="utf-8")
        except OSError as e:
            log.error("Cannot write %s: %s", args.output, e)
            return 2
        log.info("Wrote %s", args.output)
    else:
        sys.stdout.write(markdown)
    return 0


if __name__ == "__main__":
    sys.exit(main())
