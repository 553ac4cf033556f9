"""Command-line entry point for hn2vast."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from hn2vast.exceptions import Hn2vastError
from hn2vast.ingestion import IngestionOptions, ingest_thread
from hn2vast.output_formatter import render_json

logger = logging.getLogger(__name__)

USAGE = """hn2vast - Hacker News threads as VAST documents

USAGE:
    hn2vast <INPUT> [TMPDIR] [OUTPUT]

INPUT:
    hn:<id>                                   Item shorthand
    https://news.ycombinator.com/item?id=<id> Item URL
    <path>                                    Saved item page

TMPDIR:
    Directory for downloaded pages (default: $HN2VAST_CACHE_PATH).

OUTPUT:
    JSON file to write. Printed to stdout when omitted.

EXAMPLES:
    hn2vast hn:8863
    hn2vast hn:8863 /tmp thread.json
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hn2vast",
        description="Convert a Hacker News comment thread into a VAST document.",
    )
    parser.add_argument("input", nargs="?", help="hn:<id>, item URL or HTML file")
    parser.add_argument("tmpdir", nargs="?", type=Path, help="Directory for downloaded pages")
    parser.add_argument("output", nargs="?", type=Path, help="Output JSON file")
    parser.add_argument("--no-cache", action="store_true", help="Always download remote pages")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if not args.input:
        print(USAGE)
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    options = IngestionOptions(use_cache=not args.no_cache, cache_path=args.tmpdir)
    try:
        document = asyncio.run(ingest_thread(args.input, options=options))
        text = render_json(document)
        if args.output:
            args.output.write_text(text, encoding="utf-8")
            logger.info("Wrote %s", args.output)
        else:
            print(text)
    except (Hn2vastError, ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
