from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from maplink_coordinates.settings import get_settings

from .inputs import parse_jsonl, parse_text_file, validate_urls
from .orchestrator import process_links
from .outputs import summarize, write_results, write_results_file


DESCRIPTION = """
Expand map share links through a single redirect and print the
latitude/longitude embedded in each one.
"""

EXAMPLES = """Examples:
  # Locate a shortened link
  maplink-locate https://maps.app.goo.gl/qz2zoCrJpmjH7Pmk7

  # Links from a file, results to JSONL
  maplink-locate --file links.txt --output results.jsonl

  # Already expanded URLs, no network access
  maplink-locate --no-resolve "https://www.google.com/maps/@40.7484,-73.9857,15z"
"""


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maplink-locate",
        description=DESCRIPTION,
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "urls", nargs="*", help="Share links to locate"
    )
    parser.add_argument(
        "--file", type=Path, help="Text file with one link per line"
    )
    parser.add_argument(
        "--jsonl", type=Path, help="JSONL file with url records"
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write JSONL results here instead of stdout",
    )
    parser.add_argument(
        "--no-resolve",
        action="store_true",
        help="Treat inputs as already expanded URLs",
    )
    parser.add_argument(
        "--fail-on-missing",
        action="store_true",
        help="Exit with status 1 when any link has no coordinate",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide the progress bar",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print debug messages",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Minimal console output",
    )
    return parser


def gather_urls(args: argparse.Namespace) -> list[str]:
    urls: list[str] = list(args.urls or [])
    if args.file:
        urls.extend(parse_text_file(args.file))
    if args.jsonl:
        urls.extend(parse_jsonl(args.jsonl))
    return urls


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def async_main(args: argparse.Namespace) -> int:
    try:
        urls = validate_urls(gather_urls(args))
    except (OSError, ValueError) as exc:
        print(f"Input error: {exc}", file=sys.stderr)
        return 1

    if not urls:
        print("No links were provided.", file=sys.stderr)
        return 1

    try:
        settings = get_settings()
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    results = await process_links(
        urls,
        settings=settings,
        resolve=not args.no_resolve,
        show_progress=not (args.no_progress or args.quiet),
        verbose=args.verbose,
    )

    if args.output:
        write_results_file(results, args.output)
    else:
        write_results(results, sys.stdout)

    stats = summarize(results)
    if not args.quiet:
        print(
            f"Summary: located={stats['located']} missing={stats['missing']}",
            file=sys.stderr,
        )

    if args.fail_on_missing and stats["missing"]:
        return 1
    return 0


def main() -> int:
    parser = create_parser()
    args = parser.parse_args()
    configure_logging(args.verbose)
    try:
        return asyncio.run(async_main(args))
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
