from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
from typing import Callable

from url_search.core.config import DEFAULT_OUTPUT_FILE, ConfigError, SearchConfig, build_config
from url_search.core.logging_config import configure_logging
from url_search.core.runner import run_search

logger = logging.getLogger(__name__)

_EXAMPLES = """\
examples:
  url-search -f url_list.txt -s "text one"
  url-search -f url_list.txt -s "text one" -s "text two"
  url-search -f url_list.txt -s "text one" -s "text two" -c ".main-content"

Run without -f or -s to be prompted for the missing values.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="url-search",
        description="Report the URLs whose pages contain every given text (AND condition).",
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-f", "--file", dest="url_file", metavar="PATH", help="file with one URL per line")
    parser.add_argument(
        "-s",
        "--search",
        dest="fragments",
        metavar="TEXT",
        action="append",
        default=[],
        help="text that must appear on the page; repeat for more (all must match)",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output_file",
        metavar="PATH",
        default=DEFAULT_OUTPUT_FILE,
        help=f"where to write matching URLs (default: {DEFAULT_OUTPUT_FILE})",
    )
    parser.add_argument("-c", "--css", dest="css_selector", metavar="SELECTOR", help="only search inside elements matching this CSS selector")
    parser.add_argument("--log-file", type=Path, metavar="PATH", help="also write logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="log per-URL details")
    return parser


def _ask(input_fn: Callable[[str], str], prompt: str) -> str:
    try:
        return input_fn(prompt)
    except EOFError as e:
        raise ConfigError("Input ended before all required values were entered.") from e


def prompt_missing(
    args: argparse.Namespace,
    *,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> argparse.Namespace:
    """Fill in the URL file, search texts and selector interactively.

    Only values that were not given on the command line are asked for. At
    least one search text is required before a blank answer ends the list.
    """

    if not args.url_file:
        args.url_file = _ask(input_fn, "Path to the URL list file: ").strip()

    if not args.fragments:
        fragments: list[str] = []
        while True:
            text = _ask(
                input_fn,
                f"Search text {len(fragments) + 1} (press Enter on an empty line to finish): ",
            )
            if text.strip():
                fragments.append(text)
            elif fragments:
                break
            else:
                output_fn("At least one search text is required.")
        args.fragments = fragments

    if args.css_selector is None:
        args.css_selector = _ask(input_fn, "CSS selector to limit the search (optional): ").strip() or None

    return args


def config_from_args(args: argparse.Namespace) -> SearchConfig:
    return build_config(
        url_file=args.url_file,
        fragments=list(args.fragments),
        output_file=args.output_file,
        css_selector=args.css_selector,
    )


def main(argv: list[str] | None = None, *, input_fn: Callable[[str], str] = input) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    try:
        if not args.url_file or not args.fragments:
            args = prompt_missing(args, input_fn=input_fn)
        config = config_from_args(args)
    except ConfigError as e:
        logger.error("%s", e)
        return 1

    try:
        asyncio.run(run_search(config))
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Search aborted: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.error("Search interrupted")
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
