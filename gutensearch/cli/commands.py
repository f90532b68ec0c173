"""Command-line interface for gutensearch."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

import httpx
import psycopg
from loguru import logger

from gutensearch import __version__
from gutensearch.config.loader import load_config
from gutensearch.config.schema import Config
from gutensearch.db.postgres import PostgresStore
from gutensearch.perf.compare import compare_performance
from gutensearch.perf.phrases import read_phrases
from gutensearch.report.formatter import (
    COMPARISON_COL_WIDTHS,
    COMPARISON_HEAD,
    HIT_COL_WIDTHS,
    HIT_HEAD,
    format_comparison,
    format_totals,
    hit_rows,
    search_result_to_dict,
)
from gutensearch.report.table import render_table
from gutensearch.search.dispatcher import BACKENDS
from gutensearch.search.errors import SearchError
from gutensearch.search.factory import open_dispatcher

DEFAULT_RETAKES = 5


class CommandError(Exception):
    """Missing or invalid user input; reported as a message, not a traceback."""


def configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def _add_common_options(parser: argparse.ArgumentParser, *, suppress: bool) -> None:
    # Subparsers use SUPPRESS so options given before the command are kept.
    def default(value):
        return argparse.SUPPRESS if suppress else value

    parser.add_argument("-d", "--db", default=default(None), help="set db for search, either pg or es")
    parser.add_argument(
        "-f",
        "--file",
        default=default(None),
        help="path to text file from which a list of search phrases is read",
    )
    parser.add_argument(
        "-j", "--json", action="store_true", default=default(False), help="output search results as json"
    )
    parser.add_argument(
        "-r",
        "--retakes",
        type=int,
        default=default(DEFAULT_RETAKES),
        help="number of times to repeat searches for performance comparison, minimum 1",
    )
    parser.add_argument("-c", "--config", default=default(None), help="path to config.json")
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=default(False), help="log to stderr at debug level"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gutensearch",
        description="search tool for project gutenberg book details using postgres and elasticsearch",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _add_common_options(parser, suppress=False)

    common = argparse.ArgumentParser(add_help=False)
    _add_common_options(common, suppress=True)

    sub = parser.add_subparsers(dest="command")

    query = sub.add_parser("query", aliases=["q"], parents=[common], help="perform search query")
    query.add_argument("queries", nargs="*", help="words joined into one search phrase")
    query.set_defaults(handler=run_query)

    book = sub.add_parser("get_book", aliases=["b"], parents=[common], help="print a book's details")
    book.add_argument("book_id", nargs="?", help="book id")
    book.set_defaults(handler=run_get_book)

    compare = sub.add_parser(
        "compare_perf", aliases=["c"], parents=[common], help="compare search latency of pg and es"
    )
    compare.set_defaults(handler=run_compare_perf)

    return parser


async def run_query(args: argparse.Namespace, config: Config) -> int:
    if not args.db:
        raise CommandError("error: option '-d, --db [database]' must be specified for this command.")
    if args.db not in BACKENDS:
        raise CommandError("error: option '-d, --db [database]' must be either of [pg, es]")

    phrase = " ".join(args.queries)
    async with open_dispatcher(config) as dispatcher:
        result = await dispatcher.dispatch(args.db, phrase)

    if args.json:
        print(json.dumps(search_result_to_dict(result)))
    else:
        print(f"DB: {result.db}")
        print(render_table(HIT_HEAD, hit_rows(result.hits), HIT_COL_WIDTHS))
        print(f"Time Taken: {result.time_taken} ms")
    return 0


async def run_get_book(args: argparse.Namespace, config: Config) -> int:
    if not args.book_id:
        raise CommandError("provide book ID")

    store = PostgresStore(config.postgres)
    try:
        details = await store.fetch_book(args.book_id)
    finally:
        await store.close()

    if details is None:
        raise CommandError(f'Book with ID "{args.book_id}" does not exist')
    print(json.dumps(details, indent=2, ensure_ascii=False))
    return 0


async def run_compare_perf(args: argparse.Namespace, config: Config) -> int:
    path = Path(args.file) if args.file else config.search.phrases_path
    try:
        phrases = read_phrases(path)
    except OSError as e:
        raise CommandError(str(e)) from None
    if args.retakes < 1:
        raise CommandError("retakes minimum is 1")

    async with open_dispatcher(config) as dispatcher:
        report = await compare_performance(dispatcher, phrases, args.retakes)

    if args.json:
        print(json.dumps(report.to_dict()))
        return 0
    print(render_table(COMPARISON_HEAD, format_comparison(report), COMPARISON_COL_WIDTHS))
    for line in format_totals(report):
        print(line)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(Path(args.config).expanduser() if args.config else None)
    try:
        return asyncio.run(args.handler(args, config))
    except CommandError as e:
        print(e)
        return 1
    except (SearchError, httpx.HTTPError, psycopg.Error) as e:
        logger.opt(exception=True).debug("Command {} failed", args.command)
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
