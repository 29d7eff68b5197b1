"""CLI entry point for the JokeAPI client.

Usage:
    python -m jokers.main url [--category C ...] [--flag F ...] [--type T] [--format F] [--amount N]
    python -m jokers.main get [same options]
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .builder import JokeBuilder
from .errors import JokeError
from .params import Category, Flag, Format, JokeType


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-c", "--category", type=Category, choices=list(Category), action="append",
                        default=[], help="Joke category (repeatable, default: Any)")
    common.add_argument("-f", "--flag", type=Flag, choices=list(Flag), action="append", default=[],
                        help="Blacklist flag (repeatable)")
    common.add_argument("-t", "--type", type=JokeType, choices=list(JokeType), dest="joke_type",
                        help="Joke type (default: any)")
    common.add_argument("--format", type=Format, choices=list(Format), default=Format.JSON,
                        help="Response format (default: json)")
    common.add_argument("-a", "--amount", type=int, default=1, help="Number of jokes (default: 1)")

    parser = argparse.ArgumentParser(
        prog="jokers",
        description="Build JokeAPI request URLs and fetch jokes.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable INFO logging")
    parser.add_argument("--debug", action="store_true", help="Enable DEBUG logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("url", parents=[common], help="Print the request URL")
    sub.add_parser("get", parents=[common], help="Fetch and print jokes")

    return parser


def _setup_logging(verbose: bool, debug: bool) -> None:
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def _make_builder(args: argparse.Namespace) -> JokeBuilder:
    builder = JokeBuilder().format(args.format).amount(args.amount)
    for c in args.category:
        builder.add_category(c)
    for f in args.flag:
        builder.add_flag(f)
    if args.joke_type is not None:
        builder.joke_type(args.joke_type)
    return builder


def _cmd_url(builder: JokeBuilder) -> int:
    print(builder.url())
    return 0


def _cmd_get(builder: JokeBuilder) -> int:
    try:
        jokes = builder.get()
    except JokeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if len(jokes) == 1:
        print(jokes[0])
        return 0
    for i, j in enumerate(jokes, start=1):
        print(f"{i}. {j}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose, args.debug)

    builder = _make_builder(args)
    if args.command == "url":
        return _cmd_url(builder)
    if args.command == "get":
        return _cmd_get(builder)

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
