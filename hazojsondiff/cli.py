"""hazojsondiff CLI.

Entry point for the ``hazojsondiff`` command-line tool.

Usage:
    hazojsondiff dataset <old.json> <new.json> [--verbose]
    hazojsondiff diff <old.json> <new.json> [--force-empty] [--flatten] [--verbose]
    hazojsondiff tokens <file.json> [--verbose]
"""

from __future__ import annotations

import argparse
import logging
import sys

from .core.errors import JsonDiffError
from .core.json_diff import DiffPolicy, diff
from .core.parser import parse
from .core.tokenizer import tokenize
from .dataset import diff_dataset

logger = logging.getLogger(__name__)


def _read(path: str, label: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as fh:
            return fh.read()
    except OSError as exc:
        print(f"Error: failed to read {label} file '{path}': {exc}", file=sys.stderr)
        sys.exit(1)


def _fail(exc: JsonDiffError) -> None:
    print(f"Error: {exc}", file=sys.stderr)
    sys.exit(1)


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


def _cmd_dataset(args: argparse.Namespace) -> None:
    old_text = _read(args.old, "old dataset")
    new_text = _read(args.new, "new dataset")
    try:
        result = diff_dataset(old_text, new_text)
    except JsonDiffError as exc:
        _fail(exc)
        return
    if result:
        print(result)
    else:
        logger.info("no differences found")


def _cmd_diff(args: argparse.Namespace) -> None:
    old_text = _read(args.old, "old")
    new_text = _read(args.new, "new")
    policy = DiffPolicy(
        force_empty_array_sections=args.force_empty,
        flatten_object_modifications=args.flatten,
    )
    try:
        result = diff(parse(old_text), parse(new_text), policy)
    except JsonDiffError as exc:
        _fail(exc)
        return
    if result is not None:
        print(result)
    else:
        logger.info("no differences found")


def _cmd_tokens(args: argparse.Namespace) -> None:
    text = _read(args.file, "input")
    for token in tokenize(text):
        print(f"{token.start}:{token.end} {token.token_type.name} {token.text(text)}")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="hazojsondiff",
        description="hazojsondiff: structural diff of JSON dataset snapshots",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command")

    dataset_parser = subparsers.add_parser(
        "dataset", parents=[common], help="Diff two dataset snapshots"
    )
    dataset_parser.add_argument("old", help="Baseline dataset file")
    dataset_parser.add_argument("new", help="Updated dataset file")
    dataset_parser.set_defaults(func=_cmd_dataset)

    diff_parser = subparsers.add_parser(
        "diff", parents=[common], help="Diff two arbitrary JSON documents"
    )
    diff_parser.add_argument("old", help="Baseline JSON file")
    diff_parser.add_argument("new", help="Updated JSON file")
    diff_parser.add_argument(
        "--force-empty",
        action="store_true",
        help="Emit empty added/removed sections for equal top-level arrays",
    )
    diff_parser.add_argument(
        "--flatten",
        action="store_true",
        help="Merge top-level object modifications instead of nesting them",
    )
    diff_parser.set_defaults(func=_cmd_diff)

    tokens_parser = subparsers.add_parser(
        "tokens", parents=[common], help="Dump the token stream of a file"
    )
    tokens_parser.add_argument("file", help="JSON file to scan")
    tokens_parser.set_defaults(func=_cmd_tokens)

    args = parser.parse_args(argv)
    if hasattr(args, "func"):
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )
        args.func(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
